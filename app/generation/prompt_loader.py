from functools import cache
from pathlib import Path

from app.generation.exceptions import GenerationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


@cache
def load_prompt_template(name: str, prompt_dir: Path | None = None) -> str:
    """Load a certificate prompt template from a file.

    Each file is read once per process; later calls return the cached text.

    Args:
        name: Template file name, e.g. "approved_prompt.txt".
        prompt_dir: Directory holding the templates.
                    Defaults to the bundled prompts directory.

    Returns:
        The raw template string with placeholders.

    Raises:
        GenerationError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise GenerationError(f"Failed to load prompt template: {exc}") from exc


@cache
def load_json_schema(path: Path | None = None) -> str:
    """Load the certificate JSON schema from a file.

    Cached like load_prompt_template.

    Raises:
        GenerationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "certificate_schema.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise GenerationError(f"Failed to load JSON schema: {exc}") from exc
