from pathlib import Path

from app.generation.models import REJECTION_HEADER, Disposition, Register
from app.generation.prompt_loader import load_prompt_template

REGISTER_INSTRUCTIONS: dict[Register, str] = {
    Register.TERSE: "一文だけで簡潔に述べること。",
    Register.NORMAL: "標準的な長さの一段落で述べること。",
    Register.VERBOSE: (
        "法令や通達を引用するかのように、わざと回りくどく衒学的な文体で述べること。"
    ),
}


class PromptComposer:
    """Builds the model instruction for a disposition and a validated reason."""

    def __init__(self, prompt_dir: Path | None = None) -> None:
        self._approved_template = load_prompt_template("approved_prompt.txt", prompt_dir)
        self._rejected_template = load_prompt_template("rejected_prompt.txt", prompt_dir)

    def compose(self, disposition: Disposition, reason: str) -> str:
        if disposition.register is None:
            return self._rejected_template.format(
                reason=reason,
                rejection_header=REJECTION_HEADER,
            )
        return self._approved_template.format(
            reason=reason,
            register_instruction=REGISTER_INSTRUCTIONS[disposition.register],
        )
