"""Decoding of raw model text into a GeneratedDocument."""

import json
import re
from dataclasses import dataclass

from app.generation.exceptions import DocumentParseError
from app.generation.models import GeneratedDocument
from app.generation.validator import validate_and_build

_OPENING_FENCE = re.compile(r"^\s*```[A-Za-z0-9_+-]*")
_CLOSING_FENCE = re.compile(r"```\s*$")


@dataclass(frozen=True)
class DecodeResult:
    """Tagged decode result: exactly one of document / error is set."""

    document: GeneratedDocument | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.document is not None


def strip_code_fences(raw: str) -> str:
    """Remove a leading ``` fence (any language tag), a trailing fence and outer whitespace.

    Backticks elsewhere in the text are kept, so string values survive intact.
    """
    without_opening = _OPENING_FENCE.sub("", raw, count=1)
    return _CLOSING_FENCE.sub("", without_opening, count=1).strip()


def decode_document(raw: str) -> DecodeResult:
    """Decode model text without raising; failures are reported in the result."""
    try:
        parsed = _parse_json(raw)
        return DecodeResult(document=validate_and_build(parsed))
    except DocumentParseError as exc:
        return DecodeResult(error=str(exc))


def _parse_json(raw: str) -> dict[str, object]:
    cleaned = strip_code_fences(raw)
    if not cleaned:
        raise DocumentParseError("Empty model response")

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise DocumentParseError(f"Invalid JSON response: {exc}") from exc

    if not isinstance(parsed, dict):
        raise DocumentParseError("JSON response must be an object")
    return parsed
