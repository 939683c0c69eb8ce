"""Validates the user's reason and decoded model output against domain invariants."""

from typing import Any

from app.generation.exceptions import DocumentValidationError, InvalidInputError
from app.generation.models import GeneratedDocument

MAX_REASON_LENGTH = 50
_REQUIRED_FIELDS = ("title", "description", "prescription")


def validate_reason(raw: Any) -> str:
    """Return the trimmed reason if it holds 1 to 50 characters.

    Raises:
        InvalidInputError: if the reason is missing, not text, empty or too long.
    """
    if not isinstance(raw, str):
        raise InvalidInputError("'reason' must be a string")
    reason = raw.strip()
    if not reason:
        raise InvalidInputError("申請理由を入力してください")
    if len(reason) > MAX_REASON_LENGTH:
        raise InvalidInputError(
            f"申請理由は{MAX_REASON_LENGTH}文字以内で入力してください"
        )
    return reason


def validate_and_build(data: dict[str, Any]) -> GeneratedDocument:
    """Validate decoded JSON and build a GeneratedDocument.

    Raises:
        DocumentValidationError: on any validation failure.
    """
    values: dict[str, str] = {}
    for field in _REQUIRED_FIELDS:
        if field not in data:
            raise DocumentValidationError(f"Missing required field: {field}")
        value = data[field]
        if not isinstance(value, str) or not value.strip():
            raise DocumentValidationError(f"'{field}' must be a non-empty string")
        values[field] = value
    return GeneratedDocument(header=_build_header(data.get("header")), **values)


def _build_header(raw: Any) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise DocumentValidationError("'header' must be a string or null")
    return raw if raw.strip() else None
