"""Tests for reason validation and document validation."""

import pytest

from app.generation.exceptions import DocumentValidationError, InvalidInputError
from app.generation.validator import MAX_REASON_LENGTH, validate_and_build, validate_reason


def _valid_data(**overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "header": "休養許可証",
        "title": "T",
        "description": "D",
        "prescription": "P",
    }
    data.update(overrides)
    return data


class TestValidateReason:
    def test_returns_trimmed_reason(self) -> None:
        assert validate_reason("  なんとなくだるい  ") == "なんとなくだるい"

    def test_accepts_single_character(self) -> None:
        assert validate_reason("眠") == "眠"

    def test_accepts_exactly_max_length(self) -> None:
        reason = "あ" * MAX_REASON_LENGTH
        assert validate_reason(reason) == reason

    def test_empty_raises(self) -> None:
        with pytest.raises(InvalidInputError):
            validate_reason("")

    def test_whitespace_only_raises(self) -> None:
        with pytest.raises(InvalidInputError):
            validate_reason("   \n\t")

    def test_too_long_raises(self) -> None:
        with pytest.raises(InvalidInputError, match=str(MAX_REASON_LENGTH)):
            validate_reason("a" * (MAX_REASON_LENGTH + 1))

    def test_length_is_measured_after_trimming(self) -> None:
        reason = " " + "a" * MAX_REASON_LENGTH + " "
        assert validate_reason(reason) == "a" * MAX_REASON_LENGTH

    @pytest.mark.parametrize("raw", [None, 42, ["reason"], {"reason": "x"}])
    def test_non_string_raises(self, raw: object) -> None:
        with pytest.raises(InvalidInputError, match="must be a string"):
            validate_reason(raw)


class TestValidateAndBuild:
    def test_builds_document(self) -> None:
        doc = validate_and_build(_valid_data())
        assert doc.header == "休養許可証"
        assert (doc.title, doc.description, doc.prescription) == ("T", "D", "P")

    def test_header_is_optional(self) -> None:
        data = _valid_data()
        del data["header"]
        assert validate_and_build(data).header is None

    def test_blank_header_becomes_none(self) -> None:
        assert validate_and_build(_valid_data(header="  ")).header is None

    def test_non_string_header_raises(self) -> None:
        with pytest.raises(DocumentValidationError, match="header"):
            validate_and_build(_valid_data(header=3))

    @pytest.mark.parametrize("field", ["title", "description", "prescription"])
    def test_missing_required_field_raises(self, field: str) -> None:
        data = _valid_data()
        del data[field]
        with pytest.raises(DocumentValidationError, match=f"Missing required field: {field}"):
            validate_and_build(data)

    @pytest.mark.parametrize("value", ["", "   ", None, 1, ["x"]])
    def test_empty_or_non_string_title_raises(self, value: object) -> None:
        with pytest.raises(DocumentValidationError, match="'title' must be a non-empty string"):
            validate_and_build(_valid_data(title=value))

    def test_keeps_values_verbatim(self) -> None:
        doc = validate_and_build(_valid_data(title="  spaced  "))
        assert doc.title == "  spaced  "
