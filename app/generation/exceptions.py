class GenerationError(Exception):
    """Raised when certificate text generation fails."""


class InvalidInputError(GenerationError):
    """Raised when the submitted reason is empty or too long."""


class ModelUnavailableError(GenerationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class DocumentParseError(GenerationError):
    """Raised when the model output cannot be decoded into a document."""


class DocumentValidationError(DocumentParseError):
    """Raised when decoded model output violates the document invariants."""
