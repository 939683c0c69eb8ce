from abc import ABC, abstractmethod

from app.generation.models import Disposition, GenerationOutcome


class BaseDocumentGenerator(ABC):
    """Contract for all certificate text generators."""

    @abstractmethod
    def generate(self, reason: str, disposition: Disposition) -> GenerationOutcome:
        """Produce certificate text for a validated reason.

        Args:
            reason: Trimmed user reason (already validated).
            disposition: Approved/rejected outcome drawn for this request.

        Returns:
            GenerationOutcome whose document is never partially populated:
            either the decoded model output or the fallback document.
        """
