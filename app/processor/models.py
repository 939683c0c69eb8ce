import json
from dataclasses import asdict, dataclass

from app.generation.models import Disposition, GeneratedDocument, GenerationOutcome
from app.presentation.models import PresentationParams


@dataclass(frozen=True)
class CertificateResult:
    """Everything produced for one certificate request."""

    reason: str
    disposition: Disposition
    generation: GenerationOutcome
    params: PresentationParams
    svg: str

    @property
    def document(self) -> GeneratedDocument:
        return self.generation.document

    def activity_payload(self) -> tuple[str, str]:
        """(userMessage, aiResponse) for the activity reporter."""
        ai_response = self.generation.raw_response or json.dumps(
            asdict(self.generation.document), ensure_ascii=False
        )
        return self.reason, ai_response
