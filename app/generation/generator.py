"""AI-powered certificate text generator."""

import json
from pathlib import Path

from app.generation.base import BaseDocumentGenerator
from app.generation.client_base import BaseModelClient
from app.generation.models import FALLBACK_DOCUMENT, Disposition, GenerationOutcome
from app.generation.parser import decode_document
from app.generation.prompt_composer import PromptComposer
from app.generation.prompt_loader import load_json_schema
from app.logging.logger import Log


class DocumentGenerator(BaseDocumentGenerator):
    """Drives the model call and falls back to a fixed document on any failure."""

    def __init__(
        self,
        *,
        client: BaseModelClient,
        model: str,
        temperature: float = 1.0,
        composer: PromptComposer | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(2.0, temperature))
        self._system_prompt = system_prompt
        self._composer = composer or PromptComposer()
        self._json_schema = json.loads(load_json_schema(json_schema_path))

    def generate(self, reason: str, disposition: Disposition) -> GenerationOutcome:
        prompt = self._composer.compose(disposition, reason)
        Log.debug(f"Certificate prompt:\n{prompt}")

        try:
            raw_response = self._call_ai(prompt)
        except Exception as exc:
            Log.warning(f"Model call failed, using fallback document: {exc}")
            return GenerationOutcome(document=FALLBACK_DOCUMENT, failure=str(exc))
        Log.debug(f"AI raw response:\n{raw_response}")

        result = decode_document(raw_response)
        if result.document is None:
            Log.warning(f"Model output rejected, using fallback document: {result.error}")
            return GenerationOutcome(
                document=FALLBACK_DOCUMENT,
                raw_response=raw_response,
                failure=result.error,
            )
        return GenerationOutcome(document=result.document, raw_response=raw_response)

    def _call_ai(self, prompt: str) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=self._json_schema,
        )
