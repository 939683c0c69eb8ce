import httpx
import openai

from app.generation.client_base import BaseModelClient
from app.generation.exceptions import ModelUnavailableError
from app.logging.logger import Log

RESPONSE_FORMAT_NAME = "certificate"


def _response_format(json_schema: dict[str, object]) -> dict[str, object]:
    return {
        "type": "json_schema",
        "json_schema": {
            "name": RESPONSE_FORMAT_NAME,
            "strict": True,
            "schema": json_schema,
        },
    }


def _build_messages(system_prompt: str, user_prompt: str) -> list[dict[str, str]]:
    messages = [{"role": "user", "content": user_prompt}]
    if system_prompt:
        messages.insert(0, {"role": "system", "content": system_prompt})
    return messages


class OpenAIClientAdapter(BaseModelClient):
    """Model client for any OpenAI-compatible chat endpoint.

    Gemini, OpenRouter and Groq are reached the same way by pointing
    ``base_url`` at their compatibility layer. Every provider failure is
    surfaced as ``ModelUnavailableError`` so the caller can substitute the
    fallback certificate. The SDK's own retries are disabled; one request
    is bounded by ``timeout_seconds``.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        Log.debug("Requesting certificate from model", model=model, temperature=temperature)
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format=_response_format(json_schema),
                messages=_build_messages(system_prompt, user_prompt),
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ModelUnavailableError(f"AI provider network error: {exc}") from exc
        except openai.APIStatusError as exc:
            raise ModelUnavailableError(
                f"AI provider API error (HTTP {exc.status_code}): {exc}"
            ) from exc
        except openai.APIError as exc:
            raise ModelUnavailableError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ModelUnavailableError("AI returned no choices")
        choice = response.choices[0]
        if choice.finish_reason == "length":
            raise ModelUnavailableError("AI response was truncated")
        if choice.message.refusal:
            raise ModelUnavailableError(f"AI refused the request: {choice.message.refusal}")
        if choice.message.content is None:
            raise ModelUnavailableError("AI returned empty response")
        return choice.message.content
