from typing import ClassVar

from app.config.exceptions import ConfigurationError
from app.config.settings import Settings
from app.generation.base import BaseDocumentGenerator
from app.generation.client_base import BaseModelClient
from app.generation.example_client_adapter import ExampleClientAdapter
from app.generation.generator import DocumentGenerator
from app.generation.openai_client_adapter import OpenAIClientAdapter


class ModelClientFactory:
    """Creates the configured model client adapter."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseModelClient:
        """Create a model client from application settings.

        Raises:
            ConfigurationError: if the provider is unknown or its API key is missing.
        """
        provider = settings.model_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        base_url = cls._resolve_base_url(provider, settings)
        api_key = cls._resolve_api_key(provider, settings)
        if not api_key:
            raise ConfigurationError(
                f"{provider}_api_key is required for model_provider={provider}"
            )
        return OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=settings.model_timeout_seconds,
            base_url=base_url,
        )

    @classmethod
    def resolve_model_name(cls, settings: Settings) -> str:
        provider = settings.model_provider.lower()
        key_map = {
            "example": "example",
            "gemini": settings.gemini_model_name,
            "openai": settings.openai_model_name,
            "openai_compatible": settings.openai_compatible_model_name,
            "openrouter": settings.openrouter_model_name,
            "groq": settings.groq_model_name,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.openai_compatible_base_url.strip()
            if not url:
                raise ConfigurationError(
                    "openai_compatible_base_url is required for "
                    "model_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ConfigurationError(
            f"Unknown model provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "gemini": settings.gemini_api_key,
            "openai": settings.openai_api_key,
            "openai_compatible": settings.openai_compatible_api_key,
            "openrouter": settings.openrouter_api_key,
            "groq": settings.groq_api_key,
        }
        return key_map.get(provider, "").strip()


class DocumentGeneratorFactory:
    """Creates the configured document generator."""

    @classmethod
    def create(cls, settings: Settings) -> BaseDocumentGenerator:
        """Create a generator wired to the configured model client."""
        return DocumentGenerator(
            client=ModelClientFactory.create(settings),
            model=ModelClientFactory.resolve_model_name(settings),
            temperature=settings.model_temperature,
        )
