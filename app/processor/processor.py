from collections.abc import Callable

from app.config.settings import Settings
from app.generation.base import BaseDocumentGenerator
from app.generation.factory import DocumentGeneratorFactory
from app.generation.outcome import BaseOutcomeSelector, OutcomeSelector
from app.generation.validator import validate_reason
from app.logging.logger import Log
from app.presentation.mapper import map_presentation
from app.processor.models import CertificateResult
from app.rendering.font_loader import FontLoader
from app.rendering.svg_renderer import SvgRenderer


class CertificateProcessor:
    """Orchestrates the certificate pipeline.

    Pipeline: validate -> draw disposition -> generate text -> map presentation
    -> load typeface -> render SVG. Stateless; safe to share across requests.
    """

    def __init__(
        self,
        outcome_selector: BaseOutcomeSelector,
        generator_provider: Callable[[], BaseDocumentGenerator],
        font_loader: FontLoader,
        renderer: SvgRenderer,
    ) -> None:
        self._outcome_selector = outcome_selector
        self._generator_provider = generator_provider
        self._font_loader = font_loader
        self._renderer = renderer

    def process(self, raw_reason: object) -> CertificateResult:
        """Run the full pipeline for one submitted reason.

        Raises:
            InvalidInputError: if the reason is empty or longer than 50 characters.
            ConfigurationError: if the model provider is not configured.
            AssetUnavailableError: if the typeface cannot be fetched.
        """
        # Step 1: Validate before any external call
        reason = validate_reason(raw_reason)

        # Step 2: Draw disposition
        disposition = self._outcome_selector.select()
        Log.info("Disposition drawn", disposition=disposition.describe())

        # Step 3: Generate text (never fails; falls back on model errors)
        generator = self._generator_provider()
        generation = generator.generate(reason, disposition)

        # Step 4: Presentation
        params = map_presentation(disposition, generation.document)

        # Step 5: Render
        font = self._font_loader.load()
        svg = self._renderer.render_certificate(params, generation.document, font)
        Log.info(
            "Certificate rendered",
            issue_number=params.issue_number,
            disposition=disposition.describe(),
            fallback=generation.used_fallback,
        )
        return CertificateResult(
            reason=reason,
            disposition=disposition,
            generation=generation,
            params=params,
            svg=svg,
        )

    def render_og_image(self) -> str:
        return self._renderer.render_og_image(self._font_loader.load())


def build_font_loader(settings: Settings) -> FontLoader:
    return FontLoader(
        font_url=settings.font_url,
        family=settings.font_family,
        timeout_seconds=settings.font_timeout_seconds,
        stylesheet_url=settings.font_stylesheet_url,
    )


def build_processor(
    settings: Settings,
    outcome_selector: BaseOutcomeSelector | None = None,
) -> CertificateProcessor:
    """Build a CertificateProcessor with all required adapters."""
    return CertificateProcessor(
        outcome_selector=outcome_selector or OutcomeSelector(),
        generator_provider=lambda: DocumentGeneratorFactory.create(settings),
        font_loader=build_font_loader(settings),
        renderer=SvgRenderer(),
    )
