"""HTTP surface: certificate generation, social preview image, health."""

from typing import Any

from fastapi import BackgroundTasks, Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from app.config.exceptions import ConfigurationError
from app.config.settings import Settings
from app.generation.exceptions import InvalidInputError
from app.logging.logger import Log
from app.processor.processor import CertificateProcessor, build_processor
from app.rendering.exceptions import AssetUnavailableError
from app.reporting.activity_reporter import ActivityReporter

SVG_MEDIA_TYPE = "image/svg+xml"


def create_app(
    settings: Settings,
    *,
    processor: CertificateProcessor | None = None,
    reporter: ActivityReporter | None = None,
) -> FastAPI:
    """Build the FastAPI application; collaborators are injectable for tests."""
    app = FastAPI(title="Official Excuse Agency")
    app.state.processor = processor or build_processor(settings)
    app.state.reporter = reporter or ActivityReporter(
        endpoint_url=settings.activity_log_url,
        timeout_seconds=settings.activity_log_timeout_seconds,
    )
    _register_error_handlers(app)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/generate")
    def generate(
        request: Request,
        background_tasks: BackgroundTasks,
        payload: Any = Body(default=None),
    ) -> Response:
        reason = payload.get("reason") if isinstance(payload, dict) else None
        result = request.app.state.processor.process(reason)
        background_tasks.add_task(
            request.app.state.reporter.report, *result.activity_payload()
        )
        return Response(content=result.svg, media_type=SVG_MEDIA_TYPE)

    @app.get("/og-image")
    def og_image(request: Request) -> Response:
        svg = request.app.state.processor.render_og_image()
        return Response(content=svg, media_type=SVG_MEDIA_TYPE)

    return app


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidInputError)
    async def invalid_input(_: Request, exc: InvalidInputError) -> JSONResponse:
        Log.info(f"Rejected request: {exc}")
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def malformed_body(_: Request, exc: RequestValidationError) -> JSONResponse:
        Log.info(f"Malformed request body: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": "Request body must be JSON"})

    @app.exception_handler(ConfigurationError)
    async def misconfigured(_: Request, exc: ConfigurationError) -> JSONResponse:
        Log.error(f"Configuration error: {exc}")
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.exception_handler(AssetUnavailableError)
    async def asset_unavailable(_: Request, exc: AssetUnavailableError) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={"error": "証明書の生成に失敗しました", "detail": str(exc)},
        )
