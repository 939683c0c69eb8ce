from collections.abc import Callable
from unittest.mock import MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from app.api.server import create_app
from app.config.settings import Settings
from app.generation.client_base import BaseModelClient
from app.generation.generator import DocumentGenerator
from app.generation.models import Disposition, Register
from app.generation.outcome import FixedOutcomeSelector
from app.processor.processor import CertificateProcessor
from app.rendering.font_loader import FontLoader
from app.rendering.svg_renderer import SvgRenderer
from app.reporting.activity_reporter import ActivityReporter

FONT_URL = "https://fonts.example.com/Test-Bold.ttf"
FONT_BYTES = b"\x00\x01\x00\x00integration-font"


class FontServer:
    """httpx mock transport serving the test font; records every request."""

    def __init__(self, status_code: int = 200) -> None:
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=FONT_BYTES)


@pytest.fixture()
def model_client() -> MagicMock:
    client = MagicMock(spec=BaseModelClient)
    client.create_chat_completion.return_value = (
        '{"title": "X", "description": "Y", "prescription": "Z"}'
    )
    return client


@pytest.fixture()
def font_server() -> FontServer:
    return FontServer()


@pytest.fixture()
def reporter() -> MagicMock:
    return MagicMock(spec=ActivityReporter)


@pytest.fixture()
def make_client(
    model_client: MagicMock,
    font_server: FontServer,
    reporter: MagicMock,
) -> Callable[..., TestClient]:
    """Build a TestClient whose pipeline uses a forced disposition and stubbed I/O."""

    def _make(
        disposition: Disposition | None = None,
        generator_provider: Callable[[], DocumentGenerator] | None = None,
    ) -> TestClient:
        processor = CertificateProcessor(
            outcome_selector=FixedOutcomeSelector(
                disposition or Disposition.approve(Register.NORMAL)
            ),
            generator_provider=generator_provider
            or (lambda: DocumentGenerator(client=model_client, model="test-model")),
            font_loader=FontLoader(
                font_url=FONT_URL,
                family="Test Mincho",
                timeout_seconds=5,
                transport=httpx.MockTransport(font_server),
            ),
            renderer=SvgRenderer(),
        )
        app = create_app(
            Settings(model_provider="example"),
            processor=processor,
            reporter=reporter,
        )
        return TestClient(app)

    return _make
