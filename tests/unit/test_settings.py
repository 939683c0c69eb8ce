import pytest
from pydantic import ValidationError

from app.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_port(self) -> None:
        s = Settings()
        assert s.port == 8787

    def test_default_model_provider(self) -> None:
        s = Settings()
        assert s.model_provider == "gemini"
        assert s.gemini_model_name == "gemini-2.5-flash"

    def test_default_model_timeout(self) -> None:
        s = Settings()
        assert s.model_timeout_seconds == 30

    def test_default_font(self) -> None:
        s = Settings()
        assert s.font_url.endswith("ShipporiMincho-Bold.ttf")
        assert s.font_family == "Shippori Mincho"
        assert s.font_stylesheet_url == ""

    def test_activity_log_disabled_by_default(self) -> None:
        s = Settings()
        assert s.activity_log_url == ""


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_gemini_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "secret")
        s = Settings()
        assert s.gemini_api_key == "secret"

    def test_loads_model_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MODEL_TIMEOUT_SECONDS", "5")
        s = Settings()
        assert s.model_timeout_seconds == 5

    def test_loads_activity_log_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ACTIVITY_LOG_URL", "https://log.example.com/hook")
        s = Settings()
        assert s.activity_log_url == "https://log.example.com/hook"


class TestSettingsValidation:
    def test_invalid_port_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "not_a_number")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FONT_TIMEOUT_SECONDS", "abc")
        with pytest.raises(ValidationError):
            Settings()
