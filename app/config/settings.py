from pydantic_settings import BaseSettings, SettingsConfigDict

_SHIPPORI_MINCHO_BOLD_URL = (
    "https://raw.githubusercontent.com/google/fonts/main/ofl/shipporimincho/"
    "ShipporiMincho-Bold.ttf"
)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", protected_namespaces=("settings_",)
    )

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8787

    model_provider: str = "gemini"
    model_timeout_seconds: int = 30
    model_temperature: float = 1.0

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-2.5-flash"

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"

    openai_compatible_api_key: str = ""
    openai_compatible_model_name: str = ""
    openai_compatible_base_url: str = ""

    openrouter_api_key: str = ""
    openrouter_model_name: str = "google/gemini-2.5-flash"

    groq_api_key: str = ""
    groq_model_name: str = "llama-3.3-70b-versatile"

    font_url: str = _SHIPPORI_MINCHO_BOLD_URL
    font_stylesheet_url: str = ""
    font_family: str = "Shippori Mincho"
    font_timeout_seconds: int = 10

    activity_log_url: str = ""
    activity_log_timeout_seconds: int = 5
