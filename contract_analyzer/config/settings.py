from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    service_name: str = "Construction Contract Analyzer API"

    host: str = "0.0.0.0"
    port: int = 8000

    analysis_provider: str = "openai"
    analysis_variant: str = "construction"

    max_file_size_bytes: int = 10 * 1024 * 1024
    min_text_chars: int = 50
    max_text_chars: int = 50_000

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 30
    openai_temperature: float = 0.3
    openai_compatible_base_url: str = ""
