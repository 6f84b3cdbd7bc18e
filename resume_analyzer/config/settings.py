from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: str = "public"
    cors_allow_origins: list[str] = ["*"]

    default_target_role: str = "Software Developer (Fresher)"
    min_text_length: int = 50

    pdf_engine: str = "pdfplumber"

    ocr_engine: str = "tesseract"
    ocr_language: str = "eng"
    ocr_dpi: int = 200
    tesseract_cmd: str = ""

    ai_provider: str = "gemini"
    ai_temperature: float = 0.2

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-2.5-flash"
    gemini_timeout_seconds: int = 60

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_base_url: str | None = None
    openai_timeout_seconds: int = 60
