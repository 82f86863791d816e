from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    suffix_case_sensitive: bool = False

    submission_provider: str = "http"
    submission_url: str = "https://technopark-alert-api-1.onrender.com/upload_cv"
    candidate_id: str = ""
    submission_timeout_seconds: int = 30
