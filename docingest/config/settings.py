from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    uploads_dir: Path = Path("/app/uploads")
    results_path: str = ""

    pdf_engine: str = "pdfplumber"
    text_encoding: str = "utf-8"
