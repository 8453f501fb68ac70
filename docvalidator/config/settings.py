from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from docvalidator.sensors.models import OcrLevel


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    ocr_level: OcrLevel = OcrLevel.ACCURATE
    confidence_threshold: float = Field(default=0.45, ge=0.0, le=1.0)

    sensor_engine: str = "opencv"
    sensor_timeout_seconds: float = Field(default=20.0, ge=0.0)
    sensor_max_workers: int = Field(default=4, ge=1)
    tesseract_cmd: str = ""

    custom_categories_path: Path | None = None

    @field_validator("ocr_level", mode="before")
    @classmethod
    def _lowercase_ocr_level(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value
