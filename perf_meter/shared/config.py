from pathlib import Path
from typing import Dict, List
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from perf_meter.const import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_USER_AGENT,
    ENV_PREFIX,
    LIBRARY_LOG_LEVELS,
)


class Settings(BaseSettings):
    """Global runtime settings for perf-meter."""

    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)
    log_level: str = DEFAULT_LOG_LEVEL
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    use_color: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, ge=1)
    library_log_levels: Dict[str, str] = dict(LIBRARY_LOG_LEVELS)

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Init settings (command line options passed to the constructor)
        2. Environment variables
        3. Default values
        """
        return (
            init_settings,
            env_settings,
        )


class MeasurementConfig(BaseModel):
    """Measurement definition read from the YAML configuration file."""
    base: str = Field(..., description="Root URL every page is resolved against")
    pages: List[str] = Field(..., min_length=1, description="Relative page paths to measure")
    requests: int = Field(..., gt=0, description="Requests per page and mode")
    ttfb: bool = Field(default=False, description="Also report time-to-first-byte statistics")

    @field_validator("base")
    @classmethod
    def validate_base(cls, value: str) -> str:
        value = value.strip()
        parsed = urlsplit(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"'{value}' is not an absolute http(s) URL")
        return value

    @field_validator("pages")
    @classmethod
    def validate_pages(cls, value: List[str]) -> List[str]:
        for page in value:
            if not page.strip():
                raise ValueError("pages must not contain empty entries")
        return value
