"""
Logging Configuration.

Values come from environment variables with the ``SINKLOG_`` prefix, e.g.
``SINKLOG_LEVEL=DEBUG`` or ``SINKLOG_SINKS=console,file``.
"""

from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class DiagnosticsLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class FormatterName(str, Enum):
    PLAIN = "plain"
    TIMESTAMPED = "timestamped"
    JSON = "json"


class LoggingSettings(BaseSettings):
    """Settings used by ``configure_logging`` to build the shared logger."""

    model_config = SettingsConfigDict(
        env_prefix="SINKLOG_",
        extra="ignore",
        frozen=True,
    )

    level: LogLevel = Field(default=LogLevel.INFO, description="Initial severity threshold")
    formatter: FormatterName = Field(default=FormatterName.TIMESTAMPED, description="Line formatter")
    sinks: str = Field(default="console", description="Comma-separated sink tags (console, file)")
    file_path: str = Field(default="logs/sinklog.log", description="Path for file sink")
    diagnostics_level: DiagnosticsLevel = Field(
        default=DiagnosticsLevel.WARNING,
        description="Threshold for sinklog's own diagnostics on stderr",
    )

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().upper()
            return "WARN" if value == "WARNING" else value
        return value

    @field_validator("diagnostics_level", mode="before")
    @classmethod
    def _upper_diagnostics_level(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().upper()
            return "WARNING" if value == "WARN" else value
        return value

    @field_validator("formatter", mode="before")
    @classmethod
    def _lower_formatter(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value

    @property
    def sink_tags(self) -> list[str]:
        return [tag.strip().lower() for tag in self.sinks.split(",") if tag.strip()]
