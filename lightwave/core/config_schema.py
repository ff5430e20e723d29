"""
Configuration Schemas.

Pydantic models defining the expected structure of the YAML config file.
Used by load_config to validate configuration at load time. If the file
has unknown keys or wrong types, a clear error is raised at startup instead
of a cryptic KeyError deep in a command.

Unlike a server deployment, a CLI must run with no config file at all, so
every field carries a default.

    ConfigSchema
      server   → base_url, timeout
      output   → format
      logging  → level, format, handlers
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "http://localhost:8000/api"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# server
# =============================================================================


class ServerSchema(_StrictBase):
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=10.0, gt=0)


# =============================================================================
# output
# =============================================================================


class OutputSchema(_StrictBase):
    format: Literal["json", "text"] = "json"


# =============================================================================
# logging
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool = True


class FileHandlerSchema(_StrictBase):
    enabled: bool = False
    path: str = "~/.cache/lightwave/cli.jsonl"
    max_bytes: int = 1048576
    backup_count: int = 3


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema = Field(default_factory=ConsoleHandlerSchema)
    file: FileHandlerSchema = Field(default_factory=FileHandlerSchema)


class LoggingSchema(_StrictBase):
    level: str = "WARNING"
    format: Literal["json", "console"] = "console"
    handlers: HandlersSchema = Field(default_factory=HandlersSchema)

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")
        return level


class ConfigSchema(_StrictBase):
    server: ServerSchema = Field(default_factory=ServerSchema)
    output: OutputSchema = Field(default_factory=OutputSchema)
    logging: LoggingSchema = Field(default_factory=LoggingSchema)
