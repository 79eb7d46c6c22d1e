"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (ENTITYLINK__SECTION__KEY)
3. YAML file (./entitylink.yaml or an explicit path)
4. Built-in defaults (this file)

Examples:
    ENTITYLINK__LOGGING__LEVEL=DEBUG
    ENTITYLINK__BUILDER__REDECLARATION=replace
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
Redeclaration = Literal["error", "replace"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        ENTITYLINK__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every association declaration.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class BuilderConfig(BaseModel):
    """Association builder behavior.

    Env vars:
        ENTITYLINK__BUILDER__REDECLARATION: error | replace
        ENTITYLINK__BUILDER__ROLLBACK_ON_FAILURE: true | false
    """

    redeclaration: Redeclaration = Field(
        default="error",
        description="Declaring the same association name twice on one model class either "
        "raises NameConflictError (error) or rebuilds it from scratch (replace).",
    )
    rollback_on_failure: bool = Field(
        default=True,
        description="Remove freshly installed accessors when an extension hook or a "
        "validation hook fails. When false the model keeps the half-built association.",
    )


class EntityLinkConfig(BaseModel):
    """Root configuration for entitylink.

    All settings can be configured via:
    1. Environment variables: ENTITYLINK__SECTION__KEY
    2. YAML config file
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    builder: BuilderConfig = Field(default_factory=BuilderConfig)
