"""Config module exports."""

from entitylink.config.loader import load_config
from entitylink.config.models import (
    BuilderConfig,
    EntityLinkConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "BuilderConfig",
    "EntityLinkConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
