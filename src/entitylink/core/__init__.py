"""Core module exports."""

from entitylink.core.errors import (
    AssociationNotFoundError,
    ConfigError,
    EntityLinkError,
    ErrorCode,
    ExtensionError,
    InvalidNameError,
    NameConflictError,
    NotImplementedContractError,
    OptionError,
)
from entitylink.core.logging import (
    bind_declaration,
    configure_logging,
    get_declaration,
    get_logger,
    reset_declaration,
)

__all__ = [
    # Errors
    "AssociationNotFoundError",
    "ConfigError",
    "EntityLinkError",
    "ErrorCode",
    "ExtensionError",
    "InvalidNameError",
    "NameConflictError",
    "NotImplementedContractError",
    "OptionError",
    # Logging
    "bind_declaration",
    "configure_logging",
    "get_declaration",
    "get_logger",
    "reset_declaration",
]
