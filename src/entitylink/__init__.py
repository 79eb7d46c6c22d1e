"""entitylink: declarative associations for entity model classes."""

from entitylink.associations import (
    Association,
    Extension,
    ExtensionRegistry,
    InMemoryAssociation,
    default_registry,
)
from entitylink.config import EntityLinkConfig, load_config
from entitylink.core.errors import (
    AssociationNotFoundError,
    EntityLinkError,
    ExtensionError,
    InvalidNameError,
    NameConflictError,
    NotImplementedContractError,
    OptionError,
)
from entitylink.core.logging import configure_logging
from entitylink.model import EntityModel
from entitylink.reflection import AssociationKind, Reflection

__version__ = "0.1.0"


def setup(config: EntityLinkConfig | None = None) -> EntityLinkConfig:
    """Bootstrap: load config, configure logging, apply builder settings.

    Call once at startup, before extensions are registered and models are
    declared.
    """
    config = config or load_config()
    configure_logging(config=config.logging)
    Association.configure(config.builder)
    return config


__all__ = [
    "Association",
    "AssociationKind",
    "AssociationNotFoundError",
    "EntityLinkConfig",
    "EntityLinkError",
    "EntityModel",
    "Extension",
    "ExtensionError",
    "ExtensionRegistry",
    "InMemoryAssociation",
    "InvalidNameError",
    "NameConflictError",
    "NotImplementedContractError",
    "OptionError",
    "Reflection",
    "default_registry",
    "load_config",
    "setup",
]
