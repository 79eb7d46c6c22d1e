"""Association declaration: builders, extension registry and accessors."""

from entitylink.associations.builder import (
    Association,
    BelongsTo,
    CollectionAssociation,
    HasAndBelongsToMany,
    HasMany,
    HasOne,
    SingularAssociation,
)
from entitylink.associations.registry import (
    Extension,
    ExtensionRegistry,
    accepted_keys_of,
    default_registry,
)
from entitylink.associations.runtime import AssociationRuntime, InMemoryAssociation

__all__ = [
    "Association",
    "AssociationRuntime",
    "BelongsTo",
    "CollectionAssociation",
    "Extension",
    "ExtensionRegistry",
    "HasAndBelongsToMany",
    "HasMany",
    "HasOne",
    "InMemoryAssociation",
    "SingularAssociation",
    "accepted_keys_of",
    "default_registry",
]
