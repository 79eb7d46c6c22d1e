"""Association builders, one per association kind."""

from entitylink.associations.builder.association import Association
from entitylink.associations.builder.collection_association import (
    CollectionAssociation,
    HasAndBelongsToMany,
    HasMany,
)
from entitylink.associations.builder.singular_association import (
    BelongsTo,
    HasOne,
    SingularAssociation,
)

__all__ = [
    "Association",
    "BelongsTo",
    "CollectionAssociation",
    "HasAndBelongsToMany",
    "HasMany",
    "HasOne",
    "SingularAssociation",
]
