"""Builders for associations that hold a list of records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from entitylink.associations.builder.association import Association
from entitylink.core.errors import OptionError
from entitylink.reflection import AssociationKind


class CollectionAssociation(Association):
    """Shared behavior of has_many and has_and_belongs_to_many."""

    VALID_OPTIONS: ClassVar[frozenset[str]] = Association.VALID_OPTIONS | {"inverse_of", "limit"}
    VALIDATES_ASSOCIATED: ClassVar[bool] = True

    @classmethod
    def validate_options(cls, options: Mapping[str, Any]) -> None:
        super().validate_options(options)
        limit = options.get("limit")
        if limit is None:
            return
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise OptionError.invalid_value("limit", limit, ["non-negative int"])


class HasMany(CollectionAssociation):
    @classmethod
    def macro(cls) -> AssociationKind:
        return AssociationKind.HAS_MANY

    @classmethod
    def valid_dependent_options(cls) -> tuple[str, ...]:
        return ("destroy", "delete_all", "nullify")


class HasAndBelongsToMany(CollectionAssociation):
    @classmethod
    def macro(cls) -> AssociationKind:
        return AssociationKind.HAS_AND_BELONGS_TO_MANY

    @classmethod
    def valid_dependent_options(cls) -> tuple[str, ...]:
        return ()
