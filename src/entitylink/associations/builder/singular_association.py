"""Builders for associations that point at a single record."""

from __future__ import annotations

from typing import ClassVar

from entitylink.associations.builder.association import Association
from entitylink.reflection import AssociationKind


class SingularAssociation(Association):
    """Shared behavior of belongs_to and has_one."""

    VALID_OPTIONS: ClassVar[frozenset[str]] = Association.VALID_OPTIONS | {"inverse_of"}
    VALIDATES_ASSOCIATED: ClassVar[bool] = True


class BelongsTo(SingularAssociation):
    @classmethod
    def macro(cls) -> AssociationKind:
        return AssociationKind.BELONGS_TO

    @classmethod
    def valid_dependent_options(cls) -> tuple[str, ...]:
        return ("destroy", "delete")


class HasOne(SingularAssociation):
    @classmethod
    def macro(cls) -> AssociationKind:
        return AssociationKind.HAS_ONE

    @classmethod
    def valid_dependent_options(cls) -> tuple[str, ...]:
        return ("destroy", "delete", "nullify")
