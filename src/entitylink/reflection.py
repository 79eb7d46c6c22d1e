"""Association reflections: immutable metadata about declared associations.

A reflection is created once per (model class, association name) at class
definition time and shared by every instance of that class. Each model class
keeps its own table of reflections; lookups merge the tables along the MRO so
subclasses see the associations declared on their bases.
"""

from __future__ import annotations

import weakref
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

_TABLE_ATTR = "_association_reflections"


class AssociationKind(Enum):
    """Closed set of association kinds: {singular, collection} x {owning, owned}."""

    BELONGS_TO = "belongs_to"
    HAS_ONE = "has_one"
    HAS_MANY = "has_many"
    HAS_AND_BELONGS_TO_MANY = "has_and_belongs_to_many"

    @property
    def collection(self) -> bool:
        return self in (AssociationKind.HAS_MANY, AssociationKind.HAS_AND_BELONGS_TO_MANY)

    @property
    def owning(self) -> bool:
        return self in (AssociationKind.HAS_ONE, AssociationKind.HAS_MANY)


def _camelize(name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)


@dataclass(frozen=True, eq=False)
class Reflection:
    """Metadata descriptor for one declared association.

    ``owner`` is held weakly; the reflection never keeps its model class alive.
    """

    kind: AssociationKind
    name: str
    options: Mapping[str, Any]
    scope: Any = None
    _owner_ref: weakref.ReferenceType[type[Any]] | None = field(default=None, repr=False)

    @classmethod
    def create(
        cls,
        kind: AssociationKind,
        name: str,
        scope: Any,
        options: Mapping[str, Any],
        owner: type[Any],
    ) -> Reflection:
        return cls(
            kind=kind,
            name=name,
            options=MappingProxyType(dict(options)),
            scope=scope,
            _owner_ref=weakref.ref(owner),
        )

    @property
    def owner(self) -> type[Any] | None:
        """Declaring model class, or None once it has been garbage collected."""
        return self._owner_ref() if self._owner_ref is not None else None

    @property
    def macro(self) -> AssociationKind:
        return self.kind

    @property
    def collection(self) -> bool:
        return self.kind.collection

    @property
    def owning(self) -> bool:
        return self.kind.owning

    @property
    def class_name(self) -> str:
        """Target class name: the class_name option, else derived from the name."""
        if self.options.get("class_name"):
            return str(self.options["class_name"])
        derived = _camelize(self.name)
        if self.collection and derived.endswith("s") and len(derived) > 1:
            derived = derived[:-1]
        return derived

    @property
    def validate(self) -> bool:
        """Whether associated records take part in the owner's validation."""
        if "validate" in self.options and self.options["validate"] is not None:
            return bool(self.options["validate"])
        return self.collection

    def __repr__(self) -> str:
        owner = self.owner
        owner_name = owner.__qualname__ if owner is not None else None
        return (
            f"Reflection(kind={self.kind.value}, name={self.name!r}, "
            f"options={dict(self.options)!r}, owner={owner_name})"
        )


def add_reflection(owner: type[Any], name: str, reflection: Reflection) -> Reflection | None:
    """Record ``reflection`` in the table owned by ``owner`` itself.

    Returns the reflection it replaced, if any.
    """
    table = owner.__dict__.get(_TABLE_ATTR)
    if table is None:
        table = {}
        setattr(owner, _TABLE_ATTR, table)
    previous = table.get(name)
    table[name] = reflection
    return previous


def remove_reflection(owner: type[Any], name: str) -> None:
    owner.__dict__.get(_TABLE_ATTR, {}).pop(name, None)


def declared_on(owner: type[Any], name: str) -> bool:
    """True if ``name`` was declared on ``owner`` itself, not inherited."""
    return name in owner.__dict__.get(_TABLE_ATTR, {})


def reflections(owner: type[Any]) -> dict[str, Reflection]:
    """All reflections visible on ``owner``; subclass declarations win."""
    merged: dict[str, Reflection] = {}
    for klass in reversed(owner.__mro__):
        merged.update(klass.__dict__.get(_TABLE_ATTR, {}))
    return merged


def reflect_on_association(owner: type[Any], name: str) -> Reflection | None:
    return reflections(owner).get(name)


def reflect_on_all_associations(
    owner: type[Any], kind: AssociationKind | None = None
) -> list[Reflection]:
    """Reflections in declaration order, optionally filtered by kind."""
    found = list(reflections(owner).values())
    if kind is not None:
        found = [r for r in found if r.kind is kind]
    return found
