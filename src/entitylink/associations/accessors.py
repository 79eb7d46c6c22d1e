"""Accessor generation for declared associations.

For an association ``tags`` the model class gets a ``tags`` property whose
getter returns ``self.association("tags").read()`` and whose setter calls
``self.association("tags").write(value)``. Accessors are plain closures;
no source code is synthesized.
"""

from __future__ import annotations

import weakref
from collections.abc import Callable, Iterator
from typing import Any

_MISSING: Any = object()

# Attribute under which each model class keeps its own GeneratedMethods
NAMESPACE_ATTR = "_generated_association_methods"


class GeneratedMethods:
    """Per-class namespace of generated association accessors.

    Writes straight into the owner class. It trusts the caller to have
    checked the name for collisions first.
    """

    def __init__(self, owner: type[Any]) -> None:
        self._owner_ref = weakref.ref(owner)
        self._accessors: dict[str, property] = {}

    @property
    def owner(self) -> type[Any]:
        owner = self._owner_ref()
        if owner is None:
            raise ReferenceError("model class of this namespace no longer exists")
        return owner

    def define(self, name: str, accessor: property) -> Any:
        """Install ``accessor`` as ``name``; returns what the class held before."""
        owner = self.owner
        previous = owner.__dict__.get(name, _MISSING)
        setattr(owner, name, accessor)
        self._accessors[name] = accessor
        return previous

    def restore(self, name: str, previous: Any = _MISSING) -> None:
        """Undo ``define``: put back ``previous`` or drop the member entirely."""
        owner = self.owner
        self._accessors.pop(name, None)
        if previous is _MISSING:
            if name in owner.__dict__:
                delattr(owner, name)
        else:
            setattr(owner, name, previous)
            if isinstance(previous, property):
                self._accessors[name] = previous

    def get(self, name: str) -> property | None:
        return self._accessors.get(name)

    def names(self) -> list[str]:
        return list(self._accessors)

    def __contains__(self, name: object) -> bool:
        return name in self._accessors

    def __iter__(self) -> Iterator[str]:
        return iter(self._accessors)


def define_reader(name: str) -> Callable[[Any], Any]:
    def reader(self: Any) -> Any:
        return self.association(name).read()

    reader.__name__ = name
    return reader


def define_writer(name: str) -> Callable[[Any, Any], None]:
    def writer(self: Any, value: Any) -> None:
        self.association(name).write(value)

    writer.__name__ = name
    return writer


def install(owner: type[Any], name: str) -> Any:
    """Install reader and writer for ``name`` on ``owner``.

    Returns the member previously stored under ``name`` (or a sentinel) so
    the caller can undo the installation with ``uninstall``.
    """
    mixin: GeneratedMethods = owner.generated_association_methods()
    accessor = property(
        define_reader(name),
        define_writer(name),
        doc=f"Generated accessor for the {name!r} association.",
    )
    return mixin.define(name, accessor)


def uninstall(owner: type[Any], name: str, previous: Any = _MISSING) -> None:
    owner.generated_association_methods().restore(name, previous)


def is_generated(klass: type[Any], name: str) -> bool:
    """True if ``klass`` itself holds ``name`` as a generated association accessor."""
    mixin = klass.__dict__.get(NAMESPACE_ATTR)
    return mixin is not None and name in klass.__dict__ and mixin.get(name) is klass.__dict__[name]
