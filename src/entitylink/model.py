"""Base class for models that declare associations.

    class Post(EntityModel):
        pass

    Post.belongs_to("author")
    Post.has_many("comments", class_name="Comment")

Declarations happen on the class; every instance then resolves its own
association handles through ``association(name)``.
"""

from __future__ import annotations

from functools import cache
from typing import Any, ClassVar

from entitylink.associations.accessors import NAMESPACE_ATTR, GeneratedMethods
from entitylink.associations.builder import BelongsTo, HasAndBelongsToMany, HasMany, HasOne
from entitylink.associations.runtime import AssociationRuntime, InMemoryAssociation
from entitylink.core.errors import AssociationNotFoundError
from entitylink.reflection import (
    AssociationKind,
    Reflection,
    reflect_on_all_associations,
    reflect_on_association,
)

_VALIDATIONS_ATTR = "_associated_validations"


class EntityModel:
    """Owner side of association declarations."""

    association_class: ClassVar[type[Any]] = InMemoryAssociation

    def __init__(self, id: Any = None, **attributes: Any) -> None:  # noqa: A002
        self._id = id
        self._association_cache: dict[str, AssociationRuntime] = {}
        for name, value in attributes.items():
            setattr(self, name, value)

    @property
    def id(self) -> Any:
        return getattr(self, "_id", None)

    # Declarations

    @classmethod
    def belongs_to(cls, name: str, scope: Any = None, **options: Any) -> Reflection:
        return BelongsTo.build(cls, name, options, scope=scope)

    @classmethod
    def has_one(cls, name: str, scope: Any = None, **options: Any) -> Reflection:
        return HasOne.build(cls, name, options, scope=scope)

    @classmethod
    def has_many(cls, name: str, scope: Any = None, **options: Any) -> Reflection:
        return HasMany.build(cls, name, options, scope=scope)

    @classmethod
    def has_and_belongs_to_many(cls, name: str, scope: Any = None, **options: Any) -> Reflection:
        return HasAndBelongsToMany.build(cls, name, options, scope=scope)

    # Collaborator contract used by the builders

    @classmethod
    def dangerous_attribute_method(cls, name: Any) -> bool:
        """True if ``name`` would override a member defined by EntityModel itself."""
        return isinstance(name, str) and name in _base_members()

    @classmethod
    def generated_association_methods(cls) -> GeneratedMethods:
        """This class's own accessor namespace, created on first use."""
        mixin = cls.__dict__.get(NAMESPACE_ATTR)
        if mixin is None:
            mixin = GeneratedMethods(cls)
            setattr(cls, NAMESPACE_ATTR, mixin)
        return mixin

    @classmethod
    def validates_associated(cls, name: str) -> None:
        """Record that records behind ``name`` take part in validation."""
        rules = cls.__dict__.get(_VALIDATIONS_ATTR)
        if rules is None:
            rules = []
            setattr(cls, _VALIDATIONS_ATTR, rules)
        if name not in rules:
            rules.append(name)

    @classmethod
    def associated_validations(cls) -> list[str]:
        """Association names registered through validates_associated, bases first."""
        names: list[str] = []
        for klass in reversed(cls.__mro__):
            for name in klass.__dict__.get(_VALIDATIONS_ATTR, ()):
                if name not in names:
                    names.append(name)
        return names

    # Reflection

    @classmethod
    def reflect_on_association(cls, name: str) -> Reflection | None:
        return reflect_on_association(cls, name)

    @classmethod
    def reflect_on_all_associations(cls, kind: AssociationKind | None = None) -> list[Reflection]:
        return reflect_on_all_associations(cls, kind)

    # Instances

    def association(self, name: str) -> AssociationRuntime:
        """Association handle for ``name`` on this instance, created on first use."""
        cache_ = self.__dict__.setdefault("_association_cache", {})
        handle = cache_.get(name)
        if handle is None:
            reflection = reflect_on_association(type(self), name)
            if reflection is None:
                raise AssociationNotFoundError.undeclared(type(self), name)
            handle = self.association_class(self, reflection)
            cache_[name] = handle
        return handle

    def association_cached(self, name: str) -> bool:
        return name in self.__dict__.get("_association_cache", {})

    def __repr__(self) -> str:
        return f"<{type(self).__qualname__} id={self.id!r}>"


@cache
def _base_members() -> frozenset[str]:
    return frozenset(dir(EntityModel))
