"""Base association builder.

The hierarchy is:

    Association
      SingularAssociation
        BelongsTo
        HasOne
      CollectionAssociation
        HasMany
        HasAndBelongsToMany

Builders are never instantiated; every step is a classmethod so concrete
kinds can override any one of them. ``Association`` itself only fixes the
order of the steps and cannot build anything: ``macro`` and
``valid_dependent_options`` must come from a concrete kind.
"""

from __future__ import annotations

import keyword
from collections.abc import Mapping
from typing import Any, ClassVar

from entitylink.associations import accessors
from entitylink.associations.options import VALID_OPTIONS, validate_dependent
from entitylink.associations.options import validate_options as assert_valid_keys
from entitylink.associations.registry import ExtensionRegistry, default_registry
from entitylink.config.models import BuilderConfig
from entitylink.core.errors import (
    InvalidNameError,
    NameConflictError,
    NotImplementedContractError,
)
from entitylink.core.logging import bind_declaration, get_logger, reset_declaration
from entitylink.reflection import (
    AssociationKind,
    Reflection,
    add_reflection,
    declared_on,
    remove_reflection,
)

log = get_logger(__name__)


class Association:
    """Turns ``(model, name, options)`` into a reflection plus accessors."""

    extensions: ClassVar[ExtensionRegistry] = default_registry
    settings: ClassVar[BuilderConfig] = BuilderConfig()

    VALID_OPTIONS: ClassVar[frozenset[str]] = VALID_OPTIONS
    # Kinds that register validates_associated for reflections with validate on
    VALIDATES_ASSOCIATED: ClassVar[bool] = False

    @classmethod
    def configure(cls, settings: BuilderConfig) -> None:
        """Apply builder settings to this builder and every kind below it."""
        cls.settings = settings

    @classmethod
    def build(
        cls,
        model: type[Any],
        name: str,
        options: Mapping[str, Any] | None = None,
        *,
        scope: Any = None,
    ) -> Reflection:
        """Declare association ``name`` on ``model`` and return its reflection.

        Raises:
            NameConflictError: name is reserved by the model base or already taken.
            InvalidNameError: name is not an identifier.
            OptionError: options hold a key no builder or extension accepts.
            NotImplementedContractError: called on an abstract builder.
        """
        if model.dangerous_attribute_method(name):
            raise NameConflictError.dangerous(model, name)

        options = dict(options or {})
        token = bind_declaration(model, name)
        try:
            reflection = cls.create_reflection(model, name, options, scope=scope)
            cls.check_name_available(model, name)

            previous = cls.define_accessors(model, reflection)
            # Registered before the hooks so the new accessors already resolve
            replaced = add_reflection(model, name, reflection)
            try:
                cls.define_callbacks(model, reflection)
                cls.define_validations(model, reflection)
            except Exception as e:
                if cls.settings.rollback_on_failure:
                    accessors.uninstall(model, name, previous)
                    if replaced is None:
                        remove_reflection(model, name)
                    else:
                        add_reflection(model, name, replaced)
                    log.warning("association_rolled_back", error=type(e).__name__)
                raise

            log.debug(
                "association_declared",
                kind=reflection.kind.value,
                options=sorted(reflection.options),
            )
            return reflection
        finally:
            reset_declaration(token)

    @classmethod
    def create_reflection(
        cls,
        model: type[Any],
        name: str,
        options: Mapping[str, Any],
        *,
        scope: Any = None,
    ) -> Reflection:
        if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
            raise InvalidNameError.not_identifier(name)

        cls.validate_options(options)

        return Reflection.create(cls.macro(), name, scope, options, model)

    @classmethod
    def check_name_available(cls, model: type[Any], name: str) -> None:
        """Reject names taken on the model, other than inherited associations."""
        if declared_on(model, name):
            if cls.settings.redeclaration == "error":
                raise NameConflictError.already_declared(model, name)
            return

        for klass in model.__mro__:
            if name not in klass.__dict__:
                continue
            if not accessors.is_generated(klass, name):
                raise NameConflictError.member_exists(model, name)
            return

    @classmethod
    def macro(cls) -> AssociationKind:
        raise NotImplementedContractError.missing(cls, "macro")

    @classmethod
    def valid_dependent_options(cls) -> tuple[str, ...]:
        raise NotImplementedContractError.missing(cls, "valid_dependent_options")

    @classmethod
    def valid_options(cls, options: Mapping[str, Any]) -> frozenset[str]:  # noqa: ARG003
        # Recomputed per declaration so extensions registered later still count
        valid = cls.VALID_OPTIONS | cls.extensions.accepted_keys()
        if cls.valid_dependent_options():
            valid |= {"dependent"}
        return valid

    @classmethod
    def validate_options(cls, options: Mapping[str, Any]) -> None:
        assert_valid_keys(options, cls.valid_options(options))
        validate_dependent(options, cls.valid_dependent_options())

    @classmethod
    def define_accessors(cls, model: type[Any], reflection: Reflection) -> Any:
        """Define ``model.<name>`` reading and writing the association.

            class Post(EntityModel): ...
            Post.has_many("comments")

        gives ``post.comments`` and ``post.comments = [...]``.
        """
        return accessors.install(model, reflection.name)

    @classmethod
    def define_callbacks(cls, model: type[Any], reflection: Reflection) -> None:
        for extension in cls.extensions.all():
            extension.build(model, reflection)

    @classmethod
    def define_validations(cls, model: type[Any], reflection: Reflection) -> None:
        """Kind validation hook; a no-op unless the kind sets VALIDATES_ASSOCIATED."""
        if cls.VALIDATES_ASSOCIATED and reflection.validate:
            model.validates_associated(reflection.name)
