"""entitylink error types with typed error codes.

Error code ranges:
- 1xxx: Declaration (names, options, extensions, contracts)
- 2xxx: Config

Every declaration error is raised synchronously at class-definition time
and is never retryable: it points at a mistake in the model declaration.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Declaration (1xxx)
    NAME_DANGEROUS = 1001
    NAME_ALREADY_DECLARED = 1002
    NAME_MEMBER_EXISTS = 1003
    NAME_NOT_IDENTIFIER = 1101
    OPTION_UNKNOWN_KEY = 1201
    OPTION_INVALID_VALUE = 1202
    EXTENSION_INVALID = 1301
    CONTRACT_NOT_IMPLEMENTED = 1401
    ASSOCIATION_NOT_FOUND = 1501

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004


def _owner_name(owner: Any) -> str:
    return getattr(owner, "__qualname__", None) or getattr(owner, "__name__", repr(owner))


@dataclass(eq=False)
class EntityLinkError(Exception):
    """Base error with structured context.

    Fields are read-only by convention. The instance itself stays writable so
    the interpreter and contextlib can attach ``__traceback__`` and notes.
    """

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'NAME_DANGEROUS')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class NameConflictError(EntityLinkError):
    """Association name collides with a member of the owner class."""

    @classmethod
    def dangerous(cls, owner: Any, name: str) -> "NameConflictError":
        owner_name = _owner_name(owner)
        return cls(
            code=ErrorCode.NAME_DANGEROUS,
            message=(
                f"You tried to define an association named {name} on the model {owner_name}, "
                f"but this will conflict with a member {name} already defined by entitylink. "
                "Please choose a different association name."
            ),
            details={"name": name, "owner": owner_name},
        )

    @classmethod
    def already_declared(cls, owner: Any, name: str) -> "NameConflictError":
        owner_name = _owner_name(owner)
        return cls(
            code=ErrorCode.NAME_ALREADY_DECLARED,
            message=f"Association {name} is already declared on the model {owner_name}",
            details={"name": name, "owner": owner_name},
        )

    @classmethod
    def member_exists(cls, owner: Any, name: str) -> "NameConflictError":
        owner_name = _owner_name(owner)
        return cls(
            code=ErrorCode.NAME_MEMBER_EXISTS,
            message=f"The model {owner_name} already defines a member named {name}",
            details={"name": name, "owner": owner_name},
        )


class InvalidNameError(EntityLinkError):
    """Association name is not a well-formed identifier."""

    @classmethod
    def not_identifier(cls, name: Any) -> "InvalidNameError":
        return cls(
            code=ErrorCode.NAME_NOT_IDENTIFIER,
            message=f"Association names must be identifiers, got {name!r}",
            details={"name": repr(name)},
        )


class OptionError(EntityLinkError):
    """Association options contain unknown keys or invalid values."""

    @classmethod
    def unknown_keys(cls, keys: Iterable[str], accepted: Iterable[str]) -> "OptionError":
        unknown = sorted(str(k) for k in keys)
        valid = sorted(accepted)
        return cls(
            code=ErrorCode.OPTION_UNKNOWN_KEY,
            message=(
                f"Unknown key: {', '.join(unknown)}. Valid keys are: {', '.join(valid)}"
            ),
            details={"unknown": unknown, "accepted": valid},
        )

    @classmethod
    def invalid_value(cls, key: str, value: Any, allowed: Iterable[Any]) -> "OptionError":
        valid = sorted(str(a) for a in allowed)
        return cls(
            code=ErrorCode.OPTION_INVALID_VALUE,
            message=f"Invalid value {value!r} for option '{key}'. Allowed: {', '.join(valid)}",
            details={"key": key, "value": repr(value), "allowed": valid},
        )


class ExtensionError(EntityLinkError):
    """Object registered as an extension does not fulfil the extension contract."""

    @classmethod
    def invalid(cls, extension: Any, reason: str) -> "ExtensionError":
        return cls(
            code=ErrorCode.EXTENSION_INVALID,
            message=f"Invalid extension {extension!r}: {reason}",
            details={"extension": repr(extension), "reason": reason},
        )


class NotImplementedContractError(EntityLinkError):
    """Abstract builder capability called on a class that does not provide it."""

    @classmethod
    def missing(cls, owner: Any, capability: str) -> "NotImplementedContractError":
        owner_name = _owner_name(owner)
        return cls(
            code=ErrorCode.CONTRACT_NOT_IMPLEMENTED,
            message=f"{owner_name} does not implement {capability}",
            details={"owner": owner_name, "capability": capability},
        )


class AssociationNotFoundError(EntityLinkError):
    """Instance asked for an association its class never declared."""

    @classmethod
    def undeclared(cls, owner: Any, name: str) -> "AssociationNotFoundError":
        owner_name = _owner_name(owner)
        return cls(
            code=ErrorCode.ASSOCIATION_NOT_FOUND,
            message=f"Association named '{name}' was not found on {owner_name}",
            details={"name": name, "owner": owner_name},
        )


class ConfigError(EntityLinkError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )
