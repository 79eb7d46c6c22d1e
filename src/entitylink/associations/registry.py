"""Extension registry for association builders.

Extensions contribute extra accepted option keys and a construction hook
that runs for every association declared after they were registered.
Registration is append-only and meant to happen during bootstrap, before
any model declares an association.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from entitylink.core.errors import ExtensionError
from entitylink.core.logging import get_logger

if TYPE_CHECKING:
    from entitylink.reflection import Reflection

log = get_logger(__name__)


@runtime_checkable
class Extension(Protocol):
    """Capability contract every registered extension fulfils.

    ``valid_options`` is optional; extensions without it contribute no keys.
    It may be a collection of str or a method returning one.
    """

    def build(self, owner: type[Any], reflection: Reflection) -> None: ...


def accepted_keys_of(extension: Extension) -> frozenset[str]:
    """Option keys an extension adds to the accepted set.

    Raises:
        ExtensionError: valid_options is not a collection of str.
    """
    keys = getattr(extension, "valid_options", None)
    if callable(keys):
        keys = keys()
    if keys is None:
        return frozenset()
    if isinstance(keys, str) or not isinstance(keys, Iterable):
        raise ExtensionError.invalid(extension, "valid_options must be a collection of str")
    # One pass only; generators are consumed here
    materialized = tuple(keys)
    if not all(isinstance(k, str) for k in materialized):
        raise ExtensionError.invalid(extension, "valid_options must be a collection of str")
    return frozenset(materialized)


class ExtensionRegistry:
    """Append-only, ordered collection of extensions.

    Each extension's option keys are read once, at registration. Readers
    always see an immutable (extensions, keys) snapshot; ``register`` swaps
    in a new one under a lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshot: tuple[tuple[Extension, ...], frozenset[str]] = ((), frozenset())

    def register(self, extension: Extension) -> Extension:
        """Append an extension and return it.

        Raises:
            ExtensionError: extension has no build hook or malformed valid_options.
        """
        if not callable(getattr(extension, "build", None)):
            raise ExtensionError.invalid(extension, "missing callable build(owner, reflection)")
        keys = accepted_keys_of(extension)

        with self._lock:
            extensions, accepted = self._snapshot
            self._snapshot = ((*extensions, extension), accepted | keys)
        log.info(
            "extension_registered",
            extension=type(extension).__name__,
            valid_options=sorted(keys),
        )
        return extension

    def all(self) -> tuple[Extension, ...]:
        """Registered extensions in registration order."""
        return self._snapshot[0]

    def accepted_keys(self) -> frozenset[str]:
        """Union of every registered extension's option keys."""
        return self._snapshot[1]

    def __len__(self) -> int:
        return len(self._snapshot[0])

    def __contains__(self, extension: object) -> bool:
        return extension in self._snapshot[0]


# Process-wide registry used by the builders unless another one is injected
default_registry = ExtensionRegistry()
