"""Association runtime handles.

The builder only wires accessors to whatever ``association(name)`` returns.
``InMemoryAssociation`` is the default handle: it holds the assigned value
on the instance and performs no loading or persistence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from entitylink.reflection import Reflection


class AssociationRuntime(Protocol):
    def read(self) -> Any: ...

    def write(self, value: Any) -> None: ...


class InMemoryAssociation:
    """Holds the target of one association for one model instance."""

    def __init__(self, owner: Any, reflection: Reflection) -> None:
        self.owner = owner
        self.reflection = reflection
        self.target: Any = [] if reflection.collection else None

    def read(self) -> Any:
        return self.target

    def write(self, value: Any) -> None:
        if self.reflection.collection:
            value = [] if value is None else list(value)
        self.target = value

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.reflection.name}={self.target!r}>"
