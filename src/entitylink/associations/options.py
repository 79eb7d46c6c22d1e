"""Option validation for association declarations."""

from collections.abc import Iterable, Mapping
from typing import Any

from entitylink.core.errors import OptionError

# class_name: target class override, anonymous_class: inline target class,
# validate: whether associated records take part in the owner's validation
VALID_OPTIONS: frozenset[str] = frozenset({"class_name", "anonymous_class", "validate"})


def validate_options(options: Mapping[str, Any], accepted_keys: Iterable[str]) -> None:
    """Reject any key of ``options`` outside ``accepted_keys``.

    Pure set membership; no cross-key constraints.

    Raises:
        OptionError: naming every unknown key and the accepted set.
    """
    accepted = frozenset(accepted_keys)
    unknown = [key for key in options if key not in accepted]
    if unknown:
        raise OptionError.unknown_keys(unknown, accepted)


def validate_dependent(options: Mapping[str, Any], allowed: Iterable[str]) -> None:
    """Check the ``dependent`` option against the values a kind supports."""
    if "dependent" not in options or options["dependent"] is None:
        return
    allowed = tuple(allowed)
    if options["dependent"] not in allowed:
        raise OptionError.invalid_value("dependent", options["dependent"], allowed)
