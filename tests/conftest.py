"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and gives every test its own extension registry and builder settings.
"""

import sys
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

from entitylink.associations.builder import Association  # noqa: E402
from entitylink.associations.registry import ExtensionRegistry  # noqa: E402
from entitylink.config.models import BuilderConfig  # noqa: E402


@pytest.fixture(autouse=True)
def registry(monkeypatch: pytest.MonkeyPatch) -> ExtensionRegistry:
    """Fresh extension registry injected into every builder."""
    fresh = ExtensionRegistry()
    monkeypatch.setattr(Association, "extensions", fresh)
    monkeypatch.setattr(Association, "settings", BuilderConfig())
    return fresh


class RecordingExtension:
    """Extension that records every (owner, reflection) it is built with."""

    def __init__(self, valid_options: tuple[str, ...] = (), log: list | None = None) -> None:
        self.valid_options = valid_options
        self.calls: list[tuple[type, object]] = []
        self.log = log if log is not None else []

    def build(self, owner: type, reflection: object) -> None:
        self.calls.append((owner, reflection))
        self.log.append(self)


class FailingExtension:
    """Extension whose hook always raises."""

    valid_options = ()

    def build(self, owner: type, reflection: object) -> None:  # noqa: ARG002
        raise RuntimeError("hook failed")


@pytest.fixture
def recording_extension() -> type[RecordingExtension]:
    return RecordingExtension


@pytest.fixture
def failing_extension() -> FailingExtension:
    return FailingExtension()
