"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- load_config() precedence: defaults < yaml < env vars < kwargs
"""

from __future__ import annotations

from pathlib import Path

import pytest

from entitylink.config.loader import _load_yaml, load_config
from entitylink.config.models import BuilderConfig, EntityLinkConfig
from entitylink.core.errors import ConfigError, ErrorCode


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """No stray entitylink.yaml or ENTITYLINK__ env vars leak into tests."""
    monkeypatch.chdir(tmp_path)
    for var in ("ENTITYLINK__LOGGING__LEVEL", "ENTITYLINK__BUILDER__REDECLARATION"):
        monkeypatch.delenv(var, raising=False)


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("builder:\n  redeclaration: replace\n")
        assert _load_yaml(yaml_file) == {"builder": {"redeclaration": "replace"}}

    def test_returns_empty_for_yaml_null(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "null.yaml"
        yaml_file.write_text("null\n")
        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("logging:\n  level:\n    - invalid: [unclosed")
        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")
        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR


class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_defaults_without_file(self) -> None:
        config = load_config()
        assert isinstance(config, EntityLinkConfig)
        assert config.builder == BuilderConfig()
        assert config.logging.level == "INFO"

    def test_reads_default_file_in_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "entitylink.yaml").write_text("logging:\n  level: DEBUG\n")
        assert load_config().logging.level == "DEBUG"

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("builder:\n  rollback_on_failure: false\n")
        assert load_config(path).builder.rollback_on_failure is False

    def test_missing_explicit_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.yaml")
        assert exc_info.value.code == ErrorCode.CONFIG_FILE_NOT_FOUND

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "entitylink.yaml").write_text("builder:\n  redeclaration: error\n")
        monkeypatch.setenv("ENTITYLINK__BUILDER__REDECLARATION", "replace")
        assert load_config().builder.redeclaration == "replace"

    def test_kwargs_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENTITYLINK__LOGGING__LEVEL", "ERROR")
        config = load_config(logging={"level": "WARNING"})
        assert config.logging.level == "WARNING"

    def test_invalid_value_raises_config_error(self, tmp_path: Path) -> None:
        (tmp_path / "entitylink.yaml").write_text("builder:\n  redeclaration: merge\n")
        with pytest.raises(ConfigError) as exc_info:
            load_config()
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "builder" in exc_info.value.details["field"]
