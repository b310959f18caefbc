"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- load_config() precedence: kwargs > env > yaml > defaults
- ConfigError mapping for missing files and invalid values
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from tskdocs.config.loader import _load_yaml, load_config
from tskdocs.core.errors import ConfigError, ErrorCode


@pytest.fixture(autouse=True)
def no_global_config(tmp_path: Path):
    """Point the global config at a file that does not exist."""
    with patch("tskdocs.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "missing" / "config.yaml"):
        yield


@pytest.fixture(autouse=True)
def clean_env():
    """Strip TSKDOCS__ env vars so the host environment cannot leak in."""
    saved = {k: v for k, v in os.environ.items() if k.startswith("TSKDOCS__")}
    for key in saved:
        del os.environ[key]
    yield
    for key in [k for k in os.environ if k.startswith("TSKDOCS__")]:
        del os.environ[key]
    os.environ.update(saved)


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("logging:\n  level: DEBUG\n")

        assert _load_yaml(yaml_file) == {"logging": {"level": "DEBUG"}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("logging:\n  level:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults(self) -> None:
        config = load_config()

        assert config.logging.level == "INFO"
        assert config.server.transport == "stdio"
        assert config.fetch.timeout_sec == 10.0
        assert config.fetch.refresh_on_startup is True
        assert config.docs.max_content_chars == 2000
        assert config.docs.sources is None

    def test_yaml_file_values(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "fetch:\n  timeout_sec: 3\n"
            "docs:\n  max_content_chars: 500\n"
            "  sources:\n    - url: https://example.com/a.md\n      title: A\n"
        )

        config = load_config(config_file)

        assert config.fetch.timeout_sec == 3
        assert config.docs.max_content_chars == 500
        assert config.docs.sources is not None
        assert config.docs.sources[0].url == "https://example.com/a.md"
        assert config.docs.sources[0].title == "A"

    def test_global_config_used_when_no_path(self, tmp_path: Path) -> None:
        global_file = tmp_path / "global.yaml"
        global_file.write_text("server:\n  port: 9000\n")

        with patch("tskdocs.config.loader.GLOBAL_CONFIG_PATH", global_file):
            config = load_config()

        assert config.server.port == 9000

    def test_env_overrides_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\n  level: WARNING\n")
        os.environ["TSKDOCS__LOGGING__LEVEL"] = "DEBUG"

        config = load_config(config_file)

        assert config.logging.level == "DEBUG"

    def test_kwargs_override_env(self) -> None:
        os.environ["TSKDOCS__SERVER__TRANSPORT"] = "stdio"

        config = load_config(server={"transport": "http"})

        assert config.server.transport == "http"

    def test_explicit_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "nope.yaml")

        assert exc_info.value.code == ErrorCode.CONFIG_FILE_NOT_FOUND

    def test_invalid_value_raises_config_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("server:\n  port: 70000\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(config_file)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "server.port" in exc_info.value.message
