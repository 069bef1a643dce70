"""
Unit tests for configuration loading.

Tests defaults, JSON and YAML files, environment overrides, validation of
separators, saving, and the global configuration accessors.
"""

import json
from unittest.mock import patch

import pytest
import yaml

from bem_classes import bem_classes
from bem_classes.utils.config import (
    BemClassesConfig,
    NamingConfig,
    get_config,
    set_config,
    load_config,
)
from bem_classes.utils.exceptions import ConfigurationError, UnknownClassError


class TestDefaults:
    """Test configuration without a file."""

    def test_missing_file_uses_defaults(self, tmp_path):
        config = BemClassesConfig(str(tmp_path / "missing.yaml"))

        assert config.is_strict() is True
        assert config.resolver.missing_placeholder == "undefined"
        assert config.naming.element_separator == "__"
        assert config.naming.modifier_separator == "--"
        assert config.logging.level == "INFO"
        assert config.logging.enable_file_logging is False

    def test_env_config_path(self, tmp_path, monkeypatch):
        """Test BEM_CLASSES_CONFIG selects the configuration file."""
        path = tmp_path / "env.json"
        path.write_text(json.dumps({"resolver": {"strict": False}}))
        monkeypatch.setenv("BEM_CLASSES_CONFIG", str(path))

        config = BemClassesConfig()

        assert config.config_file == path
        assert config.is_strict() is False


class TestFileLoading:
    """Test JSON and YAML configuration files."""

    def test_load_json(self, tmp_path):
        path = tmp_path / "bem.json"
        path.write_text(json.dumps({
            "resolver": {"strict": False, "missing_placeholder": "?"},
            "naming": {"element_separator": "__", "modifier_separator": "_"},
        }))

        config = load_config(str(path))

        assert config.resolver.strict is False
        assert config.resolver.missing_placeholder == "?"
        assert config.naming.modifier_separator == "_"

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "bem.yaml"
        path.write_text(
            "resolver:\n"
            "  strict: false\n"
            "logging:\n"
            "  level: DEBUG\n"
            "  enable_file_logging: true\n"
            "  log_file: out.log\n"
        )

        config = load_config(str(path))

        assert config.is_strict() is False
        assert config.logging.level == "DEBUG"
        assert config.logging.enable_file_logging is True
        assert config.logging.log_file == "out.log"

    @pytest.mark.parametrize("value", ["false", "no", "0", "False"])
    def test_quoted_false_strict_yaml(self, tmp_path, value):
        """Test strict written as a quoted string is parsed, not truth-tested."""
        path = tmp_path / "quoted.yaml"
        path.write_text(f"resolver:\n  strict: \"{value}\"\n")

        assert load_config(str(path)).resolver.strict is False

    def test_string_flags_json(self, tmp_path):
        path = tmp_path / "strings.json"
        path.write_text(json.dumps({
            "resolver": {"strict": "no"},
            "logging": {"enable_file_logging": "yes"},
        }))

        config = load_config(str(path))

        assert config.resolver.strict is False
        assert config.logging.enable_file_logging is True

    @pytest.mark.parametrize("value", ["sometimes", 1, None, [True]])
    def test_invalid_flag_raises(self, tmp_path, value):
        path = tmp_path / "invalid.json"
        path.write_text(json.dumps({"resolver": {"strict": value}}))

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(str(path))

        assert "resolver.strict" in str(exc_info.value)
        assert exc_info.value.config_file == str(path)

    def test_empty_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")

        assert load_config(str(path)).is_strict() is True

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(str(path))

        assert exc_info.value.config_file == str(path)

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("resolver: [unclosed\n")

        with pytest.raises(ConfigurationError):
            load_config(str(path))

    def test_non_mapping_root_raises(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")

        with pytest.raises(ConfigurationError):
            load_config(str(path))

    def test_non_mapping_section_raises(self, tmp_path):
        path = tmp_path / "section.json"
        path.write_text(json.dumps({"naming": "dashes"}))

        with pytest.raises(ConfigurationError):
            load_config(str(path))

    def test_identical_separators_raise(self, tmp_path):
        path = tmp_path / "same.json"
        path.write_text(json.dumps({
            "naming": {"element_separator": "-", "modifier_separator": "-"},
        }))

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(str(path))

        assert exc_info.value.config_file == str(path)


class TestNamingConfig:
    """Test separator validation."""

    def test_empty_separator(self):
        with pytest.raises(ConfigurationError):
            NamingConfig(element_separator="")

    def test_identical_separators(self):
        with pytest.raises(ConfigurationError):
            NamingConfig(element_separator="--", modifier_separator="--")

    def test_modifier_separator_extending_element_separator(self):
        """Test separator pairs that make element and modifier keys overlap are rejected."""
        with pytest.raises(ConfigurationError):
            NamingConfig(element_separator="_", modifier_separator="__")

    def test_element_separator_extending_modifier_separator(self):
        config = NamingConfig(element_separator="__", modifier_separator="_")

        assert config.modifier_separator == "_"


class TestEnvironmentOverrides:
    """Test BEM_CLASSES_STRICT."""

    @pytest.mark.parametrize("value", ["0", "false", "NO"])
    def test_disable_strict(self, tmp_path, monkeypatch, value):
        monkeypatch.setenv("BEM_CLASSES_STRICT", value)

        assert BemClassesConfig(str(tmp_path / "missing.json")).is_strict() is False

    def test_enable_strict_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "lenient.json"
        path.write_text(json.dumps({"resolver": {"strict": False}}))
        monkeypatch.setenv("BEM_CLASSES_STRICT", "yes")

        assert load_config(str(path)).is_strict() is True

    def test_unrecognized_value_is_ignored(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BEM_CLASSES_STRICT", "maybe")

        assert BemClassesConfig(str(tmp_path / "missing.json")).is_strict() is True


class TestSaveConfig:
    """Test writing configuration back to disk."""

    def test_save_json_round_trip(self, tmp_path):
        path = tmp_path / "saved.json"
        config = BemClassesConfig(str(path))
        config.resolver.strict = False
        config.save_config()

        data = json.loads(path.read_text())
        assert data["resolver"]["strict"] is False
        assert load_config(str(path)).is_strict() is False

    def test_save_yaml(self, tmp_path):
        path = tmp_path / "saved.yaml"
        config = BemClassesConfig(str(path))
        config.logging.level = "WARNING"
        config.save_config()

        data = yaml.safe_load(path.read_text())
        assert data["logging"]["level"] == "WARNING"
        assert data["naming"] == {"element_separator": "__", "modifier_separator": "--"}


class TestConfigureLogging:
    """Test applying the logging section."""

    def test_configure_logging_without_file(self, default_config):
        with patch("bem_classes.utils.config.setup_logging") as mock_setup:
            default_config.configure_logging()

        mock_setup.assert_called_once_with(level="INFO", log_file=None)

    def test_configure_logging_with_file(self, default_config):
        default_config.logging.enable_file_logging = True
        default_config.logging.log_file = "bem.log"

        with patch("bem_classes.utils.config.setup_logging") as mock_setup:
            default_config.configure_logging()

        mock_setup.assert_called_once_with(level="INFO", log_file="bem.log")


class TestGlobalConfig:
    """Test the process-wide configuration accessors."""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_set_config_is_used_by_resolvers(self, lenient_config):
        set_config(lenient_config)

        resolver = bem_classes({"btn": "c1"}, "btn")

        assert get_config() is lenient_config
        assert resolver.block(None, "danger") == "c1 undefined"

    def test_explicit_config_wins_over_global(self, lenient_config, default_config):
        assert lenient_config is not default_config
        assert default_config.is_strict() is True
        set_config(lenient_config)

        resolver = bem_classes({"btn": "c1"}, "btn", default_config)

        with pytest.raises(UnknownClassError):
            resolver.block(None, "danger")

    def test_custom_separators_reach_resolver(self, tmp_path):
        path = tmp_path / "underscore.json"
        path.write_text(json.dumps({
            "naming": {"element_separator": "__", "modifier_separator": "_"},
        }))
        mapping = {"nav": "a", "nav_open": "b", "nav__item": "c", "nav__item_active": "d"}

        resolver = bem_classes(mapping, "nav", load_config(str(path)))

        assert resolver.block(None, "open") == "a b"
        assert resolver.element("item", None, "active") == "c d"
