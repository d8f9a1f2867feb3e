"""Tests for configuration loading, validation and the configured toolkit."""

import logging

import pytest
import yaml

from stringkit.config_loader import Config, load_config
from stringkit.logging_config import get_logger, setup_logging
from stringkit.schema import ConfigValidationError, validate_config
from stringkit.tables import DEFAULT_OPERATOR_PREFIXES
from stringkit.toolkit import StringToolkit


def write_config(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


class TestConfigValidation:
    """Tests for stringkit.yaml validation."""

    def test_defaults(self):
        """Test that an empty config uses defaults."""
        result = validate_config({})
        assert result.similarity_digits == 3
        assert result.mobile_operator_prefixes == list(DEFAULT_OPERATOR_PREFIXES)
        assert result.log_level == "INFO"

    def test_valid_full_config(self):
        """Test that every field is accepted and log level is normalized."""
        result = validate_config(
            {
                "similarity_digits": 1,
                "mobile_operator_prefixes": ["091", "094"],
                "log_level": "debug",
            }
        )
        assert result.similarity_digits == 1
        assert result.mobile_operator_prefixes == ["091", "094"]
        assert result.log_level == "DEBUG"

    def test_negative_digits(self):
        """Test that negative precision fails validation."""
        with pytest.raises(ConfigValidationError) as exc_info:
            validate_config({"similarity_digits": -1})
        assert "similarity_digits" in str(exc_info.value)

    @pytest.mark.parametrize("prefix", ["91", "0912", "081", "09a"])
    def test_invalid_prefix(self, prefix):
        """Test that malformed operator prefixes fail validation."""
        with pytest.raises(ConfigValidationError) as exc_info:
            validate_config({"mobile_operator_prefixes": [prefix]})
        assert "mobile_operator_prefixes" in str(exc_info.value)

    def test_empty_prefix_list(self):
        """Test that an empty prefix list fails validation."""
        with pytest.raises(ConfigValidationError):
            validate_config({"mobile_operator_prefixes": []})

    def test_unknown_log_level(self):
        """Test that an unknown log level fails validation."""
        with pytest.raises(ConfigValidationError):
            validate_config({"log_level": "LOUD"})


class TestConfigLoader:
    """Tests for Config loading from YAML."""

    def test_defaults_without_file(self, tmp_path):
        """Test defaults when the config file does not exist."""
        config = load_config(tmp_path / "missing.yaml")
        assert config.similarity_digits == 3
        assert config.mobile_operator_prefixes == list(DEFAULT_OPERATOR_PREFIXES)

    def test_load_from_file(self, tmp_path):
        """Test loading values from a YAML file."""
        path = write_config(
            tmp_path / "stringkit.yaml",
            {"similarity_digits": 1, "mobile_operator_prefixes": ["094"]},
        )
        config = load_config(path)
        assert config.similarity_digits == 1
        assert config.mobile_operator_prefixes == ["094"]

    def test_invalid_file_keeps_defaults(self, tmp_path):
        """Test that an invalid file leaves defaults in place."""
        path = write_config(tmp_path / "stringkit.yaml", {"similarity_digits": -3})
        config = load_config(path)
        assert config.similarity_digits == 3

    def test_discovers_config_directory(self, tmp_path, monkeypatch):
        """Test discovery of config/stringkit.yaml in the working directory."""
        (tmp_path / "config").mkdir()
        write_config(tmp_path / "config" / "stringkit.yaml", {"similarity_digits": 0})
        monkeypatch.chdir(tmp_path)
        assert Config().similarity_digits == 0

    def test_overrides_take_precedence(self, tmp_path):
        """Test that explicit overrides win over file values."""
        path = write_config(tmp_path / "stringkit.yaml", {"similarity_digits": 1})
        config = load_config(path)
        config.merge_overrides(similarity_digits=5, log_level=None)
        assert config.similarity_digits == 5
        assert config.log_level == "INFO"

    def test_unknown_override(self, tmp_path):
        """Test that unknown override keys are rejected."""
        config = load_config(tmp_path / "missing.yaml")
        with pytest.raises(ValueError):
            config.merge_overrides(fuzzy_threshold=0.5)


class TestStringToolkit:
    """Tests for the configured toolkit facade."""

    def test_uses_configured_precision(self, tmp_path):
        """Test that the toolkit rounds with the configured precision."""
        config = load_config(tmp_path / "missing.yaml")
        config.merge_overrides(similarity_digits=1)
        toolkit = StringToolkit(config)
        assert toolkit.similarity("abc", "abd") == 66.7
        assert toolkit.distance("abc", "abd") == 1

    def test_uses_configured_prefixes(self, tmp_path):
        """Test that the toolkit checks the configured operator prefixes."""
        config = load_config(tmp_path / "missing.yaml")
        config.merge_overrides(mobile_operator_prefixes=["094"])
        toolkit = StringToolkit(config)
        assert toolkit.is_valid_iranian_mobile_number("09412345678") is True
        assert toolkit.is_valid_iranian_mobile_number("09123456789") is False


    def test_applies_configured_log_level(self, tmp_path):
        """Test that the configured log level reaches the stringkit logger."""
        path = write_config(tmp_path / "stringkit.yaml", {"log_level": "debug"})
        StringToolkit(load_config(path))
        logger = logging.getLogger("stringkit")
        assert logger.level == logging.DEBUG
        assert get_logger("validators").getEffectiveLevel() == logging.DEBUG

        StringToolkit(load_config(tmp_path / "missing.yaml"))
        assert logger.level == logging.INFO


class TestLogging:
    """Tests for logging setup."""

    def test_setup_logging_level(self):
        """Test that setup_logging applies the requested level."""
        logger = setup_logging("DEBUG")
        assert logger.name == "stringkit"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_get_logger_namespaces(self):
        """Test that loggers are namespaced under stringkit."""
        assert get_logger("validators").name == "stringkit.validators"
        assert get_logger("stringkit.fuzzy").name == "stringkit.fuzzy"
        assert get_logger().name == "stringkit"
