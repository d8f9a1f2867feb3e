#!/usr/bin/env python3
"""
Configuration loading and management for stringkit.

Handles loading configuration from stringkit.yaml and merging with explicit
overrides. Overrides take precedence over stringkit.yaml values.
"""

from pathlib import Path
from typing import Any, List, Optional

import yaml

from .logging_config import get_logger
from .schema import ConfigValidationError, validate_config
from .tables import DEFAULT_OPERATOR_PREFIXES

# Initialize logger for this module
logger = get_logger(__name__)

CONFIG_FILENAME = "stringkit.yaml"


class Config:
    """Configuration management class for stringkit."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration with defaults and load from file if available."""
        self.similarity_digits = 3
        self.mobile_operator_prefixes: List[str] = list(DEFAULT_OPERATOR_PREFIXES)
        self.log_level = "INFO"

        if config_path is None:
            # Look in config directory first, then the working directory
            config_path = Path.cwd() / "config" / CONFIG_FILENAME
            if not config_path.exists():
                config_path = Path.cwd() / CONFIG_FILENAME

        if config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, config_path: Path) -> None:
        """Load configuration from YAML file."""
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f)

            if config_data:
                validated = validate_config(config_data)
                self.similarity_digits = validated.similarity_digits
                self.mobile_operator_prefixes = list(validated.mobile_operator_prefixes)
                self.log_level = validated.log_level
                logger.info(f"Loaded configuration from {config_path}")

        except (OSError, yaml.YAMLError, ConfigValidationError) as e:
            logger.warning(f"Could not load {config_path.name}: {e}")
            logger.info("Using default values")

    def merge_overrides(self, **overrides: Any) -> None:
        """Merge explicit values with config values. Explicit values take precedence."""
        if not overrides:
            return

        merged = {
            "similarity_digits": self.similarity_digits,
            "mobile_operator_prefixes": self.mobile_operator_prefixes,
            "log_level": self.log_level,
        }
        for key, value in overrides.items():
            if key not in merged:
                raise ValueError(f"Unknown configuration key: {key}")
            if value is not None:
                merged[key] = value

        validated = validate_config(merged)
        self.similarity_digits = validated.similarity_digits
        self.mobile_operator_prefixes = list(validated.mobile_operator_prefixes)
        self.log_level = validated.log_level


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or use defaults."""
    return Config(config_path)
