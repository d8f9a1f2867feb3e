#!/usr/bin/env python3
"""
Schema validation for stringkit configuration files.

This module provides Pydantic models for validating the stringkit YAML
configuration before it is applied to a Config instance.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from .tables import DEFAULT_OPERATOR_PREFIXES


class ConfigValidationError(Exception):
    """Custom validation error for clearer error messages."""

    pass


class ConfigSchema(BaseModel):
    """Schema for stringkit.yaml."""

    similarity_digits: int = Field(default=3, ge=0, le=15)
    mobile_operator_prefixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_OPERATOR_PREFIXES), min_length=1
    )
    log_level: str = "INFO"

    @field_validator("mobile_operator_prefixes")
    @classmethod
    def validate_operator_prefixes(cls, v: list[str]) -> list[str]:
        """Validate every prefix is three ASCII digits starting with 09."""
        for prefix in v:
            if len(prefix) != 3 or not prefix.isascii() or not prefix.isdigit():
                raise ValueError(
                    f"mobile_operator_prefixes entry {prefix!r} must be three digits"
                )
            if not prefix.startswith("09"):
                raise ValueError(
                    f"mobile_operator_prefixes entry {prefix!r} must start with 09"
                )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard level name."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}")
        return v.upper()


def validate_config(data: dict[str, Any]) -> ConfigSchema:
    """
    Validate stringkit.yaml data.

    Args:
        data: Dictionary containing config data

    Returns:
        Validated ConfigSchema instance

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        return ConfigSchema(**data)
    except Exception as e:
        raise ConfigValidationError(f"Config validation failed: {e}") from e
