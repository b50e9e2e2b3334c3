"""
Input validation utilities.

This module provides validation functions for configuration values and
command-line inputs, with error handling used throughout the package.
"""

import string


def validate_positive_number(value: int | float, name: str) -> None:
    """Validate that a number is positive."""
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_empty_string(value: str, name: str) -> None:
    """Validate that a string is not empty."""
    if not value or not value.strip():
        raise ValueError(f"{name} cannot be empty")


def validate_hex_string(value: str, name: str, length: int | None = None) -> None:
    """Validate that a string is hexadecimal, optionally of an exact length."""
    if not value or any(char not in string.hexdigits for char in value):
        raise ValueError(f"{name} must be a hexadecimal string, got {value!r}")
    if length is not None and len(value) != length:
        raise ValueError(f"{name} must be {length} hex characters, got {len(value)}")


def parse_positive_int(value: str | None, name: str, default: int) -> int:
    """Parse an optional string as a positive integer, falling back to *default*."""
    if value is None or not value.strip():
        return default
    try:
        number = int(value)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {value!r}") from e
    validate_positive_number(number, name)
    return number
