"""
Username value object.

A handle made of ASCII letters, digits and underscores, starting with a
letter or digit, at most 32 characters long.
"""

from __future__ import annotations

import re
import string

from ..core.errors import Kind
from ..testing.negation import PatternNegation
from ..testing.random_source import RandomSource
from ..testing.samplers import fake
from ..utilities.constants import USERNAME_MAX_LENGTH
from .base import ValidatedString

_USERNAME_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9_]*")
_DISALLOWED = re.compile(r"[^A-Za-z0-9_]")

# Printable ASCII outside [A-Za-z0-9_], and the same plus underscore for the first character
_INVALID_CHAR = r"[ -/:-@\[-^`{-~]"
_INVALID_FIRST = r"[ -/:-@\[-`{-~]"

NEGATION_PATTERN = "|".join(
    [
        rf"{_INVALID_FIRST}[A-Za-z0-9_]{{0,16}}",
        rf"[A-Za-z0-9][A-Za-z0-9_]{{0,12}}{_INVALID_CHAR}[ -~]{{0,12}}",
        rf"[A-Za-z0-9][A-Za-z0-9_]{{{USERNAME_MAX_LENGTH},{USERNAME_MAX_LENGTH + 16}}}",
    ]
)


def sanitize_handle(candidate: str, fallback_first: str = "u") -> str:
    """Coerce a realistic handle such as ``john.smith`` into the username grammar."""
    handle = _DISALLOWED.sub("_", candidate).lstrip("_")
    if not handle:
        handle = fallback_first
    return handle[:USERNAME_MAX_LENGTH]


class Username(ValidatedString):
    """Immutable username with alphanumeric characters and underscores."""

    kind = Kind.USERNAME
    negation = PatternNegation(NEGATION_PATTERN)

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        return len(raw) <= USERNAME_MAX_LENGTH and _USERNAME_PATTERN.fullmatch(raw) is not None

    @classmethod
    def arbitrary(cls, source: RandomSource) -> Username:
        """Draw a realistic handle, e.g. ``smith_john`` or ``mary42``."""
        candidate = fake(source, "user_name")
        return cls(sanitize_handle(candidate, source.choice(string.ascii_lowercase)))
