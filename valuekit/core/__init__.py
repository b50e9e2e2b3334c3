"""
Core error types, protocols and class specialisation.
"""

from .errors import (
    CompositionUnsupported,
    GenerationExhausted,
    Kind,
    NegativeAmount,
    ParseFailure,
    ValuekitError,
)
from .types import Generatable, Negatable, ValidatedValue, to_raw, try_parse, type_name

__all__ = [
    "CompositionUnsupported",
    "Generatable",
    "GenerationExhausted",
    "Kind",
    "Negatable",
    "NegativeAmount",
    "ParseFailure",
    "ValidatedValue",
    "ValuekitError",
    "to_raw",
    "try_parse",
    "type_name",
]
