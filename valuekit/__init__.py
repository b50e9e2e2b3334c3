"""
valuekit - validated domain values with generators for property testing.

This package provides:
- Value objects that can only be constructed through validation
- Realistic samplers for valid values
- Negated generators for inputs each type must reject
- Composition wrappers: masking, distinct and ordered pairs, bounds
"""

__version__ = "0.3.0"
__description__ = "Validated domain values with arbitrary and negated generators"

from .config import GenerationConfig
from .core import CompositionUnsupported, GenerationExhausted, Kind, NegativeAmount, ParseFailure, try_parse
from .domain import Currency, Email, Id, Masked, Money, Text, Username
from .testing import NegatedOf, PairDistinct, PairOrdered, Seed, Session, arbitrary_of, generate, negated_of

__all__ = [
    "CompositionUnsupported",
    "Currency",
    "Email",
    "GenerationConfig",
    "GenerationExhausted",
    "Id",
    "Kind",
    "Masked",
    "Money",
    "NegatedOf",
    "NegativeAmount",
    "PairDistinct",
    "PairOrdered",
    "ParseFailure",
    "Seed",
    "Session",
    "Text",
    "Username",
    "arbitrary_of",
    "generate",
    "negated_of",
    "try_parse",
]
