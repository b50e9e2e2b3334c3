"""
Property-testing support: seeded sources, arbitrary and negated generation,
composition wrappers and the Hypothesis adapter.
"""

from .bounds import InBounds
from .generation import arbitrary, can_generate, can_negate, negated
from .negation import NegatedOf, NegationStrategy, PatternNegation, RejectionNegation
from .pairs import PairDistinct, PairOrdered
from .random_source import RandomSource, Seed
from .session import GeneratedValue, GeneratorSpec, Session, arbitrary_of, generate, negated_of, stream

__all__ = [
    "GeneratedValue",
    "GeneratorSpec",
    "InBounds",
    "NegatedOf",
    "NegationStrategy",
    "PairDistinct",
    "PairOrdered",
    "PatternNegation",
    "RandomSource",
    "RejectionNegation",
    "Seed",
    "Session",
    "arbitrary",
    "arbitrary_of",
    "can_generate",
    "can_negate",
    "generate",
    "negated",
    "negated_of",
    "stream",
]
