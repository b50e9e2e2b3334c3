"""
Type expressions for the CLI.

An expression is a colon-separated chain of wrappers ending in a base type,
read outside-in: ``masked:email`` is ``Masked[Email]`` and
``negated:pair-distinct:id`` would be rejected because pairs cannot be
negated.
"""

from __future__ import annotations

from typing import Any

from ..domain import CURRENCIES, USD, Email, Id, Masked, Money, Text, Username
from ..testing import NegatedOf, PairDistinct, PairOrdered

BASE_TYPES: dict[str, Any] = {
    "email": Email,
    "username": Username,
    "text": Text,
    "id": Id,
    "money": Money[USD],
}
BASE_TYPES.update({f"money-{ticker.lower()}": Money[currency] for ticker, currency in CURRENCIES.items()})

WRAPPERS: dict[str, Any] = {
    "masked": Masked,
    "negated": NegatedOf,
    "pair-distinct": PairDistinct,
    "pair-ordered": PairOrdered,
}


def resolve_type(expression: str) -> Any:
    """Resolve a type expression such as ``masked:email`` to a class."""
    tokens = [token.strip().lower() for token in expression.split(":")]
    if not all(tokens):
        raise ValueError(f"Invalid type expression: {expression!r}")

    *wrappers, base = tokens
    if base not in BASE_TYPES:
        raise ValueError(f"Unknown type: {base!r}. Known: {', '.join(sorted(BASE_TYPES))}")

    resolved = BASE_TYPES[base]
    for wrapper in reversed(wrappers):
        if wrapper not in WRAPPERS:
            raise ValueError(f"Unknown wrapper: {wrapper!r}. Known: {', '.join(sorted(WRAPPERS))}")
        resolved = WRAPPERS[wrapper][resolved]
    return resolved


def known_expressions() -> list[str]:
    return sorted(BASE_TYPES) + [f"{wrapper}:TYPE" for wrapper in sorted(WRAPPERS)]
