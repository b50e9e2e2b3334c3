"""
Error types shared by validated values and the generation framework.

Parse failures are expected data in both the positive and negative testing
paths. Exhaustion and unsupported compositions are programmer errors and
abort the generation call with full context.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class Kind(Enum):
    """Validation domain that rejected an input."""

    EMAIL = "email"
    USERNAME = "username"
    ID = "id"
    TEXT = "text"
    MONEY = "money"
    NUMBER = "number"

    def __str__(self) -> str:
        return self.value


class ParseFailure(ValueError):
    """
    Raised when raw input is not a valid instance of a domain type.

    Carries the domain ``kind`` and the offending ``raw_input``. Two failures
    are equal when both fields match, so tests can compare them directly.
    """

    def __init__(self, kind: Kind, raw_input: Any) -> None:
        self.kind = kind
        self.raw_input = raw_input
        super().__init__(f"Failed to parse `{kind}` resource: {raw_input!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseFailure):
            return NotImplemented
        return self.kind == other.kind and self.raw_input == other.raw_input

    def __hash__(self) -> int:
        return hash((self.kind, repr(self.raw_input)))

    def __repr__(self) -> str:
        return f"ParseFailure({self.kind.name}, {self.raw_input!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.kind, self.raw_input))


class NegativeAmount(ValueError):
    """Raised when a money amount would drop below zero."""

    def __init__(self, amount: Any) -> None:
        self.amount = amount
        super().__init__(f"Negative amount is not allowed, got: {amount}")


class ValuekitError(Exception):
    """Base class for generation framework errors."""


class GenerationExhausted(ValuekitError):
    """
    A bounded sampling loop ran out of attempts.

    Usually means a validator accepts nearly everything the sampler draws,
    so rejection sampling cannot find a negative example, or a distinct-pair
    draw keeps colliding.
    """

    def __init__(self, type_name: str, strategy: str, attempts: int) -> None:
        self.type_name = type_name
        self.strategy = strategy
        self.attempts = attempts
        super().__init__(
            f"Could not generate a value for {type_name} using {strategy} "
            f"after {attempts} attempts"
        )


class CompositionUnsupported(ValuekitError):
    """A wrapper or generator was defined over a type lacking a capability."""

    def __init__(self, type_name: str, capability: str, detail: str = "") -> None:
        self.type_name = type_name
        self.capability = capability
        message = f"{type_name} does not support {capability}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
