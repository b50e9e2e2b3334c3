"""
Shared protocol types for structural typing across domain values and generators.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Protocol, TypeVar, runtime_checkable

from .errors import Kind, ParseFailure

if TYPE_CHECKING:
    from ..testing.negation import NegationStrategy
    from ..testing.random_source import RandomSource

T = TypeVar("T")


@runtime_checkable
class ValidatedValue(Protocol):
    """Minimal contract for a value whose only constructor path validates.

    Structural typing keeps the framework decoupled from concrete domain
    types: anything exposing ``parse`` and ``to_raw`` can be generated,
    negated and wrapped.
    """

    kind: ClassVar[Kind]

    @classmethod
    def parse(cls, raw: str) -> Any: ...

    def to_raw(self) -> str: ...


class Generatable(Protocol):
    """Types with a realistic-domain sampler for valid instances."""

    @classmethod
    def arbitrary(cls, source: RandomSource) -> Any: ...


class Negatable(Protocol):
    """Types describing how to draw inputs outside their grammar."""

    negation: ClassVar[NegationStrategy]


def type_name(cls: Any) -> str:
    """Readable name for a (possibly specialised) class."""
    return getattr(cls, "__qualname__", None) or getattr(cls, "__name__", repr(cls))


def to_raw(value: Any) -> str:
    """Render a value as raw text that re-parses to an equal value."""
    render = getattr(value, "to_raw", None)
    if callable(render):
        return render()
    return str(value)


def try_parse(cls: type[T], raw: str) -> T | ParseFailure:
    """Parse *raw* as *cls*, returning the failure as a value instead of raising."""
    try:
        return cls.parse(raw)  # type: ignore[attr-defined, no-any-return]
    except ParseFailure as failure:
        return failure
