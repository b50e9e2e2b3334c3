"""
Masked wrapper for sensitive values.

``Masked[Email]`` holds an email that never shows up in ``str``, ``repr``,
f-strings or log lines. The payload is only reachable through ``get()`` or
the explicit ``to_raw()`` unwrap.
"""

from __future__ import annotations

from functools import total_ordering
from typing import Any, ClassVar, Generic, TypeVar

from ..core.errors import CompositionUnsupported, Kind
from ..core.generics import specialize
from ..core.types import to_raw, type_name
from ..testing.generation import ARBITRARY, NEGATION, PARSING, arbitrary, can_generate, can_negate, negated
from ..testing.random_source import RandomSource
from ..utilities.constants import MASK

T = TypeVar("T")


def _masked_arbitrary(cls: Any, source: RandomSource) -> Any:
    return cls(arbitrary(cls.inner, source))


def _masked_negated(cls: Any, source: RandomSource) -> Any:
    return cls(negated(cls.inner, source))


@total_ordering
class Masked(Generic[T]):
    """Holds a value and renders it as a fixed mask."""

    __slots__ = ("_value",)

    inner: ClassVar[Any] = None
    kind: ClassVar[Kind | None] = None

    def __class_getitem__(cls, inner: Any) -> Any:
        if cls.inner is not None:
            raise TypeError(f"{type_name(cls)} is already specialised")

        namespace: dict[str, Any] = {"inner": inner, "kind": getattr(inner, "kind", None)}
        if can_generate(inner):
            namespace["arbitrary"] = classmethod(_masked_arbitrary)
        if can_negate(inner):
            namespace["negated"] = classmethod(_masked_negated)
        if len(namespace) == 2:
            raise CompositionUnsupported(type_name(inner), f"{ARBITRARY} or {NEGATION}", "nothing to mask")
        return specialize(Masked, (inner,), namespace)

    def __init__(self, value: T) -> None:
        self._value = value

    @classmethod
    def parse(cls, raw: str) -> Masked[T]:
        if cls.inner is None:
            raise TypeError("Masked must be specialised to parse, e.g. Masked[Email]")
        parse = getattr(cls.inner, "parse", None)
        if not callable(parse):
            raise CompositionUnsupported(type_name(cls.inner), PARSING)
        return cls(parse(raw))

    def get(self) -> T:
        """Return the wrapped value."""
        return self._value

    def to_raw(self) -> str:
        return to_raw(self._value)

    def __str__(self) -> str:
        return MASK

    def __repr__(self) -> str:
        return f"Masked({MASK!r})"

    def __format__(self, format_spec: str) -> str:
        return format(MASK, format_spec)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Masked):
            return NotImplemented
        return bool(self._value == other._value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Masked):
            return NotImplemented
        return bool(self._value < other._value)

    def __hash__(self) -> int:
        return hash(self._value)
