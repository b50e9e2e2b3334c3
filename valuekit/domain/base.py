"""
Base class for validated string value objects.

Construction is parsing: ``Username("ada")`` validates, so no code path can
hold an invalid instance.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, TypeVar

from ..core.errors import Kind, ParseFailure

S = TypeVar("S", bound="ValidatedString")


@dataclass(frozen=True, order=True)
class ValidatedString(ABC):
    """
    Immutable string value object with validation.

    Subclasses set ``kind`` and implement ``is_valid``. Equality and ordering
    only hold between instances of the same class, so an email never equals
    a username with the same text.
    """

    value: str

    kind: ClassVar[Kind]

    def __post_init__(self) -> None:
        """Validate value after initialization."""
        if not isinstance(self.value, str) or not self.is_valid(self.value):
            raise ParseFailure(self.kind, self.value)

    @classmethod
    @abstractmethod
    def is_valid(cls, raw: str) -> bool:
        """Check *raw* against the grammar."""

    @classmethod
    def parse(cls: type[S], raw: str) -> S:
        """Parse raw text, raising ``ParseFailure`` when it is invalid."""
        return cls(raw)

    def to_raw(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        """String representation."""
        return self.value

    def __repr__(self) -> str:
        """Representation for debugging."""
        return f"{type(self).__name__}({self.value!r})"
