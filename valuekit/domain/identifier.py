"""
Identifier value objects.

``Id`` wraps a 128-bit UUID. ``Id[User]`` brands it with a tag type, so a
user id and an order id with the same bits are different, incomparable
types.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from ..core.errors import Kind, ParseFailure
from ..core.generics import specialize
from ..core.types import type_name
from ..testing.negation import PatternNegation
from ..testing.random_source import RandomSource

Tag = TypeVar("Tag")

# Non-hex character in an otherwise well-formed UUID, too short, too long, non-hex groups
NEGATION_PATTERN = "|".join(
    [
        r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{11}[g-z]",
        r"[0-9a-f]{1,31}",
        r"[0-9a-f]{33,40}",
        r"[g-z]{8}-[g-z]{4}-[g-z]{4}-[g-z]{4}-[g-z]{12}",
    ]
)


@dataclass(frozen=True, order=True)
class Id(Generic[Tag]):
    """
    Immutable identifier backed by a UUID.

    Accepts a ``uuid.UUID`` or any string form ``uuid.UUID`` parses; stores
    the normalized UUID.
    """

    value: uuid.UUID

    kind: ClassVar[Kind] = Kind.ID
    tag: ClassVar[Any] = None
    negation: ClassVar[PatternNegation] = PatternNegation(NEGATION_PATTERN)

    def __class_getitem__(cls, tag: Any) -> Any:
        if cls.tag is not None:
            raise TypeError(f"{type_name(cls)} is already branded")
        return specialize(Id, (tag,), {"tag": tag})

    def __post_init__(self) -> None:
        """Validate and normalize identifier after initialization."""
        if isinstance(self.value, uuid.UUID):
            return
        if not isinstance(self.value, str):
            raise ParseFailure(self.kind, self.value)
        try:
            object.__setattr__(self, "value", uuid.UUID(self.value))
        except ValueError as e:
            raise ParseFailure(self.kind, self.value) from e

    @classmethod
    def parse(cls, raw: str) -> Id[Tag]:
        return cls(raw)

    @classmethod
    def arbitrary(cls, source: RandomSource) -> Id[Tag]:
        return cls(uuid.UUID(int=source.next_bits(128)))

    @classmethod
    def new(cls) -> Id[Tag]:
        """Mint a random identifier from OS entropy, outside any test session."""
        return cls(uuid.uuid4())

    @property
    def hex(self) -> str:
        return self.value.hex

    def to_raw(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        """String representation."""
        return str(self.value)

    def __repr__(self) -> str:
        """Representation for debugging."""
        return f"{type_name(type(self))}('{self.value}')"
