"""
Money value object.

``Money[USD]`` is a non-negative decimal amount branded with its currency.
Amounts in different currencies never mix: arithmetic and comparison
between them is a type error.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, ClassVar, Generic, TypeVar, Union

from ..core.errors import Kind, NegativeAmount, ParseFailure
from ..core.generics import specialize
from ..core.types import type_name
from ..testing import numeric
from ..testing.negation import PatternNegation
from ..testing.random_source import RandomSource
from ..utilities.constants import MONEY_MAX_MAJOR_DIGITS
from .currencies import Currency

C = TypeVar("C")

# Negative amounts, letters, thousands separators, several decimal points
NEGATION_PATTERN = "|".join(
    [
        r"-[1-9][0-9]{0,6}(\.[0-9]{1,2})?",
        r"-0\.[0-9]{0,4}[1-9]",
        r"[A-Za-z]{1,8}",
        r"[1-9][0-9]{0,3},[0-9]{3}",
        r"[0-9]{1,4}\.[0-9]{1,2}\.[0-9]{1,2}",
        r"\$[0-9]{1,4}",
    ]
)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise TypeError(f"Booleans are not amounts, got {value!r}")
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, (Decimal, int, str)):
        return Decimal(value)
    raise TypeError(f"Unsupported amount type: {type(value).__name__}")


@dataclass(frozen=True, order=True)
class Money(Generic[C]):
    """
    Immutable non-negative amount of a single currency.

    Accepts ``Decimal``, ``int``, ``float`` (via its shortest repr) and
    decimal strings. Anything else, negative or non-finite amounts included,
    raises ``ParseFailure``.
    """

    amount: Decimal

    kind: ClassVar[Kind] = Kind.MONEY
    currency: ClassVar[Currency | None] = None
    negation: ClassVar[PatternNegation] = PatternNegation(NEGATION_PATTERN)

    def __class_getitem__(cls, currency: Any) -> Any:
        if cls.currency is not None:
            raise TypeError(f"{type_name(cls)} is already branded")
        if not isinstance(currency, Currency):
            raise TypeError(f"Money must be branded with a Currency, got {currency!r}")
        return specialize(Money, (currency,), {"currency": currency})

    def __post_init__(self) -> None:
        """Validate amount after initialization."""
        if self.currency is None:
            raise TypeError("Money must be branded with a currency, e.g. Money[USD]")
        try:
            amount = _to_decimal(self.amount)
        except (InvalidOperation, TypeError) as e:
            raise ParseFailure(self.kind, self.amount) from e
        if not amount.is_finite() or amount < 0:
            raise ParseFailure(self.kind, self.amount)
        object.__setattr__(self, "amount", amount)

    @classmethod
    def parse(cls, raw: str) -> Money[C]:
        return cls(raw)

    @classmethod
    def zero(cls) -> Money[C]:
        return cls(Decimal(0))

    @classmethod
    def from_minor_units(cls, units: int) -> Money[C]:
        """Create from an integer count of minor units, e.g. cents."""
        return cls(Decimal(units).scaleb(-cls._currency().decimals))

    @classmethod
    def arbitrary(cls, source: RandomSource) -> Money[C]:
        """Draw a whole number of minor units below one billion major units."""
        decimals = cls._currency().decimals
        return cls.from_minor_units(source.next_int(0, 10 ** (MONEY_MAX_MAJOR_DIGITS + decimals) - 1))

    @classmethod
    def _currency(cls) -> Currency:
        if cls.currency is None:
            raise TypeError("Money must be branded with a currency, e.g. Money[USD]")
        return cls.currency

    def to_raw(self) -> str:
        return format(self.amount, "f")

    def to_minor_units(self) -> int:
        """Whole minor units, rounding half up."""
        return int(self.round_to_precision().amount.scaleb(self._currency().decimals))

    def format_display(self) -> str:
        """Format amount for user display."""
        return f"{self.amount:.{self._currency().decimals}f} {self.currency}"

    def round_to_precision(self) -> Money[C]:
        """Round amount to the currency's minor unit."""
        quantum = Decimal(1).scaleb(-self._currency().decimals)
        return type(self)(self.amount.quantize(quantum, rounding=ROUND_HALF_UP))

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_negative(self) -> bool:
        return self.amount < 0

    def __add__(self, other: Money[C]) -> Money[C]:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.amount + other.amount)

    def __sub__(self, other: Money[C]) -> Money[C]:
        """Subtract another amount; fails when the result would be negative."""
        if type(other) is not type(self):
            return NotImplemented
        result = self.amount - other.amount
        if result < 0:
            raise NegativeAmount(result)
        return type(self)(result)

    def __mul__(self, factor: Union[Money[C], Decimal, int]) -> Money[C]:
        multiplier = self._operand(factor)
        if multiplier is None:
            return NotImplemented
        result = self.amount * multiplier
        if result < 0:
            raise NegativeAmount(result)
        return type(self)(result)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Union[Money[C], Decimal, int]) -> Money[C]:
        denominator = self._operand(divisor)
        if denominator is None:
            return NotImplemented
        result = self.amount / denominator
        if result < 0:
            raise NegativeAmount(result)
        return type(self)(result)

    def _operand(self, other: Any) -> Decimal | None:
        if type(other) is type(self):
            return other.amount  # type: ignore[no-any-return]
        if isinstance(other, Money) or isinstance(other, bool):
            return None
        if isinstance(other, (Decimal, int)):
            return Decimal(other)
        if isinstance(other, float):
            return Decimal(str(other))
        return None

    def __str__(self) -> str:
        """String representation."""
        return self.format_display()

    def __repr__(self) -> str:
        """Representation for debugging."""
        return f"{type_name(type(self))}('{self.to_raw()}')"


@numeric.is_zero.register(Money)
def _(value: Money[Any]) -> bool:
    return value.is_zero()


@numeric.is_positive.register(Money)
def _(value: Money[Any]) -> bool:
    return value.is_positive()


@numeric.is_negative.register(Money)
def _(value: Money[Any]) -> bool:
    return value.is_negative()
