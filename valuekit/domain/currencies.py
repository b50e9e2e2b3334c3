"""
Currency definitions used to brand money amounts.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Currency:
    """A currency and the number of decimal places of its minor unit."""

    ticker: str
    name: str
    decimals: int

    def __post_init__(self):
        if not self.ticker or not self.ticker.isupper():
            raise ValueError(f"Currency ticker must be upper case, got: {self.ticker!r}")
        if self.decimals < 0:
            raise ValueError(f"Currency decimals must be non-negative, got: {self.decimals}")

    def __str__(self) -> str:
        return self.ticker


USD = Currency("USD", "US Dollar", 2)
EUR = Currency("EUR", "Euro", 2)
GBP = Currency("GBP", "Pound Sterling", 2)
BTC = Currency("BTC", "Bitcoin", 8)
ETH = Currency("ETH", "Ether", 18)

CURRENCIES = {currency.ticker: currency for currency in (USD, EUR, GBP, BTC, ETH)}


def get_currency(ticker: str) -> Currency:
    """Look up a currency by ticker, case-insensitively."""
    try:
        return CURRENCIES[ticker.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown currency: {ticker}. Known: {', '.join(CURRENCIES)}") from None
