"""
Domain value objects.

Every type here can only be built through validation, and knows how to
sample realistic valid instances and raw text outside its grammar.
"""

from .currencies import BTC, CURRENCIES, ETH, EUR, GBP, USD, Currency, get_currency
from .email import Email
from .identifier import Id
from .masked import Masked
from .money import Money
from .text import Text
from .username import Username

__all__ = [
    "BTC",
    "CURRENCIES",
    "Currency",
    "ETH",
    "EUR",
    "Email",
    "GBP",
    "Id",
    "Masked",
    "Money",
    "Text",
    "USD",
    "Username",
    "get_currency",
]
