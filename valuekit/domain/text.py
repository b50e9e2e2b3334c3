"""
Free-form text value object.

Accepts any Unicode text up to 4096 characters without control characters,
except tab, line feed and carriage return.
"""

from __future__ import annotations

import unicodedata

from ..core.errors import Kind
from ..testing.negation import RejectionNegation
from ..testing.random_source import RandomSource
from ..testing.samplers import fake
from ..utilities.constants import TEXT_MAX_LENGTH, TEXT_MAX_SENTENCES, TEXT_MIN_SENTENCES
from .base import ValidatedString

ALLOWED_CONTROLS = frozenset("\t\n\r")

# Control characters and lone surrogates
_REJECTED_CATEGORIES = frozenset({"Cc", "Cs"})


def _is_rejected_char(char: str) -> bool:
    return char not in ALLOWED_CONTROLS and unicodedata.category(char) in _REJECTED_CATEGORIES


class Text(ValidatedString):
    """Immutable free-form text such as a message body."""

    kind = Kind.TEXT
    # The invalid space is too irregular for a pattern
    negation = RejectionNegation()

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        return len(raw) <= TEXT_MAX_LENGTH and not any(_is_rejected_char(c) for c in raw)

    @classmethod
    def arbitrary(cls, source: RandomSource) -> Text:
        sentences = source.next_int(TEXT_MIN_SENTENCES, TEXT_MAX_SENTENCES)
        return cls(fake(source, "paragraph", nb_sentences=sentences, variable_nb_sentences=False))
