"""
Email address value object.

Accepts ``local@domain`` where the local part is a dot-separated run of
RFC 5322 atom characters and the domain is one or more hostname labels
followed by an alphabetic top-level domain.
"""

from __future__ import annotations

import re

from ..core.errors import Kind
from ..testing.negation import PatternNegation
from ..testing.random_source import RandomSource
from ..testing.samplers import fake
from ..utilities.constants import EMAIL_LOCAL_MAX_LENGTH, EMAIL_MAX_LENGTH
from .base import ValidatedString

_ATOM = r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~-]+"
_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"

_DOMAIN_PATTERN = re.compile(rf"(?:{_LABEL}\.)+[A-Za-z]{{2,63}}")
_EMAIL_PATTERN = re.compile(rf"(?P<local>{_ATOM}(?:\.{_ATOM})*)@(?P<domain>(?:{_LABEL}\.)+[A-Za-z]{{2,63}})")

_LOCAL_DISALLOWED = re.compile(r"[^A-Za-z0-9!#$%&'*+/=?^_`{|}~.-]")
_REPEATED_DOTS = re.compile(r"\.{2,}")

FALLBACK_LOCAL = "user"
FALLBACK_DOMAIN = "example.com"

# Missing "@", empty local part, missing domain, no top-level domain, doubled "@", embedded space
NEGATION_PATTERN = "|".join(
    [
        r"[a-zA-Z0-9._%+-]{1,20}[a-zA-Z0-9-]{1,10}\.[a-zA-Z]{2,6}",
        r"@[a-z0-9]{1,10}\.[a-z]{2,6}",
        r"[a-z0-9._%+-]{1,20}@",
        r"[a-z0-9]{1,10}@[a-z0-9]{1,10}",
        r"[a-z0-9]{1,10}@@[a-z0-9]{1,10}\.[a-z]{2,6}",
        r"[a-z0-9]{1,10} [a-z0-9]{1,10}@[a-z0-9]{1,10}\.[a-z]{2,6}",
    ]
)

# Faker providers drawn from, with weights
EMAIL_PROVIDERS = (
    ("safe_email", 3),
    ("free_email", 2),
    ("company_email", 1),
)


def _sanitize(candidate: str) -> str:
    local, _, domain = candidate.rpartition("@")
    local = _REPEATED_DOTS.sub(".", _LOCAL_DISALLOWED.sub("", local)).strip(".")
    local = local[:EMAIL_LOCAL_MAX_LENGTH].rstrip(".") or FALLBACK_LOCAL
    if _DOMAIN_PATTERN.fullmatch(domain) is None:
        domain = FALLBACK_DOMAIN
    return f"{local}@{domain}"


class Email(ValidatedString):
    """Immutable email address."""

    kind = Kind.EMAIL
    negation = PatternNegation(NEGATION_PATTERN)

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        if len(raw) > EMAIL_MAX_LENGTH:
            return False
        match = _EMAIL_PATTERN.fullmatch(raw)
        return match is not None and len(match.group("local")) <= EMAIL_LOCAL_MAX_LENGTH

    @classmethod
    def arbitrary(cls, source: RandomSource) -> Email:
        """Draw a realistic address, e.g. ``jsmith@example.org``."""
        provider = source.weighted_choice(EMAIL_PROVIDERS)
        return cls(_sanitize(fake(source, provider)))

    @property
    def local_part(self) -> str:
        return self.value.rpartition("@")[0]

    @property
    def domain(self) -> str:
        return self.value.rpartition("@")[2]
