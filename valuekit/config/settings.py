"""
Generation settings.

Provides the immutable configuration object handed to every random source,
with an environment-backed constructor for test runs.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from ..utilities.constants import (
    DEFAULT_FAKER_LOCALE,
    DEFAULT_MAX_DISTINCT_ATTEMPTS,
    DEFAULT_MAX_REJECTION_ATTEMPTS,
    ENV_FAKER_LOCALE,
    ENV_MAX_DISTINCT_ATTEMPTS,
    ENV_MAX_REJECTION_ATTEMPTS,
    ENV_SEED,
    SEED_SIZE,
)
from ..utilities.validators import (
    parse_positive_int,
    validate_hex_string,
    validate_non_empty_string,
    validate_positive_number,
)


@dataclass(frozen=True)
class GenerationConfig:
    """
    Immutable generation settings.

    Attributes:
        max_rejection_attempts: Draws allowed before negation gives up
        max_distinct_attempts: Re-draws allowed when building a distinct pair
        faker_locale: Locale used by the realistic samplers
        seed: Hex-encoded run seed, or None to draw one from the OS
    """

    max_rejection_attempts: int = DEFAULT_MAX_REJECTION_ATTEMPTS
    max_distinct_attempts: int = DEFAULT_MAX_DISTINCT_ATTEMPTS
    faker_locale: str = DEFAULT_FAKER_LOCALE
    seed: str | None = None

    def __post_init__(self) -> None:
        validate_positive_number(self.max_rejection_attempts, "max_rejection_attempts")
        validate_positive_number(self.max_distinct_attempts, "max_distinct_attempts")
        validate_non_empty_string(self.faker_locale, "faker_locale")
        if self.seed is not None:
            validate_hex_string(self.seed, "seed", length=SEED_SIZE * 2)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GenerationConfig:
        """Build a config from ``VALUEKIT_*`` environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()

        return cls(
            max_rejection_attempts=parse_positive_int(
                env.get(ENV_MAX_REJECTION_ATTEMPTS),
                ENV_MAX_REJECTION_ATTEMPTS,
                defaults.max_rejection_attempts,
            ),
            max_distinct_attempts=parse_positive_int(
                env.get(ENV_MAX_DISTINCT_ATTEMPTS),
                ENV_MAX_DISTINCT_ATTEMPTS,
                defaults.max_distinct_attempts,
            ),
            faker_locale=env.get(ENV_FAKER_LOCALE) or defaults.faker_locale,
            seed=(env.get(ENV_SEED) or "").strip().lower() or None,
        )

    def with_seed(self, seed: str | None) -> GenerationConfig:
        """Return a copy using a different run seed."""
        return replace(self, seed=seed)
