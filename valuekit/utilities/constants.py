"""
Constants and defaults shared across valuekit.
"""

# Seeds
SEED_SIZE = 32

# Sampling budgets
DEFAULT_MAX_REJECTION_ATTEMPTS = 1000
DEFAULT_MAX_DISTINCT_ATTEMPTS = 64

# Realistic samplers
DEFAULT_FAKER_LOCALE = "en_US"
TEXT_MIN_SENTENCES = 1
TEXT_MAX_SENTENCES = 5

# Unstructured strings used by rejection sampling
UNSTRUCTURED_MAX_LENGTH = 64

# Masked values
MASK = "******"

# Domain limits
USERNAME_MAX_LENGTH = 32
EMAIL_MAX_LENGTH = 254
EMAIL_LOCAL_MAX_LENGTH = 64
TEXT_MAX_LENGTH = 4096
MONEY_MAX_MAJOR_DIGITS = 9

# Environment variables
ENV_SEED = "VALUEKIT_SEED"
ENV_MAX_REJECTION_ATTEMPTS = "VALUEKIT_MAX_REJECTION_ATTEMPTS"
ENV_MAX_DISTINCT_ATTEMPTS = "VALUEKIT_MAX_DISTINCT_ATTEMPTS"
ENV_FAKER_LOCALE = "VALUEKIT_FAKER_LOCALE"

# CLI
DEFAULT_SAMPLE_COUNT = 5
