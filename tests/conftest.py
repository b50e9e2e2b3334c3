"""
Pytest configuration and shared fixtures for valuekit tests.

Registers the test-category markers and provides seeded sources and
configurations so every test is reproducible.
"""

from collections.abc import Generator

import pytest

from valuekit.config import GenerationConfig
from valuekit.testing.random_source import RandomSource, Seed
from valuekit.utilities.constants import (
    ENV_FAKER_LOCALE,
    ENV_MAX_DISTINCT_ATTEMPTS,
    ENV_MAX_REJECTION_ATTEMPTS,
    ENV_SEED,
)


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, isolated)")
    config.addinivalue_line("markers", "property: mark test as property-based test (Hypothesis)")
    config.addinivalue_line("markers", "integration: mark test as integration test (CLI end to end)")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        path = str(item.fspath)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        elif "property" in path:
            item.add_marker(pytest.mark.property)
        elif "integration" in path:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> Generator[None, None, None]:
    """Keep VALUEKIT_* settings from the outer environment out of tests."""
    for name in (ENV_SEED, ENV_MAX_REJECTION_ATTEMPTS, ENV_MAX_DISTINCT_ATTEMPTS, ENV_FAKER_LOCALE):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def zero_seed() -> Seed:
    """The all-zero seed."""
    return Seed.zero()


@pytest.fixture
def config() -> GenerationConfig:
    """Default generation settings."""
    return GenerationConfig()


@pytest.fixture
def source(zero_seed, config) -> RandomSource:
    """Random source seeded with the all-zero seed."""
    return RandomSource(zero_seed, config)


@pytest.fixture
def seeds() -> list[Seed]:
    """A fixed run of distinct seeds."""
    return [Seed.from_int(n) for n in range(50)]
