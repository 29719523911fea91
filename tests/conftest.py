"""Shared test configuration and fixtures for pytest."""

from collections.abc import Iterator

import pytest

from bigdecimals import interning
from bigdecimals.config import get_settings
from bigdecimals.interning import DecimalInterner

# === PYTEST CONFIGURATION ===


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


def pytest_collection_modifyitems(config, items):
    """Mark tests under integration/ automatically."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


# === FIXTURES ===


@pytest.fixture(autouse=True)
def reset_settings() -> Iterator[None]:
    """Reload settings around every test so env overrides do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def interner() -> DecimalInterner:
    """Fresh interner holding only the named constants."""
    return DecimalInterner(warn_size=0)


@pytest.fixture
def atomic_interner() -> DecimalInterner:
    """Fresh interner whose string path uses insert-if-absent."""
    return DecimalInterner(warn_size=0, atomic_string_intern=True)


@pytest.fixture
def restore_global_interner() -> Iterator[None]:
    """Put back the process-wide interner after a test replaces it."""
    saved = interning._interner
    yield
    interning._interner = saved
