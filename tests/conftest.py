"""Shared test fixtures: independent caches and purifiers per test."""

import pytest

from purifytext import Purifier, SanitizeCache

CANDIDATES = ["ORANGECAT", "BLACKCAT"]


@pytest.fixture()
def candidates() -> list[str]:
    """A small whitelist of acceptable identifiers."""
    return list(CANDIDATES)


@pytest.fixture()
def cache() -> SanitizeCache:
    """A fresh cache, never shared with the module-level default."""
    return SanitizeCache()


@pytest.fixture()
def purifier() -> Purifier:
    """A Purifier with default settings and no cache."""
    return Purifier()


@pytest.fixture()
def cached_purifier(cache: SanitizeCache) -> Purifier:
    """A Purifier whose output sanitizing goes through *cache*."""
    return Purifier(cache=cache)
