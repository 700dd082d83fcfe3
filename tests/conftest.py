"""Shared pytest fixtures for argwire tests."""

import pytest

from argwire.injector import Injector
from argwire.instances import CacheRefresh
from argwire.reflection import SignatureReflector


@pytest.fixture()
def injector() -> Injector:
    """Injector with the default cache refresh policy."""
    return Injector()


@pytest.fixture()
def injector_never_refresh() -> Injector:
    """Injector that keeps the first instance of every class."""
    return Injector(cache_refresh=CacheRefresh.NEVER)


@pytest.fixture()
def reflector() -> SignatureReflector:
    """SignatureReflector instance."""
    return SignatureReflector()
