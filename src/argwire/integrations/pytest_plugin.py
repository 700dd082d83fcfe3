from __future__ import annotations

from collections.abc import Iterator

import pytest

from argwire.injector import Injector
from argwire.injector_context import injector_context


@pytest.fixture()
def argwire_injector() -> Injector:
    """Create a per-test injector with empty registries.

    Override this fixture in a test suite to return a pre-configured injector
    (for example one built with ``CacheRefresh.NEVER``).

    Returns:
        A new ``Injector`` instance.

    """
    return Injector()


@pytest.fixture()
def argwire_default_injector(argwire_injector: Injector) -> Iterator[Injector]:
    """Bind ``argwire_injector`` as the process-wide default for one test.

    Module-level shortcuts such as ``argwire.get`` and ``argwire.set_parameters``
    act on this injector until the test finishes; the previous default is then
    restored.

    Yields:
        The injector bound as default.

    """
    with injector_context.override(argwire_injector) as injector:
        yield injector
