from __future__ import annotations

import functools
import importlib
import warnings
from typing import Any

from argwire.reflection import is_runtime_class

_PYDANTIC_V1_WARNING_PATTERN = (
    r"Core Pydantic V1 functionality isn't compatible with Python 3\.14 or greater\."
)
_SETTINGS_MODULES = ("pydantic_settings", "pydantic.v1", "pydantic")


def _load_base_settings(module_name: str) -> type[Any] | None:
    with warnings.catch_warnings():
        warnings.filterwarnings(
            "ignore",
            message=_PYDANTIC_V1_WARNING_PATTERN,
            category=UserWarning,
        )
        try:
            module = importlib.import_module(module_name)
        except ImportError:
            return None
        # pydantic>=2 exposes a BaseSettings stub that raises on attribute access
        try:
            base_settings = getattr(module, "BaseSettings", None)
        except ImportError:
            return None
    return base_settings if is_runtime_class(base_settings) else None


@functools.cache
def settings_bases() -> tuple[type[Any], ...]:
    """Return the settings base classes importable in this environment.

    ``pydantic_settings.BaseSettings`` comes first, then the legacy
    ``pydantic.v1.BaseSettings``/``pydantic.BaseSettings`` when present. Missing
    libraries are skipped, so the result may be empty.
    """
    bases: list[type[Any]] = []
    for module_name in _SETTINGS_MODULES:
        base = _load_base_settings(module_name)
        if base is not None and base not in bases:
            bases.append(base)
    return tuple(bases)


def is_pydantic_settings_subclass(candidate: object) -> bool:
    """Return whether a class is a Pydantic settings model.

    Settings models load their fields from the environment, so argwire builds
    them with no arguments instead of resolving their fields as parameters.

    Args:
        candidate: Object to test.

    """
    if not is_runtime_class(candidate):
        return False
    return any(issubclass(candidate, base) for base in settings_bases())


__all__ = [
    "is_pydantic_settings_subclass",
    "settings_bases",
]
