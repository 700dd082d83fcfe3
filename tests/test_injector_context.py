from __future__ import annotations

import argwire
from argwire.injector import Injector
from argwire.injector_context import InjectorContext, injector_context
from argwire.instances import CacheRefresh


class Greeter:
    def __init__(self, name: str = "world") -> None:
        self.name = name

    def greet(self) -> str:
        return f"Hello, {self.name}"


def test_default_injector_is_created_on_first_use() -> None:
    context = InjectorContext()

    injector = context.get_current()

    assert isinstance(injector, Injector)
    assert context.get_current() is injector


def test_factory_configures_default_injector() -> None:
    context = InjectorContext(lambda: Injector(cache_refresh=CacheRefresh.NEVER))

    assert context.get_current().cache_refresh is CacheRefresh.NEVER


def test_reset_replaces_default_injector() -> None:
    context = InjectorContext()
    first = context.get_current()

    second = context.reset()

    assert second is not first
    assert context.get_current() is second


def test_override_restores_previous_injector() -> None:
    context = InjectorContext()
    original = context.get_current()
    replacement = Injector()

    with context.override(replacement) as bound:
        assert bound is replacement
        assert context.get_current() is replacement

    assert context.get_current() is original


def test_set_current() -> None:
    context = InjectorContext()
    injector = Injector()

    context.set_current(injector)

    assert context.get_current() is injector


def test_module_level_shortcuts_use_default_injector() -> None:
    with injector_context.override(Injector()) as injector:
        argwire.set_parameters(Greeter, {"__init__": {"name": "Alice"}})
        argwire.set_definition(Greeter, "*", {Injector: injector})

        assert injector.get_parameters(Greeter) == {"__init__": {"name": "Alice"}}
        assert argwire.get_parameters(Greeter) == {"__init__": {"name": "Alice"}}
        assert argwire.has_definition(Greeter, "*", Injector) is True
        assert argwire.get_definition(Greeter, "*", Injector) is injector
        argwire.remove_definition(Greeter, "*", Injector)
        assert argwire.has_definition(Greeter, "*", Injector) is False

        assert argwire.get(Greeter).name == "Alice"
        assert argwire.invoke(Greeter, "greet") == "Hello, Alice"
        assert argwire.construct(Greeter, {Greeter: {"__init__": {"name": "Bob"}}}).name == "Bob"

        greeter = Greeter("Carol")
        argwire.set(greeter)
        assert argwire.is_known(Greeter) is True
        assert injector.is_known(f"{__name__}.Greeter") is True
