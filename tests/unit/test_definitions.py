from __future__ import annotations

from argwire.definitions import DefinitionTable
from argwire.parameters import WILDCARD


class Clock:
    pass


class Billing:
    pass


class Reports:
    pass


def test_set_and_get_definition() -> None:
    definitions = DefinitionTable()
    clock = Clock()

    definitions.set_definition(Billing, "charge", {Clock: clock})

    assert definitions.has_definition(Billing, "charge", Clock) is True
    assert definitions.get_definition(Billing, "charge", Clock) is clock


def test_get_missing_definition_returns_none() -> None:
    definitions = DefinitionTable()

    assert definitions.has_definition(Billing, "charge", Clock) is False
    assert definitions.get_definition(Billing, "charge", Clock) is None


def test_get_definition_does_not_apply_wildcards() -> None:
    definitions = DefinitionTable()
    definitions.set_definition(WILDCARD, WILDCARD, {Clock: Clock()})

    assert definitions.get_definition(Billing, "charge", Clock) is None


def test_first_binding_wins() -> None:
    definitions = DefinitionTable()
    first = Clock()

    definitions.set_definition(Billing, "charge", {Clock: first})
    definitions.set_definition(Billing, "charge", {Clock: Clock()})

    assert definitions.get_definition(Billing, "charge", Clock) is first


def test_remove_definition() -> None:
    definitions = DefinitionTable()
    definitions.set_definition(Billing, "charge", {Clock: Clock()})

    definitions.remove_definition(Billing, "charge", Clock)

    assert definitions.has_definition(Billing, "charge", Clock) is False


def test_remove_missing_definition_is_a_no_op() -> None:
    definitions = DefinitionTable()

    definitions.remove_definition(Billing, "charge", Clock)

    assert definitions.has_definition(Billing, "charge", Clock) is False


class TestLookup:
    def test_exact_scope_wins(self) -> None:
        definitions = DefinitionTable()
        exact, per_class, per_method, anywhere = Clock(), Clock(), Clock(), Clock()
        definitions.set_definition(WILDCARD, WILDCARD, {Clock: anywhere})
        definitions.set_definition(WILDCARD, "charge", {Clock: per_method})
        definitions.set_definition(Billing, WILDCARD, {Clock: per_class})
        definitions.set_definition(Billing, "charge", {Clock: exact})

        assert definitions.lookup(Billing, "charge", Clock) == (True, exact)

    def test_class_wildcard_method_beats_wildcard_class(self) -> None:
        definitions = DefinitionTable()
        per_class, per_method = Clock(), Clock()
        definitions.set_definition(WILDCARD, "charge", {Clock: per_method})
        definitions.set_definition(Billing, WILDCARD, {Clock: per_class})

        assert definitions.lookup(Billing, "charge", Clock) == (True, per_class)

    def test_wildcard_class_with_method(self) -> None:
        definitions = DefinitionTable()
        per_method, anywhere = Clock(), Clock()
        definitions.set_definition(WILDCARD, WILDCARD, {Clock: anywhere})
        definitions.set_definition(WILDCARD, "charge", {Clock: per_method})

        assert definitions.lookup(Reports, "charge", Clock) == (True, per_method)
        assert definitions.lookup(Reports, "export", Clock) == (True, anywhere)

    def test_class_wildcard_beats_global_wildcard(self) -> None:
        definitions = DefinitionTable()
        per_class, anywhere = Clock(), Clock()
        definitions.set_definition(WILDCARD, WILDCARD, {Clock: anywhere})
        definitions.set_definition(Billing, WILDCARD, {Clock: per_class})

        assert definitions.lookup(Billing, "anything", Clock) == (True, per_class)
        assert definitions.lookup(Reports, "anything", Clock) == (True, anywhere)

    def test_bound_none_is_found(self) -> None:
        definitions = DefinitionTable()
        definitions.set_definition(Billing, WILDCARD, {Clock: None})

        assert definitions.lookup(Billing, "charge", Clock) == (True, None)

    def test_missing_binding(self) -> None:
        assert DefinitionTable().lookup(Billing, "charge", Clock) == (False, None)

    def test_clear(self) -> None:
        definitions = DefinitionTable()
        definitions.set_definition(Billing, WILDCARD, {Clock: Clock()})
        definitions.clear()

        assert definitions.lookup(Billing, "charge", Clock) == (False, None)
