from __future__ import annotations

from argwire.parameters import (
    WILDCARD,
    ParameterTable,
    extend_overrides,
    has_values,
    layer_parameters,
    lookup_value,
    merge_parameters,
)


class Mailer:
    pass


class Clock:
    pass


class TestParameterTable:
    def test_get_parameters_of_unknown_class_is_empty(self) -> None:
        assert ParameterTable().get_parameters(Mailer) == {}

    def test_first_registration_wins(self) -> None:
        table = ParameterTable()
        table.set_parameters(Mailer, {"send": {"retries": 1}})
        table.set_parameters(Mailer, {"send": {"retries": 2}})

        assert table.get_parameters(Mailer) == {"send": {"retries": 1}}

    def test_later_registration_fills_missing_keys(self) -> None:
        table = ParameterTable()
        table.set_parameters(Mailer, {"send": {"retries": 1}})
        table.set_parameters(Mailer, {"send": {"timeout": 5}, WILDCARD: {"host": "smtp"}})

        assert table.get_parameters(Mailer) == {
            "send": {"retries": 1, "timeout": 5},
            WILDCARD: {"host": "smtp"},
        }

    def test_get_parameters_returns_a_copy(self) -> None:
        table = ParameterTable()
        table.set_parameters(Mailer, {"send": {"retries": 1}})

        table.get_parameters(Mailer)["send"]["retries"] = 99

        assert table.get_parameters(Mailer) == {"send": {"retries": 1}}

    def test_clear_forgets_every_class(self) -> None:
        table = ParameterTable()
        table.set_parameters(Mailer, {"send": {"retries": 1}})
        table.clear()

        assert table.get_parameters(Mailer) == {}


def test_merge_parameters_keeps_target_values() -> None:
    target = {"__init__": {"host": "override"}}

    merge_parameters(target, {"__init__": {"host": "registered", "port": 25}})

    assert target == {"__init__": {"host": "override", "port": 25}}


def test_extend_overrides_does_not_mutate_caller_table() -> None:
    overrides = {Mailer: {"__init__": {"host": "override"}}}

    extended = extend_overrides(overrides, Mailer, {"__init__": {"port": 25}})

    assert extended == {Mailer: {"__init__": {"host": "override", "port": 25}}}
    assert overrides == {Mailer: {"__init__": {"host": "override"}}}


def test_extend_overrides_accepts_none() -> None:
    assert extend_overrides(None, Mailer, {}) == {Mailer: {}}


class TestLayerParameters:
    def test_upper_wildcard_beats_lower_method_table(self) -> None:
        layered = layer_parameters(
            {WILDCARD: {"host": "caller"}},
            {"__init__": {"host": "registered", "port": 25}},
        )

        assert layered == {
            WILDCARD: {"host": "caller"},
            "__init__": {"host": "caller", "port": 25},
        }

    def test_lower_wildcard_fills_upper_method_table(self) -> None:
        layered = layer_parameters(
            {"send": {"timeout": 5}},
            {WILDCARD: {"timeout": 1, "retries": 3}},
        )

        assert layered == {
            "send": {"timeout": 5, "retries": 3},
            WILDCARD: {"timeout": 1, "retries": 3},
        }

    def test_method_table_still_hides_wildcard_within_a_layer(self) -> None:
        layered = layer_parameters({"send": {"timeout": 5}, WILDCARD: {"retries": 3}}, {})

        assert lookup_value({Mailer: layered}, Mailer, "send", "retries") == (False, None)

    def test_layers_are_not_mutated(self) -> None:
        upper = {WILDCARD: {"host": "caller"}}
        lower = {"__init__": {"port": 25}}

        layer_parameters(upper, lower)

        assert upper == {WILDCARD: {"host": "caller"}}
        assert lower == {"__init__": {"port": 25}}


def test_extend_overrides_keeps_caller_wildcard_over_registered_method() -> None:
    overrides = {Mailer: {WILDCARD: {"host": "caller"}}}

    extended = extend_overrides(overrides, Mailer, {"__init__": {"host": "registered"}})

    assert lookup_value(extended, Mailer, "__init__", "host") == (True, "caller")


def test_has_values_ignores_empty_tables() -> None:
    assert has_values(None) is False
    assert has_values({}) is False
    assert has_values({Mailer: {}}) is False
    assert has_values({Mailer: {"send": {}}}) is False
    assert has_values({Mailer: {"send": {"retries": None}}}) is True


class TestLookupValue:
    def test_finds_value_under_method(self) -> None:
        overrides = {Mailer: {"send": {"retries": 3}}}

        assert lookup_value(overrides, Mailer, "send", "retries") == (True, 3)

    def test_falls_back_to_wildcard_method(self) -> None:
        overrides = {Mailer: {WILDCARD: {"retries": 3}}}

        assert lookup_value(overrides, Mailer, "send", "retries") == (True, 3)

    def test_method_table_hides_wildcard_table(self) -> None:
        overrides = {Mailer: {"send": {"timeout": 5}, WILDCARD: {"retries": 3}}}

        assert lookup_value(overrides, Mailer, "send", "retries") == (False, None)

    def test_keys_can_be_types(self) -> None:
        clock = Clock()
        overrides = {Mailer: {"send": {Clock: clock}}}

        assert lookup_value(overrides, Mailer, "send", Clock) == (True, clock)

    def test_stored_none_is_found(self) -> None:
        overrides = {Mailer: {"send": {"retries": None}}}

        assert lookup_value(overrides, Mailer, "send", "retries") == (True, None)

    def test_unknown_owner_is_not_found(self) -> None:
        assert lookup_value({}, Mailer, "send", "retries") == (False, None)
