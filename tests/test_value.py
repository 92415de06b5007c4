"""Controlled and uncontrolled value ownership."""

from __future__ import annotations

from places_autocomplete.services.value import Controlled, Uncontrolled, ValueController


def test_controlled_value_is_reported_and_never_stored():
    changes: list[str] = []
    controller = ValueController(value="london", default_value="x", on_change=changes.append)

    current, handler, is_controlled = controller.evaluate()
    assert (current, is_controlled) == ("london", True)

    handler("paris")
    assert changes == ["paris"]
    assert controller.current == "london"
    assert isinstance(controller.ownership, Controlled)


def test_uncontrolled_change_updates_state_and_notifies():
    calls: list[tuple] = []
    controller = ValueController(default_value="", on_change=lambda *args: calls.append(args))

    controller.change("paris", "typed")

    assert controller.current == "paris"
    assert controller.is_controlled is False
    assert calls == [("paris", "typed")]


def test_uncontrolled_without_on_change_is_noop_callback():
    controller = ValueController(final_value="")
    controller.change("rome")
    assert controller.current == "rome"


def test_default_value_falls_back_to_final_value():
    assert ValueController(final_value="").current == ""
    assert ValueController(default_value="nyc", final_value="").current == "nyc"


def test_ownership_is_rederived_on_every_evaluation():
    controller = ValueController(default_value="a")
    controller.change("b")
    assert isinstance(controller.ownership, Uncontrolled)

    controller.bind(value="caller")
    assert controller.current == "caller"
    assert controller.is_controlled is True

    controller.bind(value=None)
    assert controller.current == "b"
    assert controller.is_controlled is False


def test_bind_can_drop_on_change():
    calls: list[str] = []
    controller = ValueController(on_change=calls.append)

    controller.bind(value=None)
    controller.change("kept")
    controller.bind(value=None, on_change=None)
    controller.change("dropped")

    assert calls == ["kept"]
    assert controller.current == "dropped"
