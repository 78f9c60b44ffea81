"""Tests for the grid event registry."""

from __future__ import annotations

import logging

import pytest

from editgrid.callbacks import WILDCARD, CallbackRegistry, GridEvent


class TestRegister:
    """Tests for CallbackRegistry.register()."""

    def test_register_by_enum_and_name(self) -> None:
        """Events can be given as enum members or their string value."""
        registry = CallbackRegistry("g")
        assert registry.register(GridEvent.SORTED, lambda *a: None)
        assert registry.register("row-selected", lambda *a: None)
        assert registry.has_handlers(GridEvent.SORTED)
        assert registry.has_handlers("row-selected")

    def test_unknown_event_rejected(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown event names are refused with a warning."""
        registry = CallbackRegistry("g")
        with caplog.at_level(logging.WARNING, logger="editgrid"):
            assert not registry.register("exploded", lambda: None)
        assert "Invalid event 'exploded'" in caplog.text
        assert not registry.has_handlers("exploded")


class TestEmit:
    """Tests for CallbackRegistry.emit()."""

    def test_handlers_called_in_order(self) -> None:
        """Handlers run in registration order with the event arguments."""
        calls = []
        registry = CallbackRegistry("g")
        registry.register(GridEvent.SORTED, lambda col, desc: calls.append(("a", col, desc)))
        registry.register(GridEvent.SORTED, lambda col, desc: calls.append(("b", col, desc)))
        assert registry.emit(GridEvent.SORTED, 2, True)
        assert calls == [("a", 2, True), ("b", 2, True)]

    def test_wildcard_gets_event_name(self) -> None:
        """Wildcard handlers receive the event name first."""
        calls = []
        registry = CallbackRegistry("g")
        registry.register(WILDCARD, lambda *args: calls.append(args))
        registry.emit(GridEvent.PAGINATED, 3)
        assert calls == [("paginated", 3)]

    def test_failing_handler_does_not_stop_others(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """An exception in one handler is logged and the next still runs."""
        calls = []

        def broken() -> None:
            raise RuntimeError("boom")

        registry = CallbackRegistry("people")
        registry.register(GridEvent.FILTERED, broken)
        registry.register(GridEvent.FILTERED, lambda: calls.append("ok"))
        with caplog.at_level(logging.ERROR, logger="editgrid"):
            assert registry.emit(GridEvent.FILTERED)
        assert calls == ["ok"]
        assert "Callback error for 'filtered' on grid 'people': boom" in caplog.text

    def test_no_handlers(self) -> None:
        """Emitting without handlers reports nothing called."""
        assert not CallbackRegistry("g").emit(GridEvent.LOADED)


class TestUnregister:
    """Tests for CallbackRegistry.unregister() and clear()."""

    def test_remove_specific_handler(self) -> None:
        """Only the given handler is removed."""
        calls = []
        first = lambda: calls.append(1)  # noqa: E731
        second = lambda: calls.append(2)  # noqa: E731
        registry = CallbackRegistry("g")
        registry.register(GridEvent.LOADED, first)
        registry.register(GridEvent.LOADED, second)
        assert registry.unregister(GridEvent.LOADED, first)
        registry.emit(GridEvent.LOADED)
        assert calls == [2]

    def test_remove_all_for_event(self) -> None:
        """Without a handler every handler of the event is removed."""
        registry = CallbackRegistry("g")
        registry.register(GridEvent.LOADED, lambda: None)
        assert registry.unregister("loaded")
        assert not registry.has_handlers(GridEvent.LOADED)

    def test_remove_unknown(self) -> None:
        """Removing something never registered reports False."""
        registry = CallbackRegistry("g")
        assert not registry.unregister(GridEvent.LOADED)
        registry.register(GridEvent.LOADED, lambda: None)
        assert not registry.unregister(GridEvent.LOADED, print)

    def test_clear(self) -> None:
        """clear() drops everything."""
        registry = CallbackRegistry("g")
        registry.register(WILDCARD, lambda *a: None)
        registry.clear()
        assert not registry.has_handlers(GridEvent.SORTED)
