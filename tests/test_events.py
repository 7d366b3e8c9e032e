"""Tests for the named-event registry."""

from __future__ import annotations

from neomanage.events import Events


class TestEvents:
    def test_trigger_in_registration_order(self):
        events = Events()
        calls = []
        events.bind("services.loaded", lambda: calls.append("a"))
        events.bind("services.loaded", lambda: calls.append("b"))
        assert events.trigger("services.loaded") == 2
        assert calls == ["a", "b"]

    def test_trigger_passes_args(self):
        events = Events()
        calls = []
        events.bind("x", lambda *args: calls.append(args))
        events.trigger("x", 1, "two")
        assert calls == [(1, "two")]

    def test_trigger_without_handlers(self):
        assert Events().trigger("nothing") == 0

    def test_failing_callback_does_not_stop_others(self):
        events = Events()
        calls = []

        def boom():
            raise RuntimeError("bad handler")

        events.bind("x", boom)
        events.bind("x", lambda: calls.append("ok"))
        events.trigger("x")
        assert calls == ["ok"]

    def test_unbind(self):
        events = Events()
        calls = []

        def handler():
            calls.append(1)

        events.bind("x", handler)
        events.unbind("x", handler)
        events.trigger("x")
        events.bind("x", handler)
        events.unbind("x")
        events.trigger("x")
        events.unbind("missing", handler)
        assert calls == []
