# tests/engine/test_bus.py
from dataclasses import dataclass

import pytest

from draw_snap.engine.bus import EventBus
from draw_snap.engine.hooks import NoopHooks


# ---- demo events ----
@dataclass(frozen=True)
class Ping:
    n: int = 0


@dataclass(frozen=True)
class Pong:
    n: int = 0


# --- test hook that records dispatches & errors ---
class TraceHooks(NoopHooks):
    def __init__(self):
        self.trace = []
        self.errors = []

    def dispatch_start(self, ev, *, handlers):
        self.trace.append((type(ev).__name__, handlers))

    def error(self, ev, *, exc, **kw):
        self.errors.append((type(ev).__name__, str(exc)))


def test_handlers_run_in_subscription_order_per_type():
    hooks = TraceHooks()
    bus = EventBus(hooks=hooks)
    seen: list[str] = []
    bus.on(Ping, lambda ev: seen.append(f"A{ev.n}"))
    bus.on(Ping, lambda ev: seen.append(f"B{ev.n}"))
    bus.on(Pong, lambda ev: seen.append(f"P{ev.n}"))

    assert bus.emit(Ping(1)) == 2
    assert bus.emit(Pong(2)) == 1
    assert seen == ["A1", "B1", "P2"]
    assert hooks.trace == [("Ping", 2), ("Pong", 1)]


def test_off_removes_only_that_handler():
    bus = EventBus()
    seen: list[str] = []

    def a(ev):
        seen.append("a")

    def b(ev):
        seen.append("b")

    bus.on(Ping, a)
    bus.on(Ping, b)
    bus.off(Ping, a)
    bus.off(Ping, a)  # already gone
    bus.off(Pong, b)  # never subscribed
    bus.emit(Ping())
    assert seen == ["b"]


def test_unsubscribed_event_is_a_noop():
    assert EventBus().emit(Pong()) == 0


def test_handler_errors_are_reported_and_reraised():
    hooks = TraceHooks()
    bus = EventBus(hooks=hooks)
    later: list[int] = []

    def boom(ev):
        raise RuntimeError("bad handler")

    bus.on(Ping, boom)
    bus.on(Ping, lambda ev: later.append(ev.n))

    with pytest.raises(RuntimeError):
        bus.emit(Ping(3))
    assert hooks.errors == [("Ping", "bad handler")]
    assert later == []
