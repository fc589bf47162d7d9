# engine/bus.py

from collections.abc import Callable

from .hooks import NoopHooks, SnapHooks

Handler = Callable[[object], None]


class EventBus:
    """
    Synchronous, typed dispatch. Handlers run in subscription order inside
    `emit`; there is no queue.
    """

    def __init__(self, hooks: SnapHooks | None = None):
        self._subs: dict[type, list[Handler]] = {}
        self._hooks = hooks or NoopHooks()

    def on(self, etype: type, handler: Handler) -> None:
        self._subs.setdefault(etype, []).append(handler)

    def off(self, etype: type, handler: Handler) -> None:
        handlers = self._subs.get(etype, [])
        if handler in handlers:
            handlers.remove(handler)

    def handlers(self, etype: type) -> tuple[Handler, ...]:
        return tuple(self._subs.get(etype, ()))

    def emit(self, ev) -> int:
        handlers = self.handlers(type(ev))
        self._hooks.dispatch_start(ev, handlers=len(handlers))
        for h in handlers:
            try:
                h(ev)
            except Exception as exc:
                self._hooks.error(ev, exc=exc, handler=getattr(h, "__qualname__", repr(h)))
                raise
        return len(handlers)
