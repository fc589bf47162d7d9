# engine/hooks.py
from typing import Protocol


class SnapHooks(Protocol):
    def session_start(self, *, feature_id, kind, candidates, vertices): ...
    def session_end(self, *, feature_id, committed, finished): ...
    def index_rebuilt(self, *, candidates, vertices): ...
    def options_changed(self, *, snap, guides): ...
    def resolved(self, outcome, *, raw): ...
    def vertex_committed(self, *, feature_id, index, coordinate): ...
    def dispatch_start(self, ev, *, handlers): ...
    def error(self, ev, *, exc: BaseException, **kw): ...


class NoopHooks:
    def session_start(self, **_):
        pass

    def session_end(self, **_):
        pass

    def index_rebuilt(self, **_):
        pass

    def options_changed(self, **_):
        pass

    def resolved(self, *_, **__):
        pass

    def vertex_committed(self, **_):
        pass

    def dispatch_start(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
