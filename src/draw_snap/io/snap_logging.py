# io/snap_logging.py
import json
import logging
import sys

from draw_snap.engine.hooks import NoopHooks
from draw_snap.io.recorder import Recorder
from draw_snap.io.session_events import SessionEndedRec, SessionStartedRec, VertexCommittedRec


def _default_json_logger(name="draw_snap", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SnapLogging(NoopHooks):
    """
    One place to shape and emit structured logs for session lifecycle and
    snap resolution, and to forward analytics records to the recorder.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self._resolved = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _record(self, rec):
        if self.recorder:
            self.recorder.emit(rec)

    # --------------------------------------------------------

    # session lifecycle

    def session_start(self, *, feature_id, kind, candidates, vertices):
        self._emit(
            "INFO",
            "session_start",
            feature_id=feature_id,
            kind=kind,
            candidates=candidates,
            vertices=vertices,
        )
        self._record(
            SessionStartedRec(
                self.run_id, feature_id, "SessionStarted", kind, candidates, vertices
            )
        )

    def session_end(self, *, feature_id, committed, finished):
        self._emit(
            "INFO",
            "session_end",
            feature_id=feature_id,
            committed=committed,
            finished=finished,
            resolved=self._resolved,
        )
        self._record(SessionEndedRec(self.run_id, feature_id, "SessionEnded", committed, finished))

    def index_rebuilt(self, *, candidates, vertices):
        if self.debug:
            self._emit("DEBUG", "index_rebuilt", candidates=candidates, vertices=vertices)

    def options_changed(self, *, snap, guides):
        self._emit("INFO", "options_changed", snap=snap, guides=guides)

    def resolved(self, outcome, *, raw):
        self._resolved += 1
        if self.debug and (self._resolved % self.sample_every) == 0:
            c = outcome.coordinate
            self._emit(
                "DEBUG",
                "resolved",
                branch=outcome.branch,
                raw=[raw.lng, raw.lat],
                snapped=[c.lng, c.lat],
                vertical=outcome.vertical.visible,
                horizontal=outcome.horizontal.visible,
            )

    # ------------- Business records --------------------------

    def vertex_committed(self, *, feature_id, index, coordinate):
        self._record(
            VertexCommittedRec(
                self.run_id, feature_id, "VertexCommitted", index, coordinate.lng, coordinate.lat
            )
        )

    # ------------- Bus --------------------------

    def dispatch_start(self, ev, *, handlers):
        if self.debug:
            self._emit("DEBUG", type(ev).__name__, handlers=handlers)

    def error(self, ev, *, exc: BaseException, **extra):
        self._emit("ERROR", "bus_error", event=type(ev).__name__, error=str(exc), **extra)
