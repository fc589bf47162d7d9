# draw_snap/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from draw_snap.app.controllers.drawing import DrawingController
from draw_snap.app.protocols import FeatureStore, GuideSink, Viewport
from draw_snap.app.wiring import unwire, wire
from draw_snap.config.models import SessionModel
from draw_snap.domain.entities.geography import GeometryKind
from draw_snap.engine.bus import EventBus
from draw_snap.engine.hooks import NoopHooks, SnapHooks
from draw_snap.io.recorder import JsonlSink, Recorder
from draw_snap.io.snap_logging import SnapLogging  # JSON logs


@dataclass
class App:
    bus: EventBus
    drawing: DrawingController
    hooks: SnapHooks
    recorder: Recorder | None

    def stop(self) -> None:
        unwire(self.bus, drawing=self.drawing)
        self.drawing.stop()


def build(
    cfg: SessionModel | Mapping,
    *,
    feature_id: str,
    kind: GeometryKind | str,
    store: FeatureStore,
    viewport: Viewport,
    sink: GuideSink,
    bus: EventBus | None = None,
    recorder: Recorder | None = None,
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, SessionModel) else SessionModel.model_validate(cfg)

    # 1) Hooks (logging + analytics records)
    if use_logging:
        recorder = recorder or Recorder(JsonlSink())
        hooks: SnapHooks = SnapLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
    else:
        hooks = NoopHooks()

    # 2) Bus: the host emits ViewportMoved / OptionsChanged on it
    bus = bus or EventBus(hooks=hooks)

    # 3) Session controller
    drawing = DrawingController(
        feature_id=feature_id,
        kind=GeometryKind(kind),
        store=store,
        viewport=viewport,
        sink=sink,
        options=model.options,
        hooks=hooks,
    )

    # 4) Wiring, then start (guides published, index built)
    wire(bus, drawing=drawing)
    drawing.start()

    return App(bus, drawing, hooks, recorder)
