# draw_snap/app/wiring.py
from draw_snap.app.controllers.drawing import DrawingController
from draw_snap.app.events import OptionsChanged, ViewportMoved
from draw_snap.engine.bus import EventBus


def wire(bus: EventBus, *, drawing: DrawingController) -> None:
    bus.on(ViewportMoved, drawing.on_viewport_moved)  # rebuild candidates + vertex pool
    bus.on(OptionsChanged, drawing.on_options_changed)


def unwire(bus: EventBus, *, drawing: DrawingController) -> None:
    bus.off(ViewportMoved, drawing.on_viewport_moved)
    bus.off(OptionsChanged, drawing.on_options_changed)
