from dataclasses import dataclass

from draw_snap.app.events import OptionsChanged, PointerEvent, ViewportMoved
from draw_snap.app.protocols import FeatureStore, GuideSink, Viewport
from draw_snap.config.models import SnapConfigModel
from draw_snap.domain.entities.geography import Coordinate, Feature, GeometryKind
from draw_snap.domain.entities.snapping import GuideLine, SnapOutcome
from draw_snap.domain.snapping.candidates import add_point_to_vertices, build_snap_index
from draw_snap.domain.snapping.orchestrator import snap
from draw_snap.domain.state import SessionState
from draw_snap.engine.hooks import NoopHooks, SnapHooks


@dataclass(frozen=True)
class ClickOutcome:
    coordinate: Coordinate
    finished: bool
    committed_index: int | None = None  # None => nothing committed


def guide_feature(guide_id: str) -> Feature:
    return Feature(
        id=guide_id,
        kind=GeometryKind.LINE,
        coordinates=[],
        properties={"isSnapGuide": "true"},  # for styling
    )


class DrawingController:
    """
    Owns the snapping session for one feature being drawn: rebuilds the
    candidate index on viewport moves, tracks options, resolves pointer
    events, and publishes guide geometry to the host.
    The drawn feature itself is never touched; click outcomes tell the host
    what to commit.
    """

    def __init__(
        self,
        *,
        feature_id: str,
        kind: GeometryKind,
        store: FeatureStore,
        viewport: Viewport,
        sink: GuideSink,
        options: SnapConfigModel | None = None,
        hooks: SnapHooks | None = None,
    ):
        self.store, self.viewport, self.sink = store, viewport, sink
        self.hooks = hooks or NoopHooks()
        self.state = SessionState(feature_id, GeometryKind(kind), options or SnapConfigModel())
        self.finished = False

    # ------------- lifecycle ---------------------

    def start(self) -> SessionState:
        self.sink.add_feature(guide_feature(self.state.vertical.id))
        self.sink.add_feature(guide_feature(self.state.horizontal.id))
        self.rebuild()
        self.hooks.session_start(
            feature_id=self.state.feature_id,
            kind=self.state.kind.value,
            candidates=len(self.state.snap_list),
            vertices=len(self.state.vertices),
        )
        return self.state

    def stop(self) -> None:
        self.sink.delete_feature(self.state.vertical.id)
        self.sink.delete_feature(self.state.horizontal.id)
        self.hooks.session_end(
            feature_id=self.state.feature_id,
            committed=len(self.state.committed),
            finished=self.finished,
        )

    def rebuild(self) -> None:
        index = build_snap_index(
            self.store.get_all_features(), self.state.feature_id, self.viewport
        )
        self.state.snap_list, self.state.vertices = index.snap_list, index.vertices
        self.hooks.index_rebuilt(candidates=len(index.snap_list), vertices=len(index.vertices))

    # ------------- bus handlers ---------------------

    def on_viewport_moved(self, ev: ViewportMoved) -> None:
        self.rebuild()

    def on_options_changed(self, ev: OptionsChanged) -> None:
        opts = ev.options
        if not isinstance(opts, SnapConfigModel):
            opts = SnapConfigModel.model_validate(opts)
        self.state.options = opts
        self.hooks.options_changed(snap=opts.snap, guides=opts.guides)

    # ------------- pointer ---------------------

    def on_mouse_move(self, ev: PointerEvent) -> SnapOutcome:
        out = snap(self.state, ev, self.viewport.zoom())
        self._publish(self.state.vertical, out.vertical)
        self._publish(self.state.horizontal, out.horizontal)
        self.state.vertical, self.state.horizontal = out.vertical, out.horizontal
        self.state.cursor = out.coordinate
        self.state.remember(out.coordinate)
        self.hooks.resolved(out, raw=ev.coordinate)
        return out

    @property
    def hovering_last_vertex(self) -> bool:
        """Cursor sits exactly on the last committed vertex (click would finish)."""
        last = self.state.last_vertex
        return last is not None and self.state.cursor == last

    def on_click(self, ev: PointerEvent) -> ClickOutcome:
        # same resolution as the move, guides left as they are
        c = snap(self.state, ev, self.viewport.zoom()).coordinate

        if self.state.last_vertex == c:
            self.finished = True
            return ClickOutcome(c, finished=True)

        idx = len(self.state.committed)
        self.state.committed.append(c)
        add_point_to_vertices(self.viewport, self.state.vertices, c)
        self.hooks.vertex_committed(feature_id=self.state.feature_id, index=idx, coordinate=c)

        if self.state.kind is GeometryKind.POINT:
            self.finished = True
        return ClickOutcome(c, finished=self.finished, committed_index=idx)

    # ------------- rendering ---------------------

    def should_hide_guide(self, feature_id: str) -> bool:
        for g in (self.state.vertical, self.state.horizontal):
            if g.id == feature_id:
                return not (self.state.options.guides and g.visible)
        return False

    def _publish(self, prev: GuideLine, new: GuideLine) -> None:
        if new.coordinates and new.coordinates != prev.coordinates:
            self.sink.update_coordinates(new.id, new.coordinates)
