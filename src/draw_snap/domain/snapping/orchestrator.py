"""
Per pointer-move snap resolution.

Decision order, first match wins:
  1. shift: align with the last committed vertex only, guides untouched
  2. alt: raw coordinate, both guides hidden
  3. default: feature snap under the pixel threshold beats guide snap,
     guide snap applies per axis, otherwise raw
"""

from draw_snap.app.events import PointerEvent
from draw_snap.domain.entities.geography import Coordinate
from draw_snap.domain.entities.snapping import SnapOutcome, VertexPool
from draw_snap.domain.geometry import meters_per_pixel
from draw_snap.domain.snapping.guides import horizontal_guide, nearby_guides, vertical_guide
from draw_snap.domain.snapping.priority import priority_snap
from draw_snap.domain.snapping.resolver import closest_match
from draw_snap.domain.state import SessionState


def _apply_axes(raw: Coordinate, lng: float | None, lat: float | None) -> Coordinate:
    return Coordinate(raw.lng if lng is None else lng, raw.lat if lat is None else lat)


def snap(state: SessionState, ev: PointerEvent, zoom: float) -> SnapOutcome:
    raw = ev.coordinate
    opts = state.options

    if ev.shift_key:
        last = state.last_vertex
        if last is None:
            return SnapOutcome(raw, state.vertical, state.horizontal, "shift")
        g = nearby_guides(VertexPool([last]), raw)
        return SnapOutcome(
            _apply_axes(raw, g.vertical, g.horizontal), state.vertical, state.horizontal, "shift"
        )

    if ev.alt_key:
        return SnapOutcome(raw, state.vertical.hidden(), state.horizontal.hidden(), "alt")

    match, target, threshold_m = None, None, 0.0
    if opts.snap and state.snap_list:
        match = closest_match(raw, state.snap_list)
        if match is not None:
            target = match.coordinate if match.is_marker else priority_snap(match, opts.snap_options)
            threshold_m = opts.snap_options.snap_px * meters_per_pixel(target.lat, zoom)

    vertical, horizontal = state.vertical.hidden(), state.horizontal.hidden()
    guides = None
    if opts.guides:
        guides = nearby_guides(state.vertices, raw)
        vertical = vertical_guide(state.vertical, guides.vertical, raw)
        horizontal = horizontal_guide(state.horizontal, guides.horizontal, raw)

    if target is not None and match.distance * 1000 < threshold_m:
        return SnapOutcome(target, vertical, horizontal, "feature")
    if guides is not None and guides.any:
        snapped = _apply_axes(raw, guides.vertical, guides.horizontal)
        return SnapOutcome(snapped, vertical, horizontal, "guide")
    return SnapOutcome(raw, vertical, horizontal, "raw")
