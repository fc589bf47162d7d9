import numpy as np

from draw_snap.domain.entities.geography import Coordinate
from draw_snap.domain.entities.snapping import GuideLine, GuideMatch, VertexPool

GUIDE_EPSILON_DEG = 0.009
GUIDE_HALF_SPAN_DEG = 10.0


def _nearest_within(values: np.ndarray, target: float, epsilon: float) -> float | None:
    delta = np.abs(values - target)
    (hits,) = np.nonzero(delta < epsilon)
    if hits.size == 0:
        return None
    # argmin keeps the first of equal deltas, i.e. pool order
    return float(values[hits[np.argmin(delta[hits])]])


def nearby_guides(
    pool: VertexPool, cursor: Coordinate, epsilon: float = GUIDE_EPSILON_DEG
) -> GuideMatch:
    """Nearest pool longitude and latitude within `epsilon` of the cursor, per axis."""
    arr = pool.as_array()
    if arr.size == 0:
        return GuideMatch()
    return GuideMatch(
        vertical=_nearest_within(arr[:, 0], cursor.lng, epsilon),
        horizontal=_nearest_within(arr[:, 1], cursor.lat, epsilon),
    )


def vertical_guide(prev: GuideLine, lng: float | None, cursor: Coordinate) -> GuideLine:
    if lng is None:
        return prev.hidden()
    top = Coordinate(lng, cursor.lat + GUIDE_HALF_SPAN_DEG)
    bottom = Coordinate(lng, cursor.lat - GUIDE_HALF_SPAN_DEG)
    return GuideLine(prev.id, (top, bottom), True)


def horizontal_guide(prev: GuideLine, lat: float | None, cursor: Coordinate) -> GuideLine:
    if lat is None:
        return prev.hidden()
    right = Coordinate(cursor.lng + GUIDE_HALF_SPAN_DEG, lat)
    left = Coordinate(cursor.lng - GUIDE_HALF_SPAN_DEG, lat)
    return GuideLine(prev.id, (right, left), True)
