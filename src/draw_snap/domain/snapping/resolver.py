from collections.abc import Iterable

from draw_snap.domain.entities.geography import Coordinate
from draw_snap.domain.entities.snapping import ClosestMatch, SnapCandidate
from draw_snap.runtime.registries import make_match


def closest_match(cursor: Coordinate, candidates: Iterable[SnapCandidate]) -> ClosestMatch | None:
    """
    Closest candidate and the closest point on it.

    A None distance (degenerate projection) is never taken, and a zero
    distance only when nothing has been found yet. Ties keep the first.
    """
    best: ClosestMatch | None = None
    for cand in candidates:
        m = make_match(cand.feature, cursor)
        if m.distance is None:
            continue
        if best is None or (m.distance and m.distance < best.distance):
            best = m
    return best
