from draw_snap.config.models import SnapOptionsModel
from draw_snap.domain.entities.geography import Coordinate
from draw_snap.domain.entities.snapping import ClosestMatch
from draw_snap.domain.geometry import distance_km, midpoint


def priority_snap(match: ClosestMatch, options: SnapOptionsModel) -> Coordinate:
    """
    Prefer a segment endpoint (or its midpoint, when enabled) over the raw
    nearest point C when C lies within `snap_vertex_priority_distance` km of it.
    """
    if match.segment is None:
        raise ValueError("no segment available for priority snapping")
    a, b = match.segment
    c = match.coordinate

    d_ac, d_bc = distance_km(a, c), distance_km(b, c)
    vertex, shortest = (a, d_ac) if d_ac < d_bc else (b, d_bc)

    if options.snap_to_mid_points:
        m = midpoint(a, b)
        d_mc = distance_km(m, c)
        if d_mc < d_ac and d_mc < d_bc:
            vertex, shortest = m, d_mc

    return vertex if shortest < options.snap_vertex_priority_distance else c
