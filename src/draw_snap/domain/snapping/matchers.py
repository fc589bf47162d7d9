from draw_snap.domain.entities.geography import Coordinate, Feature, flatten_coordinates
from draw_snap.domain.entities.snapping import ClosestMatch
from draw_snap.domain.geometry import distance_km, nearest_point_on_line


def point_match(feature: Feature, cursor: Coordinate) -> ClosestMatch:
    coords = list(flatten_coordinates(feature.coordinates))
    if len(coords) != 1:
        return ClosestMatch(cursor, None, is_marker=True, feature=feature)
    c = coords[0]
    return ClosestMatch(c, distance_km(c, cursor), is_marker=True, feature=feature)


def _line_match(lines: list[list[Coordinate]], feature: Feature, cursor: Coordinate):
    best: ClosestMatch | None = None
    for line in lines:
        if len(line) < 2:
            continue
        hit = nearest_point_on_line(line, cursor)
        if best is None or hit.distance < best.distance:
            i = hit.segment_index
            best = ClosestMatch(
                hit.coordinate,
                hit.distance,
                is_marker=False,
                segment=(line[i], line[i + 1]),
                feature=feature,
            )
    # nothing projectable: keep the cursor, no usable distance
    return best or ClosestMatch(cursor, None, is_marker=False, feature=feature)


def line_match(feature: Feature, cursor: Coordinate) -> ClosestMatch:
    return _line_match(feature.lines(), feature, cursor)


def polygon_match(feature: Feature, cursor: Coordinate) -> ClosestMatch:
    # every ring (outer boundary and holes) is treated as its own line
    return _line_match(feature.lines(), feature, cursor)
