# domain/snapping/candidates.py
from collections.abc import Iterable

from shapely.geometry import MultiPoint, Polygon, shape
from shapely.geometry.base import BaseGeometry

from draw_snap.app.protocols import Viewport
from draw_snap.domain.entities.geography import (
    Coordinate,
    Feature,
    GeometryKind,
    flatten_coordinates,
)
from draw_snap.domain.entities.snapping import (
    HORIZONTAL_GUIDE,
    VERTICAL_GUIDE,
    SnapCandidate,
    SnapIndex,
    VertexPool,
)

GUIDE_IDS = frozenset({VERTICAL_GUIDE, HORIZONTAL_GUIDE})


def viewport_polygon(viewport: Viewport) -> Polygon:
    """Quadrilateral of the four canvas corners unprojected to (lng, lat)."""
    w, h = viewport.canvas_size()
    corners = [viewport.unproject(x, y) for x, y in ((0, 0), (w, 0), (w, h), (0, h))]
    return Polygon([c.as_tuple() for c in corners])


def is_on_screen(viewport: Viewport, c: Coordinate) -> bool:
    w, h = viewport.canvas_size()
    x, y = viewport.project(c)
    return 0 < x < w and 0 < y < h


def add_point_to_vertices(
    viewport: Viewport, vertices: VertexPool, c: Coordinate, force: bool = False
) -> None:
    # off-screen points only when forced (the feature being drawn)
    if force or is_on_screen(viewport, c):
        vertices.append(c)


def feature_shape(feature: Feature) -> BaseGeometry:
    """shapely geometry for overlap tests; degenerate lines/rings become point sets."""
    if feature.kind is GeometryKind.LINE:
        degenerate = len(feature.lines()[0]) < 2
    elif feature.kind is GeometryKind.POLYGON:
        degenerate = not feature.coordinates or any(len(r) < 4 for r in feature.lines())
    else:
        degenerate = len(list(flatten_coordinates(feature.coordinates))) != 1
    if degenerate:
        return MultiPoint([c.as_tuple() for c in flatten_coordinates(feature.coordinates)])
    return shape(feature.to_geojson())


def own_placed_vertices(feature: Feature) -> list[Coordinate]:
    """Vertices of the in-progress feature minus the ones tracking the cursor."""
    if feature.kind is GeometryKind.POLYGON:
        ring = feature.coordinates[0] if feature.coordinates else []
        # last two: live cursor vertex and the ring-closing copy of the first
        return list(flatten_coordinates(list(ring)[:-2]))
    if feature.kind is GeometryKind.LINE:
        return list(flatten_coordinates(list(feature.coordinates)[:-1]))
    return []


def build_snap_index(
    features: Iterable[Feature], current_id: str | None, viewport: Viewport
) -> SnapIndex:
    """
    Split drawn features into the snap candidate list (anything overlapping
    the viewport) and the guide vertex pool (on-screen vertices, plus all
    placed vertices of the feature being drawn).
    """
    bbox = viewport_polygon(viewport)
    index = SnapIndex()

    for f in features:
        if f.id == current_id:
            for c in own_placed_vertices(f):
                add_point_to_vertices(viewport, index.vertices, c, force=True)
            continue
        if f.id in GUIDE_IDS:
            continue

        for c in flatten_coordinates(f.coordinates):
            add_point_to_vertices(viewport, index.vertices, c)

        if not bbox.disjoint(feature_shape(f)):
            index.snap_list.append(SnapCandidate.of(f))

    return index
