import pytest

from draw_snap.config.models import SnapOptionsModel
from draw_snap.domain.entities.geography import Coordinate, Feature, GeometryKind
from draw_snap.domain.entities.snapping import ClosestMatch, SnapCandidate
from draw_snap.domain.geometry import distance_km
from draw_snap.domain.snapping.priority import priority_snap
from draw_snap.domain.snapping.resolver import closest_match
from draw_snap.runtime.registries import make_match


def _cands(*features):
    return [SnapCandidate.of(f) for f in features]


SQUARE = [[(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0)]]

# ---------- resolver


def test_empty_candidate_list_resolves_to_none():
    assert closest_match(Coordinate(0.0, 0.0), []) is None


def test_nearest_point_feature_wins():
    near = Feature("near", GeometryKind.POINT, (0.1, 0.0))
    far = Feature("far", GeometryKind.POINT, (0.5, 0.0))
    m = closest_match(Coordinate(0.0, 0.0), _cands(far, near))
    assert m.feature is near
    assert m.is_marker and m.segment is None
    assert m.coordinate == Coordinate(0.1, 0.0)
    assert m.distance == pytest.approx(distance_km((0.0, 0.0), (0.1, 0.0)))


def test_line_beats_point_when_edge_is_closer():
    line = Feature("line", GeometryKind.LINE, [(0.0, -1.0), (0.0, 1.0)])
    pt = Feature("pt", GeometryKind.POINT, (0.05, 0.0))
    m = closest_match(Coordinate(0.01, 0.3), _cands(pt, line))
    assert m.feature is line
    assert not m.is_marker
    assert m.segment == (Coordinate(0.0, -1.0), Coordinate(0.0, 1.0))
    assert m.coordinate.lat == pytest.approx(0.3)


def test_polygon_boundary_segment_is_reported():
    poly = Feature("sq", GeometryKind.POLYGON, SQUARE)
    m = closest_match(Coordinate(0.5, 0.9), _cands(poly))  # inside, near the top edge
    assert m.segment == (Coordinate(1.0, 1.0), Coordinate(0.0, 1.0))
    assert m.coordinate.lat == pytest.approx(1.0)


def test_polygon_holes_are_boundaries_too():
    hole = [(0.4, 0.4), (0.6, 0.4), (0.6, 0.6), (0.4, 0.6), (0.4, 0.4)]
    poly = Feature("donut", GeometryKind.POLYGON, [*SQUARE, hole])
    m = closest_match(Coordinate(0.5, 0.62), _cands(poly))
    assert m.coordinate.lat == pytest.approx(0.6)


def test_degenerate_line_is_skipped():
    stub = Feature("stub", GeometryKind.LINE, [(0.0, 0.0)])
    assert closest_match(Coordinate(0.1, 0.1), _cands(stub)) is None

    pt = Feature("pt", GeometryKind.POINT, (1.0, 1.0))
    assert closest_match(Coordinate(0.1, 0.1), _cands(stub, pt)).feature is pt


def test_zero_distance_never_overrides_an_existing_minimum():
    far = Feature("far", GeometryKind.POINT, (0.5, 0.0))
    exact = Feature("exact", GeometryKind.POINT, (0.0, 0.0))
    cursor = Coordinate(0.0, 0.0)

    assert closest_match(cursor, _cands(far, exact)).feature is far
    # but taken when nothing was found before it
    assert closest_match(cursor, _cands(exact, far)).feature is exact


def test_unknown_kind_is_rejected():
    odd = Feature("odd", "MultiPoint", [(0.0, 0.0)])
    with pytest.raises(ValueError):
        make_match(odd, Coordinate(0.0, 0.0))


# ---------- priority tie-break


def _edge_match(c: Coordinate) -> ClosestMatch:
    seg = (Coordinate(0.0, 0.0), Coordinate(0.0, 1.0))
    return ClosestMatch(c, 0.1, is_marker=False, segment=seg)


def test_endpoint_within_priority_distance_wins():
    target = priority_snap(_edge_match(Coordinate(0.0, 0.01)), SnapOptionsModel())
    assert target == Coordinate(0.0, 0.0)


def test_interior_point_kept_when_no_vertex_is_close():
    c = Coordinate(0.0, 0.5)
    assert priority_snap(_edge_match(c), SnapOptionsModel()) == c


def test_midpoint_toggle():
    m = _edge_match(Coordinate(0.0, 0.495))
    on = SnapOptionsModel(snap_vertex_priority_distance=100.0, snap_to_mid_points=True)
    off = SnapOptionsModel(snap_vertex_priority_distance=100.0, snap_to_mid_points=False)

    mid = priority_snap(m, on)
    assert mid.lng == pytest.approx(0.0, abs=1e-12)
    assert mid.lat == pytest.approx(0.5, abs=1e-12)
    assert priority_snap(m, off) == Coordinate(0.0, 0.0)


def test_priority_needs_a_segment():
    marker = ClosestMatch(Coordinate(0.0, 0.0), 0.1, is_marker=True)
    with pytest.raises(ValueError):
        priority_snap(marker, SnapOptionsModel())
