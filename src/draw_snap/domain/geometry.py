"""
Geometry primitives on (lng, lat) degrees.

Distances are great-circle kilometres; pixel thresholds are converted to
ground metres with `meters_per_pixel`.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from draw_snap.domain.entities.geography import Coord, Coordinate, to_coordinate

EARTH_RADIUS_KM = 6371.0088
EARTH_CIRCUMFERENCE_M = 40_075_017


@dataclass(frozen=True)
class NearestPoint:
    coordinate: Coordinate
    segment_index: int
    distance: float  # km
    fraction: float  # position along segment_index -> segment_index + 1


def haversine_km(lng1, lat1, lng2, lat2):
    """Vectorised haversine; accepts scalars or numpy arrays."""
    phi1, phi2 = np.radians(lat1), np.radians(lat2)
    dphi = phi2 - phi1
    dlmb = np.radians(lng2) - np.radians(lng1)
    h = np.sin(dphi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(dlmb / 2) ** 2
    return 2 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(np.clip(h, 0.0, 1.0)))


def distance_km(a: Coord, b: Coord) -> float:
    a, b = to_coordinate(a), to_coordinate(b)
    return float(haversine_km(a.lng, a.lat, b.lng, b.lat))


def midpoint(a: Coord, b: Coord) -> Coordinate:
    a, b = to_coordinate(a), to_coordinate(b)
    phi1, lmb1 = math.radians(a.lat), math.radians(a.lng)
    phi2, lmb2 = math.radians(b.lat), math.radians(b.lng)
    bx = math.cos(phi2) * math.cos(lmb2 - lmb1)
    by = math.cos(phi2) * math.sin(lmb2 - lmb1)
    phi_m = math.atan2(math.sin(phi1) + math.sin(phi2), math.hypot(math.cos(phi1) + bx, by))
    lmb_m = lmb1 + math.atan2(by, math.cos(phi1) + bx)
    return Coordinate(math.degrees(lmb_m), math.degrees(phi_m))


def meters_per_pixel(latitude: float, zoom: float) -> float:
    return EARTH_CIRCUMFERENCE_M * math.cos(math.radians(latitude)) / 2 ** (zoom + 8)


def nearest_point_on_line(vertices: Sequence[Coord], point: Coord) -> NearestPoint:
    """
    Closest point to `point` anywhere along the polyline `vertices`.

    Each segment is projected in a local equirectangular frame around `point`;
    both endpoints are kept as candidates too, so the result is never farther
    than any vertex. A hit on a segment's end vertex reports that vertex's
    index, and a hit on the final vertex is pulled back one so
    (segment_index, segment_index + 1) is always a valid pair.
    """
    if len(vertices) < 2:
        raise ValueError(f"need at least 2 vertices, got {len(vertices)}")
    p = to_coordinate(point)
    pts = np.array([to_coordinate(v).as_tuple() for v in vertices], dtype=float)
    a, b = pts[:-1], pts[1:]

    kx = math.cos(math.radians(p.lat))
    dx, dy = (b[:, 0] - a[:, 0]) * kx, b[:, 1] - a[:, 1]
    px, py = (p.lng - a[:, 0]) * kx, p.lat - a[:, 1]
    len2 = dx * dx + dy * dy
    with np.errstate(divide="ignore", invalid="ignore"):
        t = np.where(len2 > 0, (px * dx + py * dy) / len2, 0.0)
    t = np.clip(t, 0.0, 1.0)

    # candidates per segment: projection, start, end
    ts = np.stack([t, np.zeros_like(t), np.ones_like(t)], axis=1)
    lng = a[:, 0, None] + ts * (b[:, 0, None] - a[:, 0, None])
    lat = a[:, 1, None] + ts * (b[:, 1, None] - a[:, 1, None])
    dist = haversine_km(p.lng, p.lat, lng, lat)

    flat = int(np.argmin(dist))
    seg, col = divmod(flat, 3)
    frac = float(ts[seg, col])
    idx = seg + 1 if frac >= 1.0 else seg
    if idx == len(pts) - 1:
        idx -= 1
    return NearestPoint(
        coordinate=Coordinate(float(lng[seg, col]), float(lat[seg, col])),
        segment_index=idx,
        distance=float(dist[seg, col]),
        fraction=frac,
    )
