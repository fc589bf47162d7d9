from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


# Core geometry types used by snapping
@dataclass(frozen=True)
class Coordinate:
    lng: float  # degrees
    lat: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.lng, self.lat)


Coord = Coordinate | tuple[float, float] | Sequence[float]


def to_coordinate(p: Coord) -> Coordinate:
    return p if isinstance(p, Coordinate) else Coordinate(float(p[0]), float(p[1]))


class GeometryKind(str, Enum):
    POINT = "Point"
    LINE = "LineString"
    POLYGON = "Polygon"


@dataclass
class Feature:
    """
    Host-owned drawn record with GeoJSON-shaped coordinates:
      • Point: one (lng, lat) pair
      • LineString: list of pairs
      • Polygon: list of closed rings, first ring is the outer boundary
    """

    id: str
    kind: GeometryKind
    coordinates: Any
    properties: dict[str, Any] = field(default_factory=dict)

    def lines(self) -> list[list[Coordinate]]:
        """Boundary as polylines: one per ring for polygons, empty for points."""
        if self.kind is GeometryKind.POINT:
            return []
        if self.kind is GeometryKind.LINE:
            return [list(flatten_coordinates(self.coordinates))]
        return [list(flatten_coordinates(ring)) for ring in self.coordinates]

    def to_geojson(self) -> dict[str, Any]:
        return {"type": self.kind.value, "coordinates": _plain(self.coordinates)}


def _plain(coords):
    if isinstance(coords, Coordinate):
        return coords.as_tuple()
    if _is_sequence(coords):
        return [_plain(c) for c in coords]
    return coords


def _is_sequence(v) -> bool:
    return isinstance(v, (Sequence, Coordinate)) and not isinstance(v, (str, bytes))


def flatten_coordinates(coordinates) -> Iterator[Coordinate]:
    """
    Yield every (lng, lat) pair of an arbitrarily nested coordinate sequence.
    Leaf sequences that are not pairs (e.g. the empty placeholder of a fresh
    feature) are skipped.
    """
    if isinstance(coordinates, Coordinate):
        yield coordinates
        return
    if not _is_sequence(coordinates):
        raise TypeError(f"coordinates must be a sequence, got {type(coordinates).__name__}")
    if len(coordinates) and _is_sequence(coordinates[0]):
        for c in coordinates:
            yield from flatten_coordinates(c)
    elif len(coordinates) == 2:
        yield to_coordinate(coordinates)
