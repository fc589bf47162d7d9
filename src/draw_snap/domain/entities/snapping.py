from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Literal

import numpy as np

from draw_snap.domain.entities.geography import Coordinate, Feature, GeometryKind

VERTICAL_GUIDE = "VERTICAL_GUIDE"
HORIZONTAL_GUIDE = "HORIZONTAL_GUIDE"

SnapBranch = Literal["shift", "alt", "feature", "guide", "raw"]


@dataclass(frozen=True)
class SnapCandidate:
    feature: Feature
    is_marker: bool

    @classmethod
    def of(cls, feature: Feature) -> "SnapCandidate":
        return cls(feature, feature.kind is GeometryKind.POINT)


@dataclass(frozen=True)
class ClosestMatch:
    coordinate: Coordinate
    distance: float | None  # km; None => degenerate projection
    is_marker: bool
    segment: tuple[Coordinate, Coordinate] | None = None
    feature: Feature | None = None


@dataclass(frozen=True)
class GuideMatch:
    vertical: float | None = None  # longitude
    horizontal: float | None = None  # latitude

    @property
    def any(self) -> bool:
        return self.vertical is not None or self.horizontal is not None


@dataclass(frozen=True)
class GuideLine:
    id: str
    coordinates: tuple[Coordinate, ...] = ()
    visible: bool = False

    def hidden(self) -> "GuideLine":
        return GuideLine(self.id, self.coordinates, False)


@dataclass(frozen=True)
class SnapOutcome:
    coordinate: Coordinate
    vertical: GuideLine
    horizontal: GuideLine
    branch: SnapBranch


class VertexPool:
    """Ordered vertex list for guide detection, with a cached (n, 2) array view."""

    def __init__(self, coords: Iterable[Coordinate] = ()):
        self._coords: list[Coordinate] = list(coords)
        self._arr: np.ndarray | None = None

    def append(self, c: Coordinate) -> None:
        self._coords.append(c)
        self._arr = None

    def as_array(self) -> np.ndarray:
        if self._arr is None:
            self._arr = np.array([c.as_tuple() for c in self._coords], dtype=float).reshape(-1, 2)
        return self._arr

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._coords)

    def __eq__(self, other) -> bool:
        return isinstance(other, VertexPool) and self._coords == other._coords

    def __repr__(self) -> str:
        return f"VertexPool({self._coords!r})"


@dataclass
class SnapIndex:
    snap_list: list[SnapCandidate] = field(default_factory=list)
    vertices: VertexPool = field(default_factory=VertexPool)
