from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from draw_snap.domain.entities.geography import Coordinate, Feature


# ------------- Host collaborators --------------------
@runtime_checkable
class FeatureStore(Protocol):
    """All drawn features, including the in-progress one and the guide features."""

    def get_all_features(self) -> list[Feature]: ...


@runtime_checkable
class Viewport(Protocol):
    """
    Responsibilities:
      • Report canvas size in pixels.
      • Project (lng, lat) to screen pixels and back.
      • Report the current zoom level.
    Screen origin is the top-left canvas corner.
    """

    def canvas_size(self) -> tuple[float, float]: ...
    def project(self, c: Coordinate) -> tuple[float, float]: ...
    def unproject(self, x: float, y: float) -> Coordinate: ...
    def zoom(self) -> float: ...


@runtime_checkable
class GuideSink(Protocol):
    """
    Receives the two guide pseudo-features. The host renders a guide only
    while the session reports it visible, and drops both on session end.
    """

    def add_feature(self, feature: Feature) -> None: ...
    def update_coordinates(self, feature_id: str, coords: Sequence[Coordinate]) -> None: ...
    def delete_feature(self, feature_id: str) -> None: ...
