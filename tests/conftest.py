import pytest

from draw_snap.domain.entities.geography import Coordinate


# --- Minimal host collaborators ---
class ViewportStub:
    """Linear lng/lat <-> pixel mapping over a fixed box; y grows downward."""

    def __init__(self, west=-1.0, south=-1.0, east=1.0, north=1.0, width=800, height=600, z=10.0):
        self.west, self.south, self.east, self.north = west, south, east, north
        self.width, self.height, self.z = width, height, z

    def canvas_size(self):
        return (self.width, self.height)

    def project(self, c):
        x = (c.lng - self.west) / (self.east - self.west) * self.width
        y = (self.north - c.lat) / (self.north - self.south) * self.height
        return (x, y)

    def unproject(self, x, y):
        return Coordinate(
            self.west + x / self.width * (self.east - self.west),
            self.north - y / self.height * (self.north - self.south),
        )

    def zoom(self):
        return self.z


class StoreStub:
    def __init__(self, features=()):
        self.features = list(features)

    def get_all_features(self):
        return list(self.features)


class SinkStub:
    def __init__(self):
        self.added = []
        self.updates = []
        self.deleted = []

    def add_feature(self, feature):
        self.added.append(feature)

    def update_coordinates(self, feature_id, coords):
        self.updates.append((feature_id, tuple(coords)))

    def delete_feature(self, feature_id):
        self.deleted.append(feature_id)


@pytest.fixture
def viewport() -> ViewportStub:
    return ViewportStub()


@pytest.fixture
def make_viewport():
    return ViewportStub


@pytest.fixture
def store() -> StoreStub:
    return StoreStub()


@pytest.fixture
def sink() -> SinkStub:
    return SinkStub()
