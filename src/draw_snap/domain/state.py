# draw_snap/domain/state.py
from dataclasses import dataclass, field

from draw_snap.config.models import SnapConfigModel
from draw_snap.domain.entities.geography import Coordinate, GeometryKind
from draw_snap.domain.entities.snapping import (
    HORIZONTAL_GUIDE,
    VERTICAL_GUIDE,
    GuideLine,
    SnapCandidate,
    VertexPool,
)


@dataclass
class SessionState:
    feature_id: str
    kind: GeometryKind
    options: SnapConfigModel = field(default_factory=SnapConfigModel)
    cursor: Coordinate | None = None
    committed: list[Coordinate] = field(default_factory=list)
    vertices: VertexPool = field(default_factory=VertexPool)
    snap_list: list[SnapCandidate] = field(default_factory=list)
    vertical: GuideLine = field(default_factory=lambda: GuideLine(VERTICAL_GUIDE))
    horizontal: GuideLine = field(default_factory=lambda: GuideLine(HORIZONTAL_GUIDE))

    # last two corrected coordinates, newest last
    recent: list[Coordinate] = field(default_factory=list)

    @property
    def last_vertex(self) -> Coordinate | None:
        """Last committed vertex of a line or polygon; points never have one."""
        if self.kind is GeometryKind.POINT or not self.committed:
            return None
        return self.committed[-1]

    def remember(self, c: Coordinate) -> None:
        self.recent = [*self.recent[-1:], c]
