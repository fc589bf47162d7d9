# draw_snap/io/session_events.py

from dataclasses import dataclass


# Base type for analytics records (not dispatched on the bus!)
@dataclass
class SessionRecord:
    run_id: str
    feature_id: str
    name: str  # stable record name


@dataclass
class SessionStartedRec(SessionRecord):
    kind: str
    candidates: int
    vertices: int


@dataclass
class VertexCommittedRec(SessionRecord):
    index: int
    lng: float
    lat: float


@dataclass
class SessionEndedRec(SessionRecord):
    committed: int
    finished: bool  # False => cancelled
