# runtime/registries.py
from collections.abc import Callable

from draw_snap.domain.entities.geography import Coordinate, Feature, GeometryKind
from draw_snap.domain.entities.snapping import ClosestMatch
from draw_snap.domain.snapping.matchers import line_match, point_match, polygon_match

MatchFn = Callable[[Feature, Coordinate], ClosestMatch]

_match_registry: dict[GeometryKind, MatchFn] = {}


# ------------------- Closest-match dispatch ---------------------------


def register_match(kind: GeometryKind):
    def deco(fn: MatchFn):
        _match_registry[kind] = fn
        return fn

    return deco


def make_match(feature: Feature, cursor: Coordinate) -> ClosestMatch:
    try:
        fn = _match_registry[feature.kind]
    except KeyError:
        raise ValueError(f"Unknown geometry kind {feature.kind!r}")
    return fn(feature, cursor)


register_match(GeometryKind.POINT)(point_match)
register_match(GeometryKind.LINE)(line_match)
register_match(GeometryKind.POLYGON)(polygon_match)
