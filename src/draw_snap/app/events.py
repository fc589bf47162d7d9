# app/events.py
from dataclasses import dataclass
from typing import Any

from draw_snap.domain.entities.geography import Coordinate


@dataclass(frozen=True)
class PointerEvent:
    coordinate: Coordinate
    shift_key: bool = False
    alt_key: bool = False


# Bus events
@dataclass(frozen=True)
class ViewportMoved:
    """Map finished panning or zooming (host 'moveend')."""


@dataclass(frozen=True)
class OptionsChanged:
    options: Any  # SnapConfigModel or a mapping validated against it
