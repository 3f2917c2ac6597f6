"""Parameters for circle of confusion calculations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Tuple


class WorldUnit(IntEnum):
    """Unit in which depth channel values are expressed."""

    MM = 0
    CM = 1
    DM = 2
    M = 3
    INCH = 4
    FT = 5

    @property
    def millimeters(self) -> float:
        """Length of one unit in millimeters."""
        return _MILLIMETERS[self]


_MILLIMETERS = {
    WorldUnit.MM: 1.0,
    WorldUnit.CM: 10.0,
    WorldUnit.DM: 100.0,
    WorldUnit.M: 1000.0,
    WorldUnit.INCH: 25.4,
    WorldUnit.FT: 304.8,
}


class Math(IntEnum):
    """How the depth channel encodes distance."""

    REAL = 0
    ONE_DIVIDED_BY_Z = 1


def _pair(name: str, value, kind) -> tuple:
    items = tuple(kind(item) for item in value)
    if len(items) != 2:
        raise ValueError(f"{name} must hold exactly two values, got {len(items)}")
    return items


@dataclass(frozen=True)
class CameraData:
    """Physical camera parameters used for camera based calculations."""

    focal_length: float = 50.0
    f_stop: float = 16.0
    filmback: Tuple[float, float] = (24.576, 18.672)
    near_field: float = 0.1
    far_field: float = 10000.0
    world_unit: WorldUnit = WorldUnit.M
    resolution: Tuple[int, int] = (1920, 1080)

    def __post_init__(self) -> None:
        object.__setattr__(self, "filmback", _pair("filmback", self.filmback, float))
        resolution = _pair("resolution", self.resolution, int)
        if any(item < 0 for item in resolution):
            raise ValueError("resolution values must not be negative")
        object.__setattr__(self, "resolution", resolution)
        object.__setattr__(self, "world_unit", WorldUnit(self.world_unit))


@dataclass(frozen=True)
class Settings:
    """All parameters that drive a circle of confusion calculation."""

    size: float = 5.0
    max_size: float = 10.0
    math: Math = Math.ONE_DIVIDED_BY_Z
    focal_plane: float = 0.0
    protect: float = 0.0
    pixel_aspect: float = 1.0
    camera_data: Optional[CameraData] = field(default=None)

    def __post_init__(self) -> None:
        object.__setattr__(self, "math", Math(self.math))