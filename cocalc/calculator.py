"""Circle of confusion calculator for depth of field processing."""

from __future__ import annotations

import math

from .settings import Math, Settings

_NAN = float("nan")
_ZEISS_DIVISOR = 1730.0
_EMPTY_DISTANCE = 9999.0


def _div(numerator: float, denominator: float) -> float:
    """Divide following IEEE rules for a zero denominator."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0.0 or math.isnan(numerator):
            return _NAN
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _fmin(a: float, b: float) -> float:
    """Minimum that ignores a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def _fmax(a: float, b: float) -> float:
    """Maximum that ignores a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


def _clamp(value: float, low: float, high: float) -> float:
    if not low <= high:
        raise ValueError(f"invalid clamp range: {low} > {high}")
    if math.isnan(value):
        return value
    return min(max(value, low), high)


def _convert_value_to_distance(value: float, mode: Math) -> float:
    if value == 0.0:
        return _EMPTY_DISTANCE
    if mode is Math.REAL:
        return value
    return 1.0 / value


class Calculator:
    """Compute the circle of confusion (a radius in pixels) for depth values.

    Positive results are far field, negative results near field. Without
    camera data the size is mapped manually with a smooth falloff around
    the focal plane; with camera data a physically based value is used.
    """

    def __init__(self, settings: Settings) -> None:
        self.update_settings(settings)

    @property
    def settings(self) -> Settings:
        """The settings currently in use."""
        return self._settings

    def update_settings(self, settings: Settings) -> None:
        """Replace the settings and precompute the derived values."""
        self._settings = settings
        camera = settings.camera_data
        self._world_unit_multiplier = (
            camera.world_unit.millimeters if camera is not None else 1.0
        )
        self._internal_focus = (
            _fmax(_convert_value_to_distance(settings.focal_plane, settings.math), 0.0)
            * self._world_unit_multiplier
        )
        self._depth_of_field = self._compute_depth_of_field()
        self._hyperfocal_distance = self._compute_hyperfocal_distance()

    def calculate(self, value: float) -> float:
        """Return the circle of confusion for one depth value."""
        settings = self._settings
        distance = _convert_value_to_distance(value, settings.math)
        if settings.camera_data is not None:
            result = (
                self._circle_of_confusion(distance * self._world_unit_multiplier)
                * settings.pixel_aspect
            )
        else:
            result = self._direct_map(distance)
        return _clamp(result, -settings.max_size, settings.max_size)

    def _compute_depth_of_field(self) -> tuple[float, float]:
        settings = self._settings
        focus = self._internal_focus
        if settings.protect == 0.0 or focus == 0.0:
            return (focus, focus)
        half = settings.protect * 0.5
        if settings.camera_data is not None:
            offset = half * self._world_unit_multiplier
            return (focus - offset, focus + offset)
        normalized = 1.0 / focus
        return (
            _div(1.0, normalized + normalized * half),
            _div(1.0, normalized - normalized * half),
        )

    def _compute_hyperfocal_distance(self) -> float:
        camera = self._settings.camera_data
        if camera is None:
            return 0.0
        zeiss = math.hypot(*camera.filmback) / _ZEISS_DIVISOR
        return _div(camera.focal_length**2, camera.f_stop * zeiss) + camera.focal_length

    def _circle_of_confusion(self, distance: float) -> float:
        camera = self._settings.camera_data
        if camera is None:
            return 0.0
        if distance == 0.0:
            return distance
        near, far = self._depth_of_field
        if (near, far) != (0.0, 0.0) and near < distance < far:
            return 0.0

        focal_distance = self._internal_focus
        if distance < near:
            focal_distance = near
        elif distance > self._internal_focus:
            focal_distance = far
        focal_distance = _fmin(focal_distance, self._hyperfocal_distance)

        coc = _div(
            (focal_distance - distance) * camera.focal_length**2,
            camera.f_stop * distance * (focal_distance - camera.focal_length),
        )
        half_diagonal = math.hypot(*camera.resolution) * 0.5
        return -(_div(coc, math.hypot(*camera.filmback)) * half_diagonal)

    def _direct_map(self, distance: float) -> float:
        settings = self._settings
        focus = self._internal_focus
        near, far = self._depth_of_field
        if focus == distance or near < distance < far:
            return 0.0

        inverse = 0.0 if distance == 0.0 else 1.0 / distance
        value = 0.0
        if focus < distance:
            focus_point = 0.0 if far == 0.0 else 1.0 / far
            value = _div(focus_point - inverse, focus_point)
        if focus > distance:
            focus_point = 0.0 if near == 0.0 else 1.0 / near
            near_field = _div(inverse - focus_point, focus_point)
            value = -_fmin(near_field, _div(settings.max_size, settings.size))
        return value * settings.size