# cocalc

Calculates the Circle of Confusion (CoC) for a depth value. The result is the
radius in pixels of the blur that depth of field processing should apply at
that point: a CoC of 10 means a blur disc 20 pixels across.

The sign of the result tells you which side of the focal plane the point is on:

* a positive value is a far field pixel
* a negative value is a near field pixel

The result is always clamped to `[-max_size, max_size]`.

## Installation

```
pip install cocalc
```

The package has no runtime dependencies. For the tests, install the `test`
extra (`pip install "cocalc[test]"`) and run `pytest`.

## Usage

```python
from cocalc.calculator import Calculator
from cocalc.settings import CameraData, Math, Settings

settings = Settings(
    math=Math.REAL,
    focal_plane=30.0,
    max_size=100.0,
    camera_data=CameraData(f_stop=2.0, focal_length=100.0),
)
calculator = Calculator(settings)
print(calculator.calculate(10.0))  # about -11.935
```

`Calculator` precomputes the values it needs from the settings. To change
them, for example to move the focal plane, pass new settings to
`update_settings`; the settings in use are available as `calculator.settings`:

```python
calculator.update_settings(Settings(math=Math.REAL, focal_plane=10.0))
```

`Settings` and `CameraData` are frozen dataclasses, so derive variations with
`dataclasses.replace`.

## Modes

### Manual

When `Settings.camera_data` is `None`, the calculator maps depth to a smooth
falloff around the focal plane. `size` scales the blur and `max_size` limits
it. `protect` widens the region around the focal plane that stays sharp
(CoC of zero).

### Camera

When `Settings.camera_data` holds a `CameraData`, the physically based CoC
formula is used, taking into account the focal length, f-stop, filmback,
resolution and world unit of the depth channel. Beyond the hyperfocal
distance the focus distance no longer changes the result. The value is
multiplied by `Settings.pixel_aspect`. A lower f-stop or a longer focal length
gives a larger CoC. Here `protect` is a sharp region measured in world units,
centred on the focal plane.

## Settings

| `Settings` field | default | meaning |
|---|---|---|
| `size` | `5.0` | base blur size (manual mode) |
| `max_size` | `10.0` | limit the result is clamped to |
| `math` | `Math.ONE_DIVIDED_BY_Z` | how depth values are read |
| `focal_plane` | `0.0` | depth value in focus |
| `protect` | `0.0` | width of the sharp region |
| `pixel_aspect` | `1.0` | pixel aspect ratio (camera mode) |
| `camera_data` | `None` | `CameraData` for camera mode |

`CameraData` defaults: `focal_length=50.0`, `f_stop=16.0`,
`filmback=(24.576, 18.672)`, `near_field=0.1`, `far_field=10000.0`,
`world_unit=WorldUnit.M`, `resolution=(1920, 1080)`. `filmback` and
`resolution` must each hold exactly two values and `resolution` must not be
negative; otherwise `ValueError` is raised.

### Depth interpretation

`Math.REAL` reads depth values as distances. `Math.ONE_DIVIDED_BY_Z` reads
them as inverse depth. A depth value of `0` is treated as a distance of 9999.

### World units

`WorldUnit` (`MM`, `CM`, `DM`, `M`, `INCH`, `FT`) gives the unit of the depth
channel when camera data is used; `WorldUnit.millimeters` gives the length of
one unit in millimeters.

## Limits

The calculator works on one depth value at a time. It does not read images or
depth maps and does not apply any blur; call `calculate` for each pixel of
your own depth data. A negative `max_size` makes `calculate` raise
`ValueError`.