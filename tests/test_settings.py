import dataclasses

import pytest

from cocalc.settings import CameraData, Math, Settings, WorldUnit


def test_settings_defaults():
    settings = Settings()
    assert settings.size == 5.0
    assert settings.max_size == 10.0
    assert settings.math is Math.ONE_DIVIDED_BY_Z
    assert settings.focal_plane == 0.0
    assert settings.protect == 0.0
    assert settings.pixel_aspect == 1.0
    assert settings.camera_data is None


def test_camera_data_defaults():
    camera = CameraData()
    assert camera.focal_length == 50.0
    assert camera.f_stop == 16.0
    assert camera.filmback == (24.576, 18.672)
    assert camera.near_field == 0.1
    assert camera.far_field == 10000.0
    assert camera.world_unit is WorldUnit.M
    assert camera.resolution == (1920, 1080)


def test_camera_data_positional_order():
    camera = CameraData(35.0, 2.8, (36.0, 24.0), 0.5, 500.0, WorldUnit.CM, (4096, 2160))
    assert camera.focal_length == 35.0
    assert camera.f_stop == 2.8
    assert camera.filmback == (36.0, 24.0)
    assert camera.world_unit is WorldUnit.CM
    assert camera.resolution == (4096, 2160)


def test_settings_positional_order():
    camera = CameraData()
    settings = Settings(1.0, 2.0, Math.REAL, 3.0, 4.0, 0.5, camera)
    assert settings.size == 1.0
    assert settings.max_size == 2.0
    assert settings.math is Math.REAL
    assert settings.focal_plane == 3.0
    assert settings.protect == 4.0
    assert settings.pixel_aspect == 0.5
    assert settings.camera_data == camera


def test_sequences_become_tuples():
    camera = CameraData(filmback=[10, 20], resolution=[640, 480])
    assert camera.filmback == (10.0, 20.0)
    assert camera.resolution == (640, 480)


@pytest.mark.parametrize("filmback", [(1.0,), (1.0, 2.0, 3.0)])
def test_filmback_needs_two_values(filmback):
    with pytest.raises(ValueError):
        CameraData(filmback=filmback)


def test_resolution_needs_two_values():
    with pytest.raises(ValueError):
        CameraData(resolution=(1920,))


def test_negative_resolution_rejected():
    with pytest.raises(ValueError):
        CameraData(resolution=(-1, 1080))


def test_enum_values_follow_declaration_order():
    units = [WorldUnit(index) for index in range(6)]
    assert units == [
        WorldUnit.MM,
        WorldUnit.CM,
        WorldUnit.DM,
        WorldUnit.M,
        WorldUnit.INCH,
        WorldUnit.FT,
    ]
    assert Math(0) is Math.REAL
    assert Math(1) is Math.ONE_DIVIDED_BY_Z


def test_enum_coercion_from_int():
    settings = Settings(math=0)
    assert settings.math is Math.REAL
    camera = CameraData(world_unit=5)
    assert camera.world_unit is WorldUnit.FT


@pytest.mark.parametrize(
    ("unit", "expected"),
    [
        (WorldUnit.MM, 1.0),
        (WorldUnit.CM, 10.0),
        (WorldUnit.DM, 100.0),
        (WorldUnit.M, 1000.0),
        (WorldUnit.INCH, 25.4),
        (WorldUnit.FT, 304.8),
    ],
)
def test_world_unit_millimeters(unit, expected):
    camera = CameraData(world_unit=unit)
    assert camera.world_unit.millimeters == expected


def test_settings_are_frozen_and_replaceable():
    settings = Settings()
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.size = 3.0
    changed = dataclasses.replace(settings, focal_plane=7.0)
    assert changed.focal_plane == 7.0
    assert settings.focal_plane == 0.0


def test_equality():
    assert CameraData() == CameraData()
    assert Settings(camera_data=CameraData()) == Settings(camera_data=CameraData())
    assert Settings(size=1.0) != Settings(size=2.0)