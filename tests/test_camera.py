import pytest

import constants as C
from camera import Camera


def test_camera_starts_at_origin_and_dirty():
    camera = Camera()
    assert (camera.x, camera.y) == (0.0, 0.0)
    assert camera.dirty


def test_pan_moves_and_marks_dirty():
    camera = Camera()
    camera.dirty = False
    camera.pan(3.5, -2.0)
    assert (camera.x, camera.y) == (3.5, -2.0)
    assert camera.dirty


def test_zero_pan_leaves_camera_clean():
    camera = Camera()
    camera.dirty = False
    camera.pan(0, 0)
    assert not camera.dirty


def test_pan_for_keys_scales_with_time():
    camera = Camera()
    camera.pan_for_keys(left=False, right=True, up=True, down=False, delta_seconds=0.5)
    assert camera.x == pytest.approx(C.CAMERA_PAN_SPEED_CELLS * 0.5)
    assert camera.y == pytest.approx(-C.CAMERA_PAN_SPEED_CELLS * 0.5)


def test_opposite_keys_cancel():
    camera = Camera()
    camera.dirty = False
    camera.pan_for_keys(left=True, right=True, up=False, down=False, delta_seconds=1.0)
    assert camera.x == 0.0
    assert not camera.dirty


def test_reset():
    camera = Camera()
    camera.pan(4, 4)
    camera.dirty = False
    camera.reset()
    assert (camera.x, camera.y) == (0.0, 0.0)
    assert camera.dirty

    camera.dirty = False
    camera.reset()
    assert not camera.dirty
