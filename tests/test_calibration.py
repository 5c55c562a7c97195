import numpy as np
import pytest

from pitchview.calibration import (
    PitchCalibration,
    demo_pitch_points,
    field_corners,
    perspective_transform,
)


def _apply(h, x, y):
    p = h @ np.array((x, y, 1.0))
    return p[0] / p[2], p[1] / p[2]


def test_field_corners_default_size():
    assert field_corners(64, 100) == [(-50.0, 32.0), (-50.0, -32.0), (50.0, -32.0), (50.0, 32.0)]


def test_default_model_corners():
    cal = PitchCalibration()
    assert cal.model_corners == [(-50.0, 32.0), (-50.0, -32.0), (50.0, -32.0), (50.0, 32.0)]
    assert (cal.window_width, cal.window_height) == (1920, 1080)
    assert cal.pitch_points == [(0.0, 0.0)] * 4


def test_demo_points_known_paths():
    assert demo_pitch_points("videos/01.mp4") == [
        (72.0, 368.0), (666.0, 65.0), (1256.0, 65.0), (1850.0, 368.0)
    ]
    assert demo_pitch_points("c:\\videos\\03.mp4")[3] == (1911.0, 301.0)
    assert demo_pitch_points("videos/04.mp4") is None
    assert demo_pitch_points("01.mp4") is None


def test_load_demo_points_unknown_keeps_points():
    cal = PitchCalibration()
    assert cal.load_demo_points("a/b.mp4") is False
    assert cal.pitch_points == [(0.0, 0.0)] * 4
    assert cal.load_demo_points("a/02.mp4") is True
    assert cal.pitch_points[1] == (583.0, 61.0)


def test_perspective_transform_maps_points():
    src = [(0, 0), (10, 0), (12, 8), (-1, 9)]
    dst = [(1, 1), (5, 2), (6, 7), (0, 5)]
    h = perspective_transform(src, dst)
    assert h[2, 2] == 1.0
    for (x, y), (u, v) in zip(src, dst):
        assert _apply(h, x, y) == pytest.approx((u, v))


def test_perspective_transform_wrong_count():
    with pytest.raises(ValueError):
        perspective_transform([(0, 0), (1, 0), (1, 1)], [(0, 0), (1, 0), (1, 1)])


def test_perspective_transform_degenerate():
    with pytest.raises(ValueError):
        perspective_transform([(0, 0)] * 4, [(0, 0), (1, 0), (1, 1), (0, 1)])


def test_homography_maps_demo_corners():
    cal = PitchCalibration()
    cal.load_demo_points("x/01.mp4")
    cal.calculate_homography()
    for (sx, sy), corner in zip(cal.pitch_points, cal.model_corners):
        assert cal.screen_to_scene(sx, sy) == pytest.approx(corner, abs=1e-6)


def test_set_field_parameters_changes_homography_target():
    cal = PitchCalibration()
    cal.load_demo_points("x/02.mp4")
    cal.set_field_parameters(60, 90)
    cal.calculate_homography()
    assert cal.screen_to_scene(*cal.pitch_points[2]) == pytest.approx((45.0, -30.0), abs=1e-6)


def test_screen_to_scene_requires_homography():
    cal = PitchCalibration()
    with pytest.raises(RuntimeError):
        cal.screen_to_scene(1, 2)
    with pytest.raises(RuntimeError):
        cal.homography_glm()


def test_homography_glm_is_transposed_block():
    cal = PitchCalibration()
    cal.load_demo_points("x/03.mp4")
    h = cal.calculate_homography()
    glm = cal.homography_glm()
    np.testing.assert_allclose(glm[:3, :3], h.T)
    np.testing.assert_allclose(glm[3], [0.0, 0.0, 0.0, 1.0])
    np.testing.assert_allclose(glm[:3, 3], [0.0, 0.0, 0.0])


def test_add_edit_and_clear_points():
    cal = PitchCalibration()
    cal.clear_pitch_points()
    assert cal.pitch_points == []
    cal.add_pitch_point(3, 4)
    cal.add_pitch_point(5, 6)
    cal.edit_pitch_point(1, 7, 8)
    cal.edit_pitch_point(2, 9, 9)
    cal.edit_pitch_point(-1, 9, 9)
    assert cal.pitch_points == [(3.0, 4.0), (7.0, 8.0)]


def test_resize():
    cal = PitchCalibration()
    cal.resize(800, 600)
    assert (cal.window_width, cal.window_height) == (800, 600)