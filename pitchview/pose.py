"""Camera pose of the video view, estimated from the calibrated pitch corners."""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np
from scipy.optimize import least_squares
from scipy.spatial.transform import Rotation

from .calibration import PitchCalibration, Point

_CV_TO_GL = np.diag((1.0, -1.0, -1.0, 1.0))
_PLANAR_TOLERANCE = 1e-6


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def project_point(
    proj_view,
    point: Sequence[float],
    window_width: int,
    window_height: int,
) -> Point:
    """Project a scene point to whole-pixel screen coordinates.

    ``proj_view`` is a 4x4 projection-view matrix in (row, column) order.
    """
    matrix = np.asarray(proj_view, dtype=float)
    clip = matrix @ np.array((point[0], point[1], point[2], 1.0))
    x = _round_half_away((clip[0] / clip[3] + 1.0) * 0.5 * window_width)
    y = _round_half_away((1.0 - clip[1] / clip[3]) * 0.5 * window_height)
    return float(x), float(y)


def view_error(calibration: PitchCalibration, proj_view) -> float:
    """Sum of pixel distances between the pitch points and the projected field corners.

    The projected corners are stored in ``calibration.projected_points``.
    """
    corners = calibration.model_corners
    if len(calibration.pitch_points) < len(corners):
        raise ValueError("fewer pitch points than field corners")
    calibration.projected_points = [
        project_point(
            proj_view,
            (x, 0.0, z),
            calibration.window_width,
            calibration.window_height,
        )
        for x, z in corners
    ]
    return sum(
        math.hypot(sx - px, sy - py)
        for (sx, sy), (px, py) in zip(calibration.pitch_points, calibration.projected_points)
    )


def _normalizing_transform(points: np.ndarray) -> np.ndarray:
    centre = points.mean(axis=0)
    spread = np.linalg.norm(points - centre, axis=1).mean()
    s = math.sqrt(2.0) / spread if spread > 0 else 1.0
    return np.array(
        [
            [s, 0.0, -s * centre[0]],
            [0.0, s, -s * centre[1]],
            [0.0, 0.0, 1.0],
        ]
    )


def _homography(src: np.ndarray, dst: np.ndarray) -> np.ndarray:
    """Least-squares homography mapping ``src`` onto ``dst`` (both N x 2)."""
    t_src = _normalizing_transform(src)
    t_dst = _normalizing_transform(dst)
    src_n = np.column_stack((src, np.ones(len(src)))) @ t_src.T
    dst_n = np.column_stack((dst, np.ones(len(dst)))) @ t_dst.T
    rows = []
    for (x, y, _), (u, v, _) in zip(src_n, dst_n):
        rows.append((-x, -y, -1.0, 0.0, 0.0, 0.0, u * x, u * y, u))
        rows.append((0.0, 0.0, 0.0, -x, -y, -1.0, v * x, v * y, v))
    _, _, vt = np.linalg.svd(np.array(rows))
    h = vt[-1].reshape(3, 3)
    return np.linalg.inv(t_dst) @ h @ t_src


def _nearest_rotation(matrix: np.ndarray) -> np.ndarray:
    u, _, vt = np.linalg.svd(matrix)
    rotation = u @ vt
    if np.linalg.det(rotation) < 0:
        u[:, -1] *= -1.0
        rotation = u @ vt
    return rotation


def _planar_initial_pose(objects: np.ndarray, normalized: np.ndarray, basis: np.ndarray):
    centre = objects.mean(axis=0)
    if np.linalg.det(basis) < 0:
        basis = basis.copy()
        basis[2] *= -1.0
    plane = (objects - centre) @ basis[:2].T
    h = _homography(plane, normalized)
    h1, h2, h3 = h[:, 0], h[:, 1], h[:, 2]
    lam = 2.0 / (np.linalg.norm(h1) + np.linalg.norm(h2))
    if lam * h3[2] < 0:
        lam = -lam
    r1, r2 = lam * h1, lam * h2
    plane_rotation = _nearest_rotation(np.column_stack((r1, r2, np.cross(r1, r2))))
    rotation = plane_rotation @ basis
    translation = lam * h3 - rotation @ centre
    return rotation, translation


def _general_initial_pose(objects: np.ndarray, normalized: np.ndarray):
    if len(objects) < 6:
        raise ValueError("non-planar pose estimation needs at least six points")
    rows = []
    for (x, y, z), (u, v) in zip(objects, normalized):
        rows.append((x, y, z, 1.0, 0.0, 0.0, 0.0, 0.0, -u * x, -u * y, -u * z, -u))
        rows.append((0.0, 0.0, 0.0, 0.0, x, y, z, 1.0, -v * x, -v * y, -v * z, -v))
    _, _, vt = np.linalg.svd(np.array(rows))
    p = vt[-1].reshape(3, 4)
    if np.linalg.det(p[:, :3]) < 0:
        p = -p
    _, singular, _ = np.linalg.svd(p[:, :3])
    rotation = _nearest_rotation(p[:, :3])
    translation = p[:, 3] / singular.mean()
    return rotation, translation


def solve_pnp(model_points, image_points, camera_matrix):
    """Estimate the camera pose that projects ``model_points`` onto ``image_points``.

    The camera has no lens distortion. Returns the rotation matrix and the
    translation vector that carry scene points into camera coordinates.
    """
    objects = np.asarray(model_points, dtype=float).reshape(-1, 3)
    images = np.asarray(image_points, dtype=float).reshape(-1, 2)
    k = np.asarray(camera_matrix, dtype=float)
    if len(objects) != len(images):
        raise ValueError("model and image point counts differ")
    if len(objects) < 4:
        raise ValueError("pose estimation needs at least four points")

    normalized = np.column_stack((images, np.ones(len(images)))) @ np.linalg.inv(k).T
    normalized = normalized[:, :2] / normalized[:, 2:]

    _, singular, basis = np.linalg.svd(objects - objects.mean(axis=0))
    if singular[2] <= _PLANAR_TOLERANCE * max(singular[0], 1e-12):
        rotation, translation = _planar_initial_pose(objects, normalized, basis)
    else:
        rotation, translation = _general_initial_pose(objects, normalized)

    def residuals(params: np.ndarray) -> np.ndarray:
        r = Rotation.from_rotvec(params[:3]).as_matrix()
        projected = (objects @ r.T + params[3:]) @ k.T
        return (projected[:, :2] / projected[:, 2:] - images).ravel()

    start = np.concatenate((Rotation.from_matrix(rotation).as_rotvec(), translation))
    result = least_squares(residuals, start, method="lm")
    return Rotation.from_rotvec(result.x[:3]).as_matrix(), result.x[3:].copy()


def video_view_matrix(calibration: PitchCalibration, scale: Optional[float] = None) -> np.ndarray:
    """Return the scene view matrix that matches the calibrated video frame.

    Field corners are divided by ``scale`` (default ``calibration.scale``).
    The result is in (row, column) order with the y and z axes flipped
    into the rendering convention.
    """
    if scale is None:
        scale = calibration.scale
    if len(calibration.pitch_points) != len(calibration.model_corners):
        raise ValueError("pitch point count does not match the field corners")
    model = [(x / scale, 0.0, z / scale) for x, z in calibration.model_corners]
    width = float(calibration.window_width)
    height = float(calibration.window_height)
    intrinsic = np.array(
        [
            [width, 0.0, width / 2.0],
            [0.0, height, height / 2.0],
            [0.0, 0.0, 1.0],
        ]
    )
    rotation, translation = solve_pnp(model, calibration.pitch_points, intrinsic)
    view = np.eye(4, dtype=float)
    view[:3, :3] = rotation
    view[:3, 3] = translation
    return _CV_TO_GL @ view