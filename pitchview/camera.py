"""Perspective camera and 4x4 matrix helpers for the virtual pitch scene.

Matrices are numpy arrays in mathematical (row, column) order, so a
translation lives in the last column and points are transformed as
``matrix @ (x, y, z, 1)``.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

_X_AXIS = (1.0, 0.0, 0.0)
_Y_AXIS = (0.0, 1.0, 0.0)
_Z_AXIS = (0.0, 0.0, 1.0)

MIN_X_ANGLE = 10.0
MAX_X_ANGLE = 170.0


def _identity() -> np.ndarray:
    return np.eye(4, dtype=float)


def _translation(offset: Sequence[float]) -> np.ndarray:
    mat = _identity()
    mat[:3, 3] = offset
    return mat


def _rotation(degrees: float, axis: Sequence[float]) -> np.ndarray:
    """Right-handed rotation by ``degrees`` around ``axis``."""
    a = np.asarray(axis, dtype=float)
    a = a / np.linalg.norm(a)
    angle = math.radians(degrees)
    c, s = math.cos(angle), math.sin(angle)
    cross = np.array(
        [
            [0.0, -a[2], a[1]],
            [a[2], 0.0, -a[0]],
            [-a[1], a[0], 0.0],
        ]
    )
    mat = _identity()
    mat[:3, :3] = c * np.eye(3) + s * cross + (1.0 - c) * np.outer(a, a)
    return mat


def rotate_x_mat(mat, value: float) -> np.ndarray:
    """Return ``mat`` followed by a rotation of ``value`` degrees about X."""
    return np.asarray(mat, dtype=float) @ _rotation(value, _X_AXIS)


def rotate_y_mat(mat, value: float) -> np.ndarray:
    """Return ``mat`` followed by a rotation of ``value`` degrees about Y."""
    return np.asarray(mat, dtype=float) @ _rotation(value, _Y_AXIS)


def rotate_z_mat(mat, value: float) -> np.ndarray:
    """Return ``mat`` followed by a rotation of ``value`` degrees about Z."""
    return np.asarray(mat, dtype=float) @ _rotation(value, _Z_AXIS)


def add_x_pos_mat(mat, value: float) -> np.ndarray:
    """Return ``mat`` followed by a translation of ``value`` along X."""
    return np.asarray(mat, dtype=float) @ _translation((value, 0.0, 0.0))


def add_y_pos_mat(mat, value: float) -> np.ndarray:
    """Return ``mat`` followed by a translation of ``value`` along Y."""
    return np.asarray(mat, dtype=float) @ _translation((0.0, value, 0.0))


def add_distance_mat(mat, value: float) -> np.ndarray:
    """Return a copy of ``mat`` with ``value`` added to its Z translation."""
    result = np.array(mat, dtype=float)
    result[2, 3] += value
    return result


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection; ``fovy`` in radians, depth in [-1, 1]."""
    f = 1.0 / math.tan(fovy / 2.0)
    mat = np.zeros((4, 4), dtype=float)
    mat[0, 0] = f / aspect
    mat[1, 1] = f
    mat[2, 2] = -(far + near) / (far - near)
    mat[2, 3] = -(2.0 * far * near) / (far - near)
    mat[3, 2] = -1.0
    return mat


def infinite_perspective(fovy: float, aspect: float, near: float) -> np.ndarray:
    """Right-handed perspective projection with the far plane at infinity."""
    f = 1.0 / math.tan(fovy / 2.0)
    mat = np.zeros((4, 4), dtype=float)
    mat[0, 0] = f / aspect
    mat[1, 1] = f
    mat[2, 2] = -1.0
    mat[2, 3] = -2.0 * near
    mat[3, 2] = -1.0
    return mat


class PerspectiveCamera:
    """Orbiting camera with lazily recomputed projection and view matrices."""

    def __init__(self, fovy: float, aspect: float, near: float, far: float) -> None:
        self._fovy = float(fovy)
        self._aspect = float(aspect)
        self._near = float(near)
        self._far = float(far)
        self._distance = 1.0
        self._x_angle = 0.0
        self._y_angle = 0.0
        self._position = np.zeros(3, dtype=float)
        self._proj = _identity()
        self._view = _identity()
        self._recompute_proj = True
        self._recompute_view = True
        self.video_view_matrix = _identity()

    # projection parameters -------------------------------------------------

    @property
    def near(self) -> float:
        return self._near

    @near.setter
    def near(self, value: float) -> None:
        self._near = float(value)
        self._recompute_proj = True

    @property
    def far(self) -> float:
        return self._far

    @far.setter
    def far(self, value: float) -> None:
        self._far = float(value)
        self._recompute_proj = True

    @property
    def fovy(self) -> float:
        return self._fovy

    @fovy.setter
    def fovy(self, value: float) -> None:
        self._fovy = float(value)
        self._recompute_proj = True

    @property
    def aspect(self) -> float:
        return self._aspect

    @aspect.setter
    def aspect(self, value: float) -> None:
        self._aspect = float(value)
        self._recompute_proj = True

    # view parameters -------------------------------------------------------

    @property
    def distance(self) -> float:
        return self._distance

    @distance.setter
    def distance(self, value: float) -> None:
        self._distance = float(value)
        self._recompute_view = True

    @property
    def x_angle(self) -> float:
        return self._x_angle

    @x_angle.setter
    def x_angle(self, value: float) -> None:
        self._x_angle = float(value)
        self._recompute_view = True

    @property
    def y_angle(self) -> float:
        return self._y_angle

    @y_angle.setter
    def y_angle(self, value: float) -> None:
        self._y_angle = float(value)
        self._recompute_view = True

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = np.array(value, dtype=float)
        self._recompute_view = True

    # matrices --------------------------------------------------------------

    def projection_matrix(self) -> np.ndarray:
        """Return the projection matrix, recomputing it if a parameter changed."""
        if self._recompute_proj:
            fovy = math.radians(self._fovy)
            if math.isinf(self._far) and self._far > 0:
                self._proj = infinite_perspective(fovy, self._aspect, self._near)
            else:
                self._proj = perspective(fovy, self._aspect, self._near, self._far)
            self._recompute_proj = False
        return self._proj.copy()

    def view_matrix(self) -> np.ndarray:
        """Return the orbit view matrix, recomputing it if a parameter changed."""
        if self._recompute_view:
            rotation = _rotation(self._x_angle, _X_AXIS) @ _rotation(self._y_angle, _Y_AXIS)
            self._view = (
                _translation((0.0, 0.0, -self._distance))
                @ rotation
                @ _translation(self._position)
            )
            self._recompute_view = False
        return self._view.copy()

    # incremental changes ---------------------------------------------------

    def add_distance(self, value: float) -> None:
        self.distance = self._distance + value

    def add_x_position(self, dx: float) -> None:
        self._position[0] += dx
        self._recompute_view = True

    def add_y_position(self, dy: float) -> None:
        self._position[1] += dy
        self._recompute_view = True

    def add_z_position(self, dz: float) -> None:
        self._position[2] += dz
        self._recompute_view = True

    def add_x_rotation(self, dx: float) -> None:
        """Tilt the camera, keeping the angle within [10, 170] degrees."""
        self.x_angle = min(max(self._x_angle + dx, MIN_X_ANGLE), MAX_X_ANGLE)

    def add_y_rotation(self, dy: float) -> None:
        self.y_angle = self._y_angle + dy

    def set_external_params(self, distance, x_angle, y_angle, position) -> None:
        """Set distance, both angles and position at once."""
        self._distance = float(distance)
        self._x_angle = float(x_angle)
        self._y_angle = float(y_angle)
        self._position = np.array(position, dtype=float)
        self._recompute_view = True

    # video view matrix -----------------------------------------------------

    def rotate_x_view(self, value: float) -> None:
        """Tilt the video view matrix unless it would pass the allowed limits."""
        m = self.video_view_matrix
        theta = math.degrees(math.atan2(math.hypot(m[1, 2], m[0, 2]), m[2, 2]))
        if (
            10 < theta < 160
            or (value > 0 and 0 < theta < 10)
            or (value < 0 and 160 < theta < 180)
        ):
            self.video_view_matrix = rotate_x_mat(m, value)

    def rotate_y_view(self, value: float) -> None:
        self.video_view_matrix = rotate_y_mat(self.video_view_matrix, value)

    def rotate_z_view(self, value: float) -> None:
        self.video_view_matrix = rotate_z_mat(self.video_view_matrix, value)

    def add_view_distance(self, value: float) -> None:
        self.video_view_matrix = add_distance_mat(self.video_view_matrix, value)

    def add_x_pos_view(self, value: float) -> None:
        self.video_view_matrix = add_x_pos_mat(self.video_view_matrix, value)

    def add_y_pos_view(self, value: float) -> None:
        self.video_view_matrix = add_y_pos_mat(self.video_view_matrix, value)