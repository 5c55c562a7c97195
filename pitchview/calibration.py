"""Pitch calibration: screen corner points, field model corners and homography."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

Point = tuple[float, float]

DEFAULT_WINDOW_WIDTH = 1920
DEFAULT_WINDOW_HEIGHT = 1080
DEFAULT_FIELD_WIDTH = 64.0
DEFAULT_FIELD_LENGTH = 100.0
DEFAULT_SCALE = 2.7

_DEMO_POINTS: dict[str, list[Point]] = {
    "01.mp4": [(72.0, 368.0), (666.0, 65.0), (1256.0, 65.0), (1850.0, 368.0)],
    "02.mp4": [(23.0, 380.0), (583.0, 61.0), (1335.0, 61.0), (1897.0, 380.0)],
    "03.mp4": [(12.0, 302.0), (705.0, 56.0), (1236.0, 56.0), (1911.0, 301.0)],
}


def demo_pitch_points(video_path: str) -> Optional[list[Point]]:
    """Return the stored pitch corner pixels of a demo video, or None if unknown."""
    for name, points in _DEMO_POINTS.items():
        if f"\\{name}" in video_path or f"/{name}" in video_path:
            return list(points)
    return None


def field_corners(width: float, length: float) -> list[Point]:
    """Return the field corners in scene units, starting bottom left, clockwise."""
    hw = width / 2.0
    hl = length / 2.0
    return [(-hl, hw), (-hl, -hw), (hl, -hw), (hl, hw)]


def perspective_transform(src: Sequence[Sequence[float]], dst: Sequence[Sequence[float]]) -> np.ndarray:
    """Return the 3x3 homography mapping four ``src`` points onto four ``dst`` points."""
    if len(src) != 4 or len(dst) != 4:
        raise ValueError("a perspective transform needs exactly four point pairs")
    a = np.zeros((8, 8), dtype=float)
    b = np.zeros(8, dtype=float)
    for i, ((x, y), (u, v)) in enumerate(zip(src, dst)):
        a[i] = (x, y, 1.0, 0.0, 0.0, 0.0, -x * u, -y * u)
        a[i + 4] = (0.0, 0.0, 0.0, x, y, 1.0, -x * v, -y * v)
        b[i] = u
        b[i + 4] = v
    try:
        h = np.linalg.solve(a, b)
    except np.linalg.LinAlgError as exc:
        raise ValueError("points are degenerate, no perspective transform exists") from exc
    return np.append(h, 1.0).reshape(3, 3)


class PitchCalibration:
    """Screen positions of the pitch corners and the scene field they map to."""

    def __init__(
        self,
        window_width: int = DEFAULT_WINDOW_WIDTH,
        window_height: int = DEFAULT_WINDOW_HEIGHT,
    ) -> None:
        self.window_width = window_width
        self.window_height = window_height
        self.pitch_points: list[Point] = [(0.0, 0.0)] * 4
        self.model_corners: list[Point] = field_corners(DEFAULT_FIELD_WIDTH, DEFAULT_FIELD_LENGTH)
        self.projected_points: list[Point] = []
        self.scale = DEFAULT_SCALE
        self.homography: Optional[np.ndarray] = None

    def resize(self, window_width: int, window_height: int) -> None:
        """Set the size of the window the video is shown in."""
        self.window_width = window_width
        self.window_height = window_height

    def load_demo_points(self, video_path: str) -> bool:
        """Use the stored corner points of a demo video; return whether it was known."""
        points = demo_pitch_points(video_path)
        if points is None:
            return False
        self.pitch_points = points
        return True

    def set_field_parameters(self, width: float, length: float) -> None:
        """Set the scene field size in metres."""
        self.model_corners = field_corners(width, length)

    def add_pitch_point(self, x: int, y: int) -> None:
        self.pitch_points.append((float(x), float(y)))

    def edit_pitch_point(self, index: int, x: int, y: int) -> None:
        """Move an existing pitch point; an index out of range is ignored."""
        if 0 <= index < len(self.pitch_points):
            self.pitch_points[index] = (float(x), float(y))

    def clear_pitch_points(self) -> None:
        self.pitch_points.clear()

    def calculate_homography(self) -> np.ndarray:
        """Compute and store the screen-to-scene homography."""
        self.homography = perspective_transform(self.pitch_points, self.model_corners)
        return self.homography

    def _require_homography(self) -> np.ndarray:
        if self.homography is None:
            raise RuntimeError("homography has not been calculated")
        return self.homography

    def screen_to_scene(self, x: float, y: float) -> Point:
        """Map a screen pixel to its position on the scene field."""
        warped = self._require_homography() @ np.array((x, y, 1.0))
        warped = warped / warped[2]
        return float(warped[0]), float(warped[1])

    def homography_glm(self) -> np.ndarray:
        """Return the homography embedded in a 4x4 matrix in column-major layout.

        The upper 3x3 block holds the transposed homography, the rest is identity.
        """
        mat = np.eye(4, dtype=float)
        mat[:3, :3] = self._require_homography().T
        return mat