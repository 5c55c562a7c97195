"""Menu actions: opening videos, confirming pitch points and loading saved settings."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

from .controls import ControlPanel

DEMO_VIDEO_NUMBERS = (1, 2, 3)
PITCH_POINT_COUNT = 4
SAVED_SETTINGS_MATRIX_TYPE = 2
AUTOMATIC_MATRIX_TYPE = 1


def _demo_file_name(number: int) -> str:
    return f"0{number}.mp4"


def is_known_demo_file(path: Union[str, Path]) -> bool:
    """Return whether ``path`` names one of the demo videos that has saved settings."""
    text = str(path)
    for number in DEMO_VIDEO_NUMBERS:
        name = _demo_file_name(number)
        if f"\\{name}" in text or f"/{name}" in text:
            return True
    return False


def demo_video_path(root: Union[str, Path], number: int) -> str:
    """Return the path of demo video ``number`` (1 to 3) under ``root``."""
    if number not in DEMO_VIDEO_NUMBERS:
        raise ValueError(f"there is no demo video {number}")
    return str(Path(root) / "graphics" / "videos" / _demo_file_name(number))


def open_video(panel: ControlPanel, file_path: Union[str, Path], pitch_instances: Iterable) -> None:
    """Select a new video file and reset the match settings for it.

    Playback stops, team colours are cleared, pitch point selection is
    restarted and every pitch instance is hidden.
    """
    panel.file_path_name = str(file_path)
    panel.new_video_file_selected = True
    panel.new_video_menu_open = True
    panel.playing = False
    panel.team_colors = [None, None]
    panel.pitch_points_init = True
    panel.show_plane = False
    for instance in pitch_instances:
        instance.active = False


def save_pitch_points(panel: ControlPanel) -> bool:
    """Accept the edited pitch points if all four are set, otherwise start over.

    Returns whether the points were accepted.
    """
    if panel.selected_pitch_points_count == PITCH_POINT_COUNT:
        panel.recalculate_projections = True
        panel.editing_pitch_points = False
        return True
    panel.clear_pitch_points = True
    panel.editing_pitch_points = True
    return False


def confirm_new_video(panel: ControlPanel) -> bool:
    """Close the new-video menu if all four pitch points are set, otherwise start over.

    Returns whether the menu was confirmed.
    """
    if panel.selected_pitch_points_count == PITCH_POINT_COUNT:
        panel.editing_pitch_points = False
        panel.recalculate_projections = True
        panel.new_video_menu_open = False
        panel.video_select_menu_confirmed = True
        return True
    panel.clear_pitch_points = True
    panel.editing_pitch_points = True
    return False


def load_saved_settings(panel: ControlPanel) -> None:
    """Use the stored calibration of the selected demo video and close the menu."""
    if not is_known_demo_file(panel.file_path_name):
        raise ValueError(f"no saved settings for {panel.file_path_name!r}")
    panel.selected_pitch_points_count = PITCH_POINT_COUNT
    panel.matrix_type = SAVED_SETTINGS_MATRIX_TYPE
    panel.editing_pitch_points = False
    panel.recalculate_projections = True
    panel.new_video_menu_open = False
    panel.video_select_menu_confirmed = True
    panel.saved_settings = True


def begin_point_selection(panel: ControlPanel) -> bool:
    """Start pitch corner selection once both team colours are chosen.

    On the first call after a video was opened the old points are cleared and
    editing begins. While fewer than four points are set the automatic view
    matrix is used. Returns whether selection is available.
    """
    if panel.team_colors[0] is None or panel.team_colors[1] is None:
        return False
    if panel.pitch_points_init:
        panel.clear_pitch_points = True
        panel.pitch_points_init = False
        panel.editing_pitch_points = True
    if panel.selected_pitch_points_count < PITCH_POINT_COUNT:
        panel.matrix_type = AUTOMATIC_MATRIX_TYPE
    return True