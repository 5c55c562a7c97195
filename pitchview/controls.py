"""State behind the user controls: playback, pitch editing, teams and overlays."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import Iterable, Optional, Union

from .offside import OffsideLine

SLIDER_DEFAULTS = (0, -100, -18)
SLIDER_MIN = -100
SLIDER_MAX = 100
TEAM_COLOR_CHOICES = 6
DEFAULT_FIELD_WIDTH = 64
DEFAULT_FIELD_LENGTH = 100
DEFAULT_CALIBRATION = 2


class ViewType(IntEnum):
    """What the main view shows."""

    DEPTH_MAP = 0
    PLAYER_DETECTION = 1
    FINAL_SCENE = 2
    VIRTUAL_SCENE = 3


class ControlPanel:
    """Everything the user can set through the menus, free of any drawing code."""

    def __init__(self, path: Union[str, Path] = "") -> None:
        self.path = str(path)
        self.sliders: list[int] = list(SLIDER_DEFAULTS)
        self.file_path_name = ""
        self.window_size = (0.0, 0.0)

        self.field_width = DEFAULT_FIELD_WIDTH
        self.field_length = DEFAULT_FIELD_LENGTH

        self.mouse_select = 0
        self.view_type = ViewType.FINAL_SCENE
        self.matrix_type = 0
        self.calibration_type = DEFAULT_CALIBRATION

        self.show_plane = True
        self.player_highlighting = True
        self.arrow_drawing = True
        self.offside_line_move = False

        self.arrow_in_creation = False
        self.arrow_point_selection = False
        self.arrow_new_color = 0
        self.arrow_edit: Optional[int] = None

        self.new_video_menu_open = False
        self.new_video_file_selected = False
        self.video_file_used = False
        self.video_file_ended = False
        self.recalculate_projections = False

        self.selected_corner_index = 0
        self.selected_pitch_points_count = 0
        self.editing_pitch_points = False
        self.clear_pitch_points = False
        self.dragging = False
        self.video_select_menu_confirmed = False
        self.pitch_points_init = False

        self.team_colors: list[Optional[int]] = [None, None]
        self.new_team_color_selected = False
        self.saved_settings = False

        self.playing = False
        self.replay_toggle = False
        self.open_demo_video = 0

        self.point1 = (0.0, 0.0)
        self.point2 = (0.0, 0.0)

    def slider_value(self, index: int) -> int:
        """Return a light-position slider value, or -1 for an index past the end."""
        if index < 0:
            raise IndexError(f"slider index {index} is negative")
        if index < len(self.sliders):
            return self.sliders[index]
        return -1

    def toggle_play(self) -> None:
        self.playing = not self.playing

    def replay(self) -> None:
        """Ask for the current video to be started again from its beginning."""
        self.replay_toggle = not self.replay_toggle
        self.video_file_ended = True
        self.video_file_used = True
        self.new_video_file_selected = True

    def select_team_color(self, team: int, color: int) -> None:
        """Choose the jersey colour of team 0 or 1."""
        if team not in (0, 1):
            raise IndexError(f"team {team} does not exist")
        if not 0 <= color < TEAM_COLOR_CHOICES:
            raise ValueError(f"colour {color} is not a jersey colour")
        self.team_colors[team] = color
        self.new_team_color_selected = True

    def toggle_player_highlighting(self, instances: Iterable) -> None:
        """Flip highlighting and the ``active`` flag of every highlight instance."""
        self.player_highlighting = not self.player_highlighting
        for instance in instances:
            instance.active = not instance.active

    def toggle_offside_line(self, offside_line: OffsideLine) -> None:
        """Show or hide the offside line; showing it pauses play and starts moving it."""
        offside_line.invert_active()
        if offside_line.active:
            self.offside_line_move = True
            self.playing = False

    def toggle_offside_move(self) -> None:
        self.offside_line_move = not self.offside_line_move