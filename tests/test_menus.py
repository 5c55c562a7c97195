from pathlib import Path
from types import SimpleNamespace

import pytest

from pitchview.controls import ControlPanel
from pitchview.menus import (
    begin_point_selection,
    confirm_new_video,
    demo_video_path,
    is_known_demo_file,
    load_saved_settings,
    open_video,
    save_pitch_points,
)


@pytest.mark.parametrize(
    "path",
    ["videos/01.mp4", "videos\\02.mp4", "/data/03.mp4", "C:\\videos\\01.mp4"],
)
def test_known_demo_files(path):
    assert is_known_demo_file(path) is True


@pytest.mark.parametrize("path", ["videos/04.mp4", "01.mp4", "videos/my01.mp4", ""])
def test_unknown_files(path):
    assert is_known_demo_file(path) is False


def test_demo_video_path_layout():
    path = demo_video_path("root", 2)
    assert Path(path) == Path("root") / "graphics" / "videos" / "02.mp4"
    assert is_known_demo_file(path)


@pytest.mark.parametrize("number", [0, 4, -1])
def test_demo_video_path_rejects_unknown_number(number):
    with pytest.raises(ValueError):
        demo_video_path("root", number)


def test_open_video_resets_state():
    panel = ControlPanel("root")
    panel.playing = True
    panel.select_team_color(0, 1)
    panel.select_team_color(1, 2)
    instances = [SimpleNamespace(active=True), SimpleNamespace(active=True)]
    open_video(panel, "clips/match.mp4", instances)
    assert panel.file_path_name == "clips/match.mp4"
    assert panel.new_video_file_selected is True
    assert panel.new_video_menu_open is True
    assert panel.playing is False
    assert panel.team_colors == [None, None]
    assert panel.pitch_points_init is True
    assert panel.show_plane is False
    assert [i.active for i in instances] == [False, False]


def test_save_pitch_points_accepts_four():
    panel = ControlPanel()
    panel.editing_pitch_points = True
    panel.selected_pitch_points_count = 4
    assert save_pitch_points(panel) is True
    assert panel.recalculate_projections is True
    assert panel.editing_pitch_points is False
    assert panel.clear_pitch_points is False


def test_save_pitch_points_restarts_when_incomplete():
    panel = ControlPanel()
    panel.selected_pitch_points_count = 3
    assert save_pitch_points(panel) is False
    assert panel.clear_pitch_points is True
    assert panel.editing_pitch_points is True
    assert panel.recalculate_projections is False


def test_confirm_new_video_closes_menu():
    panel = ControlPanel()
    open_video(panel, "a/01.mp4", [])
    panel.selected_pitch_points_count = 4
    assert confirm_new_video(panel) is True
    assert panel.new_video_menu_open is False
    assert panel.video_select_menu_confirmed is True
    assert panel.recalculate_projections is True
    assert panel.editing_pitch_points is False


def test_confirm_new_video_incomplete_keeps_menu():
    panel = ControlPanel()
    open_video(panel, "a/x.mp4", [])
    panel.selected_pitch_points_count = 2
    assert confirm_new_video(panel) is False
    assert panel.new_video_menu_open is True
    assert panel.video_select_menu_confirmed is False
    assert panel.clear_pitch_points is True


def test_load_saved_settings_for_demo():
    panel = ControlPanel("root")
    open_video(panel, demo_video_path("root", 1), [])
    load_saved_settings(panel)
    assert panel.selected_pitch_points_count == 4
    assert panel.matrix_type == 2
    assert panel.saved_settings is True
    assert panel.new_video_menu_open is False
    assert panel.video_select_menu_confirmed is True
    assert panel.recalculate_projections is True


def test_load_saved_settings_rejects_unknown_file():
    panel = ControlPanel()
    open_video(panel, "clips/other.mp4", [])
    with pytest.raises(ValueError):
        load_saved_settings(panel)
    assert panel.saved_settings is False


def test_begin_point_selection_needs_both_colors():
    panel = ControlPanel()
    open_video(panel, "clips/other.mp4", [])
    panel.select_team_color(0, 1)
    assert begin_point_selection(panel) is False
    assert panel.editing_pitch_points is False
    assert panel.pitch_points_init is True


def test_begin_point_selection_starts_editing_once():
    panel = ControlPanel()
    open_video(panel, "clips/other.mp4", [])
    panel.select_team_color(0, 1)
    panel.select_team_color(1, 3)
    assert begin_point_selection(panel) is True
    assert panel.clear_pitch_points is True
    assert panel.pitch_points_init is False
    assert panel.editing_pitch_points is True
    assert panel.matrix_type == 1

    panel.clear_pitch_points = False
    panel.selected_pitch_points_count = 4
    panel.matrix_type = 0
    assert begin_point_selection(panel) is True
    assert panel.clear_pitch_points is False
    assert panel.matrix_type == 0