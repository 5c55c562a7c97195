# pitchview

Geometry and state for placing virtual overlays (an offside line, player
highlights, a virtual pitch) on top of soccer broadcast video.

The package works out *where* things go and *what state* the viewer is in.
It is a library only: it has no command to run.

## Modules

- `pitchview.camera`: `PerspectiveCamera`, an orbiting camera whose
  `projection_matrix()` and `view_matrix()` are recomputed only after one of
  its parameters changes (`fovy`, `aspect`, `near`, `far`, `distance`,
  `x_angle`, `y_angle`, `position`). `add_x_rotation` keeps the tilt within
  10 to 170 degrees. A separate `video_view_matrix` attribute can be nudged
  with `rotate_x_view`, `rotate_y_view`, `rotate_z_view`,
  `add_view_distance`, `add_x_pos_view` and `add_y_pos_view`. The module also
  offers the matrix helpers `rotate_x_mat`, `rotate_y_mat`, `rotate_z_mat`,
  `add_x_pos_mat`, `add_y_pos_mat`, `add_distance_mat`, `perspective` and
  `infinite_perspective`.
- `pitchview.calibration`: `PitchCalibration` holds the pitch corners picked
  on screen (`pitch_points`), the field corners in metres (`model_corners`,
  from `field_corners`) and the screen-to-field homography
  (`calculate_homography`, `screen_to_scene`, `homography_glm`).
  `perspective_transform` computes a homography from four point pairs.
  `demo_pitch_points` and `load_demo_points` give stored corners for paths
  ending in `01.mp4`, `02.mp4` or `03.mp4`.
- `pitchview.pose`: `solve_pnp` estimates a camera pose from point
  correspondences; `video_view_matrix` turns a calibration into a view matrix
  with the y and z axes flipped into the OpenGL convention. `project_point`
  and `view_error` measure how well a projection-view matrix fits the chosen
  corners; `view_error` also stores the projected corners in
  `calibration.projected_points`.
- `pitchview.offside`: `OffsideLine` places the line (`set_model_matrix`)
  and, with `auto_offside`, moves it to the last defender of the side it
  stands on.
- `pitchview.tracking`: `Player` keeps its five most recent `Position`s,
  newest first, and `check_positions_validity` drops the oldest when it is
  more than 30 frames old. `Team.create_player` numbers players in order.
- `pitchview.playback`: `PlaybackState.update(playing, editing)` returns a
  `FrameAction` saying whether to read a new frame, reuse the background,
  rebuild it or update the player mask. `start_video`, `advance` and `time`
  keep the frame count and video time.
- `pitchview.controls`: `ControlPanel` holds the user's choices (play state,
  team colours, sliders, pitch editing flags, overlay toggles) and
  `ViewType` names the available views.
- `pitchview.menus`: actions on a `ControlPanel`: `open_video`,
  `save_pitch_points`, `confirm_new_video`, `load_saved_settings`,
  `begin_point_selection`, plus `is_known_demo_file` and `demo_video_path`.
- `pitchview.shader_source`: `ShaderSources.load` reads a vertex and
  fragment shader pair, `shader_paths` builds their paths under
  `<root>/shaders`, and `ShaderLoadError` is raised when a file cannot be read.

## Matrix convention

Matrices are 4×4 `numpy` arrays indexed `m[row, column]`; a translation sits
in the last column and points transform as `m @ (x, y, z, 1)`. The one
exception is `PitchCalibration.homography_glm()`, which returns the
homography transposed into the upper 3×3 block, ready for a column-major
graphics API.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from pitchview.calibration import PitchCalibration
from pitchview.pose import video_view_matrix

calib = PitchCalibration(1920, 1080)
calib.load_demo_points("videos/01.mp4")
calib.set_field_parameters(64, 100)
calib.calculate_homography()

# field coordinates (metres, centre at the origin) of a pixel
x, y = calib.screen_to_scene(960, 300)

view = video_view_matrix(calib, 2.7)
```

```python
from pitchview.offside import OffsideLine

line = OffsideLine()
line.set_model_matrix(-20.0, 64.0)
line.auto_offside([[(-30.0, 1.0), (-25.0, 4.0)], [(10.0, 0.0)]], 64.0)
```

## What it does not do

- It does not open, decode or play video files; the caller reads frames and
  feeds the play and edit state to `PlaybackState`.
- It does not detect players or classify jersey colours; `Player` and `Team`
  only store positions handed to them.
- It draws nothing: there is no window, menu rendering, texture handling or
  shader compilation. `ShaderSources` only reads the source text.