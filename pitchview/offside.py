"""Offside line placed across the virtual pitch."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

LINE_HEIGHT = 0.01
LINE_THICKNESS = 0.1


class OffsideLine:
    """State of the offside line: position, visibility and automatic mode."""

    def __init__(self) -> None:
        self.active = False
        self.automatic = False
        self.p1 = (0.0, 0.0)
        self.model_matrix = np.zeros((4, 4), dtype=float)

    def set_model_matrix(self, pos_x: float, field_width: float) -> None:
        """Place the line at ``pos_x`` spanning the whole field width."""
        self.p1 = (float(pos_x), 0.0)
        translate = np.eye(4)
        translate[:3, 3] = (pos_x, LINE_HEIGHT, 0.0)
        scale = np.diag((LINE_THICKNESS, 1.0, field_width / 2.0, 1.0))
        self.model_matrix = translate @ scale

    def auto_offside(
        self,
        player_positions: Sequence[Iterable[Sequence[float]]],
        field_width: float,
    ) -> None:
        """Move the line to the last defender of the side it currently stands on.

        ``player_positions[0]`` holds the first team's points and
        ``player_positions[1]`` the second team's. A line at x == 0 is left alone.
        """
        if self.p1[0] == 0.0:
            return
        min_x = min((p[0] for p in player_positions[0]), default=100.0)
        min_x = min(min_x, 100.0)
        max_x = max((p[0] for p in player_positions[1]), default=-100.0)
        max_x = max(max_x, -100.0)

        if self.p1[0] < 0:
            self.set_model_matrix(min_x, field_width)
        if self.p1[0] > 0:
            self.set_model_matrix(max_x, field_width)

    def invert_active(self) -> None:
        self.active = not self.active