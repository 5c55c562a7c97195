"""Tracked players and the teams they belong to."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence


@dataclass(frozen=True)
class Position:
    """A player's pitch position seen in a given video frame."""

    x: float
    y: float
    frame: int


class Player:
    """A player with a short history of recent positions, newest first."""

    max_positions = 5
    max_allowed_time = 30

    def __init__(self, player_id: int, position: Sequence[float], frame: int) -> None:
        self.player_id = player_id
        self.positions: list[Position] = [Position(position[0], position[1], frame)]
        self.processed = False

    def insert_first(self, position: Sequence[float], frame: int) -> None:
        """Record a new position, dropping the oldest one when over capacity."""
        self.positions.insert(0, Position(position[0], position[1], frame))
        if len(self.positions) > self.max_positions:
            self.positions.pop()

    def check_positions_validity(self, frame: int) -> None:
        """Drop the oldest position if it is too old relative to ``frame``."""
        if self.positions and self.positions[-1].frame < frame - self.max_allowed_time:
            self.positions.pop()


@dataclass
class Team:
    """A team of tracked players and its jersey colour."""

    team_id: int
    jersey_color: Optional[int] = None
    players_size: int = 10
    players: list[Player] = field(default_factory=list)
    _next_player_id: int = field(default=0, repr=False)

    def create_player(self, position: Sequence[float], frame: int) -> Player:
        """Add a new player seen at ``position`` in ``frame`` and return it."""
        player = Player(self._next_player_id, position, frame)
        self._next_player_id += 1
        self.players.append(player)
        return player