import pytest

from pitchview.tracking import Player, Position, Team


def test_new_player_has_single_position():
    player = Player(7, (1.5, -2.0), 12)
    assert player.player_id == 7
    assert player.positions == [Position(1.5, -2.0, 12)]
    assert player.processed is False


def test_insert_first_puts_newest_in_front():
    player = Player(0, (0.0, 0.0), 0)
    player.insert_first((1.0, 1.0), 1)
    assert player.positions[0] == Position(1.0, 1.0, 1)
    assert player.positions[-1] == Position(0.0, 0.0, 0)


def test_insert_first_keeps_at_most_five():
    player = Player(0, (0.0, 0.0), 0)
    for frame in range(1, 6):
        player.insert_first((float(frame), 0.0), frame)
    assert len(player.positions) == 5
    assert [p.frame for p in player.positions] == [5, 4, 3, 2, 1]


def test_old_position_is_dropped():
    player = Player(0, (0.0, 0.0), 0)
    player.insert_first((1.0, 0.0), 20)
    player.check_positions_validity(31)
    assert [p.frame for p in player.positions] == [20]


def test_position_at_limit_is_kept():
    player = Player(0, (0.0, 0.0), 0)
    player.check_positions_validity(30)
    assert len(player.positions) == 1


def test_validity_check_drops_only_one_per_call():
    player = Player(0, (0.0, 0.0), 0)
    player.insert_first((0.0, 0.0), 1)
    player.check_positions_validity(100)
    assert [p.frame for p in player.positions] == [1]
    player.check_positions_validity(100)
    assert player.positions == []
    player.check_positions_validity(100)
    assert player.positions == []


def test_team_assigns_increasing_player_ids():
    team = Team(1)
    first = team.create_player((1.0, 2.0), 3)
    second = team.create_player((4.0, 5.0), 6)
    assert [p.player_id for p in team.players] == [0, 1]
    assert team.players == [first, second]
    assert second.positions[0] == Position(4.0, 5.0, 6)


def test_team_defaults_and_color():
    team = Team(2)
    assert team.players_size == 10
    team.jersey_color = 3
    assert team.jersey_color == 3
    assert team.team_id == 2


@pytest.mark.parametrize("count", [0, 1, 4])
def test_team_player_count(count):
    team = Team(0)
    for i in range(count):
        team.create_player((float(i), 0.0), i)
    assert len(team.players) == count