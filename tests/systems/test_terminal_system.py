from robot_chase.systems.terminal import is_level_cleared, is_player_caught
from tests.test_utils import make_field


def test_player_alone_is_safe() -> None:
    assert not is_player_caught(make_field(player=(1, 1), pursuers=[(2, 2)]))


def test_player_on_pursuer_is_caught() -> None:
    assert is_player_caught(make_field(player=(1, 1), pursuers=[(1, 1)]))


def test_player_on_wreckage_is_caught() -> None:
    assert is_player_caught(make_field(player=(1, 1), wreckage=[(1, 1)]))


def test_level_cleared_when_no_pursuers() -> None:
    assert is_level_cleared(make_field(wreckage=[(3, 3)]))
    assert not is_level_cleared(make_field(pursuers=[(3, 3)]))
