import math

import pytest

from raycaster.world import (
    BLOCK,
    COLLISION,
    GameMap,
    Player,
    distance,
    fix_fish,
    get_map,
)


def test_builtin_map_shape_and_border():
    game_map = get_map()
    assert game_map.height == 11
    assert game_map.width == 18
    assert all(len(row) == 18 for row in game_map.rows)
    assert set(game_map.rows[0]) == {"1"}
    assert set(game_map.rows[-1]) == {"1"}
    assert all(row[0] == "1" and row[-1] == "1" for row in game_map.rows)


def test_builtin_map_interior_walls():
    game_map = get_map()
    assert game_map.rows[4] == "100000000100000001"
    assert game_map.rows[8] == "100000011000000001"
    assert game_map.is_wall(9, 4)
    assert not game_map.is_wall(1, 1)


def test_walls_lists_every_wall_cell():
    game_map = GameMap(["10", "01"])
    assert list(game_map.walls()) == [(0, 0), (1, 1)]


def test_empty_map_rejected():
    with pytest.raises(ValueError):
        GameMap([])


def test_touch_wall_inside_open_cell():
    game_map = get_map()
    assert not game_map.touch_wall(BLOCK * 1.5, BLOCK * 1.5)
    assert game_map.touch_wall(BLOCK * 9 + 1, BLOCK * 4 + 1)


def test_touch_wall_off_the_map():
    game_map = get_map()
    assert game_map.touch_wall(BLOCK * 2, -BLOCK * 2)
    assert game_map.touch_wall(BLOCK * 2, BLOCK * game_map.height)
    assert game_map.touch_wall(BLOCK * game_map.width, BLOCK * 2)
    assert game_map.touch_wall(-BLOCK * 2, BLOCK * 2)


def test_touch_wall_truncates_toward_zero():
    game_map = GameMap(["00", "00"])
    assert not game_map.touch_wall(-1, 1)
    assert not game_map.touch_wall(1, -1)


def test_is_wall_out_of_bounds():
    game_map = GameMap(["000", "000"])
    assert game_map.is_wall(-1, 0)
    assert game_map.is_wall(0, -1)
    assert game_map.is_wall(3, 0)
    assert game_map.is_wall(0, 2)
    assert not game_map.is_wall(2, 1)


def test_distance():
    assert distance(3, 4) == pytest.approx(5)
    assert distance(0, 0) == 0


def test_fix_fish_straight_ahead_is_distance():
    assert fix_fish(0.0, 0, 0, 10, 0) == pytest.approx(10)


def test_fix_fish_sideways_is_zero():
    assert fix_fish(0.0, 0, 0, 0, 10) == pytest.approx(0, abs=1e-9)


def test_fix_fish_never_exceeds_distance():
    value = fix_fish(0.3, 1, 2, 7, 9)
    assert value <= distance(6, 7)


def test_player_defaults():
    player = Player()
    assert player.x == player.y == player.angle == pytest.approx(math.pi / 2)
    assert player.speed == 3.0
    assert player.rot_speed == 0.05
    assert not any(
        (player.key_up, player.key_down, player.key_left, player.key_right,
         player.rot_left, player.rot_right)
    )


def test_move_without_keys_changes_nothing():
    player = Player(x=96.0, y=96.0, angle=1.0)
    player.move(get_map())
    assert (player.x, player.y, player.angle) == (96.0, 96.0, 1.0)


def test_rotation_right_and_left():
    player = Player(x=96.0, y=96.0, angle=1.0, rot_right=True)
    player.move(get_map())
    assert player.angle == pytest.approx(1.0 + player.rot_speed)
    player.rot_right = False
    player.rot_left = True
    player.move(get_map())
    assert player.angle == pytest.approx(1.0)


def test_rotation_wraps_into_range():
    player = Player(x=96.0, y=96.0, angle=2 * math.pi, rot_right=True)
    player.move(get_map())
    assert 0 <= player.angle <= 2 * math.pi
    assert player.angle == pytest.approx(player.rot_speed)

    player = Player(x=96.0, y=96.0, angle=0.0, rot_left=True)
    player.move(get_map())
    assert player.angle == pytest.approx(2 * math.pi - player.rot_speed)


def test_forward_and_backward_in_open_space():
    player = Player(x=200.0, y=200.0, angle=0.0, key_up=True)
    player.move(get_map())
    assert player.x == pytest.approx(200.0 + player.speed)
    assert player.y == pytest.approx(200.0)

    player = Player(x=200.0, y=200.0, angle=0.0, key_down=True)
    player.move(get_map())
    assert player.x == pytest.approx(200.0 - player.speed)


def test_forward_blocked_by_wall():
    start_x = BLOCK + COLLISION + 1
    player = Player(x=float(start_x), y=200.0, angle=math.pi, key_up=True)
    player.move(get_map())
    assert player.x == start_x
    assert player.y == pytest.approx(200.0)


def test_strafe_directions():
    left = Player(x=200.0, y=200.0, angle=0.0, key_left=True)
    left.move(get_map())
    assert left.y == pytest.approx(200.0 + left.speed)
    assert left.x == pytest.approx(200.0)

    right = Player(x=200.0, y=200.0, angle=0.0, key_right=True)
    right.move(get_map())
    assert right.y == pytest.approx(200.0 - right.speed)


def test_walk_uses_heading_from_before_turn():
    player = Player(x=200.0, y=200.0, angle=0.0, key_up=True, rot_right=True)
    player.move(get_map())
    assert player.y == pytest.approx(200.0)
    assert player.x == pytest.approx(200.0 + player.speed)
    assert player.angle == pytest.approx(player.rot_speed)