from raycaster.image import Image
from raycaster.render import (
    GROUND_COLOR,
    SKY_COLOR,
    cast_rays,
    draw_ceiling_floor,
    draw_map,
    draw_minimap,
    draw_scene,
    draw_wall_column,
    wall_color,
)
from raycaster.world import BLOCK, GameMap, Player

WALL_COLORS = {0xAA0000, 0x880000, 0xFF0000, 0xDD0000}


def _pixels(image):
    return [image.get_pixel(x, y) for y in range(image.height) for x in range(image.width)]


def _small_room_player():
    game_map = GameMap(["111", "101", "111"])
    player = Player(x=BLOCK + 54.0, y=BLOCK + 32.0, angle=0.0)
    return game_map, player


def test_wall_color_vertical_faces():
    assert wall_color(float(BLOCK), 10.0) == 0xAA0000
    assert wall_color(float(BLOCK), 11.0) == 0x880000
    assert wall_color(BLOCK * 2 - 0.05, 10.0) == 0xAA0000


def test_wall_color_horizontal_faces():
    assert wall_color(100.0, BLOCK * 2 + 0.05) == 0xFF0000
    assert wall_color(100.0, 100.0) == 0xDD0000


def test_ceiling_floor_defaults():
    image = Image(8, 6)
    draw_ceiling_floor(image, 0, None)
    half = image.height // 2
    for y in range(image.height):
        expected = SKY_COLOR if y < half else GROUND_COLOR
        assert all(image.get_pixel(x, y) == expected for x in range(image.width))


def test_ceiling_floor_custom_colors():
    image = Image(5, 4, bpp=24)
    draw_ceiling_floor(image, 0x123456, 0x654321)
    assert image.get_pixel(4, 0) == 0x123456
    assert image.get_pixel(4, 3) == 0x654321


def test_wall_column_near_fills_column():
    image = Image(10, 48)
    draw_wall_column(image, 3, 1.0, 100.0, 100.0)
    assert all(image.get_pixel(3, y) == 0xDD0000 for y in range(image.height))
    assert all(image.get_pixel(2, y) == 0 for y in range(image.height))


def test_wall_column_far_is_short_and_centred():
    image = Image(10, 48)
    draw_wall_column(image, 3, 1000.0, 100.0, 100.0)
    middle = image.height // 2
    assert image.get_pixel(3, middle) == 0xDD0000
    assert image.get_pixel(3, middle - 1) == 0
    assert image.get_pixel(3, middle + 1) == 0


def test_wall_column_contiguous_and_symmetric():
    image = Image(4, 48)
    draw_wall_column(image, 1, 100.0, 100.0, 100.0)
    rows = [y for y in range(image.height) if image.get_pixel(1, y)]
    assert rows == list(range(rows[0], rows[-1] + 1))
    assert rows[0] + rows[-1] == 2 * (image.height // 2)
    assert 1 < len(rows) < image.height


def test_cast_rays_near_wall_fills_every_column():
    game_map, player = _small_room_player()
    image = Image(32, 24)
    cast_rays(image, player, game_map, False)
    for x in range(image.width):
        assert image.get_pixel(x, 0) in WALL_COLORS
        assert image.get_pixel(x, image.height - 1) in WALL_COLORS


def test_cast_rays_out_of_range_draws_nothing():
    game_map = GameMap(["11111", "10001", "10001", "10001", "11111"])
    player = Player(x=160.0, y=160.0, angle=0.0)
    image = Image(16, 12)
    cast_rays(image, player, game_map, False)
    assert set(_pixels(image)) == {0}


def test_cast_rays_debug_traces_rays():
    game_map, player = _small_room_player()
    plain = Image(200, 150)
    cast_rays(plain, player, game_map, False)
    traced = Image(200, 150)
    cast_rays(traced, player, game_map, True)
    assert 0x00FF00 not in _pixels(plain)
    assert 0x00FF00 in _pixels(traced)


def test_draw_map_outlines_walls():
    image = Image(2 * BLOCK, 2 * BLOCK)
    draw_map(image, GameMap(["10", "01"]))
    assert image.get_pixel(0, 0) == 0xFFFFFF
    assert image.get_pixel(BLOCK - 1, BLOCK - 1) == 0xFFFFFF
    assert image.get_pixel(BLOCK // 2, BLOCK // 2) == 0
    assert image.get_pixel(BLOCK + 1, 1) == 0
    assert image.get_pixel(BLOCK, BLOCK) == 0xFFFFFF


def test_draw_minimap_blocks_and_player():
    image = Image(32, 32)
    player = Player(x=100.0, y=100.0)
    draw_minimap(image, GameMap(["10", "01"]), player)
    block = int(BLOCK * 0.1)
    assert image.get_pixel(0, 0) == 0xFFFFFF
    assert image.get_pixel(block - 1, block - 1) == 0xFFFFFF
    assert image.get_pixel(block, 0) == 0
    marker_x = int(player.x * 0.1)
    assert image.get_pixel(marker_x, marker_x) == 0xFF0000
    assert image.get_pixel(marker_x - 2, marker_x - 2) == 0xFF0000
    assert image.get_pixel(marker_x + 2, marker_x + 2) == 0xFFFFFF


def test_draw_scene_without_debug():
    game_map = GameMap(["11111", "10001", "10001", "10001", "11111"])
    player = Player(x=160.0, y=160.0, angle=0.0)
    image = Image(16, 12)
    draw_scene(image, player, game_map, False)
    assert image.get_pixel(0, 0) == SKY_COLOR
    assert image.get_pixel(15, 11) == GROUND_COLOR


def test_draw_scene_debug_overlays():
    game_map, player = _small_room_player()
    image = Image(200, 150)
    draw_scene(image, player, game_map, True)
    px, py = int(player.x), int(player.y)
    assert image.get_pixel(px - 4, py - 4) == 0x00FF00
    assert image.get_pixel(px + 12, py) == 0xFFFF00
    assert image.get_pixel(0, 0) == 0xFFFFFF