"""Drawing the first-person view and the debug overlays into an Image."""

import math

from .world import BLOCK

WIDTH = 1280
HEIGHT = 720

SKY_COLOR = 0x87CEEB
GROUND_COLOR = 0x8B4513
MAP_COLOR = 0xFFFFFF
RAY_COLOR = 0x00FF00
HIT_COLOR = 0xFF0000
PLAYER_COLOR = 0x00FF00
HEADING_COLOR = 0xFFFF00
MINIMAP_PLAYER_COLOR = 0xFF0000

FIELD_OF_VIEW = math.pi / 3
RAY_STEP = 0.1
MAX_RAY_DISTANCE = 20
DEBUG_RAY_SPACING = 50
MINIMAP_SCALE = 0.1
HEADING_LENGTH = 20


def wall_color(ray_x, ray_y):
    """Shade of red for a wall hit at (ray_x, ray_y), by the face that was hit."""
    cell_x = int(ray_x / BLOCK)
    if abs(ray_x - cell_x * BLOCK) < 0.1 or abs(ray_x - (cell_x + 1) * BLOCK) < 0.1:
        return 0xAA0000 if int(ray_y) % 2 == 0 else 0x880000
    if abs(ray_y - int(ray_y / BLOCK) * BLOCK) < 0.1:
        return 0xFF0000
    return 0xDD0000


def _fill_rows(image, top, bottom, color):
    opp = image.bytes_per_pixel
    span = image.width * opp
    channels = (color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF)
    for y in range(top, bottom):
        start = y * image.size_line
        for offset, value in enumerate(channels):
            image.data[start + offset:start + span:opp] = bytes([value]) * image.width


def draw_ceiling_floor(image, ceiling_color, floor_color):
    """Paint the top half with the ceiling colour and the bottom with the floor.

    A colour of 0 or None selects the default sky or ground colour.
    """
    half = image.height // 2
    _fill_rows(image, 0, half, ceiling_color or SKY_COLOR)
    _fill_rows(image, half, image.height, floor_color or GROUND_COLOR)


def draw_wall_column(image, x, corrected_dist, ray_x, ray_y):
    """Draw column x of a wall seen at corrected_dist, centred vertically."""
    height = image.height
    wall_height = min(int(height / corrected_dist * BLOCK / 2), height)
    start_y = max(height // 2 - wall_height // 2, 0)
    end_y = min(height // 2 + wall_height // 2, height - 1)
    color = wall_color(ray_x, ray_y)
    for y in range(start_y, end_y + 1):
        image.put_pixel(x, y, color)


def cast_rays(image, player, game_map, debug):
    """Cast one ray per image column across the field of view.

    Rays march in small steps up to a short range; a ray that reaches a wall
    draws its column. In debug mode every fiftieth ray is traced on the image.
    """
    for x in range(image.width):
        ray_angle = player.angle - FIELD_OF_VIEW / 2 + (x / image.width) * FIELD_OF_VIEW
        cos_a = math.cos(ray_angle)
        sin_a = math.sin(ray_angle)
        trace = debug and x % DEBUG_RAY_SPACING == 0
        dist = 0.0
        while dist < MAX_RAY_DISTANCE:
            dist += RAY_STEP
            ray_x = player.x + cos_a * dist
            ray_y = player.y + sin_a * dist
            if trace:
                image.put_pixel(ray_x, ray_y, RAY_COLOR)
            if game_map.is_wall(int(ray_x / BLOCK), int(ray_y / BLOCK)):
                corrected = dist * math.cos(ray_angle - player.angle)
                draw_wall_column(image, x, corrected, ray_x, ray_y)
                if trace:
                    for ox, oy in ((0, 0), (1, 0), (0, 1), (1, 1)):
                        image.put_pixel(ray_x + ox, ray_y + oy, HIT_COLOR)
                break


def draw_map(image, game_map):
    """Outline every wall cell at full scale."""
    for col, row in game_map.walls():
        image.draw_square(col * BLOCK, row * BLOCK, BLOCK, MAP_COLOR)


def draw_minimap(image, game_map, player):
    """Draw the walls as filled squares at a tenth of the scale, with the player."""
    block_size = int(BLOCK * MINIMAP_SCALE)
    for col, row in game_map.walls():
        image.draw_filled_square(col * block_size, row * block_size, block_size, MAP_COLOR)
    px = int(player.x * MINIMAP_SCALE)
    py = int(player.y * MINIMAP_SCALE)
    image.draw_filled_square(px - 2, py - 2, 4, MINIMAP_PLAYER_COLOR)


def draw_scene(image, player, game_map, debug):
    """Render one frame: background, walls and, in debug mode, the overlays."""
    draw_ceiling_floor(image, 0, 0)
    cast_rays(image, player, game_map, debug)
    if debug:
        draw_map(image, game_map)
        draw_minimap(image, game_map, player)
        image.draw_filled_square(player.x - 5, player.y - 5, 10, PLAYER_COLOR)
        for i in range(HEADING_LENGTH):
            px = player.x + math.cos(player.angle) * i
            py = player.y + math.sin(player.angle) * i
            image.put_pixel(px, py, HEADING_COLOR)