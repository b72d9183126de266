"""The level map, the player and the geometry they share."""

import math
from dataclasses import dataclass

BLOCK = 64
"""Side of one map cell in world units (pixels of the top-down view)."""

COLLISION = 10
"""Clearance kept between the player and a wall along each axis."""

_LAYOUT = (
    "111111111111111111",
    "100000000000000001",
    "100000000000000001",
    "100000000000000001",
    "100000000100000001",
    "100000000000000001",
    "100000000000010001",
    "100000100000000001",
    "100000011000000001",
    "100000000000000001",
    "111111111111111111",
)


@dataclass(frozen=True)
class GameMap:
    """A grid of cells, one string per row; the character '1' is a wall."""

    rows: tuple

    def __post_init__(self):
        rows = tuple(self.rows)
        if not rows or not rows[0]:
            raise ValueError("a map needs at least one non-empty row")
        object.__setattr__(self, "rows", rows)

    @property
    def height(self):
        return len(self.rows)

    @property
    def width(self):
        """Width of the map, taken from its first row."""
        return len(self.rows[0])

    def walls(self):
        """Yield (col, row) for every wall cell, row by row."""
        for row, line in enumerate(self.rows):
            for col, cell in enumerate(line):
                if cell == "1":
                    yield col, row

    def touch_wall(self, px, py):
        """Whether the world point (px, py) lies in a wall or off the map."""
        col = int(px / BLOCK)
        row = int(py / BLOCK)
        if row < 0 or row >= self.height:
            return True
        line = self.rows[row]
        if col < 0 or col >= len(line):
            return True
        return line[col] == "1"

    def is_wall(self, col, row):
        """Whether the cell (col, row) stops a ray; cells off the map do."""
        if col < 0 or row < 0 or row >= self.height or col >= self.width:
            return True
        line = self.rows[row]
        return col >= len(line) or line[col] == "1"


def get_map():
    """Return the built-in level."""
    return GameMap(_LAYOUT)


def distance(dx, dy):
    """Length of the vector (dx, dy)."""
    return math.sqrt(dx * dx + dy * dy)


def fix_fish(player_angle, x1, y1, x2, y2):
    """Distance from (x1, y1) to (x2, y2) projected onto the view direction."""
    dx = x2 - x1
    dy = y2 - y1
    angle = math.atan2(dy, dx) - player_angle
    return distance(dx, dy) * math.cos(angle)


@dataclass
class Player:
    """Position, heading, speeds and the movement keys held down."""

    x: float = math.pi / 2
    y: float = math.pi / 2
    angle: float = math.pi / 2
    speed: float = 3.0
    rot_speed: float = 0.05
    key_up: bool = False
    key_down: bool = False
    key_left: bool = False
    key_right: bool = False
    rot_left: bool = False
    rot_right: bool = False

    def move(self, game_map):
        """Advance one frame: turn, then walk and strafe where no wall is hit.

        Walking uses the heading the player had at the start of the frame.
        """
        dx = math.cos(self.angle)
        dy = math.sin(self.angle)
        sx = math.cos(self.angle + math.pi / 2)
        sy = math.sin(self.angle + math.pi / 2)

        if self.rot_left:
            self.angle -= self.rot_speed
        if self.rot_right:
            self.angle += self.rot_speed
        if self.angle < 0:
            self.angle += 2 * math.pi
        if self.angle > 2 * math.pi:
            self.angle -= 2 * math.pi

        if self.key_up or self.key_down:
            self._step(game_map, dx, dy, 1.0 if self.key_up else -1.0)
        if self.key_left or self.key_right:
            self._step(game_map, sx, sy, -1.0 if self.key_right else 1.0)

    def _step(self, game_map, ux, uy, direction):
        new_x = self.x + ux * self.speed * direction
        new_y = self.y + uy * self.speed * direction
        if not game_map.touch_wall(new_x + COLLISION, self.y) and not game_map.touch_wall(
            new_x - COLLISION, self.y
        ):
            self.x = new_x
        if not game_map.touch_wall(self.x, new_y + COLLISION) and not game_map.touch_wall(
            self.x, new_y - COLLISION
        ):
            self.y = new_y