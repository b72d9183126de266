"""Game state, keyboard handling and the window loop."""

import argparse
import sys
from enum import IntEnum

from .image import Image
from .render import HEIGHT, WIDTH, draw_scene
from .world import Player, get_map

TITLE = "cub3D"
FRAMES_PER_SECOND = 60


class Key(IntEnum):
    """Keys the game reacts to, by their X11 keysym."""

    W = 0x0077
    A = 0x0061
    S = 0x0073
    D = 0x0064
    LEFT = 0xFF51
    RIGHT = 0xFF53
    TAB = 0xFF09
    ESC = 0xFF1B


class GameExit(Exception):
    """Raised to end the game; carries the process exit code."""

    def __init__(self, code=0, message=None):
        super().__init__(message or f"game exited with code {code}")
        self.code = code
        self.message = message


_HELD_KEYS = {
    Key.W: "key_up",
    Key.S: "key_down",
    Key.A: "key_left",
    Key.D: "key_right",
    Key.LEFT: "rot_left",
    Key.RIGHT: "rot_right",
}


class GameState:
    """Everything one running game needs: frame buffer, map, player, mode."""

    def __init__(self, debug=False):
        self.image = Image(WIDTH, HEIGHT)
        self.game_map = get_map()
        self.player = Player()
        self.debug = bool(debug)

    def key_press(self, key):
        """React to a key going down; ESC raises GameExit(0)."""
        if key == Key.ESC:
            raise GameExit(0)
        attribute = _HELD_KEYS.get(key)
        if attribute is not None:
            setattr(self.player, attribute, True)
        elif key == Key.TAB:
            self.debug = not self.debug
            print(f"Debug mode: {'ON' if self.debug else 'OFF'}")

    def key_release(self, key):
        """React to a key coming up."""
        attribute = _HELD_KEYS.get(key)
        if attribute is not None:
            setattr(self.player, attribute, False)

    def tick(self):
        """Move the player, redraw the frame and return the image."""
        self.player.move(self.game_map)
        self.image.clear()
        draw_scene(self.image, self.player, self.game_map, self.debug)
        return self.image


def _report_error(message):
    sys.stderr.write("Error\n")
    if message:
        sys.stderr.write(f"{message}\n")


def _pygame_keys(pygame):
    return {
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_TAB: Key.TAB,
        pygame.K_ESCAPE: Key.ESC,
    }


def _run(state):
    import pygame

    try:
        pygame.init()
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
    except pygame.error as exc:
        raise GameExit(1, f"Error: window creation failed: {exc}") from None
    pygame.display.set_caption(TITLE)
    keys = _pygame_keys(pygame)
    clock = pygame.time.Clock()
    try:
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    raise GameExit(0)
                if event.type == pygame.KEYDOWN and event.key in keys:
                    state.key_press(keys[event.key])
                elif event.type == pygame.KEYUP and event.key in keys:
                    state.key_release(keys[event.key])
            image = state.tick()
            frame = pygame.image.frombuffer(
                bytes(image.data), (image.width, image.height), "BGRA"
            ).convert()
            screen.blit(frame, (0, 0))
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()


def main(argv=None):
    """Open the game window and play until it is closed; return the exit code."""
    parser = argparse.ArgumentParser(prog=TITLE, description="First-person maze view.")
    parser.add_argument("--debug", action="store_true", help="start with the overlays shown")
    args = parser.parse_args(argv)
    try:
        _run(GameState(debug=args.debug))
    except GameExit as stop:
        if stop.code:
            _report_error(stop.message)
        return stop.code
    return 0


if __name__ == "__main__":
    sys.exit(main())