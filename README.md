# raycaster

A small first-person maze viewer built on a classic raycasting engine. The
ceiling, floor and walls are drawn column by column into an in-memory image,
which is shown in a window through pygame.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Playing

```
raycaster
raycaster --debug
```

`--debug` starts with the debug overlay shown. The window is 1280x720 and
runs at up to 60 frames per second. Closing the window or pressing Esc ends
the game with exit code 0; if the window cannot be opened, `Error` and a
message are written to standard error and the exit code is 1.

Controls:

| Key          | Action                          |
|--------------|---------------------------------|
| W / S        | move forward / backward         |
| A / D        | strafe                          |
| Left / Right | turn                            |
| Tab          | toggle the debug overlay        |
| Esc          | quit                            |

Toggling the overlay prints `Debug mode: ON` or `Debug mode: OFF`. With the
overlay on, the map outline, a minimap, the player and every fiftieth cast
ray are drawn over the scene.

## Using the pieces as a library

- `raycaster.image.Image(width, height, bpp=32)` is a pixel buffer with rows
  padded to 32 bits, holding 0xRRGGBB colours blue byte first. It has
  `put_pixel` (points outside are ignored), `get_pixel` (raises `IndexError`
  outside), `clear`, `draw_square` and `draw_filled_square`.
- `raycaster.world` holds the built-in 18x11 map (`get_map()`), the
  `GameMap` collision tests (`touch_wall` for world points, `is_wall` for
  cells), the `Player`, whose `move(game_map)` applies one frame of turning,
  walking and strafing with wall collision, and the helpers `distance` and
  `fix_fish`.
- `raycaster.render` draws a whole frame with `draw_scene`, or its parts
  with `draw_ceiling_floor`, `cast_rays`, `draw_wall_column`, `draw_map` and
  `draw_minimap`; `wall_color` picks the shade of red for a wall hit.
- `raycaster.game.GameState` ties these together: feed it `Key` values with
  `key_press` / `key_release` and advance it with `tick`, which returns the
  drawn image. Pressing `Key.ESC` raises `GameExit`, which carries an exit
  code.
- `raycaster.xpm` reads XPM 3 images: `read_xpm_file(path)` for a file,
  `xpm_to_image(lines)` or `parse_xpm(lines)` for in-memory strings.
  Malformed input raises `XpmError`; transparent pixels become `0xFF000000`.
  The helpers `strip_comments`, `extract_strings`, `split_words` and
  `color_from_text` are available too.
- `raycaster.colors.lookup_color(name)` resolves X11 colour names such as
  `"sky blue"` or `"gray50"`, ignoring case; `"none"` gives -1 and an
  unknown name raises `KeyError`.
- `raycaster.visual` converts 24-bit colours for shallower pixel formats:
  `channel_shifts(red_mask, green_mask, blue_mask)` and
  `get_good_color(color, depth, shifts)`.

```python
from raycaster.game import GameState, Key

state = GameState(debug=False)
state.key_press(Key.W)
image = state.tick()
print(state.player.x, state.player.y, hex(image.get_pixel(0, 0)))
```

## What it does not do

- The map is fixed in code; there is no loading of level files.
- Walls are flat shades of red chosen by the face that was hit. The XPM
  reader produces images but the game does not use them as textures.
- Ceiling and floor colours are the built-in sky and ground colours; they
  cannot be set from the command line.