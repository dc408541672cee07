# sprite2d

A small toolkit for 2D games on pygame, with a demo game built from it.

## Modules

- `sprite2d.tga`: reads Targa images.
  - `decode_targa(data)` parses the 18-byte header (`TgaHeader.from_bytes`).
    It accepts image types 2 and 10 and reads `width * height * channels`
    bytes directly after the header, where channels is bits per pixel divided
    by 8. It returns a `TgaImage` (`width`, `height`, `channels`, `pixels`,
    `mode`) with the order of the rows reversed.
  - `load_targa(path)` does the same for a file.
  - Unsupported image types, short headers, truncated pixel data and files
    that cannot be opened all raise `TgaError`.
  - `flip_rows` reverses the row order of a raw pixel buffer.
- `sprite2d.shapes`: vertex lists.
  - `rect_corners` gives the four corners of a rectangle.
  - `circle_outline` and `oval_outline` give 100 points around the edge.
  - `circle_fan` and `oval_fan` give the centre followed by 101 rim points
    that close the loop.
  - `polygon_vertices` returns the points, or an empty list when fewer than
    three are given.
- `sprite2d.sprite`: sprite geometry.
  - `Frame(x, y, w, h)` is a clip rectangle of a sprite sheet.
  - `Flip` holds the flags `NONE`, `H` and `V`.
  - `texture_coords` returns `(u1, v1, u2, v2)` for a clip, with v pointing up
    and the pairs swapped by the flip flags.
  - `rotate_about` rotates a point about a pivot and then offsets it.
  - `sprite_quad` returns a `Quad` with the rotated, scaled corners and their
    texture coordinates.
- `sprite2d.animation`: `Animation(frames, frame_duration=0.1)` is a looping
  frame sequence.
  - `update(delta_time)` adds to the elapsed time. Once `frame_duration` is
    reached it moves on one frame and resets the clock.
  - `current()` returns the frame to draw.
- `sprite2d.render`: drawing onto a pygame surface.
  - `Canvas(surface, color)` clears to black and draws points, lines,
    rectangles, circles, ovals and polygons, as outlines or filled, in its
    current `color`.
  - `draw_texture` blits a whole texture.
  - `draw_sprite` draws one clip, flipped, scaled and rotated.
  - `texture_from_image` turns a 3- or 4-channel `TgaImage` into a surface.
- `sprite2d.mouse`: `Mouse` keeps the pointer position and the state of the
  left and right buttons. `update(position, buttons)` takes the buttons in
  pygame's left, middle, right order.
- `sprite2d.game`: the demo.
  - Helpers: `in_rect`, `in_circle`, `rotate_point`, `clamp_radians` and
    `clamp_cursor`.
  - The `Game` class holds the demo's state.
  - `main()` runs the demo.

## Install

```
pip install .
```

## Example

```python
from sprite2d.animation import Animation
from sprite2d.sprite import Frame, Flip, sprite_quad

frames = [Frame(68, 0, 68, 68), Frame(136, 0, 68, 68),
          Frame(204, 0, 68, 68), Frame(136, 0, 68, 68)]
walk = Animation(frames, frame_duration=0.1)

walk.update(0.1)
quad = sprite_quad(272, 68, walk.current(), 100.0, 50.0,
                   Flip.NONE, 0.0, 0.0, 0.0, 1.0)
```

## Demo

```
sprite2d-demo
```

The demo opens a 640×480 fullscreen window and hides the system cursor. An
animated sprite follows the mouse and is kept inside the screen.

A circle sits in the middle of the window. While the left button is held
inside it, the circle is drawn filled. Pressing the button there plays
`sfx/beep.mp3` once per press.

Images are read from `images/` relative to the working directory. If an
image cannot be loaded, the error is printed and the sprite is not drawn. If
the sound mixer cannot start, the demo exits with -1. Press Esc or close the
window to quit.

## Limitations

- Targa pixel data is always read as uncompressed; run-length-encoded data is
  not decoded.
- The colour byte order is not changed, and the image ID field is not skipped.
- Sound is limited to what `pygame.mixer` can play.

## Tests

```
pip install .[test]
pytest
```