"""The demo game: a clickable circle that beeps and an animated sprite on the cursor."""

from __future__ import annotations

import math
from typing import Callable, Optional, Sequence, Tuple

import pygame

from sprite2d.animation import Animation
from sprite2d.mouse import Mouse
from sprite2d.render import WHITE, Canvas, texture_from_image
from sprite2d.sprite import Flip, Frame
from sprite2d.tga import TgaError, load_targa

GAME_TITLE = "mygl2d"
SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
BUTTON_RADIUS = 32
CURSOR_MARGIN = 68
MAN_SHEET_SIZE = (272, 68)
FRAME_DURATION = 0.1

BEEP_PATH = "sfx/beep.mp3"
CURSOR_IMAGE = "images/cursor.tga"
SPIN_IMAGE = "images/spin.tga"
MAN_IMAGE = "images/man.tga"

SPIN_FRAMES = (
    Frame(0, 0, 16, 16),
    Frame(16, 0, 16, 16),
    Frame(32, 0, 16, 16),
    Frame(48, 0, 16, 16),
)

MAN_FRAMES = (
    Frame(68, 0, 68, 68),
    Frame(136, 0, 68, 68),
    Frame(204, 0, 68, 68),
    Frame(136, 0, 68, 68),
)

TWO_PI = 2 * math.pi


def in_rect(x: int, y: int, rx: int, ry: int, w: int, h: int) -> bool:
    """Whether ``(x, y)`` lies in the rectangle, edges included."""
    return rx <= x <= rx + w and ry <= y <= ry + h


def in_circle(x: int, y: int, cx: int, cy: int, r: int) -> bool:
    """Whether ``(x, y)`` lies strictly inside the circle."""
    return (cx - x) ** 2 + (cy - y) ** 2 < r * r


def rotate_point(
    cx: float, cy: float, angle: float, x: float, y: float
) -> Tuple[float, float]:
    """Rotate ``(x, y)`` by ``angle`` radians about ``(cx, cy)``."""
    s = math.sin(angle)
    c = math.cos(angle)
    dx = x - cx
    dy = y - cy
    return dx * c - dy * s + cx, dx * s + dy * c + cy


def clamp_radians(angle: float) -> float:
    """Remove whole turns from an angle outside ``[-2*pi, 2*pi]``."""
    if angle < -TWO_PI or angle > TWO_PI:
        cycles = math.floor(angle / TWO_PI) if angle >= 0 else math.ceil(angle / TWO_PI)
        return angle - cycles * TWO_PI
    return angle


def clamp_cursor(
    x: int, y: int, width: int, height: int, margin: int
) -> Tuple[int, int]:
    """Keep a cursor of size ``margin`` inside a ``width`` by ``height`` screen."""
    x = max(x, 0)
    y = max(y, 0)
    x = min(x, width - margin)
    y = min(y, height - margin)
    return x, y


class Game:
    """State and per-frame logic of the demo, drawing onto a canvas."""

    def __init__(
        self,
        canvas: Canvas,
        man_texture: Optional[pygame.Surface] = None,
        play_sound: Optional[Callable[[], None]] = None,
        set_mouse_pos: Optional[Callable[[int, int], None]] = None,
        margin: int = CURSOR_MARGIN,
    ) -> None:
        self.canvas = canvas
        self.man_texture = man_texture
        self.play_sound = play_sound
        self.set_mouse_pos = set_mouse_pos
        self.margin = margin
        self.mouse = Mouse(0, 0)
        self.hold = False
        self.spin_animation = Animation(SPIN_FRAMES, FRAME_DURATION)
        self.man_animation = Animation(MAN_FRAMES, FRAME_DURATION)

    def update(
        self,
        delta_time: float,
        position: Tuple[int, int],
        buttons: Sequence[bool],
    ) -> None:
        """Sample the pointer and advance the sprite animation."""
        self.mouse.update(position, buttons)
        self.man_animation.update(delta_time)

    def draw(self) -> None:
        """Render one frame."""
        canvas = self.canvas
        centre_x = canvas.width // 2
        centre_y = canvas.height // 2
        canvas.clear()
        canvas.color = WHITE

        mouse = self.mouse
        if mouse.is_left_button_down and in_circle(
            mouse.x, mouse.y, centre_x, centre_y, BUTTON_RADIUS
        ):
            canvas.fill_circle(centre_x, centre_y, BUTTON_RADIUS)
            if not self.hold:
                if self.play_sound is not None:
                    self.play_sound()
                self.hold = True
        else:
            canvas.draw_circle(centre_x, centre_y, BUTTON_RADIUS)
            self.hold = False

        clamped = clamp_cursor(mouse.x, mouse.y, canvas.width, canvas.height, self.margin)
        if clamped != (mouse.x, mouse.y):
            mouse.x, mouse.y = clamped
            if self.set_mouse_pos is not None:
                self.set_mouse_pos(mouse.x, mouse.y)

        if self.man_texture is not None:
            canvas.draw_sprite(
                self.man_texture,
                self.man_animation.current(),
                mouse.x,
                mouse.y,
                Flip.NONE,
                0.0,
                0.0,
                0.0,
                1.0,
            )


def _load_texture(path: str) -> Optional[pygame.Surface]:
    try:
        return texture_from_image(load_targa(path))
    except TgaError as exc:
        print(exc)
        return None


def _sound_player(path: str) -> Callable[[], None]:
    sound: Optional[pygame.mixer.Sound] = None

    def play() -> None:
        nonlocal sound
        try:
            if sound is None:
                sound = pygame.mixer.Sound(path)
            sound.play()
        except (pygame.error, FileNotFoundError):
            pass

    return play


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until Escape or the window closes."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.FULLSCREEN)
        pygame.display.set_caption(GAME_TITLE)
        pygame.mouse.set_visible(False)

        _load_texture(CURSOR_IMAGE)
        _load_texture(SPIN_IMAGE)
        man = _load_texture(MAN_IMAGE)

        try:
            pygame.mixer.init()
        except pygame.error:
            return -1

        game = Game(
            Canvas(screen),
            man_texture=man,
            play_sound=_sound_player(BEEP_PATH),
            set_mouse_pos=lambda x, y: pygame.mouse.set_pos((x, y)),
        )

        last_time = 0.0
        running = True
        while running:
            current_time = pygame.time.get_ticks() / 1000.0
            delta_time = current_time - last_time
            last_time = current_time

            closed = any(event.type == pygame.QUIT for event in pygame.event.get())
            game.update(delta_time, pygame.mouse.get_pos(), pygame.mouse.get_pressed())
            game.draw()
            pygame.display.flip()

            running = not (closed or pygame.key.get_pressed()[pygame.K_ESCAPE])

        pygame.mixer.quit()
        return 0
    finally:
        pygame.quit()