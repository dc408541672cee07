"""Drawing primitives, textures and sprites onto a pygame surface."""

from __future__ import annotations

import math
from typing import Iterable, Sequence, Tuple

import pygame

from sprite2d.shapes import (
    circle_fan,
    circle_outline,
    oval_fan,
    oval_outline,
    polygon_vertices,
    rect_corners,
)
from sprite2d.sprite import Flip, Frame, sprite_quad, texture_coords
from sprite2d.tga import TgaImage

Color = Tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)


def texture_from_image(image: TgaImage) -> pygame.Surface:
    """Build a surface from decoded Targa pixels, first row at the top."""
    if image.channels not in (3, 4):
        raise ValueError(
            f"unsupported channel count {image.channels}; expected 3 or 4"
        )
    expected = image.width * image.height * image.channels
    if len(image.pixels) != expected:
        raise ValueError(
            f"expected {expected} bytes of pixels, got {len(image.pixels)}"
        )
    surface = pygame.image.frombuffer(
        image.pixels, (image.width, image.height), image.mode
    )
    return surface.copy()


class Canvas:
    """A drawing target with a current colour, in screen pixels, y pointing down."""

    def __init__(self, surface: pygame.Surface, color: Sequence[int] = WHITE) -> None:
        self.surface = surface
        self.color = tuple(color)

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def clear(self) -> None:
        """Fill the whole canvas with opaque black."""
        self.surface.fill(BLACK)

    def draw_point(self, x: int, y: int) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.surface.set_at((x, y), self.color)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        pygame.draw.line(self.surface, self.color, (x1, y1), (x2, y2), 1)

    def _loop(self, points: Sequence[Tuple[int, int]]) -> None:
        if len(points) >= 2:
            pygame.draw.lines(self.surface, self.color, True, list(points), 1)

    def _fill(self, points: Sequence[Tuple[int, int]]) -> None:
        if len(points) >= 3:
            pygame.draw.polygon(self.surface, self.color, list(points))

    def draw_rect(self, x: int, y: int, w: int, h: int) -> None:
        self._loop(rect_corners(x, y, w, h))

    def fill_rect(self, x: int, y: int, w: int, h: int) -> None:
        self._fill(rect_corners(x, y, w, h))

    def draw_circle(self, cx: int, cy: int, r: int) -> None:
        self._loop(circle_outline(cx, cy, r))

    def fill_circle(self, cx: int, cy: int, r: int) -> None:
        self._fill(circle_fan(cx, cy, r)[1:])

    def draw_oval(self, cx: int, cy: int, rx: int, ry: int) -> None:
        self._loop(oval_outline(cx, cy, rx, ry))

    def fill_oval(self, cx: int, cy: int, rx: int, ry: int) -> None:
        self._fill(oval_fan(cx, cy, rx, ry)[1:])

    def draw_polygon(self, points: Iterable[Tuple[int, int]]) -> None:
        """Outline a polygon; fewer than three points draw nothing."""
        self._loop(polygon_vertices(points))

    def fill_polygon(self, points: Iterable[Tuple[int, int]]) -> None:
        """Fill a polygon; fewer than three points draw nothing."""
        self._fill(polygon_vertices(points))

    def draw_texture(self, texture: pygame.Surface, pos_x: float, pos_y: float) -> None:
        """Blit a whole texture with its top-left corner at ``pos``."""
        self.surface.blit(texture, (round(pos_x), round(pos_y)))

    def draw_sprite(
        self,
        texture: pygame.Surface,
        clip: Frame,
        pos_x: float,
        pos_y: float,
        flip: Flip = Flip.NONE,
        rotation: float = 0.0,
        pivot_x: float = 0.0,
        pivot_y: float = 0.0,
        scale: float = 1.0,
    ) -> None:
        """Draw ``clip`` of ``texture`` flipped, scaled and rotated about the pivot."""
        tex_width, tex_height = texture.get_size()
        quad = sprite_quad(
            tex_width, tex_height, clip, pos_x, pos_y,
            flip, rotation, pivot_x, pivot_y, scale,
        )
        if scale == 0 or clip.w <= 0 or clip.h <= 0:
            return

        u1, v1, u2, v2 = texture_coords(tex_width, tex_height, clip)
        left = round(min(u1, u2) * tex_width)
        top = round(min(v1, v2) * tex_height)
        source = pygame.Rect(left, top, clip.w, clip.h).clip(texture.get_rect())
        if source.width == 0 or source.height == 0:
            return
        image = texture.subsurface(source).copy()

        flip = Flip(flip)
        flip_x = bool(flip & Flip.H)
        flip_y = bool(flip & Flip.V)
        if scale < 0:
            flip_x, flip_y = not flip_x, not flip_y
        if flip_x or flip_y:
            image = pygame.transform.flip(image, flip_x, flip_y)

        magnitude = abs(scale)
        if magnitude != 1:
            size = (
                max(1, round(image.get_width() * magnitude)),
                max(1, round(image.get_height() * magnitude)),
            )
            image = pygame.transform.scale(image, size)

        if rotation:
            image = pygame.transform.rotate(image, -math.degrees(rotation))

        centre_x = sum(x for x, _ in quad.vertices) / 4
        centre_y = sum(y for _, y in quad.vertices) / 4
        top_left = (
            round(centre_x - image.get_width() / 2),
            round(centre_y - image.get_height() / 2),
        )
        self.surface.blit(image, top_left)