"""Geometry for drawing a clipped, flipped, rotated and scaled sprite."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Tuple

Vertex = Tuple[float, float]
TexCoord = Tuple[float, float]


@dataclass(frozen=True)
class Frame:
    """A rectangle of a sprite sheet, in pixels from its top-left corner."""

    x: int
    y: int
    w: int
    h: int


class Flip(enum.IntFlag):
    """Mirroring applied to a sprite's texture."""

    NONE = 0
    H = 1 << 0
    V = 1 << 1


@dataclass(frozen=True)
class Quad:
    """Four screen vertices paired with their texture coordinates.

    Corners run top-left, top-right, bottom-right, bottom-left of the
    unrotated sprite.
    """

    vertices: Tuple[Vertex, Vertex, Vertex, Vertex]
    tex_coords: Tuple[TexCoord, TexCoord, TexCoord, TexCoord]


def texture_coords(
    tex_width: int, tex_height: int, clip: Frame, flip: Flip = Flip.NONE
) -> Tuple[float, float, float, float]:
    """Return ``(u1, v1, u2, v2)`` for ``clip`` with the v axis pointing up.

    A horizontal flip swaps the u pair, a vertical flip the v pair.
    """
    if tex_width <= 0 or tex_height <= 0:
        raise ValueError(
            f"texture size must be positive, got {tex_width}x{tex_height}"
        )
    u1 = clip.x / tex_width
    v1 = (tex_height - (clip.y + clip.h)) / tex_height
    u2 = (clip.x + clip.w) / tex_width
    v2 = (tex_height - clip.y) / tex_height
    flip = Flip(flip)
    if flip & Flip.H:
        u1, u2 = u2, u1
    if flip & Flip.V:
        v1, v2 = v2, v1
    return u1, v1, u2, v2


def rotate_about(
    x: float,
    y: float,
    pivot_x: float,
    pivot_y: float,
    rotation: float,
    pos_x: float,
    pos_y: float,
) -> Vertex:
    """Rotate ``(x, y)`` by ``rotation`` radians about the pivot, then move it by ``pos``."""
    cos_r = math.cos(rotation)
    sin_r = math.sin(rotation)
    dx = x - pivot_x
    dy = y - pivot_y
    return (
        cos_r * dx - sin_r * dy + pos_x + pivot_x,
        sin_r * dx + cos_r * dy + pos_y + pivot_y,
    )


def sprite_quad(
    tex_width: int,
    tex_height: int,
    clip: Frame,
    pos_x: float,
    pos_y: float,
    flip: Flip = Flip.NONE,
    rotation: float = 0.0,
    pivot_x: float = 0.0,
    pivot_y: float = 0.0,
    scale: float = 1.0,
) -> Quad:
    """Build the textured quad that draws ``clip`` of a texture at ``pos``."""
    u1, v1, u2, v2 = texture_coords(tex_width, tex_height, clip, flip)
    width = clip.w * scale
    height = clip.h * scale
    corners = ((0.0, 0.0), (width, 0.0), (width, height), (0.0, height))
    vertices = tuple(
        rotate_about(cx, cy, pivot_x, pivot_y, rotation, pos_x, pos_y)
        for cx, cy in corners
    )
    tex = ((u1, v1), (u2, v1), (u2, v2), (u1, v2))
    return Quad(vertices=vertices, tex_coords=tex)