"""Small helpers for tile grids."""

from __future__ import annotations

import math
from typing import Sequence


def create_grid(tile_size: int, tex_size: Sequence[int]) -> list[tuple[float, float]]:
    """Line endpoints, in pairs, outlining the tiles of a texture: rows first, then columns."""
    if tile_size <= 0:
        raise ValueError("tile size must be positive")
    width, height = tex_size
    points: list[tuple[float, float]] = []
    for row in range(height // tile_size):
        y = float(row * tile_size)
        points += [(0.0, y), (float(width), y)]
    for col in range(width // tile_size):
        x = float(col * tile_size)
        points += [(x, 0.0), (x, float(height))]
    return points


def map_vector_to_id(vec: Sequence[int], tile_size: int) -> int:
    """Map a tile coordinate to a tile index in a grid ``tile_size + 1`` tiles wide."""
    stride = tile_size + 1
    return int(math.fmod(vec[0], stride)) + vec[1] * stride