"""Drawing shapes onto a pygame surface through a movable camera view."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import pygame

from .builtin_components import WHITE, Rectangle

VIEW_SIZE = (640.0, 480.0)


class RenderTarget:
    """A surface to draw on, with a view mapping world coordinates to pixels."""

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self.reset_view()

    def set_view(self, transform: Any) -> None:
        """Centre a 640 by 480 view on the transform's position."""
        width, height = VIEW_SIZE
        self._view = (transform.pos[0] - width / 2, transform.pos[1] - height / 2, width, height)

    def reset_view(self) -> None:
        width, height = self._surface.get_size()
        self._view = (0.0, 0.0, float(width), float(height))

    def _to_screen(self, x: float, y: float) -> tuple[float, float]:
        left, top, width, height = self._view
        screen_width, screen_height = self._surface.get_size()
        return ((x - left) * screen_width / width, (y - top) * screen_height / height)

    def draw_lines(self, vertices: Iterable[Sequence[float]]) -> None:
        """Draw a line for each consecutive pair of vertices."""
        points = iter(vertices)
        for start, end in zip(points, points):
            pygame.draw.line(
                self._surface,
                WHITE[:3],
                self._to_screen(start[0], start[1]),
                self._to_screen(end[0], end[1]),
            )

    def draw(self, shape: Rectangle) -> None:
        x0, y0 = self._to_screen(shape.position[0], shape.position[1])
        x1, y1 = self._to_screen(
            shape.position[0] + shape.size[0], shape.position[1] + shape.size[1]
        )
        area = pygame.Rect(round(x0), round(y0), round(x1 - x0), round(y1 - y0))
        if area.width > 0 and area.height > 0:
            if shape.texture is not None:
                self._blit_texture(shape, area)
            else:
                self._fill(shape.fill_color, area)
        thickness = round(shape.outline_thickness)
        if thickness > 0:
            outer = area.inflate(2 * thickness, 2 * thickness)
            pygame.draw.rect(self._surface, shape.outline_color[:3], outer, width=thickness)

    def _blit_texture(self, shape: Rectangle, area: pygame.Rect) -> None:
        source = shape.texture.surface
        region = pygame.Rect(*shape.texture_rect.to_list()).clip(source.get_rect())
        if region.width == 0 or region.height == 0:
            return
        image = pygame.transform.scale(source.subsurface(region), area.size)
        self._surface.blit(image, area)

    def _fill(self, color: Sequence[int], area: pygame.Rect) -> None:
        alpha = color[3] if len(color) > 3 else 255
        if alpha >= 255:
            pygame.draw.rect(self._surface, tuple(color[:3]), area)
        elif alpha > 0:
            overlay = pygame.Surface(area.size, pygame.SRCALPHA)
            overlay.fill(tuple(color))
            self._surface.blit(overlay, area)

    def draw_all(self, shapes: Iterable[Rectangle]) -> None:
        for shape in shapes:
            self.draw(shape)

    def size(self) -> tuple[int, int]:
        width, height = self._surface.get_size()
        return (int(width), int(height))

    @property
    def surface(self) -> pygame.Surface:
        return self._surface