"""
Draw surface backed by a Cairo image.
"""

import math
from typing import Optional, Sequence, Tuple

import cairo
import numpy as np

from config.render_config import SurfaceConfig
from .base import DrawSurface, Color
from .utils import parse_color


class CairoSurface(DrawSurface):
    def __init__(self, config: Optional[SurfaceConfig] = None):
        self.config = config or SurfaceConfig()
        self.width = self.config.output_width
        self.height = self.config.output_height
        self.surface, self.ctx = self._create_surface()

    def _create_surface(self) -> Tuple[cairo.ImageSurface, cairo.Context]:
        surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, self.width, self.height)
        ctx = cairo.Context(surface)

        if self.config.antialiasing:
            ctx.set_antialias(cairo.ANTIALIAS_BEST)
        ctx.set_line_cap(cairo.LINE_CAP_ROUND)
        ctx.set_line_join(cairo.LINE_JOIN_ROUND)

        self._paint_background(ctx)
        return surface, ctx

    def _paint_background(self, ctx: cairo.Context):
        r, g, b, a = self.config.background_color
        ctx.save()
        ctx.set_operator(cairo.OPERATOR_SOURCE)
        ctx.set_source_rgba(r, g, b, a)
        ctx.paint()
        ctx.restore()

    def move_to(self, x: float, y: float):
        self.ctx.move_to(x, y)

    def line_to(self, x: float, y: float):
        self.ctx.line_to(x, y)

    def stroke(self, width: float, color: Color):
        # Cairo rejects negative widths
        self.ctx.set_line_width(max(width, 0.0))
        self.ctx.set_source_rgba(*parse_color(color))
        self.ctx.stroke()

    def stroke_circle(self, x: float, y: float, radius: float, color: Color, line_width: float = 1.0):
        self.ctx.new_path()
        self.ctx.arc(x, y, max(radius, 0.0), 0, 2 * math.pi)
        self.ctx.close_path()
        self.stroke(line_width, color)

    def fill_translucent_rect(self, rgb: Sequence[int], alpha: float):
        r, g, b = rgb
        self.ctx.new_path()
        self.ctx.set_source_rgba(r / 255, g / 255, b / 255, min(max(alpha, 0.0), 1.0))
        self.ctx.rectangle(0, 0, self.width, self.height)
        self.ctx.fill()

    def clear(self):
        self.ctx.new_path()
        self._paint_background(self.ctx)

    def get_dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    def set_dimensions(self, width: int, height: int):
        """Reallocate the image; like a canvas resize the content is lost."""
        self.width = max(int(width), 1)
        self.height = max(int(height), 1)
        self.surface, self.ctx = self._create_surface()

    def to_numpy(self) -> np.ndarray:
        """Return the current image as an (H, W, 4) RGBA uint8 array."""
        self.surface.flush()
        buf = self.surface.get_data()
        stride = self.surface.get_stride()
        arr = np.ndarray(
            shape=(self.height, stride // 4, 4),
            dtype=np.uint8,
            buffer=buf
        )[:, :self.width]
        arr_copy = arr.copy()
        arr_rgba = np.zeros_like(arr_copy)
        arr_rgba[:, :, 0] = arr_copy[:, :, 2]  # R
        arr_rgba[:, :, 1] = arr_copy[:, :, 1]  # G
        arr_rgba[:, :, 2] = arr_copy[:, :, 0]  # B
        arr_rgba[:, :, 3] = arr_copy[:, :, 3]  # A
        return arr_rgba

    def to_rgb(self) -> np.ndarray:
        return self.to_numpy()[:, :, :3].copy()
