"""
Base renderer class defining the interface for all renderers.
"""

import cairo
import numpy as np
from abc import ABC, abstractmethod
from typing import Tuple

from config.render_config import RenderConfig
from .utils import hex_to_rgba


class Renderer(ABC):
    def __init__(self, config: RenderConfig):
        self.config = config

    def _prepare_context(self, ctx: cairo.Context, paint_background: bool = True):
        if self.config.antialiasing:
            ctx.set_antialias(cairo.ANTIALIAS_BEST)

        if paint_background:
            ctx.set_source_rgba(*hex_to_rgba(self.config.background_color))
            ctx.paint()

    def _create_surface(self) -> Tuple[cairo.ImageSurface, cairo.Context]:
        surface = cairo.ImageSurface(
            cairo.FORMAT_ARGB32,
            self.config.output_width,
            self.config.output_height
        )
        ctx = cairo.Context(surface)
        self._prepare_context(ctx)
        return surface, ctx

    def _surface_to_numpy(self, surface: cairo.ImageSurface) -> np.ndarray:
        surface.flush()
        height = surface.get_height()
        width = surface.get_width()
        stride = surface.get_stride()
        buf = surface.get_data()
        arr = np.ndarray(
            shape=(height, stride // 4, 4),
            dtype=np.uint8,
            buffer=buf
        )[:, :width, :]
        arr_copy = arr.copy()
        arr_rgba = np.zeros_like(arr_copy)
        arr_rgba[:, :, 0] = arr_copy[:, :, 2]  # R
        arr_rgba[:, :, 1] = arr_copy[:, :, 1]  # G
        arr_rgba[:, :, 2] = arr_copy[:, :, 0]  # B
        arr_rgba[:, :, 3] = arr_copy[:, :, 3]  # A
        return arr_rgba

    def _compute_scale(self, size: float, width: float, height: float) -> Tuple[float, float]:
        """Scale from simulation space [-size, size]² onto a width x height surface."""
        scale_x = width / (2 * size)
        scale_y = height / (2 * size)
        return scale_x, scale_y

    @abstractmethod
    def render_frame(self, *args, **kwargs) -> np.ndarray:
        pass

    @abstractmethod
    def render_animation(self, *args, **kwargs):
        pass
