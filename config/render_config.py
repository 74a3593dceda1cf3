"""
Configuration for rendering module.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

# Paper sizes in inches (width, height)
PAPER_FORMATS: Dict[str, Tuple[float, float]] = {
    'square': (8.5, 8.5),
    'letter-h': (11.0, 8.5),
    'letter-v': (8.5, 11.0),
}

# Cairo dash patterns in output units; solid has none
LINE_STYLES: Dict[str, Tuple[float, ...]] = {
    'solid': (),
    'dashed': (10.0, 5.0),
    'dotted': (2.0, 8.0),
}


@dataclass
class RenderConfig:
    paper_format: str = 'square'
    dpi: int = 96
    max_dimension: int = 800  # Largest raster side in pixels

    background_color: str = '#FFFFFF'
    line_width: float = 1.5
    line_style: str = 'solid'

    channel: Optional[int] = None  # Only draw this channel; None draws all

    antialiasing: bool = True

    def __post_init__(self):
        if self.paper_format not in PAPER_FORMATS:
            raise ValueError(f"paper_format must be one of {list(PAPER_FORMATS)}, got {self.paper_format!r}")
        if self.line_style not in LINE_STYLES:
            raise ValueError(f"line_style must be one of {list(LINE_STYLES)}, got {self.line_style!r}")

    @property
    def paper_size_px(self) -> Tuple[float, float]:
        """Paper size at `dpi`, used as the SVG document size."""
        w, h = PAPER_FORMATS[self.paper_format]
        return w * self.dpi, h * self.dpi

    @property
    def _scale(self) -> float:
        w, h = PAPER_FORMATS[self.paper_format]
        return self.max_dimension / (max(w, h) * self.dpi)

    @property
    def output_width(self) -> int:
        return round(PAPER_FORMATS[self.paper_format][0] * self.dpi * self._scale)

    @property
    def output_height(self) -> int:
        return round(PAPER_FORMATS[self.paper_format][1] * self.dpi * self._scale)

    @property
    def dash_pattern(self) -> Tuple[float, ...]:
        return LINE_STYLES[self.line_style]

    @classmethod
    def from_pipeline(cls, pipeline_config) -> 'RenderConfig':
        return cls(
            paper_format=pipeline_config.paper_format,
            background_color=pipeline_config.background_color,
            line_width=pipeline_config.line_width,
            line_style=pipeline_config.line_style,
            channel=pipeline_config.draw_channel if pipeline_config.color_mode == 'single' else None,
        )
