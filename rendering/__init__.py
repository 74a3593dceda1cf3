"""
Rendering module for plotter-ready output of walker paths.
Uses Cairo for resolution-independent vector graphics.
"""

from config.render_config import RenderConfig
from .walker_renderer import WalkerRenderer
from .exporters import (
    scene_to_data,
    export_walker_data,
    load_walker_data,
)
from .utils import hex_to_rgba, split_strokes
