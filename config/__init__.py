"""
Configuration module.
"""

from pra.config import WalkerConfig
from .pipeline import PipelineConfig, load_config, save_config
from .render_config import RenderConfig, PAPER_FORMATS, LINE_STYLES

__all__ = [
    'PipelineConfig',
    'load_config',
    'save_config',
    'WalkerConfig',
    'RenderConfig',
    'PAPER_FORMATS',
    'LINE_STYLES',
]
