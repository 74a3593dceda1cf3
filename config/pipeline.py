"""
Unified configuration for the walker pipeline.

All output paths are derived from the run name.
This is the single source of truth for simulation, export and rendering.
"""

from dataclasses import dataclass, fields
from typing import Tuple
from pathlib import Path
import json


@dataclass
class PipelineConfig:
    """
    Unified configuration for the walker pipeline.
    All output paths are derived from run_name.
    """

    # ==================== MAIN SETTING ====================
    run_name: str = 'walkers'

    # ==================== OUTPUT SETTINGS ====================
    output_base: str = 'outputs'

    # ==================== SIMULATION SETTINGS ====================
    seed: str = ''
    size: int = 90
    population: float = 1.0
    channels: int = 1
    draw_channel: int = 1
    repulsion: float = 1.0
    max_turn_deg: float = 180.0
    turn_resolution_deg: float = 0.5
    dropoff_rate: float = 0.0
    dropoff_direction: str = 'none'  # none, x-positive, x-negative, y-positive, y-negative, radial

    # ==================== COLOR SETTINGS ====================
    color_mode: str = 'direction'  # 'single', 'direction' or 'position'
    colors: Tuple[str, str, str] = ('#B8E0FF', '#6EAED5', '#FFCBA4')
    background_color: str = '#FFFFFF'

    # ==================== RENDERING SETTINGS ====================
    paper_format: str = 'square'  # 'square', 'letter-h' or 'letter-v'
    line_style: str = 'solid'     # 'solid', 'dashed' or 'dotted'
    line_width: float = 1.5
    render_fps: int = 20
    steps_per_frame: int = 10
    render_animation: bool = False

    # ==================== MISC ====================
    max_steps: int = 5000
    log_interval: int = 100
    profile: bool = False

    # ==================== DERIVED PATHS ====================
    @property
    def output_dir(self) -> Path:
        return Path(self.output_base) / self.run_name

    @property
    def path_data_path(self) -> Path:
        return self.output_dir / f'{self.run_name}_paths.json'

    @property
    def metadata_path(self) -> Path:
        return self.output_dir / f'{self.run_name}_metadata.json'

    @property
    def preview_path(self) -> Path:
        return self.output_dir / f'{self.run_name}_preview.png'

    @property
    def stats_path(self) -> Path:
        return self.output_dir / f'{self.run_name}_stats.png'

    @property
    def render_path(self) -> Path:
        return self.output_dir / f'{self.run_name}_render.png'

    @property
    def animation_path(self) -> Path:
        return self.output_dir / f'{self.run_name}_growth.gif'

    def svg_path(self, color_group: int) -> Path:
        return self.output_dir / f'{self.run_name}_{color_group}_color.svg'

    # ==================== DIRECTORY CREATION ====================
    def create_output_dirs(self):
        """Create all output directories."""
        self.output_dir.mkdir(parents=True, exist_ok=True)


def load_config(path: str = 'config/pipeline.json') -> PipelineConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return PipelineConfig()

    with open(config_path, 'r') as f:
        data = json.load(f)

    known = {f.name for f in fields(PipelineConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown keys in {config_path}: {sorted(unknown)}")

    if 'colors' in data:
        data['colors'] = tuple(data['colors'])

    return PipelineConfig(**data)


def save_config(config: PipelineConfig, path: str = 'config/pipeline.json'):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {f.name: getattr(config, f.name) for f in fields(config)}
    data['colors'] = list(config.colors)

    with open(config_path, 'w') as f:
        json.dump(data, f, indent=2)

    print(f"Saved config to {config_path}")
