"""
Configuration for the Path Repulsion Algorithm.

One immutable value per simulation run; changing a parameter means building
a new config and a new scene.
"""

import math
from dataclasses import dataclass, replace
from typing import Tuple, Literal, get_args

DropoffDirection = Literal['none', 'x-positive', 'x-negative', 'y-positive', 'y-negative', 'radial']
ColorMode = Literal['single', 'direction', 'position']

DROPOFF_DIRECTIONS = get_args(DropoffDirection)
COLOR_MODES = get_args(ColorMode)


@dataclass(frozen=True)
class WalkerConfig:
    seed: str = ''                # Empty seed gives a different result each run

    size: int = 90                # Domain half size: walkers live in [-size, size]²
    population: float = 1.0       # Walker population multiplier per area
    channels: int = 1             # Number of pencils walkers are split across
    draw_channel: int = 1         # Channel shown in single color mode

    repulsion: float = 1.0        # Minimum distance between accepted points
    max_turn_deg: float = 180.0   # Largest turn tried per step
    turn_resolution: float = math.pi / 360  # Radians between tried turns

    # Spawn-time culling: 0 keeps everyone, 1 removes up to all walkers at the far side
    dropoff_rate: float = 0.0
    dropoff_direction: DropoffDirection = 'none'

    color_mode: ColorMode = 'direction'
    colors: Tuple[str, str, str] = ('#B8E0FF', '#6EAED5', '#FFCBA4')

    bin_size: float = 2.0
    grid_extent: float = 120.0

    log_interval: int = 100

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")
        if self.population < 0:
            raise ValueError(f"population must be non-negative, got {self.population}")
        if self.channels < 1:
            raise ValueError(f"channels must be at least 1, got {self.channels}")
        if not 1 <= self.draw_channel <= self.channels:
            raise ValueError(f"draw_channel must be in [1, {self.channels}], got {self.draw_channel}")
        if self.repulsion <= 0:
            raise ValueError(f"repulsion must be positive, got {self.repulsion}")
        if self.turn_resolution <= 0:
            raise ValueError(f"turn_resolution must be positive, got {self.turn_resolution}")
        if self.max_turn_deg < 0:
            raise ValueError(f"max_turn_deg must be non-negative, got {self.max_turn_deg}")
        if not 0.0 <= self.dropoff_rate <= 1.0:
            raise ValueError(f"dropoff_rate must be in [0, 1], got {self.dropoff_rate}")
        if self.dropoff_direction not in DROPOFF_DIRECTIONS:
            raise ValueError(
                f"dropoff_direction must be one of {DROPOFF_DIRECTIONS}, got {self.dropoff_direction!r}"
            )
        if self.color_mode not in COLOR_MODES:
            raise ValueError(f"color_mode must be one of {COLOR_MODES}, got {self.color_mode!r}")
        if len(self.colors) != 3:
            raise ValueError(f"exactly three colors are required, got {len(self.colors)}")
        if self.bin_size < self.repulsion:
            raise ValueError(
                f"bin_size ({self.bin_size}) must be at least the repulsion distance ({self.repulsion})"
            )
        if self.size + self.bin_size > self.grid_extent:
            raise ValueError(
                f"size {self.size} plus one bin of {self.bin_size} "
                f"does not fit in grid_extent {self.grid_extent}"
            )
        if self.log_interval < 1:
            raise ValueError(f"log_interval must be at least 1, got {self.log_interval}")
        # Lists from JSON would make the frozen config unhashable
        object.__setattr__(self, 'colors', tuple(self.colors))

    @property
    def max_turn(self) -> float:
        return math.radians(self.max_turn_deg)

    @property
    def population_multiplier(self) -> float:
        return self.population * self.population

    @property
    def total_candidates(self) -> int:
        return round(self.population_multiplier * self.size * self.size / 10)

    def with_seed(self, seed: str) -> 'WalkerConfig':
        return replace(self, seed=seed)

    @classmethod
    def from_pipeline(cls, pipeline_config) -> 'WalkerConfig':
        """Create WalkerConfig from PipelineConfig."""
        return cls(
            seed=pipeline_config.seed,
            size=pipeline_config.size,
            population=pipeline_config.population,
            channels=pipeline_config.channels,
            draw_channel=pipeline_config.draw_channel,
            repulsion=pipeline_config.repulsion,
            max_turn_deg=pipeline_config.max_turn_deg,
            turn_resolution=math.radians(pipeline_config.turn_resolution_deg),
            dropoff_rate=pipeline_config.dropoff_rate,
            dropoff_direction=pipeline_config.dropoff_direction,
            color_mode=pipeline_config.color_mode,
            colors=tuple(pipeline_config.colors),
            log_interval=pipeline_config.log_interval,
        )
