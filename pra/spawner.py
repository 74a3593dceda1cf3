"""
Population spawning: placement, headings, dropoff culling and color groups.

Random draws happen in a fixed order per candidate (position, heading, turn
preference, channel, dropoff) so that a seed string always reproduces the
same population.
"""

import math
from typing import List, Optional

import numpy as np

from .config import WalkerConfig
from .scene import WalkerScene
from .seeding import make_rng, resolve_seed
from .vector import Vector2D
from .walker import Walker


def _map_range(value: float, start1: float, stop1: float, start2: float, stop2: float) -> float:
    return start2 + (value - start1) * (stop2 - start2) / (stop1 - start1)


def dropoff_probability(position: Vector2D, size: float, rate: float, direction: str) -> float:
    """Chance of discarding a walker spawned at `position`, in [0, rate]."""
    if rate <= 0 or direction == 'none':
        return 0.0

    if direction == 'x-positive':
        return _map_range(position.x, -size, size, 0.0, rate)
    if direction == 'x-negative':
        return _map_range(position.x, size, -size, 0.0, rate)
    if direction == 'y-positive':
        return _map_range(position.y, -size, size, 0.0, rate)
    if direction == 'y-negative':
        return _map_range(position.y, size, -size, 0.0, rate)
    if direction == 'radial':
        max_distance = math.sqrt(2 * size * size)
        return _map_range(position.magnitude, 0.0, max_distance, 0.0, rate)

    raise ValueError(f"Unknown dropoff direction: {direction!r}")


def sector_group(vector: Vector2D) -> int:
    """Bucket the angle of `vector` into three equal sectors, numbered 1..3."""
    angle = math.atan2(vector.y, vector.x)
    choice = math.floor(_map_range(angle, -math.pi, math.pi, 0.0, 3.0))
    if choice <= 0:
        return 1
    if choice == 1:
        return 2
    return 3


def assign_color_group(color_mode: str, position: Vector2D, direction: Vector2D) -> int:
    if color_mode == 'single':
        return 1
    if color_mode == 'direction':
        return sector_group(direction)
    if color_mode == 'position':
        return sector_group(position)
    raise ValueError(f"Unknown color mode: {color_mode!r}")


class PopulationSpawner:
    def __init__(self, config: WalkerConfig, rng: np.random.Generator):
        self.config = config
        self.rng = rng
        self.candidates = 0
        self.dropped = 0

    def _sample_direction(self) -> Vector2D:
        # Redraw the (measure-zero) exact zero vector instead of dividing by zero
        while True:
            d = Vector2D(self.rng.uniform(-0.5, 0.5), self.rng.uniform(-0.5, 0.5))
            if d.magnitude_squared > 0.0:
                return d.normalize()

    def _sample_walker(self) -> Walker:
        cfg = self.config
        position = Vector2D(self.rng.uniform(-cfg.size, cfg.size), self.rng.uniform(-cfg.size, cfg.size))
        direction = self._sample_direction()
        turn_preference = 1 if self.rng.random() < 0.5 else -1
        channel = math.floor(self.rng.random() * cfg.channels) + 1
        return Walker(
            position,
            direction,
            cfg.max_turn,
            turn_resolution=cfg.turn_resolution,
            turn_preference=turn_preference,
            channel=channel,
        )

    def _dropped(self, walker: Walker) -> bool:
        cfg = self.config
        if cfg.dropoff_rate <= 0 or cfg.dropoff_direction == 'none':
            return False
        p = dropoff_probability(walker.position, cfg.size, cfg.dropoff_rate, cfg.dropoff_direction)
        return self.rng.random() < p

    def spawn(self, scene: WalkerScene) -> List[Walker]:
        """Create the configured number of candidates and add the survivors to `scene`."""
        cfg = self.config
        spawned = []
        self.candidates = cfg.total_candidates

        for _ in range(self.candidates):
            walker = self._sample_walker()

            if self._dropped(walker):
                self.dropped += 1
                continue

            walker.color_group = assign_color_group(cfg.color_mode, walker.position, walker.direction)
            walker.color = cfg.colors[walker.color_group - 1]

            spawned.append(scene.add_walker(walker))

        return spawned


def spawn_scene(config: WalkerConfig, rng: Optional[np.random.Generator] = None) -> WalkerScene:
    """
    Build a ready-to-step scene from `config`.
    An empty seed is resolved to a time-based one and stored on the scene's config.
    """
    if rng is None:
        config = config.with_seed(resolve_seed(config.seed))
        rng = make_rng(config.seed)

    scene = WalkerScene(config)
    spawner = PopulationSpawner(config, rng)
    spawner.spawn(scene)

    print(f"Initialized WalkerScene:")
    print(f"  Seed: {config.seed!r}")
    print(f"  Domain: [-{config.size}, {config.size}]")
    print(f"  Walkers: {len(scene.walkers)} of {spawner.candidates} candidates "
          f"({spawner.dropped} dropped)")

    return scene
