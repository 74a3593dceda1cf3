"""
Path Repulsion Algorithm (PRA) for organic, non-overlapping line trails.

Walkers grow trails step by step, refusing any point closer than the
repulsion distance to an already accepted point. Output is plotter-ready
stroke data in simulation coordinates.
"""

from .vector import Vector2D
from .spatial import SpatialRegistry
from .walker import Walker, WalkerMode
from .paths import PathRecorder, BREAK
from .scene import WalkerScene
from .spawner import PopulationSpawner, spawn_scene
from .config import WalkerConfig
from .seeding import resolve_seed, hash_seed, make_rng
from .visualization import visualize_paths, animate_growth, plot_walker_statistics

__all__ = [
    'Vector2D',
    'SpatialRegistry',
    'Walker',
    'WalkerMode',
    'PathRecorder',
    'BREAK',
    'WalkerScene',
    'PopulationSpawner',
    'spawn_scene',
    'WalkerConfig',
    'resolve_seed',
    'hash_seed',
    'make_rng',
    'visualize_paths',
    'animate_growth',
    'plot_walker_statistics',
]
