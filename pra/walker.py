"""
Walker class - a single agent growing a trail one step at a time.

Each step the walker looks for the smallest turn that lands on free space,
trying its preferred side first. When it is boxed in it restarts once from
its origin in the opposite heading, and stops for good the second time.
"""

import math
from enum import IntEnum
from typing import Optional, Tuple, TYPE_CHECKING

from .vector import Vector2D, rot2d, trans
from .profiling import profiler

if TYPE_CHECKING:
    from .scene import WalkerScene


class WalkerMode(IntEnum):
    INACTIVE = 0
    FORWARD = 1
    REVERSE = 2


DEFAULT_TURN_RESOLUTION = math.pi / 360


class Walker:
    __slots__ = (
        'position', 'direction', 'start_position', 'reverse_direction',
        'max_turn', 'turn_resolution', 'turn_preference', 'mode',
        'channel', 'color_group', 'color', 'index',
    )

    def __init__(
        self,
        position: Vector2D,
        direction: Vector2D,
        max_turn: float,
        turn_resolution: float = DEFAULT_TURN_RESOLUTION,
        turn_preference: int = 1,
        channel: int = 1,
        color_group: int = 1,
        color: Optional[str] = None,
    ):
        if turn_resolution <= 0:
            raise ValueError(f"turn_resolution must be positive, got {turn_resolution}")
        if turn_preference not in (1, -1):
            raise ValueError(f"turn_preference must be +1 or -1, got {turn_preference}")
        if direction.magnitude_squared == 0.0:
            raise ValueError("direction must be non-zero")
        direction = direction.normalize()

        self.position = position
        self.direction = direction
        self.start_position = position
        self.reverse_direction = -direction
        self.max_turn = max_turn
        self.turn_resolution = turn_resolution
        self.turn_preference = turn_preference
        self.mode = WalkerMode.FORWARD
        self.channel = channel
        self.color_group = color_group
        self.color = color
        self.index: Optional[int] = None

    @property
    def active(self) -> bool:
        return self.mode != WalkerMode.INACTIVE

    def find_candidate(self, scene: 'WalkerScene') -> Optional[Tuple[Vector2D, Vector2D]]:
        """
        Scan turns 0..max_turn on the preferred side, then on the other side.
        Returns (candidate, rotated_direction) for the first free spot, or None.
        """
        registry = scene.registry
        repulsion = scene.repulsion
        p = self.position
        d = self.direction
        tested = 0

        for sign in (1, -1):
            t = 0.0
            while t <= self.max_turn:
                rotated = trans(rot2d(self.turn_preference * sign * t), d)
                candidate = p + rotated
                tested += 1
                if not registry.is_blocked(candidate, p, repulsion):
                    if profiler.enabled:
                        profiler.record_search(tested, True)
                    return candidate, rotated
                t += self.turn_resolution

        if profiler.enabled:
            profiler.record_search(tested, False)
        return None

    def step(self, scene: 'WalkerScene'):
        if self.mode == WalkerMode.INACTIVE:
            return

        scene.recorder.record(self.index, self.position)

        found = self.find_candidate(scene)
        if found is None:
            scene.recorder.mark_break(self.index)
            if self.mode == WalkerMode.REVERSE:
                self.mode = WalkerMode.INACTIVE
                if profiler.enabled:
                    profiler.terminations += 1
                return
            self.position = self.start_position
            self.direction = self.reverse_direction
            self.mode = WalkerMode.REVERSE
            if profiler.enabled:
                profiler.reversals += 1
            return

        self.position, self.direction = found
        scene.registry.register_point(self.position)

    def __repr__(self) -> str:
        return f"Walker({self.position}, {self.mode.name.lower()}, group={self.color_group})"
