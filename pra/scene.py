"""
WalkerScene - owns the spatial registry, the path recorder and every walker.

Walkers are stepped in creation order and register their points immediately,
so a walker later in the same round already sees what earlier walkers just
accepted. That ordering is part of the output and must not change.
"""

from collections import Counter
from typing import Callable, Dict, List, Optional

from .config import WalkerConfig
from .paths import PathRecorder
from .spatial import SpatialRegistry
from .walker import Walker, WalkerMode
from .profiling import timed_step


class WalkerScene:
    def __init__(self, config: WalkerConfig, registry: Optional[SpatialRegistry] = None):
        self.config = config
        self.registry = registry or SpatialRegistry(
            config.size, bin_size=config.bin_size, extent=config.grid_extent
        )
        self.recorder = PathRecorder()
        self.walkers: List[Walker] = []
        self.iteration = 0

    @property
    def repulsion(self) -> float:
        return self.config.repulsion

    def add_walker(self, walker: Walker) -> Walker:
        walker.index = self.recorder.create()
        self.walkers.append(walker)
        self.registry.register_point(walker.position)
        return walker

    def step(self):
        """Advance every walker once. Does nothing once all walkers are inactive."""
        if not self.has_active():
            return
        with timed_step():
            for walker in self.walkers:
                walker.step(self)
        self.iteration += 1

    def step_batch(self, n: int) -> bool:
        """
        Run up to `n` steps, stopping early when every walker is done.
        Returns True while there is still work left.
        """
        for _ in range(n):
            if not self.has_active():
                break
            self.step()
        return self.has_active()

    def has_active(self) -> bool:
        return any(w.mode != WalkerMode.INACTIVE for w in self.walkers)

    def run(
        self,
        max_steps: Optional[int] = None,
        callback: Optional[Callable[['WalkerScene', int], None]] = None,
    ) -> int:
        """
        Step until no walker is active (or `max_steps` is reached).
        Optional callback is called after each iteration with (scene, iteration).
        Returns the total number of iterations.
        """
        print(f"Starting growth with {len(self.walkers)} walkers...")

        while self.has_active():
            if max_steps is not None and self.iteration >= max_steps:
                break
            self.step()

            if callback:
                callback(self, self.iteration)

            if self.iteration % self.config.log_interval == 0:
                print(f"  Iteration {self.iteration}: {self.active_count} active walkers, "
                      f"{self.registry.point_count} points")

        if self.has_active():
            print(f"Growth stopped at step limit ({max_steps}) with {self.active_count} walkers still active")
        print(f"Growth complete after {self.iteration} iterations")
        print(f"  Points: {self.registry.point_count}")
        print(f"  Strokes: {sum(len(self.recorder.segments(w.index)) for w in self.walkers)}")

        return self.iteration

    @property
    def active_count(self) -> int:
        return sum(1 for w in self.walkers if w.active)

    def mode_counts(self) -> Dict[str, int]:
        counts = Counter(w.mode.name.lower() for w in self.walkers)
        return {mode.name.lower(): counts.get(mode.name.lower(), 0) for mode in WalkerMode}

