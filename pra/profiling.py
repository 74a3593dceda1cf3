"""
Growth counters for diagnosing slow or sparse runs.

Off by default. When enabled, the walker, registry and scene report what
the candidate search is doing: how many candidates were tested, what
blocked them, how often walkers reversed or stopped, and how long steps took.
The summary is printed at interpreter exit.
"""

import atexit
import time
from typing import Dict


class GrowthProfiler:
    def __init__(self):
        self.enabled = False
        self._exit_hook = False
        self.reset()

    def reset(self):
        self.candidates_tested = 0
        self.blocked_by_wall = 0
        self.blocked_by_neighbour = 0
        self.searches = 0
        self.failed_searches = 0
        self.points_accepted = 0
        self.reversals = 0
        self.terminations = 0
        self.steps = 0
        self.step_seconds = 0.0

    def enable(self, enabled: bool = True):
        self.enabled = enabled
        if enabled and not self._exit_hook:
            atexit.register(self.print_summary)
            self._exit_hook = True

    def record_search(self, tested: int, found: bool):
        self.searches += 1
        self.candidates_tested += tested
        if found:
            self.points_accepted += 1
        else:
            self.failed_searches += 1

    def record_step(self, elapsed: float):
        self.steps += 1
        self.step_seconds += elapsed

    def summary(self) -> Dict[str, float]:
        searches = max(self.searches, 1)
        return {
            'steps': self.steps,
            'searches': self.searches,
            'candidates_tested': self.candidates_tested,
            'candidates_per_search': self.candidates_tested / searches,
            'blocked_by_wall': self.blocked_by_wall,
            'blocked_by_neighbour': self.blocked_by_neighbour,
            'points_accepted': self.points_accepted,
            'failed_searches': self.failed_searches,
            'reversals': self.reversals,
            'terminations': self.terminations,
            'ms_per_step': self.step_seconds / max(self.steps, 1) * 1000,
        }

    def print_summary(self):
        if not self.searches:
            return

        print("\n" + "=" * 50)
        print("WALKER GROWTH PROFILE")
        print("=" * 50)
        for name, value in self.summary().items():
            if isinstance(value, float):
                print(f"{name:<28} {value:>18.3f}")
            else:
                print(f"{name:<28} {value:>18}")
        print("=" * 50)


profiler = GrowthProfiler()


def enable_profiling(enabled: bool = True):
    profiler.enable(enabled)


class timed_step:
    """Times one scene step into the profiler when profiling is on."""

    def __enter__(self):
        self.start = time.perf_counter() if profiler.enabled else None
        return self

    def __exit__(self, *args):
        if self.start is not None:
            profiler.record_step(time.perf_counter() - self.start)
