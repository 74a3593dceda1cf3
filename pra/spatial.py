"""
Spatial partitioning for repulsion queries.

Every accepted point is copied into its own bin and the 8 surrounding bins,
so a proximity query only has to scan the single bin containing the query
point. Bin size must be at least the repulsion threshold for this to find
every neighbour.
"""

import math
from typing import Dict, List, Optional, Tuple

from .vector import Vector2D
from .profiling import profiler

BinKey = Tuple[int, int]

_NEIGHBOURHOOD = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)]


class SpatialRegistry:
    """Dense bin grid over [-extent, extent]² with redundant 3x3 registration."""

    def __init__(self, half_size: float, bin_size: float = 2.0, extent: float = 120.0):
        if bin_size <= 0:
            raise ValueError(f"bin_size must be positive, got {bin_size}")
        if half_size <= 0:
            raise ValueError(f"half_size must be positive, got {half_size}")
        if half_size + bin_size > extent:
            raise ValueError(
                f"domain half size {half_size} (+ one bin of {bin_size}) "
                f"does not fit in grid extent {extent}"
            )

        self.half_size = float(half_size)
        self.bin_size = float(bin_size)
        self.extent = float(extent)

        self._min_bin = math.floor(-self.extent / self.bin_size)
        self._max_bin = math.floor(self.extent / self.bin_size)
        self._bins: Dict[BinKey, List[Vector2D]] = {
            (ix, iy): []
            for ix in range(self._min_bin, self._max_bin + 1)
            for iy in range(self._min_bin, self._max_bin + 1)
        }
        self.point_count = 0

    def bin_index(self, p: Vector2D) -> BinKey:
        return math.floor(p.x / self.bin_size), math.floor(p.y / self.bin_size)

    def in_domain(self, p: Vector2D) -> bool:
        s = self.half_size
        return -s <= p.x <= s and -s <= p.y <= s

    def register_point(self, p: Vector2D):
        ix, iy = self.bin_index(p)
        for dx, dy in _NEIGHBOURHOOD:
            bucket = self._bins.get((ix + dx, iy + dy))
            if bucket is not None:
                bucket.append(p)
        self.point_count += 1

    def is_blocked(self, p: Vector2D, excluding: Optional[Vector2D], threshold: float) -> bool:
        """
        True when `p` lies outside the domain or within `threshold` of any
        registered point other than those exactly equal to `excluding`.
        """
        if not self.in_domain(p):
            if profiler.enabled:
                profiler.blocked_by_wall += 1
            return True

        threshold_sq = threshold * threshold
        px, py = p.x, p.y
        for q in self._bins[self.bin_index(p)]:
            if q == excluding:
                continue
            dx = q.x - px
            dy = q.y - py
            if dx * dx + dy * dy < threshold_sq:
                if profiler.enabled:
                    profiler.blocked_by_neighbour += 1
                return True
        return False

    def points_in_bin(self, key: BinKey) -> List[Vector2D]:
        return list(self._bins.get(key, ()))

    @property
    def bin_count(self) -> int:
        return len(self._bins)

    @property
    def stored_count(self) -> int:
        return sum(len(b) for b in self._bins.values())
