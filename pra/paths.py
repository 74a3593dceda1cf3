"""
PathRecorder - ordered visited points per walker, with break markers
separating disjoint strokes.
"""

from typing import List, Optional

from .vector import Vector2D

BREAK = None

PathEntry = Optional[Vector2D]


class PathRecorder:
    def __init__(self):
        self._paths: List[List[PathEntry]] = []

    def create(self) -> int:
        """Start an empty path and return its index."""
        self._paths.append([])
        return len(self._paths) - 1

    def record(self, index: int, point: Vector2D):
        self._paths[index].append(point)

    def mark_break(self, index: int):
        self._paths[index].append(BREAK)

    def __len__(self) -> int:
        return len(self._paths)

    def __getitem__(self, index: int) -> List[PathEntry]:
        return list(self._paths[index])

    def segments(self, index: int) -> List[List[Vector2D]]:
        """Split a walker's path at break markers into continuous strokes."""
        strokes = []
        current: List[Vector2D] = []
        for entry in self._paths[index]:
            if entry is BREAK:
                if current:
                    strokes.append(current)
                    current = []
            else:
                current.append(entry)
        if current:
            strokes.append(current)
        return strokes

    def point_count(self, index: Optional[int] = None) -> int:
        paths = self._paths if index is None else [self._paths[index]]
        return sum(1 for path in paths for entry in path if entry is not BREAK)

    def to_data(self, index: int) -> List[Optional[List[float]]]:
        """JSON-friendly form: [x, y] lists and None for breaks."""
        return [None if e is BREAK else e.to_list() for e in self._paths[index]]
