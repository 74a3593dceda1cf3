"""
Rendering utility functions.
"""

from typing import List, Optional, Sequence, Tuple


def hex_to_rgba(color: str, alpha: float = 1.0) -> Tuple[float, float, float, float]:
    """'#RRGGBB' (or '#RGB') to an (r, g, b, a) tuple in [0, 1]."""
    value = color.lstrip('#')
    if len(value) == 3:
        value = ''.join(c * 2 for c in value)
    if len(value) != 6:
        raise ValueError(f"Expected a hex color like '#B8E0FF', got {color!r}")
    r, g, b = (int(value[i:i + 2], 16) / 255.0 for i in (0, 2, 4))
    return r, g, b, alpha


def split_strokes(path: Sequence[Optional[Sequence[float]]]) -> List[List[Tuple[float, float]]]:
    """Split an exported path ([x, y] entries and None breaks) into strokes."""
    strokes = []
    current = []
    for entry in path:
        if entry is None:
            if current:
                strokes.append(current)
                current = []
            continue
        current.append((entry[0], entry[1]))
    if current:
        strokes.append(current)
    return strokes
