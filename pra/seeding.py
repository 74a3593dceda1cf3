"""
Seed handling: turns a free-form seed string into a reproducible RNG.
"""

import time

import numpy as np

RANDOM_SEED_SENTINELS = ('', 'Empty seed is random.', 'Empty seed is random every run.')


def resolve_seed(seed: str) -> str:
    """Replace an empty or sentinel seed with the current time in milliseconds."""
    if seed is None or seed.strip() in RANDOM_SEED_SENTINELS:
        return str(int(time.time() * 1000))
    return seed


def hash_seed(seed: str) -> int:
    """
    32-bit signed string hash (h = 31*h + c over UTF-16 code units).
    Identical strings always give identical integers across runs and platforms.
    """
    data = seed.encode('utf-16-be')
    h = 0
    for i in range(0, len(data), 2):
        unit = (data[i] << 8) | data[i + 1]
        h = (h * 31 + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def make_rng(seed: str) -> np.random.Generator:
    return np.random.default_rng(hash_seed(seed) & 0xFFFFFFFF)
