"""
Random letter pools for demos and benchmarks.

A pool is a string of lowercase letters drawn independently and uniformly
from 'a'..'z'. When no length is requested, the length itself is drawn
uniformly from [1, MAX_POOL_LENGTH] first.

PoolGenerator owns its RNG so callers can seed it (reproducible benchmark
runs) or hand in any random.Random-compatible object (fixed sequences in
tests).
"""

from __future__ import annotations
import random
from string import ascii_lowercase

ALPHABET = ascii_lowercase
MIN_POOL_LENGTH = 1
MAX_POOL_LENGTH = 200


class PoolGenerator:
    def __init__(self, seed: int | None = None, *, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def generate(self, length: int | None = None) -> str:
        if length is None:
            length = self.rng.randint(MIN_POOL_LENGTH, MAX_POOL_LENGTH)
        if not MIN_POOL_LENGTH <= length <= MAX_POOL_LENGTH:
            raise ValueError(
                f"pool length must be in [{MIN_POOL_LENGTH}, {MAX_POOL_LENGTH}]; got {length}")
        return "".join(self.rng.choice(ALPHABET) for _ in range(length))


def generate_pool(length: int | None = None, *, rng: random.Random | None = None) -> str:
    """
    Return `length` random lowercase letters (random length in [1, 200] if None).

    Raises ValueError for a length outside [1, 200].
    """
    return PoolGenerator(rng=rng).generate(length)
