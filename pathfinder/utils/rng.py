"""Seeded random number generator for reproducible mazes."""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class SeededRNG:
    """Thin wrapper around random.Random that remembers its seed."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def set_seed(self, seed: Optional[int]):
        """Reseed, restarting the sequence."""
        self._seed = seed
        self._rng.seed(seed)

    def random(self) -> float:
        """Generate a random float in [0.0, 1.0)."""
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        """Generate a random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        return self._rng.choice(seq)


# Shared instance used when a generator is not given one
default_rng = SeededRNG()


def set_global_seed(seed: Optional[int]):
    """Set the seed for the shared RNG instance."""
    default_rng.set_seed(seed)
