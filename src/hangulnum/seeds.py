"""
Seed providers for encode().

A seed provider is any zero-argument callable returning an int in
[0, 128). The scramble seed only varies how an encoding looks, so none of
these are cryptographically secure.
"""

import random
import time
from typing import Callable

from .config import ALPHABET_SIZE

SeedProvider = Callable[[], int]


def time_seed() -> int:
    """Seed from the sub-second part of the wall clock."""
    return time.time_ns() % ALPHABET_SIZE


def random_seed() -> int:
    """Seed from the module-level PRNG."""
    return random.randrange(ALPHABET_SIZE)


def fixed_seed(seed: int) -> SeedProvider:
    """Provider that always returns the same seed (useful in tests)."""

    def provider() -> int:
        return seed

    return provider
