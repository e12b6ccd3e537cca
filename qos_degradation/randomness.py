"""Shared pseudo-random source used by graph generation and the solvers."""

import random
import time

_rng = random.Random(int(time.time()))


def seed(value):
    """Reseed the shared generator so that later draws are reproducible."""
    _rng.seed(value)


def bernoulli(p):
    """Return True with probability ``p``."""
    return _rng.random() < p


def rand_int(low, high):
    """Return a uniform integer in the half-open range ``[low, high)``.

    Raises ValueError when the range is empty.
    """
    if high <= low:
        raise ValueError(f"empty range [{low}, {high})")
    return _rng.randrange(low, high)