"""Uniform index sampling without replacement via reservoir sampling."""

from __future__ import annotations

import numpy as np

from listsampling.errors import InvalidArgumentError
from listsampling.reservoir.base import IndexSampler

_DRAW_BLOCK_SIZE = 65_536


def as_generator(rng: np.random.Generator | int | None = None) -> np.random.Generator:
    """Return ``rng`` if it is already a generator, else seed a new one."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def random_index_sample(
    size: int,
    low: int,
    high: int,
    rng: np.random.Generator | int | None = None,
) -> np.ndarray:
    """Draw ``size`` distinct integers uniformly from ``[low, high)``.

    Classic reservoir sampling: the reservoir starts out as
    ``low, low + 1, ..., low + size - 1`` and the candidate at zero-based
    position ``i >= size`` replaces slot ``j = rng.integers(i + 1)`` whenever
    ``j < size``. Every candidate ends up in the result with probability
    ``size / (high - low)``.

    The order of the returned values is whatever the overwrites leave behind.
    It is *not* a uniformly random permutation; shuffle the result if the
    order matters.

    Args:
        size: Number of values to draw.
        low: Inclusive lower bound.
        high: Exclusive upper bound.
        rng: Generator (or seed) providing the randomness. A passed-in
            generator is advanced by ``high - low - size`` draws.

    Returns:
        ``int64`` array of length ``size``.

    Raises:
        InvalidArgumentError: If ``size`` is negative, ``low > high`` or
            ``size > high - low``.
    """
    if size < 0:
        raise InvalidArgumentError(f"The size may not be negative, but is {size}")
    if low > high:
        raise InvalidArgumentError(
            f"The minimum is {low}, which is larger than the maximum {high}"
        )
    if size > high - low:
        raise InvalidArgumentError(
            f"Can not create a sample of size {size} with values between {low} and {high}"
        )
    rng = as_generator(rng)

    reservoir = np.arange(low, low + size, dtype=np.int64)
    n_candidates = high - low
    if n_candidates == size:
        return reservoir

    # Candidate i draws from [0, i + 1); draws are made a block at a time so
    # scratch memory stays bounded regardless of high - low.
    for block_start in range(size, n_candidates, _DRAW_BLOCK_SIZE):
        positions = np.arange(
            block_start, min(block_start + _DRAW_BLOCK_SIZE, n_candidates), dtype=np.int64
        )
        slots = rng.integers(0, positions + 1)
        for k in np.flatnonzero(slots < size):
            reservoir[slots[k]] = low + positions[k]
    return reservoir


class RandomIndexSampler(IndexSampler):
    """Uniform sampler without replacement that owns its random generator."""

    def __init__(self, seed: np.random.Generator | int | None = None) -> None:
        """Initialize the sampler.

        Args:
            seed: Random seed for reproducibility, or an existing generator
                to share with other components.
        """
        self._rng = as_generator(seed)

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    def sample(self, size: int, low: int, high: int) -> np.ndarray:
        """Sample ``size`` distinct indices from ``[low, high)``."""
        return random_index_sample(size, low, high, self._rng)
