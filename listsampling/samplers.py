"""List samplers: policies that turn a sequence into an endless stream of samples.

Three policies are available::

    ListSampler.full()                         # the whole input, every time
    ListSampler.with_relative_size(0.5, rng)   # ceil(50 %) of the input per sample
    ListSampler.with_absolute_size(100, rng)   # 100 elements per sample

Samplers that draw random samples hold on to their generator and advance it
on every produced sample. Do not share one sampler between threads without
external locking.
"""

from __future__ import annotations

import itertools
import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from typing import TypeVar

import numpy as np

from listsampling.errors import InvalidArgumentError
from listsampling.reservoir.random_sampler import RandomIndexSampler
from listsampling.sampling import create_samples, take
from listsampling.views import ListView

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ListSampler(ABC):
    """Base interface for list sampling policies."""

    @abstractmethod
    def create_samples(self, seq: Sequence[T]) -> Iterator[ListView[T]]:
        """Return an endless iterator of sample views over ``seq``."""

    def create_list(self, seq: Sequence[T], num_samples: int) -> list[ListView[T]]:
        """Return the first ``num_samples`` samples of ``seq`` as a list."""
        return take(self.create_samples(seq), num_samples)

    @classmethod
    def full(cls) -> FullSampler:
        return FullSampler()

    @classmethod
    def with_relative_size(
        cls, relative_size: float, seed: np.random.Generator | int | None = None
    ) -> RelativeSizeSampler:
        return RelativeSizeSampler(relative_size, seed=seed)

    @classmethod
    def with_absolute_size(
        cls, absolute_size: int, seed: np.random.Generator | int | None = None
    ) -> AbsoluteSizeSampler:
        return AbsoluteSizeSampler(absolute_size, seed=seed)


class FullSampler(ListSampler):
    """Every sample is the complete input.

    The same view object is yielded each time.
    """

    def create_samples(self, seq: Sequence[T]) -> Iterator[ListView[T]]:
        logger.debug("Full sampler over %d elements", len(seq))
        return itertools.repeat(ListView.full(seq))

    def __repr__(self) -> str:
        return "FullSampler()"


class RelativeSizeSampler(ListSampler):
    """Random samples holding a fixed fraction of the input."""

    def __init__(
        self, relative_size: float, seed: np.random.Generator | int | None = None
    ) -> None:
        """Initialize the sampler.

        Args:
            relative_size: Fraction of the input per sample, in ``(0.0, 1.0]``.
                The sample size is ``ceil(len(seq) * relative_size)``.
            seed: Random seed for reproducibility, or a generator to draw from.

        Raises:
            InvalidArgumentError: If ``relative_size`` is outside ``(0.0, 1.0]``.
        """
        if not 0.0 < relative_size <= 1.0:
            raise InvalidArgumentError(
                f"The relative sample size must be in (0.0, 1.0], but is {relative_size}"
            )
        self._relative_size = float(relative_size)
        self._index_sampler = RandomIndexSampler(seed)
        logger.debug("Configured relative-size sampler with fraction %s", self._relative_size)

    @property
    def relative_size(self) -> float:
        return self._relative_size

    def sample_size(self, input_size: int) -> int:
        """Number of elements each sample of an ``input_size`` sequence holds."""
        return math.ceil(input_size * self._relative_size)

    def create_samples(self, seq: Sequence[T]) -> Iterator[ListView[T]]:
        if len(seq) == 0:
            return itertools.repeat(ListView.full(seq))
        return create_samples(seq, self.sample_size(len(seq)), self._index_sampler)

    def __repr__(self) -> str:
        return f"RelativeSizeSampler(relative_size={self._relative_size})"


class AbsoluteSizeSampler(ListSampler):
    """Random samples holding a fixed number of elements.

    Inputs that are not larger than the sample size are returned whole.
    """

    def __init__(
        self, absolute_size: int, seed: np.random.Generator | int | None = None
    ) -> None:
        """Initialize the sampler.

        Args:
            absolute_size: Number of elements per sample. Must be positive.
            seed: Random seed for reproducibility, or a generator to draw from.

        Raises:
            InvalidArgumentError: If ``absolute_size`` is not a positive integer.
        """
        if isinstance(absolute_size, bool) or not isinstance(absolute_size, (int, np.integer)):
            raise InvalidArgumentError(
                f"The sample size must be an integer, but is {absolute_size!r}"
            )
        if absolute_size <= 0:
            raise InvalidArgumentError(f"The sample size must be positive, but is {absolute_size}")
        self._absolute_size = int(absolute_size)
        self._index_sampler = RandomIndexSampler(seed)
        logger.debug("Configured absolute-size sampler with size %d", self._absolute_size)

    @property
    def absolute_size(self) -> int:
        return self._absolute_size

    def create_samples(self, seq: Sequence[T]) -> Iterator[ListView[T]]:
        if len(seq) <= self._absolute_size:
            return itertools.repeat(ListView.full(seq))
        return create_samples(seq, self._absolute_size, self._index_sampler)

    def __repr__(self) -> str:
        return f"AbsoluteSizeSampler(absolute_size={self._absolute_size})"


def create_list(
    sampler: ListSampler, seq: Sequence[T], num_samples: int
) -> list[ListView[T]]:
    """Return the first ``num_samples`` samples ``sampler`` produces for ``seq``."""
    return sampler.create_list(seq, num_samples)
