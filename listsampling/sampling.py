"""Random samples of a sequence, exposed as selection views.

Each sample picks ``sample_size`` distinct positions of the input with an
:class:`~listsampling.reservoir.IndexSampler` (by default a
:class:`~listsampling.reservoir.RandomIndexSampler`) and wraps them in a
:class:`~listsampling.views.ListView`. No elements are copied.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import TypeVar

import numpy as np

from listsampling.errors import InvalidArgumentError
from listsampling.reservoir.base import IndexSampler
from listsampling.reservoir.random_sampler import RandomIndexSampler
from listsampling.views import ListView

T = TypeVar("T")

logger = logging.getLogger(__name__)

RandomSource = IndexSampler | np.random.Generator | int | None


def _as_index_sampler(rng: RandomSource) -> IndexSampler:
    if isinstance(rng, IndexSampler):
        return rng
    return RandomIndexSampler(rng)


def _validate_sample_size(sample_size: int, input_size: int) -> None:
    if sample_size <= 0:
        raise InvalidArgumentError(f"The sample size must be positive, but is {sample_size}")
    if sample_size > input_size:
        raise InvalidArgumentError(
            f"Can not create a sample of size {sample_size} from a sequence of size {input_size}"
        )


def create_sample(
    seq: Sequence[T],
    sample_size: int,
    rng: RandomSource = None,
) -> ListView[T]:
    """Return one random sample of ``seq`` without replacement.

    Raises:
        InvalidArgumentError: Unless ``0 < sample_size <= len(seq)``.
    """
    _validate_sample_size(sample_size, len(seq))
    indices = _as_index_sampler(rng).sample(sample_size, 0, len(seq))
    logger.debug("Drew sample of %d out of %d elements", sample_size, len(seq))
    return ListView.selection(seq, indices)


def _iter_samples(
    seq: Sequence[T], sample_size: int, rng: IndexSampler
) -> Iterator[ListView[T]]:
    while True:
        yield create_sample(seq, sample_size, rng)


def create_samples(
    seq: Sequence[T],
    sample_size: int,
    rng: RandomSource = None,
) -> Iterator[ListView[T]]:
    """Return an endless iterator of independent random samples of ``seq``.

    ``rng`` is an :class:`~listsampling.reservoir.IndexSampler`, a numpy
    generator or a seed. Every sample advances it. Pass the same seeded
    generator state to reproduce the same sequence of samples.

    Raises:
        InvalidArgumentError: Unless ``0 < sample_size <= len(seq)``.
            Checked before the iterator is returned.
    """
    _validate_sample_size(sample_size, len(seq))
    logger.debug(
        "Creating samples of size %d from a sequence of size %d", sample_size, len(seq)
    )
    return _iter_samples(seq, sample_size, _as_index_sampler(rng))


def take(iterable: Iterable[T], n: int) -> list[T]:
    """Collect at most the first ``n`` items of ``iterable`` into a list.

    Returns fewer items when ``iterable`` runs out first.

    Raises:
        InvalidArgumentError: If ``n`` is negative.
    """
    if n < 0:
        raise InvalidArgumentError(f"The number of items may not be negative, but is {n}")
    return list(itertools.islice(iterable, n))
