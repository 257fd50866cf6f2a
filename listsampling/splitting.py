"""Splitting a sequence into near-equal contiguous chunks.

``len(seq) % num_chunks`` leftover elements go to the first chunks, one
each. ``extract_chunk(i)`` and ``omit_chunk(i)`` together cover the input
exactly, which makes the pair a train/validation split for k-fold
cross-validation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import TypeVar

from listsampling.errors import InvalidArgumentError
from listsampling.views import ListView

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _validate_num_chunks(num_chunks: int) -> None:
    if num_chunks < 1:
        raise InvalidArgumentError(
            f"The number of chunks must be at least 1, but is {num_chunks}"
        )


def _validate_chunk(num_chunks: int, chunk_index: int) -> None:
    _validate_num_chunks(num_chunks)
    if chunk_index < 0:
        raise InvalidArgumentError(f"The chunk index may not be negative, but is {chunk_index}")
    if chunk_index >= num_chunks:
        raise InvalidArgumentError(
            f"The chunk index is {chunk_index}, but must be smaller than the "
            f"number of chunks, which is {num_chunks}"
        )


def chunk_bounds(length: int, num_chunks: int, chunk_index: int) -> tuple[int, int]:
    """Return the ``(from_index, to_index)`` bounds of one chunk.

    The first ``length % num_chunks`` chunks have ``length // num_chunks + 1``
    elements, the rest have ``length // num_chunks``. With more chunks than
    elements the trailing chunks are empty, ``(length, length)``.

    Examples:
        >>> [chunk_bounds(10, 3, i) for i in range(3)]
        [(0, 4), (4, 7), (7, 10)]

    Raises:
        InvalidArgumentError: If ``num_chunks < 1`` or ``chunk_index`` is not
            in ``[0, num_chunks)``.
    """
    _validate_chunk(num_chunks, chunk_index)
    size, remainder = divmod(length, num_chunks)
    if chunk_index < remainder:
        from_index = chunk_index * (size + 1)
        return from_index, from_index + size + 1
    from_index = remainder * (size + 1) + (chunk_index - remainder) * size
    return from_index, from_index + size


def extract_chunk(seq: Sequence[T], num_chunks: int, chunk_index: int) -> ListView[T]:
    """View of chunk ``chunk_index`` when ``seq`` is cut into ``num_chunks`` chunks."""
    from_index, to_index = chunk_bounds(len(seq), num_chunks, chunk_index)
    return ListView.range(seq, from_index, to_index)


def omit_chunk(seq: Sequence[T], num_chunks: int, chunk_index: int) -> ListView[T]:
    """View of ``seq`` without chunk ``chunk_index``."""
    from_index, to_index = chunk_bounds(len(seq), num_chunks, chunk_index)
    return ListView.complement(seq, from_index, to_index)


def extract_chunks(seq: Sequence[T], num_chunks: int) -> Iterator[ListView[T]]:
    """Lazily yield all ``num_chunks`` chunks of ``seq`` in order."""
    _validate_num_chunks(num_chunks)
    logger.debug("Splitting %d elements into %d chunks", len(seq), num_chunks)
    return (extract_chunk(seq, num_chunks, i) for i in range(num_chunks))


def omit_chunks(seq: Sequence[T], num_chunks: int) -> Iterator[ListView[T]]:
    """Lazily yield ``seq`` with each of the ``num_chunks`` chunks left out in turn."""
    _validate_num_chunks(num_chunks)
    logger.debug("Omitting each of %d chunks from %d elements", num_chunks, len(seq))
    return (omit_chunk(seq, num_chunks, i) for i in range(num_chunks))
