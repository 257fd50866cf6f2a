"""Sliding windows over a sequence.

Windows are produced lazily as :class:`~listsampling.views.ListView` range
views. A logical window starts at a cursor that begins at ``start`` and
advances by ``step_size``; its materialized bounds are clamped to the input,
so windows hanging over either edge come out shorter instead of failing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import TypeVar

from listsampling.errors import InvalidArgumentError
from listsampling.views import ListView

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _validate_window(window_size: int, step_size: int) -> None:
    if window_size <= 0:
        raise InvalidArgumentError(f"The window size must be positive, but is {window_size}")
    if step_size <= 0:
        raise InvalidArgumentError(f"The step size must be positive, but is {step_size}")


def _iter_bounds(
    length: int, window_size: int, start: int, max_end: int, step_size: int
) -> Iterator[tuple[int, int]]:
    current = start
    while current < length and current + window_size <= max_end:
        from_index = max(current, 0)
        to_index = min(max(current + window_size, 0), length)
        yield from_index, to_index
        current += step_size


def window_bounds(
    length: int,
    window_size: int,
    start: int,
    max_end: int,
    step_size: int = 1,
) -> Iterator[tuple[int, int]]:
    """Enumerate ``(from_index, to_index)`` bounds of sliding windows.

    Windows keep coming while the cursor is below ``length`` and the logical
    window end ``cursor + window_size`` does not exceed ``max_end``.

    Args:
        length: Length of the sequence the windows run over.
        window_size: Logical size of every window.
        start: Logical start of the first window. May be negative.
        max_end: Upper limit for the logical end of a window.
        step_size: Distance between the starts of consecutive windows.

    Returns:
        A fresh iterator; bounds are clamped to ``[0, length]``.

    Raises:
        InvalidArgumentError: If ``window_size`` or ``step_size`` is not
            positive. Raised immediately, not on first iteration.
    """
    _validate_window(window_size, step_size)
    return _iter_bounds(length, window_size, start, max_end, step_size)


def _iter_windows(seq: Sequence[T], bounds: Iterator[tuple[int, int]]) -> Iterator[ListView[T]]:
    for from_index, to_index in bounds:
        yield ListView.range(seq, from_index, to_index)


def sliding_windows(
    seq: Sequence[T],
    window_size: int,
    start: int,
    max_end: int,
    step_size: int = 1,
) -> Iterator[ListView[T]]:
    """Lazily yield sliding-window views over ``seq``.

    Example:
        >>> [list(w) for w in sliding_windows([0, 1, 2, 3, 4], 3, -3, 100, 2)]
        [[], [0, 1], [1, 2, 3], [3, 4]]
    """
    bounds = window_bounds(len(seq), window_size, start, max_end, step_size)
    logger.debug(
        "Sliding windows of size %d, step %d over %d elements (start=%d, max_end=%d)",
        window_size,
        step_size,
        len(seq),
        start,
        max_end,
    )
    return _iter_windows(seq, bounds)


def closed_sliding_windows(
    seq: Sequence[T], window_size: int, step_size: int = 1
) -> Iterator[ListView[T]]:
    """Full-size windows that stay inside ``seq``.

    Every window has exactly ``window_size`` elements. Yields nothing when
    ``window_size`` exceeds ``len(seq)``.
    """
    return sliding_windows(seq, window_size, 0, len(seq), step_size)


def open_sliding_windows(
    seq: Sequence[T], window_size: int, step_size: int = 1
) -> Iterator[ListView[T]]:
    """Windows that also hang over the start and end of ``seq``.

    With ``step_size == 1`` the first window holds only ``seq[0]``, windows
    grow to full size and shrink back down to only ``seq[-1]``.
    """
    return sliding_windows(
        seq, window_size, -(window_size - 1), len(seq) + window_size - 1, step_size
    )
