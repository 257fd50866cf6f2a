"""Read-only, non-copying views over a backing sequence.

A :class:`ListView` never copies elements. It keeps a reference to the
backing sequence plus an index mapping, and translates every read into a
read of the backing sequence. Three kinds of mapping exist:

* ``SELECTION`` -- ``view[i] == backing[indices[i]]``
* ``RANGE`` -- ``view[i] == backing[start + i]`` for ``i < stop - start``
* ``COMPLEMENT`` -- every element of ``backing`` except ``backing[start:stop]``

Changing the *length* of the backing sequence while a view on it is in use
is unsupported and leads to undefined results. Replacing elements in place
is visible through the view.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Sequence
from typing import Any, Generic, TypeVar, overload

import numpy as np

from listsampling.errors import InvalidArgumentError

T = TypeVar("T")


class ViewKind(enum.Enum):
    """Index mapping used by a :class:`ListView`."""

    SELECTION = "selection"
    RANGE = "range"
    COMPLEMENT = "complement"


def _check_bounds(length: int, start: int, stop: int) -> None:
    if start < 0 or stop > length or start > stop:
        raise InvalidArgumentError(
            f"Invalid index range [{start}, {stop}) for a sequence of length {length}"
        )


class ListView(Sequence, Generic[T]):
    """Read-only projection of a backing sequence.

    Use the :meth:`selection`, :meth:`range`, :meth:`complement` and
    :meth:`full` constructors rather than calling ``ListView`` directly.

    Attributes:
        kind: Which index mapping the view applies.
    """

    __slots__ = ("_backing", "kind", "_indices", "_start", "_stop")

    def __init__(
        self,
        backing: Sequence[T],
        kind: ViewKind,
        indices: np.ndarray | None = None,
        start: int = 0,
        stop: int = 0,
    ) -> None:
        self._backing = backing
        self.kind = kind
        self._indices = indices
        self._start = start
        self._stop = stop

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def selection(cls, backing: Sequence[T], indices: Any) -> ListView[T]:
        """View of ``backing`` at the given ``indices``, in that order.

        Raises:
            InvalidArgumentError: If an index lies outside ``[0, len(backing))``.
        """
        idx = np.asarray(indices, dtype=np.int64).reshape(-1)
        if idx.size and (idx.min() < 0 or idx.max() >= len(backing)):
            raise InvalidArgumentError(
                f"Selection indices must lie in [0, {len(backing)}), "
                f"got range [{idx.min()}, {idx.max()}]"
            )
        # Freeze the mapping so later changes to the caller's array cannot leak in.
        idx = idx.copy()
        idx.setflags(write=False)
        return cls(backing, ViewKind.SELECTION, indices=idx)

    @classmethod
    def range(cls, backing: Sequence[T], start: int, stop: int) -> ListView[T]:
        """View of ``backing[start:stop]``."""
        _check_bounds(len(backing), start, stop)
        return cls(backing, ViewKind.RANGE, start=start, stop=stop)

    @classmethod
    def complement(cls, backing: Sequence[T], start: int, stop: int) -> ListView[T]:
        """View of ``backing`` with ``backing[start:stop]`` left out."""
        _check_bounds(len(backing), start, stop)
        return cls(backing, ViewKind.COMPLEMENT, start=start, stop=stop)

    @classmethod
    def full(cls, backing: Sequence[T]) -> ListView[T]:
        """View of the whole backing sequence."""
        return cls.range(backing, 0, len(backing))

    # ------------------------------------------------------------------
    # Index mapping
    # ------------------------------------------------------------------

    @property
    def backing(self) -> Sequence[T]:
        return self._backing

    def _source_index(self, index: int) -> int:
        if self.kind is ViewKind.SELECTION:
            return int(self._indices[index])
        if self.kind is ViewKind.RANGE:
            return self._start + index
        if index < self._start:
            return index
        return index + (self._stop - self._start)

    def source_indices(self) -> np.ndarray:
        """Return the backing-sequence index of every element of the view."""
        if self.kind is ViewKind.SELECTION:
            return self._indices
        if self.kind is ViewKind.RANGE:
            return np.arange(self._start, self._stop, dtype=np.int64)
        return np.concatenate(
            [
                np.arange(0, self._start, dtype=np.int64),
                np.arange(self._stop, len(self._backing), dtype=np.int64),
            ]
        )

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        if self.kind is ViewKind.SELECTION:
            return len(self._indices)
        if self.kind is ViewKind.RANGE:
            return self._stop - self._start
        return len(self._backing) - (self._stop - self._start)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> ListView[T]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ListView(
                self._backing, ViewKind.SELECTION, indices=self.source_indices()[index]
            )
        if not isinstance(index, (int, np.integer)):
            raise TypeError(
                f"{type(self).__name__} indices must be integers or slices, "
                f"not {type(index).__name__}"
            )
        size = len(self)
        if index < 0:
            index += size
        if index < 0 or index >= size:
            raise IndexError(f"{type(self).__name__} index out of range")
        return self._backing[self._source_index(int(index))]

    def __iter__(self) -> Iterator[T]:
        backing = self._backing
        if self.kind is ViewKind.SELECTION:
            for i in self._indices:
                yield backing[int(i)]
        elif self.kind is ViewKind.RANGE:
            for i in range(self._start, self._stop):
                yield backing[i]
        else:
            for i in range(self._start):
                yield backing[i]
            for i in range(self._stop, len(backing)):
                yield backing[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
