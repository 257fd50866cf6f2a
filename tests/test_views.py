"""Tests for read-only sequence views."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pytest

from listsampling.errors import InvalidArgumentError
from listsampling.views import ListView, ViewKind


def test_selection_view_maps_indices() -> None:
    data = ["a", "b", "c", "d", "e"]
    view = ListView.selection(data, [4, 0, 2])
    assert view.kind is ViewKind.SELECTION
    assert len(view) == 3
    assert list(view) == ["e", "a", "c"]
    assert view[-1] == "c"


def test_range_view_maps_offset() -> None:
    data = list(range(10))
    view = ListView.range(data, 3, 7)
    assert len(view) == 4
    assert list(view) == [3, 4, 5, 6]
    assert view[0] == 3
    assert view.source_indices().tolist() == [3, 4, 5, 6]


def test_complement_view_skips_range() -> None:
    data = list(range(10))
    view = ListView.complement(data, 3, 7)
    assert len(view) == 6
    assert list(view) == [0, 1, 2, 7, 8, 9]
    assert [view[i] for i in range(len(view))] == [0, 1, 2, 7, 8, 9]
    assert view.source_indices().tolist() == [0, 1, 2, 7, 8, 9]


def test_view_does_not_copy_backing() -> None:
    """In-place element updates show through, reads are repeatable."""
    data = [1, 2, 3, 4]
    view = ListView.range(data, 1, 3)
    assert view[0] == view[0] == 2
    data[1] = 20
    assert view[0] == 20
    assert view.backing is data


def test_view_is_read_only_sequence() -> None:
    view = ListView.full([1, 2, 3])
    assert isinstance(view, Sequence)
    with pytest.raises(TypeError):
        view[0] = 5  # type: ignore[index]


def test_view_equality_and_repr() -> None:
    view = ListView.selection([10, 20, 30], [2, 1])
    assert view == [30, 20]
    assert view == (30, 20)
    assert view != [20, 30]
    assert view != [30]
    assert repr(view) == "ListView([30, 20])"


def test_view_supports_sequence_mixins() -> None:
    view = ListView.complement([5, 6, 7, 5], 1, 2)
    assert 7 in view
    assert 6 not in view
    assert view.count(5) == 2
    assert view.index(7) == 1
    assert list(reversed(view)) == [5, 7, 5]


def test_slicing_returns_view_over_same_backing() -> None:
    data = list(range(10))
    view = ListView.complement(data, 2, 5)
    sliced = view[1:5:2]
    assert isinstance(sliced, ListView)
    assert sliced.backing is data
    assert list(sliced) == [1, 6]


def test_out_of_range_index_raises() -> None:
    view = ListView.range([1, 2, 3], 0, 2)
    with pytest.raises(IndexError):
        view[2]
    with pytest.raises(IndexError):
        view[-3]
    with pytest.raises(TypeError):
        view["0"]  # type: ignore[index]


def test_numpy_backing() -> None:
    data = np.arange(6) * 10
    view = ListView.selection(data, np.array([5, 1]))
    assert view[0] == 50
    assert list(view) == [50, 10]


def test_selection_mapping_is_frozen() -> None:
    indices = np.array([0, 1])
    view = ListView.selection(["x", "y", "z"], indices)
    indices[0] = 2
    assert list(view) == ["x", "y"]


@pytest.mark.parametrize(("start", "stop"), [(-1, 2), (2, 1), (0, 4)])
def test_invalid_range_raises(start: int, stop: int) -> None:
    with pytest.raises(InvalidArgumentError):
        ListView.range([1, 2, 3], start, stop)
    with pytest.raises(InvalidArgumentError):
        ListView.complement([1, 2, 3], start, stop)


def test_invalid_selection_raises() -> None:
    with pytest.raises(InvalidArgumentError):
        ListView.selection([1, 2, 3], [0, 3])
    with pytest.raises(InvalidArgumentError):
        ListView.selection([1, 2, 3], [-1])


def test_empty_views() -> None:
    assert len(ListView.full([])) == 0
    assert list(ListView.selection([1, 2], [])) == []
    assert list(ListView.complement([1, 2], 0, 2)) == []
