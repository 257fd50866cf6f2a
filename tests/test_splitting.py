"""Tests for chunk splitting."""

from __future__ import annotations

import itertools

import pytest

from listsampling.errors import InvalidArgumentError
from listsampling.splitting import (
    chunk_bounds,
    extract_chunk,
    extract_chunks,
    omit_chunk,
    omit_chunks,
)


def test_chunk_sizes_distribute_remainder() -> None:
    data = list(range(10))
    chunks = [list(c) for c in extract_chunks(data, 3)]
    assert chunks == [[0, 1, 2, 3], [4, 5, 6], [7, 8, 9]]


def test_omit_chunks() -> None:
    data = list(range(10))
    omitted = [list(c) for c in omit_chunks(data, 3)]
    assert omitted == [[4, 5, 6, 7, 8, 9], [0, 1, 2, 3, 7, 8, 9], [0, 1, 2, 3, 4, 5, 6]]


@pytest.mark.parametrize(("length", "num_chunks"), list(itertools.product(range(0, 12), range(1, 14))))
def test_extract_and_omit_partition_input(length: int, num_chunks: int) -> None:
    """A chunk and its complement are disjoint and together cover the input."""
    data = list(range(length))
    expected_sizes = sorted(
        [length // num_chunks + 1] * (length % num_chunks)
        + [length // num_chunks] * (num_chunks - length % num_chunks),
        reverse=True,
    )
    assert [len(c) for c in extract_chunks(data, num_chunks)] == expected_sizes
    covered = [i for chunk in extract_chunks(data, num_chunks) for i in chunk]
    assert covered == data
    for chunk_index in range(num_chunks):
        chunk = set(extract_chunk(data, num_chunks, chunk_index))
        rest = set(omit_chunk(data, num_chunks, chunk_index))
        assert not chunk & rest
        assert chunk | rest == set(data)
        assert len(chunk) + len(rest) == length


def test_more_chunks_than_elements_gives_empty_tail() -> None:
    assert [chunk_bounds(2, 4, i) for i in range(4)] == [(0, 1), (1, 2), (2, 2), (2, 2)]
    assert list(omit_chunk([7, 8], 4, 3)) == [7, 8]


def test_chunk_streams_are_finite() -> None:
    stream = extract_chunks(list(range(5)), 2)
    assert len(list(stream)) == 2
    assert list(stream) == []


@pytest.mark.parametrize(("num_chunks", "chunk_index"), [(0, 0), (3, -1), (3, 3)])
def test_invalid_chunk_arguments_raise(num_chunks: int, chunk_index: int) -> None:
    with pytest.raises(InvalidArgumentError):
        chunk_bounds(10, num_chunks, chunk_index)
    with pytest.raises(InvalidArgumentError):
        extract_chunk(list(range(10)), num_chunks, chunk_index)
    with pytest.raises(InvalidArgumentError):
        omit_chunk(list(range(10)), num_chunks, chunk_index)


def test_invalid_chunk_count_raises_eagerly() -> None:
    with pytest.raises(InvalidArgumentError):
        extract_chunks([1, 2], 0)
    with pytest.raises(InvalidArgumentError):
        omit_chunks([1, 2], 0)
