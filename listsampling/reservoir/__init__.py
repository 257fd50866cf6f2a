"""Reservoir samplers."""

from listsampling.reservoir.base import IndexSampler
from listsampling.reservoir.random_sampler import (
    RandomIndexSampler,
    as_generator,
    random_index_sample,
)

__all__ = [
    "IndexSampler",
    "RandomIndexSampler",
    "as_generator",
    "random_index_sample",
]
