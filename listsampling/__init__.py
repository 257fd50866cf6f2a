"""listsampling — lazy, non-copying samples, windows and chunks of sequences.

Public API
----------
The entire usable surface is importable directly from ``listsampling``::

    from listsampling import ListSampler, take
    from listsampling import closed_sliding_windows, extract_chunks, omit_chunks
    from listsampling.reservoir import random_index_sample

Every result is a read-only :class:`ListView` over the caller's sequence. The
caller keeps ownership of that sequence and must not change its length while
views on it are in use.
"""

from __future__ import annotations

# Configuration
from listsampling.config import SamplerConfig
from listsampling.errors import InvalidArgumentError

# Random index selection
from listsampling.reservoir import RandomIndexSampler, random_index_sample

# Samplers
from listsampling.samplers import (
    AbsoluteSizeSampler,
    FullSampler,
    ListSampler,
    RelativeSizeSampler,
    create_list,
)
from listsampling.sampling import create_sample, create_samples, take

# Chunks
from listsampling.splitting import (
    chunk_bounds,
    extract_chunk,
    extract_chunks,
    omit_chunk,
    omit_chunks,
)
from listsampling.views import ListView, ViewKind

# Sliding windows
from listsampling.windows import (
    closed_sliding_windows,
    open_sliding_windows,
    sliding_windows,
    window_bounds,
)

__version__ = "0.1.0"

__all__ = [
    # Views
    "ListView",
    "ViewKind",
    # Samplers
    "ListSampler",
    "FullSampler",
    "RelativeSizeSampler",
    "AbsoluteSizeSampler",
    "SamplerConfig",
    "create_list",
    "create_sample",
    "create_samples",
    "take",
    # Random index selection
    "RandomIndexSampler",
    "random_index_sample",
    # Sliding windows
    "sliding_windows",
    "closed_sliding_windows",
    "open_sliding_windows",
    "window_bounds",
    # Chunks
    "chunk_bounds",
    "extract_chunk",
    "extract_chunks",
    "omit_chunk",
    "omit_chunks",
    # Errors
    "InvalidArgumentError",
    "__version__",
]
