"""Index sampling interface used by the sample streams."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class IndexSampler(ABC):
    """Base interface for strategies that pick distinct indices."""

    @abstractmethod
    def sample(self, size: int, low: int, high: int) -> np.ndarray:
        """Return ``size`` distinct integers from ``[low, high)``."""
