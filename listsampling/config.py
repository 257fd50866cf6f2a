"""Sampler configuration objects."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from omegaconf import DictConfig, OmegaConf

from listsampling.errors import InvalidArgumentError
from listsampling.samplers import ListSampler

logger = logging.getLogger(__name__)

POLICIES = ("full", "relative", "absolute")


@dataclass(frozen=True)
class SamplerConfig:
    """Declarative description of a :class:`~listsampling.samplers.ListSampler`.

    Attributes:
        policy: ``full``, ``relative`` or ``absolute``.
        size: Fraction of the input (``relative``) or element count
            (``absolute``). Ignored for ``full``.
        seed: Seed of the sampler's random generator.
    """

    policy: str = "full"
    size: float | int | None = None
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.policy not in POLICIES:
            raise InvalidArgumentError(
                f"Unknown sampling policy {self.policy!r}; expected one of {POLICIES}"
            )
        if self.policy != "full" and self.size is None:
            raise InvalidArgumentError(f"The {self.policy!r} policy requires a size")

    @classmethod
    def from_omegaconf(cls, cfg: DictConfig | Mapping[str, Any]) -> SamplerConfig:
        """Build a config from a ``DictConfig`` or plain mapping.

        Keys other than ``policy``, ``size`` and ``seed`` are rejected.
        """
        if isinstance(cfg, DictConfig):
            mapping: Any = OmegaConf.to_container(cfg, resolve=True)
        else:
            mapping = dict(cfg)
        unknown = set(mapping) - {"policy", "size", "seed"}
        if unknown:
            raise InvalidArgumentError(f"Unknown sampler config keys: {sorted(unknown)}")
        return cls(**mapping)

    @classmethod
    def from_yaml(cls, path: Path | str) -> SamplerConfig:
        """Load a config from a YAML file."""
        return cls.from_omegaconf(OmegaConf.load(path))

    def build(self) -> ListSampler:
        """Instantiate the configured sampler."""
        logger.debug("Building %s sampler (size=%s, seed=%s)", self.policy, self.size, self.seed)
        if self.policy == "relative":
            return ListSampler.with_relative_size(float(self.size), seed=self.seed)
        if self.policy == "absolute":
            return ListSampler.with_absolute_size(self.size, seed=self.seed)
        return ListSampler.full()
