"""Execution parameters for training: kernel cache, convergence and folds."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .parameters import SVMConfigItem

DEFAULT_CACHE_SIZE = 2000
DEFAULT_EPS = 1e-3
DEFAULT_N_FOLDS = 0


@dataclass(frozen=True)
class SVMExecution(SVMConfigItem):
    """Cache size (MB), convergence threshold and number of CV folds.

    Only ``cache_size`` and ``eps`` are solver fields. ``n_folds`` stays on
    this object and decides whether training runs cross-validation first.
    """

    cache_size: float = DEFAULT_CACHE_SIZE
    eps: float = DEFAULT_EPS
    n_folds: int = DEFAULT_N_FOLDS

    def __post_init__(self):
        if self.n_folds < 0:
            raise ValueError(f"n_folds must be >= 0, got {self.n_folds}")

    @classmethod
    def default(cls) -> "SVMExecution":
        return cls(DEFAULT_CACHE_SIZE, DEFAULT_EPS, DEFAULT_N_FOLDS)

    def fields(self) -> Mapping[str, Any]:
        return {"cache_size": self.cache_size, "eps": self.eps}

    def __str__(self):
        return f"cache_size={self.cache_size} eps={self.eps} n_folds={self.n_folds}"
