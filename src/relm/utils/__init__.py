"""Utility helpers: JAX configuration, metrics, timing and reporting.

They are re-exported here for convenience, so callers can import from
`relm.utils.*` or from `relm.utils` directly.
"""

from .jax_config import ensure_x64_enabled, x64_enabled  # noqa: F401
from .metrics import calculate_mse, calculate_rmse, calculate_mae, accuracy_score, sparsity  # noqa: F401
from .timing import Stopwatch, TimingRecorder  # noqa: F401

__all__ = [
    "ensure_x64_enabled",
    "x64_enabled",
    "calculate_mse",
    "calculate_rmse",
    "calculate_mae",
    "accuracy_score",
    "sparsity",
    "Stopwatch",
    "TimingRecorder",
]
