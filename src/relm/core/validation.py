"""src/relm/core/validation.py
Argument checks shared by the hidden layer, the readouts and the model.

All checks run before any matrix work and raise InvalidArgumentError with the
offending argument name and shape.
"""
from __future__ import annotations

import math
from numbers import Integral, Real

import numpy as np

from relm.core.errors import InvalidArgumentError
from relm.core.types import NpF64


def check_positive_int(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}.")
    if int(value) <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value}.")
    return int(value)


def check_regularization(value: float, name: str = "regularization") -> float:
    """C must be a finite positive real."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(f"{name} must be a positive real number, got {value!r}.")
    c = float(value)
    if not math.isfinite(c) or c <= 0.0:
        raise InvalidArgumentError(f"{name} must be a positive real number, got {c}.")
    return c


def check_alpha(value: float, name: str = "alpha") -> float:
    """alpha must lie in [0, 1] (0: ridge, 1: lasso, interior: elastic net)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(f"{name} must be a real number in [0, 1], got {value!r}.")
    a = float(value)
    if not (0.0 <= a <= 1.0):
        raise InvalidArgumentError(f"{name} must be in [0, 1], got {a}.")
    return a


def as_matrix(data, name: str, *, n_columns: int | None = None) -> NpF64:
    """Convert to a finite 2-D float64 array, optionally checking the column count."""
    try:
        arr = np.asarray(data, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{name} could not be converted to a float64 array: {exc}") from exc
    if arr.ndim != 2:
        raise InvalidArgumentError(f"{name} must be 2D (samples, features), got shape {arr.shape}.")
    if n_columns is not None and arr.shape[1] != n_columns:
        raise InvalidArgumentError(
            f"{name} must have {n_columns} columns, got {arr.shape[1]} (shape {arr.shape})."
        )
    if not np.all(np.isfinite(arr)):
        raise InvalidArgumentError(f"{name} contains NaN or Inf values (shape {arr.shape}).")
    return arr


def as_targets(data, n_samples: int, name: str = "Y") -> NpF64:
    """Targets as an (N, m) array; a 1-D vector is treated as a single output column."""
    try:
        arr = np.asarray(data, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{name} could not be converted to a float64 array: {exc}") from exc
    if arr.ndim == 1:
        arr = arr[:, None]
    arr = as_matrix(arr, name)
    if arr.shape[0] != n_samples:
        raise InvalidArgumentError(
            f"Mismatched samples: features have {n_samples} rows, {name} has {arr.shape[0]}."
        )
    if arr.shape[1] == 0:
        raise InvalidArgumentError(f"{name} must have at least one output column, got shape {arr.shape}.")
    return arr


def check_training_pair(H, Y, *, h_name: str = "H", y_name: str = "Y") -> tuple[NpF64, NpF64]:
    features = as_matrix(H, h_name)
    if features.shape[0] == 0:
        raise InvalidArgumentError(f"{h_name} must contain at least one sample, got shape {features.shape}.")
    if features.shape[1] == 0:
        raise InvalidArgumentError(f"{h_name} must contain at least one feature, got shape {features.shape}.")
    targets = as_targets(Y, features.shape[0], name=y_name)
    return features, targets


__all__ = [
    "check_positive_int",
    "check_regularization",
    "check_alpha",
    "as_matrix",
    "as_targets",
    "check_training_pair",
]
