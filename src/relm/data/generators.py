"""src/relm/data/generators.py
デモ用の合成回帰データ生成関数。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from relm.core.errors import InvalidArgumentError


@dataclass(frozen=True)
class DataGenerationConfig:
    """Synthetic dataset parameters."""

    n_samples: int = 400
    n_features: int = 1
    n_outputs: int = 1
    noise_level: float = 0.05
    test_ratio: float = 0.25
    seed: int = 0

    def validate(self, context: str = "data") -> "DataGenerationConfig":
        prefix = f"{context}: "
        if int(self.n_samples) < 2:
            raise InvalidArgumentError(f"{prefix}n_samples must be >= 2.")
        if int(self.n_features) <= 0 or int(self.n_outputs) <= 0:
            raise InvalidArgumentError(f"{prefix}n_features and n_outputs must be positive.")
        if float(self.noise_level) < 0:
            raise InvalidArgumentError(f"{prefix}noise_level must be non-negative.")
        if not (0.0 < float(self.test_ratio) < 1.0):
            raise InvalidArgumentError(f"{prefix}test_ratio must be in (0,1).")
        return self


def generate_sine_data(config: DataGenerationConfig) -> Tuple[np.ndarray, np.ndarray]:
    """sin 回帰データを生成。

    入力 x ~ U[-π, π]^d、目標は各出力 k について
    y_k = Σ_i sin((k+1)·x_i) / d にガウシアンノイズを加えたもの。

    Returns:
        tuple: (X, Y) 形状 (n_samples, n_features), (n_samples, n_outputs)
    """
    config.validate()
    rng = np.random.default_rng(config.seed)
    X = rng.uniform(-np.pi, np.pi, size=(config.n_samples, config.n_features))
    Y = np.stack(
        [np.sin((k + 1) * X).mean(axis=1) for k in range(config.n_outputs)],
        axis=1,
    )
    Y = Y + rng.normal(0.0, config.noise_level, size=Y.shape)
    return X.astype(np.float64), Y.astype(np.float64)


def generate_sparse_linear_data(config: DataGenerationConfig, n_active: int = 2) -> Tuple[np.ndarray, np.ndarray]:
    """Linear targets driven by only ``n_active`` input features (useful for lasso demos)."""
    config.validate()
    rng = np.random.default_rng(config.seed)
    X = rng.standard_normal((config.n_samples, config.n_features))
    coef = np.zeros((config.n_features, config.n_outputs))
    active = min(int(n_active), config.n_features)
    coef[:active] = rng.uniform(1.0, 3.0, size=(active, config.n_outputs))
    Y = X @ coef + 0.5 + rng.normal(0.0, config.noise_level, size=(config.n_samples, config.n_outputs))
    return X.astype(np.float64), Y.astype(np.float64)


def train_test_split(
    X: np.ndarray, Y: np.ndarray, test_ratio: float, seed: int = 0
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Shuffled split into (X_train, Y_train, X_test, Y_test)."""
    n = X.shape[0]
    idx = np.random.default_rng(seed).permutation(n)
    n_test = max(1, int(round(n * float(test_ratio))))
    test_idx, train_idx = idx[:n_test], idx[n_test:]
    return X[train_idx], Y[train_idx], X[test_idx], Y[test_idx]


DATASETS = {
    "sine": generate_sine_data,
    "linear": generate_sparse_linear_data,
}

__all__ = [
    "DataGenerationConfig",
    "generate_sine_data",
    "generate_sparse_linear_data",
    "train_test_split",
    "DATASETS",
]
