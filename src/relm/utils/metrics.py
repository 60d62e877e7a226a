"""src/relm/utils/metrics.py
ELM 出力の評価メトリクス。
"""

from .jax_config import ensure_x64_enabled

ensure_x64_enabled()

import jax.numpy as jnp


def calculate_mse(predictions: jnp.ndarray, targets: jnp.ndarray) -> float:
    """平均二乗誤差（Mean Squared Error）を計算。

    数式: MSE = (1/n) * Σ(y_pred - y_true)²

    Args:
        predictions: 予測値の配列。任意の形状
        targets: 目標値の配列。predictionsと同じ形状である必要がある

    Returns:
        計算されたMSE値（スカラー）

    Examples:
        >>> predictions = jnp.array([1.0, 2.0, 3.0])
        >>> targets = jnp.array([1.1, 1.9, 3.2])
        >>> mse = calculate_mse(predictions, targets)
        >>> print(f"MSE: {mse:.4f}")
        MSE: 0.0200
    """
    predictions = jnp.asarray(predictions, dtype=jnp.float64)
    targets = jnp.asarray(targets, dtype=jnp.float64).reshape(predictions.shape)
    return float(jnp.mean((predictions - targets) ** 2))


def calculate_rmse(predictions: jnp.ndarray, targets: jnp.ndarray) -> float:
    """Root of calculate_mse (the figure reported by the classic ELM toolbox)."""
    return float(jnp.sqrt(calculate_mse(predictions, targets)))


def calculate_mae(predictions: jnp.ndarray, targets: jnp.ndarray) -> float:
    """平均絶対誤差（Mean Absolute Error）を計算。

    数式: MAE = (1/n) * Σ|y_pred - y_true|
    """
    predictions = jnp.asarray(predictions, dtype=jnp.float64)
    targets = jnp.asarray(targets, dtype=jnp.float64).reshape(predictions.shape)
    return float(jnp.mean(jnp.abs(predictions - targets)))


def accuracy_score(predictions: jnp.ndarray, targets: jnp.ndarray) -> float:
    """Compute classification accuracy for one-hot style outputs or label indices."""
    preds = jnp.asarray(predictions)
    targs = jnp.asarray(targets)

    if preds.shape != targs.shape and preds.size == targs.size:
        preds = preds.reshape(targs.shape)

    if preds.ndim > 1 and preds.shape[-1] > 1:
        pred_labels = jnp.argmax(preds, axis=-1)
    else:
        pred_labels = preds.ravel() > 0.5

    if targs.ndim > 1 and targs.shape[-1] > 1:
        true_labels = jnp.argmax(targs, axis=-1)
    else:
        true_labels = targs.ravel() > 0.5

    return float(jnp.mean((pred_labels == true_labels).astype(jnp.float64)))


def sparsity(weights: jnp.ndarray, atol: float = 1e-8) -> int:
    """Number of entries whose magnitude is at most atol."""
    return int(jnp.sum(jnp.abs(jnp.asarray(weights)) <= atol))
