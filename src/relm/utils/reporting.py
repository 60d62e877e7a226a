"""
Reporting utilities for post-run summaries (print-based).
"""
from __future__ import annotations

from typing import Dict, Optional

import numpy as np

from relm.core.types import to_np_f64
from relm.readout.base import ReadoutState


def readout_summary(state: ReadoutState, atol: float = 1e-8) -> Dict[str, float]:
    """Shape, norm and sparsity figures for a trained readout."""
    W = to_np_f64(state.output_weight)
    n_zero = int(np.sum(np.abs(W) <= atol))
    summary: Dict[str, float] = {
        "n_hidden": float(W.shape[0]),
        "n_outputs": float(W.shape[1]),
        "weight_norm": float(np.linalg.norm(W)),
        "zero_weights": float(n_zero),
        "zero_fraction": float(n_zero / W.size) if W.size else 0.0,
    }
    if state.intercept is not None:
        summary["intercept_norm"] = float(np.linalg.norm(to_np_f64(state.intercept)))
    return summary


def print_readout_summary(
    state: ReadoutState,
    metrics: Optional[Dict[str, float]] = None,
    timings: Optional[Dict[str, float]] = None,
    title: str = "R-ELM Readout",
) -> None:
    summary = readout_summary(state)
    print("\n" + "=" * 40)
    print(title)
    print("-" * 40)
    print(f"   Output weight : [{int(summary['n_hidden'])}x{int(summary['n_outputs'])}] (Norm: {summary['weight_norm']:.2e})")
    print(f"   Zero weights  : {int(summary['zero_weights'])} ({summary['zero_fraction'] * 100:.1f}%)")
    if "intercept_norm" in summary:
        print(f"   Intercept     : present (Norm: {summary['intercept_norm']:.2e})")
    else:
        print("   Intercept     : none")
    for split, value in (metrics or {}).items():
        print(f"   {split:<14}: {value:.6f}")
    for event, seconds in (timings or {}).items():
        print(f"   {event + ' time':<14}: {seconds:.4f}s")
    print("=" * 40 + "\n")


__all__ = ["readout_summary", "print_readout_summary"]
