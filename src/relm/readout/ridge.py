"""
src/relm/readout/ridge.py
Ridge readout (alpha == 0) with a shape-driven primal/dual switch.

    N >= L (primal): W = (I_L / C + HᵀH)⁻¹ HᵀY      factorizes an L x L matrix
    N <  L (dual)  : W = Hᵀ (I_N / C + HHᵀ)⁻¹ Y      factorizes an N x N matrix

Both are the minimiser of ||HW - Y||² + ||W||² / C, so the cost is bounded by
min(N, L)³. The regularized Gram matrix is symmetric positive definite, which
lets us solve with a Cholesky factorization instead of forming an inverse.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import jax.numpy as jnp
import jax.scipy.linalg

from relm.core.errors import InvalidArgumentError, NumericalError
from relm.core.identifiers import Formulation, ReadoutKind
from relm.core.types import JaxF64, to_jax_f64
from relm.core.validation import check_regularization, check_training_pair
from relm.readout.base import ReadoutModule, ReadoutState

# Gram matrices with a condition number above 1/eps are treated as singular.
MAX_CONDITION = 1.0 / float(jnp.finfo(jnp.float64).eps)


def select_formulation(n_samples: int, n_hidden: int) -> Formulation:
    """Primal when there are at least as many samples as hidden units, dual otherwise."""
    return Formulation.PRIMAL if n_samples >= n_hidden else Formulation.DUAL


def _check_gram(gram: JaxF64, formulation: Formulation) -> None:
    if not bool(jnp.all(jnp.isfinite(gram))):
        raise NumericalError(f"Ridge ({formulation}): regularized Gram matrix contains NaN/Inf.")
    # gram is symmetric positive definite, so cond = max / min eigenvalue
    eigvals = jnp.linalg.eigvalsh(gram)
    lo, hi = float(eigvals[0]), float(eigvals[-1])
    cond = hi / lo if lo > 0.0 else float("inf")
    if not (cond < MAX_CONDITION):
        raise NumericalError(
            f"Ridge ({formulation}): regularized Gram matrix {gram.shape} is singular to machine "
            f"precision (condition number {cond:.3e} >= {MAX_CONDITION:.3e}). "
            "Try a smaller regularization parameter C."
        )


def solve_ridge(
    features: Any,
    targets: Any,
    regularization: float,
    formulation: Optional[Formulation] = None,
) -> JaxF64:
    """Output weights (L, m) of the L2-regularized least-squares readout.

    ``formulation`` forces the primal or dual closed form; by default it is
    chosen from the shape of H via select_formulation.
    """
    C = check_regularization(regularization)
    H_np, Y_np = check_training_pair(features, targets)
    if formulation is not None and not isinstance(formulation, Formulation):
        try:
            formulation = Formulation(formulation)
        except ValueError:
            raise InvalidArgumentError(f"Unknown ridge formulation {formulation!r}.") from None

    H = to_jax_f64(H_np)
    Y = to_jax_f64(Y_np)
    n_samples, n_hidden = H.shape
    form = formulation or select_formulation(n_samples, n_hidden)

    if form is Formulation.PRIMAL:
        gram = jnp.eye(n_hidden, dtype=H.dtype) / C + H.T @ H
        _check_gram(gram, form)
        W = jax.scipy.linalg.solve(gram, H.T @ Y, assume_a="pos")
    else:
        gram = jnp.eye(n_samples, dtype=H.dtype) / C + H @ H.T
        _check_gram(gram, form)
        W = H.T @ jax.scipy.linalg.solve(gram, Y, assume_a="pos")

    if not bool(jnp.all(jnp.isfinite(W))):
        raise NumericalError(f"Ridge ({form}): solution contains NaN/Inf (C={C}, H shape {H.shape}).")
    return W


class RidgeReadout(ReadoutModule):
    """Closed-form ridge readout; produces output weights only (no intercept)."""

    kind = ReadoutKind.RIDGE

    def __init__(self, regularization: float) -> None:
        super().__init__()
        self.regularization = check_regularization(regularization)
        self.formulation_: Optional[Formulation] = None

    def _solve(self, H, Y) -> ReadoutState:
        form = select_formulation(*H.shape)
        W = solve_ridge(H, Y, self.regularization, formulation=form)
        self.formulation_ = form
        return ReadoutState(output_weight=W, intercept=None)

    def _forward(self, H: JaxF64, state: ReadoutState) -> JaxF64:
        return self._linear(H, state)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"kind": self.kind.value, "regularization": self.regularization, "alpha": 0.0}
        if self.formulation_ is not None:
            data["formulation"] = self.formulation_.value
        return data


__all__ = ["RidgeReadout", "solve_ridge", "select_formulation", "MAX_CONDITION"]
