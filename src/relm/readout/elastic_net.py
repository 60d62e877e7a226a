"""
src/relm/readout/elastic_net.py
Elastic-net readout (0 < alpha <= 1): one independent sparse regression per output.

Each output column j is fitted with scikit-learn's coordinate-descent
``ElasticNet``, whose objective is

    1/(2N) ||y - b - Hw||²  +  λ·alpha·||w||₁  +  λ·(1 - alpha)/2·||w||²

with λ = 1/C. This is the same objective as the lasso/elastic-net used by the
classic R-ELM toolbox (``lasso(H, y, 'Alpha', alpha, 'Lambda', 1/C)``).

Library behaviour that the results depend on:
  - standardize=True (default): columns of H are centred and scaled to unit
    variance with StandardScaler before fitting (zero-variance columns keep
    scale 1); weights and intercept are mapped back to the raw H scale.
  - a single λ is fitted (no path search); convergence is controlled by
    ``max_iter`` and ``tol`` and a ConvergenceWarning becomes NumericalError.
"""
from __future__ import annotations

import warnings
from typing import Any, Dict

import numpy as np
from sklearn.exceptions import ConvergenceWarning
from sklearn.linear_model import ElasticNet
from sklearn.preprocessing import StandardScaler
from tqdm.auto import tqdm

from relm.core.errors import InvalidArgumentError, NumericalError
from relm.core.identifiers import ReadoutKind
from relm.core.types import JaxF64, NpF64, to_jax_f64
from relm.core.validation import check_alpha, check_positive_int, check_regularization, check_training_pair
from relm.readout.base import ReadoutModule, ReadoutState


def solve_elastic_net(
    features: Any,
    targets: Any,
    regularization: float,
    alpha: float,
    *,
    standardize: bool = True,
    max_iter: int = 10000,
    tol: float = 1e-4,
    verbose: bool = False,
) -> tuple[NpF64, NpF64]:
    """Return (output_weight (L, m), intercept (m,)) from m single-output elastic-net fits."""
    C = check_regularization(regularization)
    l1_ratio = check_alpha(alpha)
    if l1_ratio == 0.0:
        raise InvalidArgumentError("Elastic net requires alpha > 0; use solve_ridge for alpha == 0.")
    max_iter = check_positive_int(max_iter, "max_iter")
    if not float(tol) > 0.0:
        raise InvalidArgumentError(f"tol must be positive, got {tol}.")
    H, Y = check_training_pair(features, targets)

    penalty = 1.0 / C
    if standardize:
        scaler = StandardScaler().fit(H)
        design = scaler.transform(H)
        mean, scale = scaler.mean_, scaler.scale_
    else:
        design = H
        mean, scale = None, None

    n_hidden, n_outputs = H.shape[1], Y.shape[1]
    weights = np.zeros((n_hidden, n_outputs), dtype=np.float64)
    intercept = np.zeros(n_outputs, dtype=np.float64)

    for j in tqdm(range(n_outputs), desc="[ElasticNet] outputs", disable=not verbose):
        model = ElasticNet(
            alpha=penalty,
            l1_ratio=l1_ratio,
            fit_intercept=True,
            max_iter=max_iter,
            tol=float(tol),
        )
        with warnings.catch_warnings():
            warnings.simplefilter("error", category=ConvergenceWarning)
            try:
                model.fit(design, Y[:, j])
            except ConvergenceWarning as exc:
                raise NumericalError(
                    f"Elastic net for output column {j} did not converge within max_iter={max_iter} "
                    f"(tol={tol}, lambda={penalty:.3e}, alpha={l1_ratio}): {exc}"
                ) from exc

        coef = np.asarray(model.coef_, dtype=np.float64)
        b = float(model.intercept_)
        if standardize:
            coef = coef / scale
            b = b - float(mean @ coef)
        weights[:, j] = coef
        intercept[j] = b

    if not (np.all(np.isfinite(weights)) and np.all(np.isfinite(intercept))):
        raise NumericalError(f"Elastic net produced NaN/Inf weights (lambda={penalty:.3e}, alpha={l1_ratio}).")
    return weights, intercept


class ElasticNetReadout(ReadoutModule):
    """Per-output elastic-net readout (lasso at alpha == 1); produces weights and an intercept."""

    kind = ReadoutKind.ELASTIC_NET

    def __init__(
        self,
        regularization: float,
        alpha: float = 1.0,
        *,
        standardize: bool = True,
        max_iter: int = 10000,
        tol: float = 1e-4,
        verbose: bool = False,
    ) -> None:
        super().__init__()
        self.regularization = check_regularization(regularization)
        self.alpha = check_alpha(alpha)
        if self.alpha == 0.0:
            raise InvalidArgumentError("ElasticNetReadout requires alpha > 0; use RidgeReadout for alpha == 0.")
        self.standardize = bool(standardize)
        self.max_iter = check_positive_int(max_iter, "max_iter")
        self.tol = float(tol)
        self.verbose = bool(verbose)

    def _solve(self, H, Y) -> ReadoutState:
        W, b = solve_elastic_net(
            H,
            Y,
            self.regularization,
            self.alpha,
            standardize=self.standardize,
            max_iter=self.max_iter,
            tol=self.tol,
            verbose=self.verbose,
        )
        return ReadoutState(output_weight=to_jax_f64(W), intercept=to_jax_f64(b))

    def _forward(self, H: JaxF64, state: ReadoutState) -> JaxF64:
        return self._linear(H, state) + state.intercept[None, :]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "regularization": self.regularization,
            "alpha": self.alpha,
            "standardize": self.standardize,
            "max_iter": self.max_iter,
            "tol": self.tol,
        }


__all__ = ["ElasticNetReadout", "solve_elastic_net"]
