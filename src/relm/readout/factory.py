"""Factory for creating readout instances from configuration, plus functional train/predict."""
from __future__ import annotations

from typing import Any, Optional

import jax.numpy as jnp

from relm.core.errors import InvalidArgumentError, InvalidStateError
from relm.core.types import JaxF64, to_jax_f64
from relm.core.validation import as_matrix
from relm.models.config import (
    ElasticNetReadoutConfig,
    ReadoutConfig,
    RidgeReadoutConfig,
    readout_config_from_alpha,
)
from relm.readout.base import ReadoutModule, ReadoutState
from relm.readout.elastic_net import ElasticNetReadout
from relm.readout.ridge import RidgeReadout


class ReadoutFactory:
    """Builds readout modules from a ReadoutConfig variant."""

    @staticmethod
    def create_readout(config: Optional[ReadoutConfig], *, verbose: bool = False) -> ReadoutModule:
        if config is None:
            raise InvalidArgumentError("ReadoutFactory requires a readout config.")

        if isinstance(config, RidgeReadoutConfig):
            config.validate()
            return RidgeReadout(regularization=config.regularization)

        if isinstance(config, ElasticNetReadoutConfig):
            config.validate()
            return ElasticNetReadout(
                regularization=config.regularization,
                alpha=config.alpha,
                standardize=config.standardize,
                max_iter=config.max_iter,
                tol=config.tol,
                verbose=verbose,
            )

        raise TypeError(f"ReadoutFactory received unknown config type: {type(config)}")


def train_readout(features: Any, targets: Any, regularization: float, alpha: float, **kwargs: Any) -> ReadoutState:
    """Fit H (N, L) -> Y (N, m); returns output_weight (L, m) and intercept (m,) or None."""
    config = readout_config_from_alpha(regularization, alpha, **kwargs)
    return ReadoutFactory.create_readout(config).fit(features, targets).state


def predict_readout(features: Any, state: Optional[ReadoutState]) -> JaxF64:
    """Yhat = H W (+ intercept broadcast over rows when the state carries one)."""
    if state is None:
        raise InvalidStateError("No trained readout state; train the readout before predicting.")
    H = to_jax_f64(as_matrix(features, "H", n_columns=state.n_hidden))
    Yhat = jnp.dot(H, state.output_weight)
    if state.intercept is not None:
        Yhat = Yhat + state.intercept[None, :]
    return Yhat


__all__ = ["ReadoutFactory", "train_readout", "predict_readout"]
