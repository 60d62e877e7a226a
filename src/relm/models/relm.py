"""
src/relm/models/relm.py
Regularized Extreme Learning Machine: a fixed random hidden layer composed
with a regularized linear readout.

    alpha == 0      ridge readout   → output_weight
    0 < alpha <= 1  elastic net     → output_weight + intercept

The readout variant is resolved once from (C, alpha) at construction, so
train and predict never branch on alpha themselves.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from relm.core.errors import InvalidArgumentError, InvalidStateError
from relm.core.interfaces import FeatureMap
from relm.core.types import JaxF64, TimingHook
from relm.core.validation import as_matrix, as_targets, check_alpha, check_positive_int, check_regularization
from relm.layers.activations import ActivationSpec
from relm.layers.hidden import HiddenLayer, SeedLike
from relm.models.config import (
    DEFAULT_ACTIVATION,
    DEFAULT_ALPHA,
    DEFAULT_MAX_ITER,
    DEFAULT_N_HIDDEN,
    DEFAULT_REGULARIZATION,
    DEFAULT_TOL,
    RELMConfig,
    ReadoutConfig,
    readout_config_from_alpha,
)
from relm.readout.base import ReadoutModule, ReadoutState
from relm.readout.factory import ReadoutFactory
from relm.utils.timing import Stopwatch


class RegularizedELM:
    """Single-hidden-layer random-feature network with a ridge or elastic-net readout.

    Usage::

        relm = RegularizedELM(n_inputs=4, n_hidden=100)            # ridge
        relm = relm.train(X, Y)
        Yhat = relm.predict(X)

        lasso = RegularizedELM(n_inputs=4, n_hidden=100, alpha=1)  # lasso
        Yhat = lasso.train(X, Y).predict(X)

    Training mutates only the trained readout state; concurrent ``train`` calls
    on one instance must be serialized by the caller. ``predict`` on a trained
    model is read-only.
    """

    def __init__(
        self,
        n_inputs: int,
        n_hidden: int = DEFAULT_N_HIDDEN,
        regularization: float = DEFAULT_REGULARIZATION,
        alpha: float = DEFAULT_ALPHA,
        activation: ActivationSpec = DEFAULT_ACTIVATION,
        seed: SeedLike = None,
        *,
        standardize: bool = True,
        max_iter: int = DEFAULT_MAX_ITER,
        tol: float = DEFAULT_TOL,
        feature_map: Optional[FeatureMap] = None,
        timing_hook: Optional[TimingHook] = None,
        verbose: bool = False,
    ) -> None:
        regularization = check_regularization(regularization)
        alpha = check_alpha(alpha)
        self.hidden: FeatureMap = self._resolve_feature_map(feature_map, n_inputs, n_hidden, activation, seed)
        self._readout_config: ReadoutConfig = readout_config_from_alpha(
            regularization, alpha, standardize=standardize, max_iter=max_iter, tol=tol
        )
        self.timing_hook = timing_hook
        self.verbose = bool(verbose)
        self._readout: Optional[ReadoutModule] = None

    @staticmethod
    def _resolve_feature_map(
        feature_map: Optional[FeatureMap],
        n_inputs: int,
        n_hidden: int,
        activation: ActivationSpec,
        seed: SeedLike,
    ) -> FeatureMap:
        if feature_map is None:
            return HiddenLayer(n_inputs=n_inputs, n_hidden=n_hidden, activation=activation, seed=seed)
        if not isinstance(feature_map, FeatureMap):
            raise InvalidArgumentError(
                f"feature_map must provide n_inputs, n_hidden, transform and to_dict; got {type(feature_map).__name__}."
            )
        n_inputs = check_positive_int(n_inputs, "n_inputs")
        if feature_map.n_inputs != n_inputs:
            raise InvalidArgumentError(
                f"feature_map expects {feature_map.n_inputs} inputs but n_inputs={n_inputs}."
            )
        return feature_map

    @classmethod
    def from_config(
        cls,
        config: RELMConfig,
        *,
        timing_hook: Optional[TimingHook] = None,
        verbose: bool = False,
    ) -> "RegularizedELM":
        readout_cfg = config.readout
        extra: Dict[str, Any] = {}
        if readout_cfg.alpha > 0.0:
            extra = {
                "standardize": readout_cfg.standardize,
                "max_iter": readout_cfg.max_iter,
                "tol": readout_cfg.tol,
            }
        return cls(
            n_inputs=config.hidden.n_inputs,
            n_hidden=config.hidden.n_hidden,
            regularization=readout_cfg.regularization,
            alpha=readout_cfg.alpha,
            activation=config.hidden.activation,
            seed=config.hidden.seed,
            timing_hook=timing_hook,
            verbose=verbose,
            **extra,
        )

    # ------------------------------------------------------------------
    # Hyperparameter views
    # ------------------------------------------------------------------
    @property
    def readout_config(self) -> ReadoutConfig:
        return self._readout_config

    @property
    def regularization(self) -> float:
        return self._readout_config.regularization

    @property
    def alpha(self) -> float:
        return self._readout_config.alpha

    @property
    def n_inputs(self) -> int:
        return self.hidden.n_inputs

    @property
    def n_hidden(self) -> int:
        return self.hidden.n_hidden

    # ------------------------------------------------------------------
    # Trained state
    # ------------------------------------------------------------------
    @property
    def is_trained(self) -> bool:
        return self._readout is not None

    @property
    def state(self) -> ReadoutState:
        if self._readout is None:
            raise InvalidStateError("RegularizedELM has not been trained; call train(X, Y) before predict.")
        return self._readout.state

    @property
    def output_weight(self) -> JaxF64:
        return self.state.output_weight

    @property
    def intercept(self) -> Optional[JaxF64]:
        return self.state.intercept

    # ------------------------------------------------------------------
    # Train / predict
    # ------------------------------------------------------------------
    def hidden_features(self, X: Any) -> JaxF64:
        """Hidden-layer output H for inputs X (samples, n_inputs)."""
        return self.hidden.transform(X)

    def train(self, X: Any, Y: Any) -> "RegularizedELM":
        """Fit the readout on X (N, n_inputs) and Y (N, m); returns self."""
        inputs = as_matrix(X, "X", n_columns=self.n_inputs)
        if inputs.shape[0] == 0:
            raise InvalidArgumentError(f"X must contain at least one sample, got shape {inputs.shape}.")
        targets = as_targets(Y, inputs.shape[0], name="Y")

        with Stopwatch("train", self.timing_hook) as watch:
            H = self.hidden.transform(inputs)
            readout = ReadoutFactory.create_readout(self.readout_config, verbose=self.verbose)
            readout.fit(H, targets)
            # the fitted readout replaces the previous one in a single assignment
            self._readout = readout

        if self.verbose:
            state = readout.state
            print(
                f"[RELM] trained {readout.kind.value} readout: H={tuple(H.shape)} -> "
                f"W={tuple(state.output_weight.shape)} in {watch.elapsed:.3f}s"
            )
        return self

    def predict(self, X: Any) -> JaxF64:
        """Predicted outputs (K, m) for X (K, n_inputs)."""
        if self._readout is None:
            raise InvalidStateError("RegularizedELM has not been trained; call train(X, Y) before predict.")
        readout = self._readout
        inputs = as_matrix(X, "X", n_columns=self.n_inputs)
        with Stopwatch("predict", self.timing_hook):
            return readout.predict(self.hidden.transform(inputs))

    def to_dict(self) -> Dict[str, Any]:
        return {"hidden": self.hidden.to_dict(), "readout": self.readout_config.to_dict()}

    def __repr__(self) -> str:
        return (
            f"RegularizedELM(n_inputs={self.n_inputs}, n_hidden={self.n_hidden}, "
            f"regularization={self.regularization}, alpha={self.alpha}, "
            f"activation={getattr(self.hidden, 'activation_name', 'custom')!r}, trained={self.is_trained})"
        )


__all__ = ["RegularizedELM"]
