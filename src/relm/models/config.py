"""
src/relm/models/config.py
Frozen configuration objects for the hidden layer and the two readout variants.

The readout is a tagged variant: RidgeReadoutConfig (alpha == 0) or
ElasticNetReadoutConfig (0 < alpha <= 1). readout_config_from_alpha resolves
it once so neither train nor predict branch on alpha.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from relm.core.errors import InvalidArgumentError
from relm.core.identifiers import ReadoutKind
from relm.core.validation import check_alpha, check_positive_int, check_regularization

DEFAULT_N_HIDDEN = 1000
DEFAULT_REGULARIZATION = 1000.0
DEFAULT_ALPHA = 0.0
DEFAULT_ACTIVATION = "sig"
DEFAULT_MAX_ITER = 10000
DEFAULT_TOL = 1e-4


@dataclass(frozen=True)
class HiddenLayerConfig:
    """Random feature map parameters."""

    n_inputs: int
    n_hidden: int = DEFAULT_N_HIDDEN
    activation: str = DEFAULT_ACTIVATION
    seed: Optional[int] = None

    def validate(self, context: str = "hidden") -> "HiddenLayerConfig":
        prefix = f"{context}: "
        try:
            check_positive_int(self.n_inputs, "n_inputs")
            check_positive_int(self.n_hidden, "n_hidden")
        except InvalidArgumentError as exc:
            raise InvalidArgumentError(f"{prefix}{exc}") from None
        if not isinstance(self.activation, str) or not self.activation:
            raise InvalidArgumentError(f"{prefix}activation must be a non-empty name.")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n_inputs": int(self.n_inputs),
            "n_hidden": int(self.n_hidden),
            "activation": str(self.activation),
            "seed": None if self.seed is None else int(self.seed),
        }


@dataclass(frozen=True)
class RidgeReadoutConfig:
    """alpha == 0: closed-form L2 readout, no intercept."""

    regularization: float = DEFAULT_REGULARIZATION

    @property
    def kind(self) -> ReadoutKind:
        return ReadoutKind.RIDGE

    @property
    def alpha(self) -> float:
        return 0.0

    def validate(self, context: str = "ridge") -> "RidgeReadoutConfig":
        try:
            check_regularization(self.regularization)
        except InvalidArgumentError as exc:
            raise InvalidArgumentError(f"{context}: {exc}") from None
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "regularization": float(self.regularization), "alpha": 0.0}


@dataclass(frozen=True)
class ElasticNetReadoutConfig:
    """0 < alpha <= 1: per-output elastic net (lasso at alpha == 1) with intercept."""

    regularization: float = DEFAULT_REGULARIZATION
    alpha: float = 1.0
    standardize: bool = True
    max_iter: int = DEFAULT_MAX_ITER
    tol: float = DEFAULT_TOL

    @property
    def kind(self) -> ReadoutKind:
        return ReadoutKind.ELASTIC_NET

    @property
    def penalty(self) -> float:
        """Penalty strength lambda = 1 / C."""
        return 1.0 / float(self.regularization)

    def validate(self, context: str = "elastic_net") -> "ElasticNetReadoutConfig":
        prefix = f"{context}: "
        try:
            check_regularization(self.regularization)
            alpha = check_alpha(self.alpha)
            check_positive_int(self.max_iter, "max_iter")
        except InvalidArgumentError as exc:
            raise InvalidArgumentError(f"{prefix}{exc}") from None
        if alpha == 0.0:
            raise InvalidArgumentError(f"{prefix}alpha must be > 0 for elastic net; use RidgeReadoutConfig for alpha == 0.")
        if not float(self.tol) > 0.0:
            raise InvalidArgumentError(f"{prefix}tol must be positive, got {self.tol}.")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "regularization": float(self.regularization),
            "alpha": float(self.alpha),
            "standardize": bool(self.standardize),
            "max_iter": int(self.max_iter),
            "tol": float(self.tol),
        }


ReadoutConfig = Union[RidgeReadoutConfig, ElasticNetReadoutConfig]


def readout_config_from_alpha(
    regularization: float = DEFAULT_REGULARIZATION,
    alpha: float = DEFAULT_ALPHA,
    *,
    standardize: bool = True,
    max_iter: int = DEFAULT_MAX_ITER,
    tol: float = DEFAULT_TOL,
) -> ReadoutConfig:
    """Resolve (C, alpha) into the matching readout variant."""
    c = check_regularization(regularization)
    a = check_alpha(alpha)
    if a == 0.0:
        return RidgeReadoutConfig(regularization=c).validate()
    return ElasticNetReadoutConfig(
        regularization=c, alpha=a, standardize=standardize, max_iter=max_iter, tol=tol
    ).validate()


@dataclass(frozen=True)
class RELMConfig:
    """Full model configuration: hidden layer + readout variant."""

    hidden: HiddenLayerConfig
    readout: ReadoutConfig

    def __post_init__(self) -> None:
        if self.hidden is None:
            raise InvalidArgumentError("RELMConfig: hidden config is required.")
        if self.readout is None:
            raise InvalidArgumentError("RELMConfig: readout config is required.")
        self.hidden.validate(context="RELMConfig.hidden")
        self.readout.validate(context="RELMConfig.readout")

    @classmethod
    def create(
        cls,
        n_inputs: int,
        n_hidden: int = DEFAULT_N_HIDDEN,
        regularization: float = DEFAULT_REGULARIZATION,
        alpha: float = DEFAULT_ALPHA,
        activation: str = DEFAULT_ACTIVATION,
        seed: Optional[int] = None,
        **readout_kwargs: Any,
    ) -> "RELMConfig":
        return cls(
            hidden=HiddenLayerConfig(n_inputs=n_inputs, n_hidden=n_hidden, activation=activation, seed=seed),
            readout=readout_config_from_alpha(regularization, alpha, **readout_kwargs),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"hidden": self.hidden.to_dict(), "readout": self.readout.to_dict()}


__all__ = [
    "HiddenLayerConfig",
    "RidgeReadoutConfig",
    "ElasticNetReadoutConfig",
    "ReadoutConfig",
    "RELMConfig",
    "readout_config_from_alpha",
]
