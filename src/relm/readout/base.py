"""src/relm/readout/base.py
ABC for readout components and the immutable trained state they publish.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

import jax.numpy as jnp

from relm.core.errors import InvalidStateError
from relm.core.identifiers import ReadoutKind
from relm.core.types import ConfigDict, JaxF64, to_jax_f64
from relm.core.validation import as_matrix, check_training_pair


@dataclass(frozen=True)
class ReadoutState:
    """Trained readout: output_weight (n_hidden, m) and intercept (m,) or None."""

    output_weight: JaxF64
    intercept: Optional[JaxF64] = None

    @property
    def n_hidden(self) -> int:
        return int(self.output_weight.shape[0])

    @property
    def n_outputs(self) -> int:
        return int(self.output_weight.shape[1])


class ReadoutModule(ABC):
    """Abstract base for readout components (ridge, elastic net).

    Subclasses implement ``_solve`` (H, Y -> ReadoutState) and ``_forward``
    (H, state -> Yhat). Validation happens here, before any solver runs, and a
    new state replaces the old one only after ``_solve`` returned.
    """

    kind: ReadoutKind

    def __init__(self) -> None:
        self._state: Optional[ReadoutState] = None

    @property
    def is_fitted(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> ReadoutState:
        if self._state is None:
            raise InvalidStateError(f"{type(self).__name__} is not fitted yet; call fit/train first.")
        return self._state

    def fit(self, features: Any, targets: Any) -> "ReadoutModule":
        """Fit the readout on hidden features H (N, L) and targets Y (N, m)."""
        H, Y = check_training_pair(features, targets)
        self._state = self._solve(H, Y)
        return self

    def predict(self, features: Any) -> JaxF64:
        """Predict Yhat (K, m) from hidden features H (K, L)."""
        state = self.state
        H = to_jax_f64(as_matrix(features, "H", n_columns=state.n_hidden))
        return self._forward(H, state)

    @staticmethod
    def _linear(H: JaxF64, state: ReadoutState) -> JaxF64:
        return jnp.dot(H, state.output_weight)

    @abstractmethod
    def _solve(self, H, Y) -> ReadoutState:
        """Compute a new trained state without touching self."""

    @abstractmethod
    def _forward(self, H: JaxF64, state: ReadoutState) -> JaxF64:
        """Apply a trained state to hidden features."""

    @abstractmethod
    def to_dict(self) -> ConfigDict:
        """Serialize hyperparameters to a config dict."""


__all__ = ["ReadoutModule", "ReadoutState"]
