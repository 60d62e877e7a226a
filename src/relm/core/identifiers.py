"""src/relm/core/identifiers.py
Enum-based identifiers for activations and readout variants.
"""

from __future__ import annotations

import enum


class Activation(str, enum.Enum):
    """Hidden-layer activation functions (short names follow the classic ELM toolbox)."""

    SIGMOID = "sig"
    SINE = "sin"
    HARD_LIMIT = "hardlim"
    TRIANGULAR_BASIS = "tribas"
    RADIAL_BASIS = "radbas"

    @classmethod
    def from_name(cls, name: str) -> "Activation":
        key = str(name).strip().lower()
        if key in _ACTIVATION_ALIASES:
            return _ACTIVATION_ALIASES[key]
        return cls(key)

    def __str__(self) -> str:
        return self.value


_ACTIVATION_ALIASES = {
    "sigmoid": Activation.SIGMOID,
    "sine": Activation.SINE,
    "hard-limit": Activation.HARD_LIMIT,
    "hard_limit": Activation.HARD_LIMIT,
    "triangular-basis": Activation.TRIANGULAR_BASIS,
    "triangular_basis": Activation.TRIANGULAR_BASIS,
    "radial-basis": Activation.RADIAL_BASIS,
    "radial_basis": Activation.RADIAL_BASIS,
}


class ReadoutKind(str, enum.Enum):
    """Regularization regime of the readout."""

    RIDGE = "ridge"
    ELASTIC_NET = "elastic_net"

    def __str__(self) -> str:
        return self.value


class Formulation(str, enum.Enum):
    """Which Gram matrix the ridge solver factorizes."""

    PRIMAL = "primal"  # (L x L): N >= L
    DUAL = "dual"      # (N x N): N < L

    def __str__(self) -> str:
        return self.value


__all__ = ["Activation", "ReadoutKind", "Formulation"]
