"""
src/relm/layers/activations.py
Elementwise hidden-layer activations (pure JAX, safe under jax.jit).

    sig     : 1 / (1 + exp(-x))
    sin     : sin(x)
    hardlim : 1 where x >= 0, else 0
    tribas  : max(1 - |x|, 0)
    radbas  : exp(-x^2)
"""
from __future__ import annotations

from typing import Callable, Union

import jax
import jax.numpy as jnp

from relm.core.errors import InvalidArgumentError
from relm.core.identifiers import Activation
from relm.core.types import ActivationFn, JaxF64


def sigmoid(x: JaxF64) -> JaxF64:
    return jax.nn.sigmoid(x)


def sine(x: JaxF64) -> JaxF64:
    return jnp.sin(x)


def hard_limit(x: JaxF64) -> JaxF64:
    return jnp.where(x >= 0.0, 1.0, 0.0).astype(x.dtype)


def triangular_basis(x: JaxF64) -> JaxF64:
    return jnp.maximum(1.0 - jnp.abs(x), 0.0)


def radial_basis(x: JaxF64) -> JaxF64:
    return jnp.exp(-(x ** 2))


ACTIVATIONS: dict[Activation, ActivationFn] = {
    Activation.SIGMOID: sigmoid,
    Activation.SINE: sine,
    Activation.HARD_LIMIT: hard_limit,
    Activation.TRIANGULAR_BASIS: triangular_basis,
    Activation.RADIAL_BASIS: radial_basis,
}

ActivationSpec = Union[str, Activation, Callable[[JaxF64], JaxF64]]


def resolve_activation(activation: ActivationSpec) -> tuple[str, ActivationFn]:
    """Return (display name, function) for an enum, a symbolic name or a callable."""
    if isinstance(activation, Activation):
        return activation.value, ACTIVATIONS[activation]
    if isinstance(activation, str):
        try:
            act = Activation.from_name(activation)
        except ValueError:
            valid = sorted({a.value for a in Activation} | {"sigmoid", "sine", "hard-limit",
                                                             "triangular-basis", "radial-basis"})
            raise InvalidArgumentError(f"Unknown activation {activation!r}. Expected one of {valid} or a callable.") from None
        return act.value, ACTIVATIONS[act]
    if callable(activation):
        return getattr(activation, "__name__", "custom"), activation
    raise InvalidArgumentError(f"activation must be a name or a callable, got {type(activation).__name__}.")


__all__ = [
    "sigmoid",
    "sine",
    "hard_limit",
    "triangular_basis",
    "radial_basis",
    "ACTIVATIONS",
    "ActivationSpec",
    "resolve_activation",
]
