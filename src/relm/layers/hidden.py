"""src/relm/layers/hidden.py
Fixed random hidden layer of the ELM (the feature map X -> H).
"""
from __future__ import annotations

from typing import Any, Dict, Union

import jax
import jax.numpy as jnp
import numpy as np

from relm.core.errors import InvalidArgumentError
from relm.core.types import JaxF64, JaxKey, to_jax_f64
from relm.core.validation import as_matrix, check_positive_int
from relm.layers.activations import ActivationSpec, resolve_activation

SeedLike = Union[int, JaxKey, None]


def create_jax_key(seed: SeedLike) -> JaxKey:
    """Create a JAX PRNGKey from an int, an existing key, or None (fresh entropy)."""
    if seed is None:
        seed = np.random.SeedSequence().entropy
    if isinstance(seed, (int, np.integer)) and not isinstance(seed, bool):
        # PRNGKey only takes 64 bits
        return jax.random.PRNGKey(int(seed) % (2 ** 63))
    if isinstance(seed, jax.Array) and jax.dtypes.issubdtype(seed.dtype, jax.dtypes.prng_key):
        return seed
    try:
        key = jnp.asarray(seed)
    except TypeError as exc:
        raise InvalidArgumentError(f"seed must be an int or a PRNG key, got {type(seed).__name__}.") from exc
    if key.dtype != jnp.uint32 or key.shape != (2,):
        raise InvalidArgumentError(f"seed must be an int or a PRNG key, got {key.dtype}{key.shape}.")
    return key


class HiddenLayer:
    """
    Random affine transform followed by an elementwise activation.

    input_weight ~ U[-1, 1] with shape (n_inputs, n_hidden) and
    bias ~ U[0, 1] with shape (n_hidden,), drawn once at construction.
    """

    def __init__(
        self,
        n_inputs: int,
        n_hidden: int = 1000,
        activation: ActivationSpec = "sig",
        seed: SeedLike = None,
    ) -> None:
        self.n_inputs = check_positive_int(n_inputs, "n_inputs")
        self.n_hidden = check_positive_int(n_hidden, "n_hidden")
        self.activation_name, self.activation = resolve_activation(activation)
        self.seed = int(seed) if isinstance(seed, (int, np.integer)) and not isinstance(seed, bool) else None
        k_w, k_b = jax.random.split(create_jax_key(seed), 2)

        self.input_weight: JaxF64 = jax.random.uniform(
            k_w,
            (self.n_inputs, self.n_hidden),
            minval=-1.0,
            maxval=1.0,
            dtype=jnp.float64,
        )
        self.bias: JaxF64 = jax.random.uniform(
            k_b,
            (self.n_hidden,),
            minval=0.0,
            maxval=1.0,
            dtype=jnp.float64,
        )

    def transform(self, inputs: Any) -> JaxF64:
        """H = g(X W + b) for X of shape (samples, n_inputs)."""
        X = to_jax_f64(as_matrix(inputs, "X", n_columns=self.n_inputs))
        return self.activation(jnp.dot(X, self.input_weight) + self.bias)

    def __call__(self, inputs: Any) -> JaxF64:
        return self.transform(inputs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n_inputs": self.n_inputs,
            "n_hidden": self.n_hidden,
            "activation": self.activation_name,
            "seed": self.seed,
        }

    def __repr__(self) -> str:
        return f"HiddenLayer(n_inputs={self.n_inputs}, n_hidden={self.n_hidden}, activation={self.activation_name!r})"


__all__ = ["HiddenLayer", "create_jax_key", "SeedLike"]
