"""Hidden-layer components (feature map and activation library)."""

from .activations import ACTIVATIONS, resolve_activation
from .hidden import HiddenLayer, create_jax_key

__all__ = ["ACTIVATIONS", "resolve_activation", "HiddenLayer", "create_jax_key"]
