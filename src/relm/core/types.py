"""
relm/core/types.py — Central Type Definitions & Domain Gateway

NUMPY Domain → NpF64 (sklearn / user input side)
JAX Domain   → JaxF64 (hidden layer and ridge solver side)

CPU↔JAX transfers go through to_jax_f64() / to_np_f64() so that NaN/Inf never
crosses the boundary silently.
"""
from typing import Callable

from beartype import beartype
from jaxtyping import Float64, UInt32, jaxtyped
import jax
from jax import Array
import jax.numpy as jnp
import numpy as np

# ==========================================
# 型エイリアス定義
# ==========================================
NpF64 = Float64[np.ndarray, "..."]
JaxF64 = Float64[Array, "..."]
JaxKey = UInt32[Array, "..."]  # JAX PRNG key (uint32)

ActivationFn = Callable[[JaxF64], JaxF64]
TimingHook = Callable[[str, float], None]

PrimitiveValue = str | float | int | bool | None
ConfigDict = dict[str, PrimitiveValue | dict[str, PrimitiveValue]]


# ==========================================
# Domain Gateway（関所）— CPU ↔ JAX 転送
# ==========================================

@jaxtyped(typechecker=beartype)
def to_jax_f64(x: NpF64) -> JaxF64:
    """NumPy(CPU) → JAX 変換の関所。

    - beartype が NpF64 (numpy.float64) のみ受け付ける
    - NaN/Inf が混入していたら即クラッシュ
    """
    if not np.all(np.isfinite(x)):
        raise ValueError(f"NaN/Inf detected at CPU→JAX boundary! shape={x.shape}")
    return jax.device_put(jnp.asarray(x, dtype=jnp.float64))


@jaxtyped(typechecker=beartype)
def to_np_f64(x: JaxF64) -> NpF64:
    """JAX → NumPy(CPU) 変換の関所。"""
    result = np.asarray(x, dtype=np.float64)
    if not np.all(np.isfinite(result)):
        raise ValueError(f"NaN/Inf detected at JAX→CPU boundary! shape={result.shape}")
    return result


__all__ = [
    "NpF64",
    "JaxF64",
    "JaxKey",
    "ActivationFn",
    "TimingHook",
    "ConfigDict",
    "to_jax_f64",
    "to_np_f64",
]
