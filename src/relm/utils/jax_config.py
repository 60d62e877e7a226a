"""JAX precision settings for relm (the solvers assume float64 throughout)."""

from __future__ import annotations

import threading

import jax

_CONFIG_LOCK = threading.Lock()
_CONFIGURED = False


def ensure_x64_enabled() -> None:
    """Switch JAX to 64-bit mode once per process."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    with _CONFIG_LOCK:
        if not _CONFIGURED:
            jax.config.update("jax_enable_x64", True)
            _CONFIGURED = True


def x64_enabled() -> bool:
    return bool(jax.config.read("jax_enable_x64"))


__all__ = ["ensure_x64_enabled", "x64_enabled"]
