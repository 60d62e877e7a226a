"""src/relm/core/interfaces.py
Lightweight protocol interfaces for the feature map and readout contracts.
"""
from __future__ import annotations

from typing import Any, Dict, Protocol, runtime_checkable

from relm.core.types import JaxF64


@runtime_checkable
class FeatureMap(Protocol):
    """Fixed hidden-layer mapping X -> H consumed by the readout trainer."""

    n_inputs: int
    n_hidden: int

    def transform(self, inputs: Any) -> JaxF64:
        ...

    def to_dict(self) -> Dict[str, Any]:
        ...


__all__ = ["FeatureMap"]
