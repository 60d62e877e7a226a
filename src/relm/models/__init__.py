"""Model configuration and the RegularizedELM model."""

from .config import (
    HiddenLayerConfig,
    RidgeReadoutConfig,
    ElasticNetReadoutConfig,
    ReadoutConfig,
    RELMConfig,
    readout_config_from_alpha,
)
from .relm import RegularizedELM

__all__ = [
    "HiddenLayerConfig",
    "RidgeReadoutConfig",
    "ElasticNetReadoutConfig",
    "ReadoutConfig",
    "RELMConfig",
    "readout_config_from_alpha",
    "RegularizedELM",
]
