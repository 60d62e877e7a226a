"""Readout modules (trainable linear decoders on top of the hidden layer)."""

from .base import ReadoutModule, ReadoutState
from .ridge import RidgeReadout, solve_ridge, select_formulation
from .elastic_net import ElasticNetReadout, solve_elastic_net

__all__ = [
    "ReadoutModule",
    "ReadoutState",
    "RidgeReadout",
    "solve_ridge",
    "select_formulation",
    "ElasticNetReadout",
    "solve_elastic_net",
]
