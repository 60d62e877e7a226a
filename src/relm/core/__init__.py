"""Core contracts: errors, identifiers, types and validation."""

from .errors import RELMError, InvalidArgumentError, InvalidStateError, NumericalError
from .identifiers import Activation, ReadoutKind, Formulation

__all__ = [
    "RELMError",
    "InvalidArgumentError",
    "InvalidStateError",
    "NumericalError",
    "Activation",
    "ReadoutKind",
    "Formulation",
]
