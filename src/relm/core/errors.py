"""src/relm/core/errors.py
Typed error taxonomy for training and prediction.

Every failure raised by the library derives from RELMError so callers can
catch one base class, while the concrete classes also inherit the matching
builtin (ValueError / RuntimeError / ArithmeticError).
"""
from __future__ import annotations


class RELMError(Exception):
    """Base class for all relm errors."""


class InvalidArgumentError(RELMError, ValueError):
    """A hyperparameter, shape or value was rejected before any computation."""


class InvalidStateError(RELMError, RuntimeError):
    """The model was used before a successful train call."""


class NumericalError(RELMError, ArithmeticError):
    """The solver produced an unusable result (ill-conditioned, NaN/Inf, no convergence)."""


__all__ = ["RELMError", "InvalidArgumentError", "InvalidStateError", "NumericalError"]
