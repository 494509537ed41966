"""
satfeat.core.validation

Boundary validation functions.

Design: Validate at API boundaries, trust internally.
All validation functions raise ValidationError on failure.
"""

import numpy as np
from typing import Sequence

from .exceptions import ValidationError, NumericalError


def validate_no_nan_inf(
    values: np.ndarray,
    name: str = "array"
) -> None:
    """Validate array contains no NaN or Inf values.

    Raises:
        NumericalError: If NaN or Inf found.
    """
    values = np.asarray(values, dtype=np.float64)

    if np.isnan(values).any():
        n_nan = int(np.isnan(values).sum())
        raise NumericalError(f"{name} contains {n_nan} NaN values")

    if np.isinf(values).any():
        n_inf = int(np.isinf(values).sum())
        raise NumericalError(f"{name} contains {n_inf} Inf values")


def validate_positive(
    value: float,
    name: str = "value"
) -> None:
    """Validate value is strictly positive."""
    if value <= 0:
        raise ValidationError(f"{name} must be positive, got {value}")


def validate_non_negative(
    value: float,
    name: str = "value"
) -> None:
    """Validate value is non-negative."""
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")


def validate_in_range(
    value: float,
    low: float,
    high: float,
    name: str = "value"
) -> None:
    """Validate value is in [low, high]."""
    if not (low <= value <= high):
        raise ValidationError(f"{name} must be in [{low}, {high}], got {value}")


def validate_non_negative_int(
    value: int,
    name: str = "value"
) -> None:
    """Validate value is a non-negative integer."""
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ValidationError(f"{name} must be non-negative int, got {value!r}")


def validate_lit_in_range(
    var: int,
    n_vars: int,
    name: str = "literal"
) -> None:
    """Validate a literal's variable exists in a universe of n_vars variables."""
    if not (0 <= var < n_vars):
        raise ValidationError(
            f"{name} refers to variable {var}, but only {n_vars} variables exist"
        )


def validate_unique_elements(
    seq: Sequence,
    name: str = "sequence"
) -> None:
    """Validate all elements in sequence are unique."""
    if len(seq) != len(set(seq)):
        raise ValidationError(f"{name} contains duplicate elements")
