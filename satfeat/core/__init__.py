"""
satfeat.core

Core infrastructure for satfeat.

Exports:
- Exception classes
- Core data types
- Validation utilities
"""

from .exceptions import (
    SatFeatError,
    ValidationError,
    ConfigError,
    NumericalError,
    ContractViolationError,
)

from .types import (
    Lit,
    WatchType,
    Watched,
    Clause,
    MetricSummary,
    Distrib,
    SolveFeatures,
    FEATURE_NAMES,
    FEATURE_DIM,
)

from .validation import (
    validate_no_nan_inf,
    validate_positive,
    validate_non_negative,
    validate_in_range,
    validate_non_negative_int,
    validate_lit_in_range,
    validate_unique_elements,
)

__all__ = [
    # Exceptions
    "SatFeatError",
    "ValidationError",
    "ConfigError",
    "NumericalError",
    "ContractViolationError",
    # Types
    "Lit",
    "WatchType",
    "Watched",
    "Clause",
    "MetricSummary",
    "Distrib",
    "SolveFeatures",
    "FEATURE_NAMES",
    "FEATURE_DIM",
    # Validation
    "validate_no_nan_inf",
    "validate_positive",
    "validate_non_negative",
    "validate_in_range",
    "validate_non_negative_int",
    "validate_lit_in_range",
    "validate_unique_elements",
]
