"""
satfeat

Structural and statistical features of the SAT instance held in a
solver's clause database, for algorithm-selection classifiers.
"""

from .core import (
    SatFeatError,
    ValidationError,
    ConfigError,
    NumericalError,
    ContractViolationError,
    Lit,
    SolveFeatures,
    FEATURE_NAMES,
    FEATURE_DIM,
)
from .config import FeatureConfig, load_config
from .solver import ClauseDatabase, create_clause_database
from .features import FeatureExtractor, extract_features

__version__ = "0.1.0"

__all__ = [
    "SatFeatError",
    "ValidationError",
    "ConfigError",
    "NumericalError",
    "ContractViolationError",
    "Lit",
    "SolveFeatures",
    "FEATURE_NAMES",
    "FEATURE_DIM",
    "FeatureConfig",
    "load_config",
    "ClauseDatabase",
    "create_clause_database",
    "FeatureExtractor",
    "extract_features",
]
