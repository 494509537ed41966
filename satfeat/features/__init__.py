"""
satfeat.features

Feature extraction over a clause database.

Exports:
- Clause iteration
- Occurrence accumulators
- Moment and distribution stages
- FeatureExtractor orchestrator
"""

from .iterator import (
    ClauseView,
    clause_view,
    iter_clauses,
    for_one_clause,
    for_all_clauses,
)

from .accumulators import (
    VarOccurrences,
    RunningStat,
    fill_vars_cls,
)

from .moments import (
    ClauseMoments,
    VariableMoments,
    pnr,
    normalized_std,
    clause_first_moments,
    variable_first_moments,
    clause_second_moments,
    variable_second_moments,
)

from .distributions import calculate_cl_distributions

from .logging import create_logger

from .extractor import FeatureExtractor, extract_features

__all__ = [
    # Iteration
    "ClauseView",
    "clause_view",
    "iter_clauses",
    "for_one_clause",
    "for_all_clauses",
    # Accumulators
    "VarOccurrences",
    "RunningStat",
    "fill_vars_cls",
    # Moments
    "ClauseMoments",
    "VariableMoments",
    "pnr",
    "normalized_std",
    "clause_first_moments",
    "variable_first_moments",
    "clause_second_moments",
    "variable_second_moments",
    # Distributions
    "calculate_cl_distributions",
    # Logging
    "create_logger",
    # Orchestration
    "FeatureExtractor",
    "extract_features",
]
