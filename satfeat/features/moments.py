"""
satfeat.features.moments

First- and second-moment statistics over clauses and variables.

Clause-side ratios are recomputed from a pass over the clause iterator;
variable-side ratios come from the VarOccurrences counters and are
computed over active variables only.

Ratios:
    vcg (clause): size / num_vars
    vcg (var):    occurrences / num_clauses
    pnr:          0.5 + (2 * pos - size) / (2 * size)
                  (0.0 all negative, 0.5 balanced, 1.0 all positive)
    horn (var):   Horn clause occurrences / num_clauses

Each stage returns a new value; nothing is accumulated in shared state.
"""

from dataclasses import dataclass, field, replace
import math

import numpy as np

from satfeat.core.types import MetricSummary
from satfeat.solver.database import ClauseDatabase
from .accumulators import RunningStat, VarOccurrences
from .iterator import for_all_clauses


def pnr(pos, size):
    """Positive/negative literal ratio; works on scalars and arrays."""
    return 0.5 + (2.0 * pos - size) / (2.0 * size)


def normalized_std(sq_sum: float, population: int, mean: float, eps: float) -> float:
    """sqrt(sq_sum / population) / mean, or 0 if sq_sum or mean is within eps of 0."""
    if sq_sum > eps and mean > eps and population > 0:
        return math.sqrt(sq_sum / population) / mean
    return 0.0


@dataclass(frozen=True)
class ClauseMoments:
    """Clause-side features.

    Attributes:
        binary: Fraction of irredundant binary clauses.
        trinary: Fraction of irredundant ternary clauses.
        horn: Fraction of Horn clauses.
        vcg: Clause size ratio summary.
        pnr: Clause polarity ratio summary.
    """
    binary: float = 0.0
    trinary: float = 0.0
    horn: float = 0.0
    vcg: MetricSummary = field(default_factory=MetricSummary)
    pnr: MetricSummary = field(default_factory=MetricSummary)


@dataclass(frozen=True)
class VariableMoments:
    """Variable-side features over active variables."""
    vcg: MetricSummary = field(default_factory=MetricSummary)
    pnr: MetricSummary = field(default_factory=MetricSummary)
    horn: MetricSummary = field(default_factory=MetricSummary)


# =============================================================================
# First moments
# =============================================================================

def clause_first_moments(
    db: ClauseDatabase,
    num_vars: int,
    num_clauses: int,
    horn_clauses: int,
) -> ClauseMoments:
    """Min/max/mean/spread of clause ratios plus clause-kind fractions.

    Args:
        db: Clause database.
        num_vars: Active variable count.
        num_clauses: Irredundant clause count from the database counters.
        horn_clauses: Horn clause count from the occurrence pass.
    """
    if num_clauses == 0:
        return ClauseMoments()

    vcg = RunningStat()
    pnr_stat = RunningStat()

    def each_clause(size: int, pos: int, neg: int) -> None:
        if size == 0 or num_vars == 0:
            return
        vcg.add(size / num_vars)
        pnr_stat.add(pnr(pos, size))

    for_all_clauses(db, each_clause)

    return ClauseMoments(
        binary=db.bin_tri.irred_bins / num_clauses,
        trinary=db.bin_tri.irred_tris / num_clauses,
        horn=horn_clauses / num_clauses,
        vcg=vcg.summary(num_clauses),
        pnr=pnr_stat.summary(num_clauses),
    )


def _variable_ratios(occ: VarOccurrences, num_clauses: int):
    active = occ.active
    size = occ.size[active].astype(np.float64)
    num_pos = occ.num_pos[active].astype(np.float64)
    horn = occ.horn[active].astype(np.float64)
    return size / num_clauses, pnr(num_pos, size), horn / num_clauses


def variable_first_moments(
    occ: VarOccurrences,
    num_vars: int,
    num_clauses: int,
) -> VariableMoments:
    """Min/max/mean/spread of variable ratios across active variables."""
    if num_vars == 0 or num_clauses == 0:
        return VariableMoments()

    vcg_values, pnr_values, horn_values = _variable_ratios(occ, num_clauses)

    stats = []
    for values in (vcg_values, pnr_values, horn_values):
        stat = RunningStat()
        stat.add_array(values)
        stats.append(stat.summary(num_vars))

    return VariableMoments(vcg=stats[0], pnr=stats[1], horn=stats[2])


# =============================================================================
# Second moments
# =============================================================================

def clause_second_moments(
    db: ClauseDatabase,
    first: ClauseMoments,
    num_vars: int,
    num_clauses: int,
    eps: float,
) -> ClauseMoments:
    """Fill the normalized std of the clause ratios (needs the means)."""
    if num_clauses == 0 or num_vars == 0:
        return first

    vcg_mean = first.vcg.mean
    pnr_mean = first.pnr.mean
    vcg_sq = 0.0
    pnr_sq = 0.0

    def each_clause(size: int, pos: int, neg: int) -> None:
        nonlocal vcg_sq, pnr_sq
        if size == 0:
            return
        vcg_sq += (vcg_mean - size / num_vars) ** 2
        pnr_sq += (pnr_mean - pnr(pos, size)) ** 2

    for_all_clauses(db, each_clause)

    return replace(
        first,
        vcg=replace(first.vcg, std=normalized_std(vcg_sq, num_clauses, vcg_mean, eps)),
        pnr=replace(first.pnr, std=normalized_std(pnr_sq, num_clauses, pnr_mean, eps)),
    )


def variable_second_moments(
    occ: VarOccurrences,
    first: VariableMoments,
    num_vars: int,
    num_clauses: int,
    eps: float,
) -> VariableMoments:
    """Fill the normalized std of the variable ratios (needs the means)."""
    if num_vars == 0 or num_clauses == 0:
        return first

    values = _variable_ratios(occ, num_clauses)
    summaries = (first.vcg, first.pnr, first.horn)

    filled = []
    for summary, vals in zip(summaries, values):
        sq_sum = float(((summary.mean - vals) ** 2).sum())
        filled.append(
            replace(summary, std=normalized_std(sq_sum, num_vars, summary.mean, eps))
        )

    return VariableMoments(vcg=filled[0], pnr=filled[1], horn=filled[2])
