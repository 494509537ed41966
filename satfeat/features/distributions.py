"""
satfeat.features.distributions

Mean and variance of size, glue and activity over a clause population.

Activity is divided by the current clause increment: the increment grows
during search, so raw activities from different points in time are not
comparable.
"""

from typing import Sequence, Tuple

import numpy as np

from satfeat.core.types import Distrib
from satfeat.core.validation import validate_positive
from satfeat.solver.database import ClauseDatabase


def _mean_var(values: np.ndarray) -> Tuple[float, float]:
    """Population mean and variance, exact for constant populations."""
    if values.min() == values.max():
        return float(values[0]), 0.0
    mean = values.sum() / values.size
    var = ((mean - values) ** 2).sum() / values.size
    return float(mean), float(var)


def calculate_cl_distributions(
    db: ClauseDatabase,
    clauses: Sequence[int],
    cla_inc: float,
) -> Distrib:
    """Summarize the clauses at the given allocator offsets.

    Args:
        db: Clause database owning the offsets.
        clauses: Allocator offsets (e.g. db.long_irred_cls).
        cla_inc: Current clause activity increment.

    Returns:
        Distrib; all zeros if clauses is empty.
    """
    validate_positive(cla_inc, "cla_inc")
    if len(clauses) == 0:
        return Distrib()

    bodies = [db.cl_alloc.ptr(off) for off in clauses]
    sizes = np.array([cl.size for cl in bodies], dtype=np.float64)
    glues = np.array([cl.glue for cl in bodies], dtype=np.float64)
    activities = np.array([cl.activity for cl in bodies], dtype=np.float64) / cla_inc

    size_mean, size_var = _mean_var(sizes)
    glue_mean, glue_var = _mean_var(glues)
    activity_mean, activity_var = _mean_var(activities)

    return Distrib(
        size_distr_mean=size_mean,
        size_distr_var=size_var,
        glue_distr_mean=glue_mean,
        glue_distr_var=glue_var,
        activity_distr_mean=activity_mean,
        activity_distr_var=activity_var,
    )
