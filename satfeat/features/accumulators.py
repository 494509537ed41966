"""
satfeat.features.accumulators

Single-pass counters driven by the clause iterator.

VarOccurrences is allocated per extraction, sized to the variable count,
filled by one pass over the irredundant clauses and dropped afterwards.
"""

from dataclasses import dataclass
import math

import numpy as np

from satfeat.core.types import Lit, MetricSummary
from satfeat.solver.database import ClauseDatabase
from .iterator import for_all_clauses


@dataclass
class VarOccurrences:
    """Per-variable occurrence counts over irredundant clauses.

    Attributes:
        size: [n_vars] clauses containing the variable.
        num_pos: [n_vars] occurrences as a positive literal.
        horn: [n_vars] occurrences in clauses with at most one positive literal.
        horn_clauses: Number of clauses with at most one positive literal.
    """
    size: np.ndarray
    num_pos: np.ndarray
    horn: np.ndarray
    horn_clauses: int = 0

    @classmethod
    def zeros(cls, n_vars: int) -> "VarOccurrences":
        return cls(
            size=np.zeros(n_vars, dtype=np.int64),
            num_pos=np.zeros(n_vars, dtype=np.int64),
            horn=np.zeros(n_vars, dtype=np.int64),
        )

    @property
    def active(self) -> np.ndarray:
        """[n_vars] bool mask of variables occurring at least once."""
        return self.size > 0

    def count_active(self) -> int:
        return int(np.count_nonzero(self.size))


def fill_vars_cls(db: ClauseDatabase) -> VarOccurrences:
    """Count Horn clauses and per-variable occurrences in one pass."""
    occ = VarOccurrences.zeros(db.n_vars())

    def each_clause(size: int, pos: int, neg: int) -> None:
        if pos <= 1:
            occ.horn_clauses += 1

    def each_lit(lit: Lit, size: int, pos: int, neg: int) -> None:
        v = lit.var
        if pos <= 1:
            occ.horn[v] += 1
        if not lit.sign:
            occ.num_pos[v] += 1
        occ.size[v] += 1

    for_all_clauses(db, each_clause, each_lit)
    return occ


class RunningStat:
    """Running min, max and sum of a stream of ratios.

    Extremes start at the +inf/-inf sentinels and are only reported once
    at least one value was added.
    """

    def __init__(self):
        self.min = math.inf
        self.max = -math.inf
        self.total = 0.0
        self.count = 0

    def add(self, value: float) -> None:
        self.min = min(self.min, value)
        self.max = max(self.max, value)
        self.total += value
        self.count += 1

    def add_array(self, values: np.ndarray) -> None:
        """Add every element of a 1-D array."""
        if values.size == 0:
            return
        self.min = min(self.min, float(values.min()))
        self.max = max(self.max, float(values.max()))
        self.total += float(values.sum())
        self.count += int(values.size)

    def mean_over(self, population: int) -> float:
        """Sum divided by population; 0 unless the sum is positive."""
        if self.total > 0 and population > 0:
            return self.total / population
        return 0.0

    def summary(self, population: int) -> MetricSummary:
        """First-moment summary (std left at 0)."""
        if self.count == 0:
            return MetricSummary()
        return MetricSummary(
            min=self.min,
            max=self.max,
            spread=self.max - self.min,
            mean=self.mean_over(population),
        )
