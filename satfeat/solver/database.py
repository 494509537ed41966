"""
satfeat.solver.database

In-memory clause database with watch-list indexing.

Design: Mirrors the layout a CDCL solver keeps after simplification.
Binary and ternary clauses live inline in the watch lists of every literal
they contain; longer clauses live in the allocator and are watched by
their first two literals. Counters for inline clauses are kept separately
because nothing else enumerates them.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from satfeat.core.exceptions import ValidationError
from satfeat.core.types import Clause, Lit, Watched
from satfeat.core.validation import (
    validate_lit_in_range,
    validate_non_negative,
    validate_non_negative_int,
    validate_positive,
    validate_unique_elements,
)
from .allocator import ClauseAllocator
from .watches import WatchIndex


# Number of redundant long-clause tiers (core, mid-term, local)
N_RED_TIERS = 3


@dataclass
class BinTriStats:
    """Counts of inline (binary and ternary) clauses."""
    irred_bins: int = 0
    irred_tris: int = 0
    red_bins: int = 0
    red_tris: int = 0


class ClauseDatabase:
    """Clause store read by the feature extractor.

    Attributes:
        watches: Per-literal watch lists.
        cl_alloc: Storage for clauses of size >= 4.
        long_irred_cls: Offsets of irredundant long clauses.
        long_red_cls: Offsets of redundant long clauses, one list per tier.
        bin_tri: Inline clause counters.
        cla_inc: Current clause activity increment (read-only, see set_cla_inc).
    """

    def __init__(self, n_vars: int = 0):
        validate_non_negative_int(n_vars, "n_vars")
        self._n_vars = n_vars
        self.watches = WatchIndex(n_vars)
        self.cl_alloc = ClauseAllocator()
        self.long_irred_cls: List[int] = []
        self.long_red_cls: List[List[int]] = [[] for _ in range(N_RED_TIERS)]
        self.bin_tri = BinTriStats()
        self._cla_inc = 1.0

    def n_vars(self) -> int:
        return self._n_vars

    def new_var(self) -> int:
        """Add one variable and return its index."""
        self._n_vars += 1
        self.watches.resize(self._n_vars)
        return self._n_vars - 1

    def new_vars(self, n: int) -> None:
        validate_non_negative_int(n, "n")
        self._n_vars += n
        self.watches.resize(self._n_vars)

    def get_cla_inc(self) -> float:
        return self._cla_inc

    def set_cla_inc(self, value: float) -> None:
        validate_positive(value, "cla_inc")
        self._cla_inc = value

    @property
    def cla_inc(self) -> float:
        return self._cla_inc

    def num_irred_clauses(self) -> int:
        """Irredundant clauses of every size."""
        return len(self.long_irred_cls) + self.bin_tri.irred_bins + self.bin_tri.irred_tris

    def num_red_clauses(self) -> int:
        """Redundant clauses of every size."""
        return (
            sum(len(tier) for tier in self.long_red_cls)
            + self.bin_tri.red_bins
            + self.bin_tri.red_tris
        )

    def add_clause(
        self,
        lits: Sequence[Lit],
        red: bool = False,
        glue: int = 0,
        activity: float = 0.0,
        tier: int = 0,
    ) -> Optional[int]:
        """Add a clause and attach it to the watch lists.

        Args:
            lits: At least two distinct literals over existing variables.
            red: True for a redundant (learned) clause.
            glue: Glue of a long clause.
            activity: Activity of a long clause.
            tier: Redundant tier of a long clause.

        Returns:
            Allocator offset for clauses of size >= 4, None otherwise.
        """
        lits = tuple(lits)
        if len(lits) < 2:
            raise ValidationError(
                f"Clauses need at least 2 literals, got {len(lits)}"
            )
        validate_unique_elements(lits, "clause literals")
        for lit in lits:
            validate_lit_in_range(lit.var, self._n_vars)
        validate_non_negative_int(glue, "glue")
        validate_non_negative(activity, "activity")

        if len(lits) == 2:
            a, b = lits
            self.watches.attach(a, Watched.binary(b, red=red))
            self.watches.attach(b, Watched.binary(a, red=red))
            if red:
                self.bin_tri.red_bins += 1
            else:
                self.bin_tri.irred_bins += 1
            return None

        if len(lits) == 3:
            for lit in lits:
                lit2, lit3 = sorted(other for other in lits if other != lit)
                self.watches.attach(lit, Watched.ternary(lit2, lit3, red=red))
            if red:
                self.bin_tri.red_tris += 1
            else:
                self.bin_tri.irred_tris += 1
            return None

        if red and not (0 <= tier < N_RED_TIERS):
            raise ValidationError(f"tier must be in [0, {N_RED_TIERS}), got {tier}")

        offset = self.cl_alloc.alloc(
            Clause(lits=lits, red=red, glue=glue, activity=activity)
        )
        self.watches.attach(lits[0], Watched.clause(offset))
        self.watches.attach(lits[1], Watched.clause(offset))
        if red:
            self.long_red_cls[tier].append(offset)
        else:
            self.long_irred_cls.append(offset)
        return offset

    def add_index_marker(self, lit: Lit, idx: int) -> None:
        """Attach a bookkeeping marker to lit's watch list."""
        validate_lit_in_range(lit.var, self._n_vars)
        self.watches.attach(lit, Watched.index(idx))


def create_clause_database(
    clauses: Iterable[Sequence[int]],
    n_vars: Optional[int] = None,
    red_clauses: Optional[Iterable[Sequence[int]]] = None,
) -> ClauseDatabase:
    """Build a ClauseDatabase from DIMACS-style integer clauses.

    Args:
        clauses: Irredundant clauses, e.g. [[1, -2], [2, 3, -4]].
        n_vars: Variable count. If None, the largest variable mentioned.
        red_clauses: Redundant clauses, added with default glue/activity.

    Returns:
        Populated ClauseDatabase.
    """
    clauses = [list(c) for c in clauses]
    red_clauses = [list(c) for c in (red_clauses or [])]

    if n_vars is None:
        n_vars = max(
            (abs(v) for c in clauses + red_clauses for v in c),
            default=0,
        )

    db = ClauseDatabase(n_vars)
    for c in clauses:
        db.add_clause([Lit.from_dimacs(v) for v in c])
    for c in red_clauses:
        db.add_clause([Lit.from_dimacs(v) for v in c], red=True)
    return db
