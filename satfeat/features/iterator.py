"""
satfeat.features.iterator

Visit every irredundant clause of a ClauseDatabase exactly once.

Design: Clauses are reached through the watch lists, so each clause of
size >= 2 shows up under at least two literals. Instead of a seen-set, a
clause is only reported from one canonical owner literal:

    - binary/ternary: the smallest literal of the clause
    - long: the smaller of its two watched literals, clause[0] and clause[1]

Redundant clauses are skipped; the features describe the original formula.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Tuple

from satfeat.core.exceptions import ContractViolationError
from satfeat.core.types import Lit, Watched, WatchType
from satfeat.solver.database import ClauseDatabase


# each_clause(size, pos, neg) and each_lit(lit, size, pos, neg)
ClauseCallback = Callable[[int, int, int], Any]
LitCallback = Callable[[Lit, int, int, int], Any]


@dataclass(frozen=True)
class ClauseView:
    """Representation-independent view of one irredundant clause."""
    lits: Tuple[Lit, ...]
    pos: int

    @property
    def size(self) -> int:
        return len(self.lits)

    @property
    def neg(self) -> int:
        return self.size - self.pos


def _count_pos(lits: Tuple[Lit, ...]) -> int:
    return sum(1 for lit in lits if not lit.sign)


def clause_view(db: ClauseDatabase, watched: Watched, lit: Lit) -> Optional[ClauseView]:
    """Resolve one watch entry of lit.

    Returns:
        The clause view if lit owns an irredundant clause through this
        entry, None if the entry must be skipped.

    Raises:
        ContractViolationError: If the entry is an index marker.
    """
    if watched.type is WatchType.BINARY:
        if watched.red or lit > watched.lit2:
            return None
        lits = (lit, watched.lit2)
        return ClauseView(lits=lits, pos=_count_pos(lits))

    if watched.type is WatchType.TERNARY:
        if watched.red or lit > watched.lit2:
            return None
        lits = (lit, watched.lit2, watched.lit3)
        return ClauseView(lits=lits, pos=_count_pos(lits))

    if watched.type is WatchType.CLAUSE:
        clause = db.cl_alloc.ptr(watched.offset)
        if clause.red:
            return None
        if lit != min(clause[0], clause[1]):
            return None
        return ClauseView(lits=clause.lits, pos=_count_pos(clause.lits))

    if watched.type is WatchType.IDX:
        raise ContractViolationError(
            f"Index marker {watched.idx} found in watch list of {lit!r} "
            f"during clause iteration"
        )

    raise ContractViolationError(f"Unknown watch type {watched.type!r}")


def iter_clauses(db: ClauseDatabase) -> Iterator[ClauseView]:
    """Yield every irredundant clause once, in watch-list order."""
    for x in range(2 * db.n_vars()):
        lit = Lit(x)
        for watched in db.watches[lit]:
            view = clause_view(db, watched, lit)
            if view is not None:
                yield view


def for_one_clause(
    db: ClauseDatabase,
    watched: Watched,
    lit: Lit,
    each_clause: ClauseCallback,
    each_lit: Optional[LitCallback] = None,
) -> None:
    """Run the callbacks for one watch entry, if lit owns its clause."""
    view = clause_view(db, watched, lit)
    if view is None:
        return
    _dispatch(view, each_clause, each_lit)


def for_all_clauses(
    db: ClauseDatabase,
    each_clause: ClauseCallback,
    each_lit: Optional[LitCallback] = None,
) -> None:
    """Run each_clause once per irredundant clause, then each_lit once per literal in it."""
    for view in iter_clauses(db):
        _dispatch(view, each_clause, each_lit)


def _dispatch(
    view: ClauseView,
    each_clause: ClauseCallback,
    each_lit: Optional[LitCallback],
) -> None:
    size, pos, neg = view.size, view.pos, view.neg
    each_clause(size, pos, neg)
    if each_lit is not None:
        for lit in view.lits:
            each_lit(lit, size, pos, neg)
