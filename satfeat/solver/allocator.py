"""
satfeat.solver.allocator

Storage for clause bodies of size four and up.

Clauses are referenced by integer offsets, the way watch entries refer to
them. Offsets stay valid for the allocator's lifetime.
"""

from typing import List

from satfeat.core.exceptions import ValidationError
from satfeat.core.types import Clause


class ClauseAllocator:
    """Append-only clause store addressed by offset."""

    def __init__(self):
        self._clauses: List[Clause] = []

    def alloc(self, clause: Clause) -> int:
        """Store clause and return its offset."""
        self._clauses.append(clause)
        return len(self._clauses) - 1

    def ptr(self, offset: int) -> Clause:
        """Resolve an offset to the clause body."""
        if not (0 <= offset < len(self._clauses)):
            raise ValidationError(f"Clause offset {offset} was never allocated")
        return self._clauses[offset]

    def __len__(self) -> int:
        return len(self._clauses)
