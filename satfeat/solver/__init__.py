"""
satfeat.solver

Clause database read by the feature extractor.

Exports:
- ClauseDatabase and its builder
- Allocator and watch index
"""

from .allocator import ClauseAllocator
from .watches import WatchIndex
from .database import (
    ClauseDatabase,
    BinTriStats,
    N_RED_TIERS,
    create_clause_database,
)

__all__ = [
    "ClauseAllocator",
    "WatchIndex",
    "ClauseDatabase",
    "BinTriStats",
    "N_RED_TIERS",
    "create_clause_database",
]
