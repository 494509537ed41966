"""
Pytest configuration and shared fixtures for satfeat tests.
"""

import pytest
from satfeat.config.schema import FeatureConfig
from satfeat.core.types import Lit
from satfeat.solver.database import ClauseDatabase, create_clause_database


# Irredundant clauses of sizes 2, 3 and 5 (DIMACS literals)
MIXED_IRRED = [
    [1, -2],
    [-1, -5],
    [2, 3, -4],
    [3, 4, -6],
    [1, 2, -3, 4, 5],
    [-2, -3, -4, -5, 6],
]

# Redundant clauses of sizes 2, 3 and 6
MIXED_RED = [
    [1, 6],
    [-3, 5, 6],
    [1, -2, 3, -4, -5, 6],
]


def lits(*dimacs):
    """Build a tuple of Lit from DIMACS integers."""
    return tuple(Lit.from_dimacs(v) for v in dimacs)


@pytest.fixture
def default_config():
    """Provide default FeatureConfig."""
    return FeatureConfig()


@pytest.fixture
def empty_db():
    """Provide a database with variables but no clauses."""
    return ClauseDatabase(5)


@pytest.fixture
def mixed_db():
    """Provide a database mixing clause sizes and redundancy."""
    db = create_clause_database(MIXED_IRRED, n_vars=6)
    for c in MIXED_RED:
        db.add_clause(lits(*c), red=True, glue=2, activity=4.0)
    return db


@pytest.fixture
def small_db():
    """Provide [x1 v x2] and [-x1 v -x2 v -x3 v x4]."""
    return create_clause_database([[1, 2], [-1, -2, -3, 4]])


@pytest.fixture
def mixed_clauses():
    """Provide (irredundant, redundant) DIMACS clauses of mixed_db."""
    return MIXED_IRRED, MIXED_RED
