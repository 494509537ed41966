"""
Integration test: Reproducibility and invariants on random formulas.

Tests:
- Same formula produces bit-identical feature records
- Clause insertion order does not change counts or extremes
- Iterator visits every irredundant clause once
"""

import numpy as np
import pytest

from satfeat.config.schema import FeatureConfig
from satfeat.core.types import FEATURE_DIM, Lit
from satfeat.features import FeatureExtractor, extract_features, iter_clauses
from satfeat.solver import ClauseDatabase


def random_formula(seed: int, n_vars: int = 30, n_clauses: int = 120):
    """Random clauses of size 2..7 with distinct variables (DIMACS ints)."""
    rng = np.random.default_rng(seed)
    clauses = []
    for _ in range(n_clauses):
        k = int(rng.integers(2, 8))
        variables = rng.choice(n_vars, size=k, replace=False) + 1
        signs = rng.choice([-1, 1], size=k)
        clauses.append([int(v * s) for v, s in zip(variables, signs)])
    return clauses


def build_db(irred, red, n_vars: int = 30, seed: int = 0) -> ClauseDatabase:
    rng = np.random.default_rng(seed)
    db = ClauseDatabase(n_vars)
    for c in irred:
        db.add_clause([Lit.from_dimacs(v) for v in c])
    for c in red:
        db.add_clause(
            [Lit.from_dimacs(v) for v in c],
            red=True,
            glue=int(rng.integers(1, 10)),
            activity=float(rng.random() * 100),
            tier=int(rng.integers(0, 3)),
        )
    db.set_cla_inc(3.5)
    return db


@pytest.fixture(params=[1, 7, 42])
def formula(request):
    seed = request.param
    return random_formula(seed), random_formula(seed + 1000, n_clauses=40)


class TestDeterminism:
    """Same snapshot, same features."""

    def test_repeated_extraction_identical(self, formula):
        irred, red = formula
        extractor = FeatureExtractor(build_db(irred, red))

        v1 = extractor.extract().to_vector()
        v2 = extractor.extract().to_vector()

        assert np.array_equal(v1, v2)

    def test_rebuilt_database_identical(self, formula):
        irred, red = formula
        f1 = extract_features(build_db(irred, red))
        f2 = extract_features(build_db(irred, red))
        assert f1 == f2

    def test_insertion_order_preserves_counts(self, formula):
        irred, red = formula
        f1 = extract_features(build_db(irred, red))
        f2 = extract_features(build_db(list(reversed(irred)), red))

        assert f1.num_vars == f2.num_vars
        assert f1.num_clauses == f2.num_clauses
        assert f1.binary == f2.binary
        assert f1.horn == f2.horn
        assert f1.vcg_cls.min == f2.vcg_cls.min
        assert f1.vcg_cls.max == f2.vcg_cls.max
        assert f1.pnr_var.spread == f2.pnr_var.spread
        assert f1.vcg_cls.mean == pytest.approx(f2.vcg_cls.mean)
        assert f1.pnr_cls.std == pytest.approx(f2.pnr_cls.std)


class TestInvariants:
    """Structural invariants on random formulas."""

    def test_iterator_visits_each_clause_once(self, formula):
        irred, red = formula
        db = build_db(irred, red)

        visited = sorted(sorted(v.lits) for v in iter_clauses(db))
        expected = sorted(sorted(Lit.from_dimacs(x) for x in c) for c in irred)

        assert visited == expected
        assert len(visited) == db.num_irred_clauses()

    def test_feature_ranges(self, formula):
        irred, red = formula
        feat = extract_features(build_db(irred, red))

        assert feat.vcg_cls.min > 0.0
        assert feat.binary + feat.trinary <= 1.0
        assert 0.0 <= feat.horn <= 1.0
        assert 0.0 <= feat.pnr_cls.min <= feat.pnr_cls.max <= 1.0
        for s in (feat.vcg_cls, feat.pnr_cls, feat.vcg_var, feat.pnr_var, feat.horn_var):
            assert s.spread >= 0.0
            assert s.std >= 0.0

    def test_vector_finite(self, formula):
        irred, red = formula
        vec = extract_features(build_db(irred, red), FeatureConfig(red_tier=2)).to_vector()
        assert vec.shape == (FEATURE_DIM,)
        assert np.isfinite(vec).all()
