"""
Tests for satfeat.features.accumulators
"""

import math

import numpy as np
import pytest
from satfeat.core.types import MetricSummary
from satfeat.features.accumulators import RunningStat, VarOccurrences, fill_vars_cls
from satfeat.solver import create_clause_database


class TestFillVarsCls:
    """Tests for the occurrence pass."""

    def test_counts(self, small_db):
        occ = fill_vars_cls(small_db)

        np.testing.assert_array_equal(occ.size, [2, 2, 1, 1])
        np.testing.assert_array_equal(occ.num_pos, [1, 1, 0, 1])
        np.testing.assert_array_equal(occ.horn, [1, 1, 1, 1])
        assert occ.horn_clauses == 1

    def test_redundant_clauses_ignored(self):
        db = create_clause_database([[1, 2]], n_vars=4, red_clauses=[[3, 4], [-1, 3, 4, 2]])
        occ = fill_vars_cls(db)
        np.testing.assert_array_equal(occ.size, [1, 1, 0, 0])

    def test_active_variables(self):
        db = create_clause_database([[1, -3]], n_vars=5)
        occ = fill_vars_cls(db)
        assert occ.count_active() == 2
        np.testing.assert_array_equal(occ.active, [True, False, True, False, False])

    def test_sized_to_variable_count(self, empty_db):
        occ = fill_vars_cls(empty_db)
        assert occ.size.shape == (5,)
        assert occ.count_active() == 0
        assert occ.horn_clauses == 0

    def test_zeros(self):
        occ = VarOccurrences.zeros(3)
        assert occ.size.dtype == np.int64
        assert not occ.active.any()


class TestRunningStat:
    """Tests for RunningStat."""

    def test_starts_at_sentinels(self):
        stat = RunningStat()
        assert stat.min == math.inf
        assert stat.max == -math.inf

    def test_empty_summary_is_zero(self):
        assert RunningStat().summary(10) == MetricSummary()

    def test_min_max_tracked_independently(self):
        stat = RunningStat()
        for v in (0.5, 0.2, 0.9, 0.4):
            stat.add(v)
        s = stat.summary(4)
        assert s.min == 0.2
        assert s.max == 0.9
        assert s.spread == pytest.approx(0.7)
        assert s.mean == pytest.approx(0.5)
        assert s.std == 0.0

    def test_mean_stays_zero_without_positive_sum(self):
        stat = RunningStat()
        stat.add(0.0)
        stat.add(0.0)
        assert stat.mean_over(2) == 0.0

    def test_mean_over_empty_population(self):
        stat = RunningStat()
        stat.add(1.0)
        assert stat.mean_over(0) == 0.0

    def test_add_array(self):
        stat = RunningStat()
        stat.add_array(np.array([3.0, 1.0, 2.0]))
        stat.add_array(np.array([]))
        assert (stat.min, stat.max, stat.total, stat.count) == (1.0, 3.0, 6.0, 3)
