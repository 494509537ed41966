"""
satfeat.features.extractor

Orchestrates the feature stages over one clause database snapshot.

Stage order (later stages need earlier results):
    1. occurrence pass          -> VarOccurrences, Horn clause count
    2. active variables         -> num_vars, var_cl_ratio
    3. clause first moments     -> fractions, clause min/max/mean/spread
    4. variable first moments   -> variable min/max/mean/spread
    5. clause second moments    -> clause normalized std
    6. variable second moments  -> variable normalized std
    7. distributions            -> redundant, then irredundant long clauses

The database must not change while extract() runs.
"""

import time
from typing import Callable, Optional

from satfeat.config.schema import FeatureConfig
from satfeat.core.types import SolveFeatures
from satfeat.core.validation import validate_in_range, validate_no_nan_inf
from satfeat.solver.database import ClauseDatabase
from .accumulators import fill_vars_cls
from .distributions import calculate_cl_distributions
from .logging import create_logger
from .moments import (
    clause_first_moments,
    clause_second_moments,
    variable_first_moments,
    variable_second_moments,
)


class FeatureExtractor:
    """Computes SolveFeatures for a ClauseDatabase.

    Usage:
        extractor = FeatureExtractor(db)
        feat = extractor.extract()
        vec = feat.to_vector()
    """

    def __init__(
        self,
        db: ClauseDatabase,
        config: Optional[FeatureConfig] = None,
        logger: Optional[Callable[[dict], None]] = None,
    ):
        self.db = db
        self.config = config if config is not None else FeatureConfig()
        validate_in_range(
            self.config.red_tier, 0, len(db.long_red_cls) - 1, "red_tier"
        )
        if logger is None:
            logger = create_logger(self.config.verbosity, self.config.log_file)
        self.log = logger

    def extract(self) -> SolveFeatures:
        """Recompute every feature from scratch."""
        start_time = time.perf_counter()
        db = self.db
        eps = self.config.eps

        occ = fill_vars_cls(db)
        num_clauses = db.num_irred_clauses()
        num_vars = occ.count_active()
        var_cl_ratio = 0.0
        if num_vars > 0 and num_clauses > 0:
            var_cl_ratio = num_vars / num_clauses

        cls_moments = clause_first_moments(db, num_vars, num_clauses, occ.horn_clauses)
        var_moments = variable_first_moments(occ, num_vars, num_clauses)

        cls_moments = clause_second_moments(db, cls_moments, num_vars, num_clauses, eps)
        var_moments = variable_second_moments(occ, var_moments, num_vars, num_clauses, eps)

        cla_inc = db.get_cla_inc()
        red_distrib = calculate_cl_distributions(
            db, db.long_red_cls[self.config.red_tier], cla_inc
        )
        irred_distrib = calculate_cl_distributions(db, db.long_irred_cls, cla_inc)

        feat = SolveFeatures(
            num_vars=num_vars,
            num_clauses=num_clauses,
            var_cl_ratio=var_cl_ratio,
            binary=cls_moments.binary,
            trinary=cls_moments.trinary,
            horn=cls_moments.horn,
            vcg_cls=cls_moments.vcg,
            pnr_cls=cls_moments.pnr,
            vcg_var=var_moments.vcg,
            pnr_var=var_moments.pnr,
            horn_var=var_moments.horn,
            red_cl_distrib=red_distrib,
            irred_cl_distrib=irred_distrib,
        )
        validate_no_nan_inf(feat.to_vector(), "feature vector")

        self.log({
            "event": "extracted",
            "time": time.perf_counter() - start_time,
            "num_vars": num_vars,
            "num_clauses": num_clauses,
        })
        return feat


def extract_features(
    db: ClauseDatabase,
    config: Optional[FeatureConfig] = None,
) -> SolveFeatures:
    """Extract features with a one-off FeatureExtractor."""
    return FeatureExtractor(db, config=config).extract()
