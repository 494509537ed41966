"""
satfeat.core.types

Core data types for satfeat.

All types are immutable dataclasses with validation.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple
import numpy as np


@dataclass(frozen=True, order=True)
class Lit:
    """A literal in the solver's integer encoding.

    x = 2 * var + sign, where sign 1 means the variable is negated. The
    ordering on x is the total order used to pick a canonical watcher for
    each clause; it carries no logical meaning.
    """
    x: int

    def __post_init__(self):
        if self.x < 0:
            raise ValueError(f"Literal encoding must be non-negative, got {self.x}")

    @property
    def var(self) -> int:
        return self.x >> 1

    @property
    def sign(self) -> bool:
        """True if the literal is negated."""
        return bool(self.x & 1)

    def __invert__(self) -> "Lit":
        return Lit(self.x ^ 1)

    @staticmethod
    def make(var: int, sign: bool = False) -> "Lit":
        return Lit(var + var + int(sign))

    @staticmethod
    def from_dimacs(value: int) -> "Lit":
        """Convert a 1-based signed DIMACS literal (e.g. -3) to a Lit."""
        if value == 0:
            raise ValueError("DIMACS literal 0 is the clause terminator")
        return Lit.make(abs(value) - 1, value < 0)

    def to_dimacs(self) -> int:
        return -(self.var + 1) if self.sign else self.var + 1

    def __repr__(self) -> str:
        return f"Lit({self.to_dimacs()})"


class WatchType(Enum):
    """Physical kind of a watch-list entry."""
    BINARY = "binary"
    TERNARY = "ternary"
    CLAUSE = "clause"
    IDX = "idx"  # bookkeeping marker, not a clause


@dataclass(frozen=True)
class Watched:
    """One entry of a literal's watch list.

    Binary and ternary clauses are stored inline (the watching literal plus
    lit2, and lit3 for ternaries). Longer clauses are stored in the
    allocator and referenced by offset. IDX entries carry a bookkeeping
    index and never describe a clause.

    Attributes:
        type: Which variant this entry is.
        lit2: Other literal of a binary clause, smaller other literal of a ternary.
        lit3: Larger other literal of a ternary clause.
        red: Redundant (learned) flag for inline clauses.
        offset: Allocator reference of a long clause.
        idx: Bookkeeping index of an IDX marker.
    """
    type: WatchType
    lit2: Optional[Lit] = None
    lit3: Optional[Lit] = None
    red: bool = False
    offset: Optional[int] = None
    idx: Optional[int] = None

    def __post_init__(self):
        if self.type is WatchType.BINARY and self.lit2 is None:
            raise ValueError("binary watch needs lit2")
        if self.type is WatchType.TERNARY:
            if self.lit2 is None or self.lit3 is None:
                raise ValueError("ternary watch needs lit2 and lit3")
            if not self.lit2 < self.lit3:
                raise ValueError(f"ternary watch needs lit2 < lit3, got {self.lit2}, {self.lit3}")
        if self.type is WatchType.CLAUSE and self.offset is None:
            raise ValueError("clause watch needs an offset")
        if self.type is WatchType.IDX and self.idx is None:
            raise ValueError("index watch needs an idx")

    @classmethod
    def binary(cls, lit2: Lit, red: bool = False) -> "Watched":
        return cls(WatchType.BINARY, lit2=lit2, red=red)

    @classmethod
    def ternary(cls, lit2: Lit, lit3: Lit, red: bool = False) -> "Watched":
        return cls(WatchType.TERNARY, lit2=lit2, lit3=lit3, red=red)

    @classmethod
    def clause(cls, offset: int) -> "Watched":
        return cls(WatchType.CLAUSE, offset=offset)

    @classmethod
    def index(cls, idx: int) -> "Watched":
        return cls(WatchType.IDX, idx=idx)


@dataclass(frozen=True)
class Clause:
    """Body of a clause held by the clause allocator.

    Attributes:
        lits: Literals in storage order (lits[0] and lits[1] are watched).
        red: True for redundant (learned) clauses.
        glue: Literal block distance assigned when the clause was learned.
        activity: Bumped usage score, scaled by the solver's clause increment.
    """
    lits: Tuple[Lit, ...]
    red: bool = False
    glue: int = 0
    activity: float = 0.0

    @property
    def size(self) -> int:
        return len(self.lits)

    def __len__(self) -> int:
        return len(self.lits)

    def __iter__(self) -> Iterator[Lit]:
        return iter(self.lits)

    def __getitem__(self, i: int) -> Lit:
        return self.lits[i]


@dataclass(frozen=True)
class MetricSummary:
    """Population summary of one ratio feature.

    std is the standard deviation normalized by the mean (coefficient of
    variation). An empty population leaves every field at 0.
    """
    min: float = 0.0
    max: float = 0.0
    spread: float = 0.0
    mean: float = 0.0
    std: float = 0.0


@dataclass(frozen=True)
class Distrib:
    """Mean/variance of size, glue and scaled activity over a clause population."""
    size_distr_mean: float = 0.0
    size_distr_var: float = 0.0
    glue_distr_mean: float = 0.0
    glue_distr_var: float = 0.0
    activity_distr_mean: float = 0.0
    activity_distr_var: float = 0.0


# Prefix used for each MetricSummary field when flattening a record.
_SUMMARY_PREFIXES = (
    ("vcg_var", "vcg_var"),
    ("vcg_cls", "vcg_cls"),
    ("pnr_var", "pnr_var"),
    ("pnr_cls", "pnr_cls"),
    ("horn_var", "horn"),
)
_SUMMARY_STATS = ("mean", "std", "min", "max", "spread")
_DISTRIB_PREFIXES = (
    ("red_cl_distrib", "red"),
    ("irred_cl_distrib", "irred"),
)
_SCALARS = ("num_vars", "num_clauses", "var_cl_ratio", "binary", "trinary", "horn")

FEATURE_NAMES: Tuple[str, ...] = (
    _SCALARS
    + tuple(
        f"{prefix}_{stat}"
        for _, prefix in _SUMMARY_PREFIXES
        for stat in _SUMMARY_STATS
    )
    + tuple(
        f"{prefix}_{f.name}"
        for _, prefix in _DISTRIB_PREFIXES
        for f in fields(Distrib)
    )
)

FEATURE_DIM = len(FEATURE_NAMES)


@dataclass(frozen=True)
class SolveFeatures:
    """Feature record of one clause database snapshot.

    Attributes:
        num_vars: Variables occurring in at least one irredundant clause.
        num_clauses: Irredundant clauses (binary + ternary + long).
        var_cl_ratio: num_vars / num_clauses.
        binary: Fraction of irredundant clauses that are binary.
        trinary: Fraction of irredundant clauses that are ternary.
        horn: Fraction of irredundant clauses with at most one positive literal.
        vcg_cls: Clause size over num_vars, across clauses.
        pnr_cls: Positive/negative literal ratio, across clauses.
        vcg_var: Variable occurrences over num_clauses, across active variables.
        pnr_var: Positive/negative occurrence ratio, across active variables.
        horn_var: Horn clause occurrences over num_clauses, across active variables.
        red_cl_distrib: Distribution summary of redundant long clauses.
        irred_cl_distrib: Distribution summary of irredundant long clauses.
    """
    num_vars: int = 0
    num_clauses: int = 0
    var_cl_ratio: float = 0.0
    binary: float = 0.0
    trinary: float = 0.0
    horn: float = 0.0
    vcg_cls: MetricSummary = field(default_factory=MetricSummary)
    pnr_cls: MetricSummary = field(default_factory=MetricSummary)
    vcg_var: MetricSummary = field(default_factory=MetricSummary)
    pnr_var: MetricSummary = field(default_factory=MetricSummary)
    horn_var: MetricSummary = field(default_factory=MetricSummary)
    red_cl_distrib: Distrib = field(default_factory=Distrib)
    irred_cl_distrib: Distrib = field(default_factory=Distrib)

    def to_dict(self) -> Dict[str, float]:
        """Flatten to a {feature_name: value} dict in FEATURE_NAMES order."""
        out: Dict[str, float] = {name: getattr(self, name) for name in _SCALARS}
        for attr, prefix in _SUMMARY_PREFIXES:
            summary = getattr(self, attr)
            for stat in _SUMMARY_STATS:
                out[f"{prefix}_{stat}"] = getattr(summary, stat)
        for attr, prefix in _DISTRIB_PREFIXES:
            distrib = getattr(self, attr)
            for f in fields(Distrib):
                out[f"{prefix}_{f.name}"] = getattr(distrib, f.name)
        return out

    def to_vector(self) -> np.ndarray:
        """Return the [FEATURE_DIM] float64 feature vector."""
        d = self.to_dict()
        return np.array([d[name] for name in FEATURE_NAMES], dtype=np.float64)
