"""
satfeat.config.schema

Configuration schema using dataclasses.

Design: All config fields have explicit types and defaults.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class FeatureConfig:
    """Feature extraction configuration.

    Attributes:
        eps: Below this, a squared-deviation sum or a mean is treated as
            zero and the normalized std is reported as 0.
        red_tier: Which redundant-clause tier feeds the redundant
            distribution summary.
        verbosity: 0 is silent, >0 prints the extraction time.
        log_file: If set, every extraction appends its metrics here.
    """
    eps: float = 1e-5
    red_tier: int = 0
    verbosity: int = 0
    log_file: Optional[str] = None

    def __post_init__(self):
        if not (0 <= self.eps < 1):
            raise ValueError(f"eps must be in [0, 1), got {self.eps}")
        if self.red_tier < 0:
            raise ValueError(f"red_tier must be non-negative, got {self.red_tier}")
        if self.verbosity < 0:
            raise ValueError(f"verbosity must be non-negative, got {self.verbosity}")

    @classmethod
    def quiet(cls) -> "FeatureConfig":
        """Factory for a silent configuration with default thresholds."""
        return cls(verbosity=0, log_file=None)
