"""
Tests for satfeat.config.schema

Verify config validation and defaults.
"""

import pytest
from satfeat.config.schema import FeatureConfig


class TestFeatureConfig:
    """Tests for FeatureConfig."""

    def test_defaults(self):
        cfg = FeatureConfig()
        assert cfg.eps == 1e-5
        assert cfg.red_tier == 0
        assert cfg.verbosity == 0
        assert cfg.log_file is None

    def test_invalid_eps_raises(self):
        with pytest.raises(ValueError, match="eps"):
            FeatureConfig(eps=-0.1)
        with pytest.raises(ValueError, match="eps"):
            FeatureConfig(eps=1.0)

    def test_invalid_red_tier_raises(self):
        with pytest.raises(ValueError, match="red_tier"):
            FeatureConfig(red_tier=-1)

    def test_invalid_verbosity_raises(self):
        with pytest.raises(ValueError, match="verbosity"):
            FeatureConfig(verbosity=-2)

    def test_quiet_factory(self):
        cfg = FeatureConfig.quiet()
        assert cfg.verbosity == 0
        assert cfg.log_file is None
