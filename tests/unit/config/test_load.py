"""
Tests for satfeat.config.load

Verify config loading/saving.
"""

import pytest
import tempfile
from pathlib import Path
from satfeat.config.load import (
    load_config,
    save_config,
    config_from_dict,
    config_to_dict,
)
from satfeat.config.schema import FeatureConfig
from satfeat.core.exceptions import ConfigError


class TestConfigFromDict:
    """Tests for config_from_dict."""

    def test_empty_dict_uses_defaults(self):
        cfg = config_from_dict({})
        assert cfg.eps == 1e-5
        assert cfg.red_tier == 0

    def test_partial_override(self):
        cfg = config_from_dict({"features": {"verbosity": 2}})
        assert cfg.verbosity == 2
        assert cfg.eps == 1e-5  # Default preserved

    def test_flat_mapping(self):
        cfg = config_from_dict({"eps": 1e-8, "red_tier": 1})
        assert cfg.eps == 1e-8
        assert cfg.red_tier == 1

    def test_unknown_key_raises(self):
        with pytest.raises(ConfigError, match="Unknown"):
            config_from_dict({"features": {"epsilon": 0.1}})

    def test_invalid_value_raises(self):
        with pytest.raises(ConfigError, match="Invalid config"):
            config_from_dict({"eps": 5.0})


class TestConfigToDict:
    """Tests for config_to_dict."""

    def test_roundtrip(self):
        cfg1 = FeatureConfig(eps=1e-7, verbosity=1)
        d = config_to_dict(cfg1)
        cfg2 = config_from_dict(d)

        assert cfg2 == cfg1


class TestLoadSaveConfig:
    """Tests for load_config and save_config."""

    def test_save_and_load(self):
        cfg1 = FeatureConfig(red_tier=2, log_file="logs/features.log")

        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.yaml"
            save_config(cfg1, path)
            cfg2 = load_config(path)

        assert cfg2 == cfg1

    def test_load_nonexistent_raises(self):
        with pytest.raises(ConfigError, match="not found"):
            load_config("/nonexistent/path/config.yaml")

    def test_load_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == FeatureConfig()

    def test_load_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("features: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_load_non_mapping_raises(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_load_null_features_section_raises(self, tmp_path):
        path = tmp_path / "null_section.yaml"
        path.write_text("features:\n")
        with pytest.raises(ConfigError, match="must be a mapping"):
            load_config(path)

    def test_non_mapping_features_section_raises(self):
        with pytest.raises(ConfigError, match="must be a mapping"):
            config_from_dict({"features": [1, 2]})
