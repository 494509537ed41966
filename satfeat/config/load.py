"""
satfeat.config.load

Config loading and validation.
"""

import yaml
from pathlib import Path
from typing import Union, Dict, Any

from .schema import FeatureConfig
from ..core.exceptions import ConfigError


def load_config(path: Union[str, Path]) -> FeatureConfig:
    """Load configuration from YAML file."""
    path = Path(path)

    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")

    # An empty file loads as None
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config root in {path} must be a mapping, got {type(raw).__name__}")

    return config_from_dict(raw)


def config_from_dict(d: Dict[str, Any]) -> FeatureConfig:
    """Create FeatureConfig from dictionary.

    Accepts either a flat mapping or one nested under a "features" key.
    """
    section = d.get("features", d)
    if not isinstance(section, dict):
        raise ConfigError(
            f"Config section 'features' must be a mapping, got {type(section).__name__}"
        )
    unknown = set(section) - {"eps", "red_tier", "verbosity", "log_file"}
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

    try:
        return FeatureConfig(
            eps=float(section.get("eps", 1e-5)),
            red_tier=int(section.get("red_tier", 0)),
            verbosity=int(section.get("verbosity", 0)),
            log_file=section.get("log_file"),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config: {e}")


def save_config(config: FeatureConfig, path: Union[str, Path]) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    d = config_to_dict(config)

    with open(path, "w") as f:
        yaml.dump(d, f, default_flow_style=False, sort_keys=False)


def config_to_dict(config: FeatureConfig) -> Dict[str, Any]:
    """Convert FeatureConfig to dictionary."""
    return {
        "features": {
            "eps": config.eps,
            "red_tier": config.red_tier,
            "verbosity": config.verbosity,
            "log_file": config.log_file,
        },
    }
