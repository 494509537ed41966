"""
satfeat.config

Configuration management for satfeat.

Exports:
- Config schema
- Loading/saving utilities
"""

from .schema import FeatureConfig

from .load import (
    load_config,
    save_config,
    config_from_dict,
    config_to_dict,
)

__all__ = [
    # Schema
    "FeatureConfig",
    # Load/save
    "load_config",
    "save_config",
    "config_from_dict",
    "config_to_dict",
]
