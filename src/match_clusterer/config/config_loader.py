"""
Configuration loader for the match clusterer.
Author: Rowel Facunla
"""

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.yaml"

DEFAULT_FIXED_SEPARATION = 5
DEFAULT_MAX_SEPARATION = 1000
DEFAULT_MIN_OUTPUT_SCORE = 200
DEFAULT_SEPARATION_FACTOR = 0.05


@dataclass(frozen=True)
class ClusterConfig:
    """Thresholds and mode flags for one clustering run."""
    fixed_separation: int = DEFAULT_FIXED_SEPARATION
    separation_factor: float = DEFAULT_SEPARATION_FACTOR
    max_separation: int = DEFAULT_MAX_SEPARATION
    min_output_score: int = DEFAULT_MIN_OUTPUT_SCORE
    use_extents: bool = False
    check_labels: bool = False
    reverse_marker: str = "Reverse"
    header_marker: str = ">"

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ClusterConfig":
        """Build from a loaded configuration dictionary."""
        clustering = config.get('clustering') or {}
        labels = config.get('labels') or {}
        return cls(
            fixed_separation=clustering.get('fixed_separation', DEFAULT_FIXED_SEPARATION),
            separation_factor=clustering.get('separation_factor', DEFAULT_SEPARATION_FACTOR),
            max_separation=clustering.get('max_separation', DEFAULT_MAX_SEPARATION),
            min_output_score=clustering.get('min_output_score', DEFAULT_MIN_OUTPUT_SCORE),
            use_extents=bool(clustering.get('use_extents', False)),
            check_labels=bool(labels.get('check_labels', False)),
            reverse_marker=labels.get('reverse_marker', "Reverse"),
            header_marker=labels.get('header_marker', ">"),
        )


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML file. Fails if file does not exist."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(config_path)

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict):
        raise ValueError(f"Invalid YAML format in {config_path}")

    config['_source'] = str(config_path.resolve())
    return config


def merge_overrides(config: Dict[str, Any], overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Return a copy of ``config`` with ``overrides`` applied section by section."""
    merged = copy.deepcopy(config)
    if not overrides:
        return merged
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Loads the shipped defaults, then a user YAML file on top of them."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path
        self.config = {}
        self.load_config()

    def load_config(self):
        """Load defaults and, if given, the user configuration file."""
        defaults = load_config()
        if self.config_path is None:
            self.config = defaults
            return
        user = load_config(self.config_path)
        source = user.pop('_source')
        self.config = merge_overrides(defaults, user)
        self.config['_source'] = source
        logger.debug(f"Merged user configuration from {source}")

    def apply_overrides(self, overrides: Optional[Dict[str, Any]]):
        self.config = merge_overrides(self.config, overrides)

    def get_io_params(self) -> Dict[str, Any]:
        """Get input/output parameters."""
        return self.config.get('io', {})

    def cluster_config(self) -> ClusterConfig:
        return ClusterConfig.from_config(self.config)


__all__ = [
    'ClusterConfig',
    'ConfigLoader',
    'load_config',
    'merge_overrides',
    'DEFAULT_CONFIG_PATH',
    'DEFAULT_FIXED_SEPARATION',
    'DEFAULT_MAX_SEPARATION',
    'DEFAULT_MIN_OUTPUT_SCORE',
    'DEFAULT_SEPARATION_FACTOR',
]
