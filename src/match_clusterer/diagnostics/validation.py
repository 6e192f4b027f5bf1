"""
Configuration validation.
Author: Rowel Facunla
"""

import math
from typing import List, Tuple

from ..config.config_loader import ClusterConfig


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(config: ClusterConfig) -> Tuple[bool, List[str]]:
    """
    Validate clustering thresholds and label options.

    Args:
        config: Cluster configuration

    Returns:
        Tuple of (is_valid, error_messages)
    """
    errors = []

    for name in ('fixed_separation', 'max_separation', 'min_output_score'):
        value = getattr(config, name)
        if not _is_int(value):
            errors.append(f"{name} must be an integer, got {value!r}")

    factor = config.separation_factor
    if isinstance(factor, bool) or not isinstance(factor, (int, float)):
        errors.append(f"separation_factor must be a number, got {factor!r}")
    elif not math.isfinite(factor):
        errors.append(f"separation_factor must be finite, got {factor!r}")

    if not isinstance(config.header_marker, str) or len(config.header_marker) != 1:
        errors.append(f"header_marker must be a single character, got {config.header_marker!r}")

    if config.check_labels and not config.reverse_marker:
        errors.append("reverse_marker must be non-empty when check_labels is enabled")

    return len(errors) == 0, errors


__all__ = ['validate_config']
