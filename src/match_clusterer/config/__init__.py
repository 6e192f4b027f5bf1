from .config_loader import (
    ClusterConfig,
    ConfigLoader,
    load_config,
    merge_overrides,
    DEFAULT_CONFIG_PATH,
)

__all__ = [
    'ClusterConfig',
    'ConfigLoader',
    'load_config',
    'merge_overrides',
    'DEFAULT_CONFIG_PATH',
]
