from .validation import validate_config
from .performance import RunMetrics, RunMonitor

__all__ = [
    'validate_config',
    'RunMetrics',
    'RunMonitor',
]
