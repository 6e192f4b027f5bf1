from .block_driver import BlockDriver, BlockResult, RunSummary, run_blocks
from .main_pipeline import main, setup_logging

# Alias for convenience
run_pipeline = main

__all__ = [
    'BlockDriver',
    'BlockResult',
    'RunSummary',
    'run_blocks',
    'main',
    'run_pipeline',
    'setup_logging',
]
