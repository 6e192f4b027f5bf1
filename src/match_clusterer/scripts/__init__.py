from .run_clusterer import main as run_clusterer_main

__all__ = [
    'run_clusterer_main',
]
