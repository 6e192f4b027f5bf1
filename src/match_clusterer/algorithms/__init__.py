from .overlap_filter import *
from .diagonal_clustering import *
from .chain_extraction import *

__all__ = [
    # Overlap filter
    'filter_matches',

    # Diagonal clustering
    'join_threshold',
    'assign_clusters',
    'sort_by_cluster',
    'iter_clusters',

    # Chain extraction
    'Chain',
    'ChainRow',
    'score_run',
    'peel_chains',
    'extract_chains',
]
