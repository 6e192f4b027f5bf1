"""
Clusters exact sequence matches into gapped alignment chains.
"""

__version__ = "1.0.0"
__author__ = "Rowel Facunla"
__description__ = "Diagonal clustering and chaining of exact pairwise matches"

from .config.config_loader import ClusterConfig
from .core.match import Match
from .core.union_find import UnionFind
from .core.exceptions import InvariantError, LabelCheckError
from .algorithms.overlap_filter import filter_matches
from .algorithms.diagonal_clustering import assign_clusters, join_threshold
from .algorithms.chain_extraction import Chain, ChainRow, peel_chains, extract_chains
from .io.match_reader import MatchBlock, read_blocks
from .pipeline.block_driver import BlockDriver, run_blocks

__all__ = [
    # Metadata
    '__version__',
    '__author__',
    '__description__',

    # Types
    'ClusterConfig',
    'Match',
    'UnionFind',
    'Chain',
    'ChainRow',
    'MatchBlock',
    'BlockDriver',

    # Errors
    'InvariantError',
    'LabelCheckError',

    # Operations
    'filter_matches',
    'assign_clusters',
    'join_threshold',
    'peel_chains',
    'extract_chains',
    'read_blocks',
    'run_blocks',
]
