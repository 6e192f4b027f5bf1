"""
Core data types for match clustering.
"""

from .match import Match, by_query_start, by_cluster, sort_matches
from .union_find import UnionFind
from .exceptions import InvariantError, LabelCheckError

__all__ = [
    'Match',
    'by_query_start',
    'by_cluster',
    'sort_matches',
    'UnionFind',
    'InvariantError',
    'LabelCheckError',
]
