"""
Author: Rowel Facunla
"""

from dataclasses import dataclass
from typing import Optional

# ================================================================
# MATCH OBJECT
# ================================================================
@dataclass
class Match:
    start_ref: int      # position in reference
    start_query: int    # position in query
    length: int         # exact match length

    # chain extraction scratch, rewritten on every DP pass
    chain_score: int = 0
    chain_pred: Optional[int] = None
    chain_adjust: int = 0

    selected: bool = False
    tentative: bool = False
    cluster_id: int = -1

    @property
    def diagonal(self) -> int:
        return self.start_query - self.start_ref

    @property
    def ref_end(self) -> int:
        return self.start_ref + self.length

    @property
    def query_end(self) -> int:
        return self.start_query + self.length

    def as_tuple(self):
        return (self.start_ref, self.start_query, self.length)

# ================================================================
# Ordering keys
# ================================================================
def by_query_start(m: Match):
    """Query start, then reference start."""
    return (m.start_query, m.start_ref)


def by_cluster(m: Match):
    """Cluster id, then query start, then reference start."""
    return (m.cluster_id, m.start_query, m.start_ref)


def sort_matches(matches):
    """Sort matches in place by query start (ties by reference start)."""
    matches.sort(key=by_query_start)
    return matches


__all__ = [
    'Match',
    'by_query_start',
    'by_cluster',
    'sort_matches',
]
