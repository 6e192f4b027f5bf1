"""
Diagonal clustering of filtered matches.
Author: Rowel Facunla
"""

from itertools import groupby
from typing import Iterator, List

from ..config.config_loader import ClusterConfig
from ..core.match import Match, by_cluster
from ..core.union_find import UnionFind


def join_threshold(gap: int, config: ClusterConfig) -> int:
    """
    Largest diagonal difference allowed between two matches ``gap`` apart.

    The proportional term is truncated toward zero, so overlapping matches
    (negative gap) fall back to the fixed slack.
    """
    return max(config.fixed_separation, int(config.separation_factor * gap))


def assign_clusters(matches: List[Match], uf: UnionFind, config: ClusterConfig) -> int:
    """
    Union matches that are close on the query axis and on similar diagonals.

    ``matches`` must be sorted by query start and ``uf`` reset to at least
    ``len(matches)``. Match ``k`` in the list is index ``k + 1`` in ``uf``.
    Sets ``cluster_id`` on every match and returns the number of clusters.
    """
    n = len(matches)

    for i in range(n - 1):
        a = matches[i]
        i_end = a.query_end
        i_diag = a.diagonal

        for j in range(i + 1, n):
            b = matches[j]
            sep = b.start_query - i_end
            if sep > config.max_separation:
                break

            if abs(b.diagonal - i_diag) <= join_threshold(sep, config):
                uf.union(uf.find(i + 1), uf.find(j + 1))

    roots = set()
    for k, m in enumerate(matches, 1):
        m.cluster_id = uf.find(k)
        roots.add(m.cluster_id)
    return len(roots)


def sort_by_cluster(matches: List[Match]) -> List[Match]:
    """Sort in place so that every cluster is one contiguous run."""
    matches.sort(key=by_cluster)
    return matches


def iter_clusters(matches: List[Match]) -> Iterator[List[Match]]:
    """Yield each contiguous run of equal ``cluster_id`` as its own list."""
    for _, run in groupby(matches, key=lambda m: m.cluster_id):
        yield list(run)


__all__ = [
    'join_threshold',
    'assign_clusters',
    'sort_by_cluster',
    'iter_clusters',
]
