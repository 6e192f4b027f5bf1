"""
Author: Rowel Facunla
"""

from typing import List

from ..core.match import Match

# ================================================================
# Repeat / same-diagonal filter
# ================================================================
def _drop_repeat(a: Match, b: Match, olap: int, keep: List[bool], i: int, j: int) -> bool:
    """
    Resolve two matches that share a start on one axis.

    ``a`` precedes ``b``. Returns True when ``a`` itself was dropped, in
    which case the caller stops scanning forward from ``a``.
    """
    if a.length < b.length:
        if olap >= a.length // 2:
            keep[i] = False
            return True
    elif b.length < a.length:
        if olap >= b.length // 2:
            keep[j] = False
    elif olap >= a.length // 2:
        # equal lengths: drop ``a`` only when it was already a tie loser
        b.tentative = True
        if a.tentative:
            keep[i] = False
            return True
    return False


def filter_matches(matches: List[Match]) -> List[Match]:
    """
    Remove matches internal to a tandem repeat and merge same-diagonal overlaps.

    E.g. if the reference has 27 As and the query 20, only the first and
    last of the 8 phase-shifted matches survive. Matches *must* be sorted
    by query start (ties by reference start). The list is compacted in
    place, keeps its order, and is returned with every flag cleared.
    """
    n = len(matches)
    keep = [True] * n

    for i in range(n - 1):
        if not keep[i]:
            continue

        a = matches[i]
        i_diag = a.diagonal
        i_end = a.query_end

        for j in range(i + 1, n):
            b = matches[j]
            if b.start_query > i_end:
                break
            if not keep[j]:
                continue

            if b.diagonal == i_diag:
                j_extent = b.length + b.start_query - a.start_query
                if j_extent > a.length:
                    a.length = j_extent
                    i_end = a.start_query + j_extent
                keep[j] = False
            elif a.start_ref == b.start_ref:
                olap = a.query_end - b.start_query
                if _drop_repeat(a, b, olap, keep, i, j):
                    break
            elif a.start_query == b.start_query:
                olap = a.ref_end - b.start_ref
                if _drop_repeat(a, b, olap, keep, i, j):
                    break

    matches[:] = [m for m, k in zip(matches, keep) if k]

    for m in matches:
        m.selected = False
        m.tentative = False

    return matches


__all__ = ['filter_matches']
