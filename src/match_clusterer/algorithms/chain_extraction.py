"""
Author: Rowel Facunla
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from ..config.config_loader import ClusterConfig
from ..core.match import Match

# ================================================================
# CHAIN OBJECTS
# ================================================================
@dataclass
class ChainRow:
    start_ref: int
    start_query: int
    length: int
    adjustment: Optional[int] = None    # None on the first row of a chain
    ref_gap: Optional[int] = None
    query_gap: Optional[int] = None


@dataclass
class Chain:
    members: List[Match]
    adjustments: List[int] = field(default_factory=list)
    total_length: int = 0
    extent: int = 0

    def score(self, use_extents: bool = False) -> int:
        """Reference extent or summed member lengths."""
        return self.extent if use_extents else self.total_length

    def rows(self) -> List[ChainRow]:
        """
        Members trimmed by their overlap adjustment, with the gap from the
        end of the previous member on each axis.
        """
        rows = []
        prev = None
        for m, adj in zip(self.members, self.adjustments):
            if prev is None:
                rows.append(ChainRow(m.start_ref, m.start_query, m.length))
            else:
                rows.append(ChainRow(
                    start_ref=m.start_ref + adj,
                    start_query=m.start_query + adj,
                    length=m.length - adj,
                    adjustment=adj,
                    ref_gap=m.start_ref + adj - prev.ref_end,
                    query_gap=m.start_query + adj - prev.query_end,
                ))
            prev = m
        return rows

    def __len__(self):
        return len(self.members)

# ================================================================
# DP CHAINING
# ================================================================
def score_run(run: List[Match]):
    """
    Best chain ending at every match of ``run``.

    Every earlier match is a candidate predecessor; a link costs the overlap
    on either axis plus the diagonal drift between the two matches.
    """
    for i, a in enumerate(run):
        a.chain_score = a.length
        a.chain_adjust = 0
        a.chain_pred = None

        for j in range(i):
            b = run[j]
            olap = max(0, b.ref_end - a.start_ref, b.query_end - a.start_query)
            pen = olap + abs(a.diagonal - b.diagonal)

            score = b.chain_score + a.length - pen
            if score > a.chain_score:
                a.chain_score = score
                a.chain_pred = j
                a.chain_adjust = olap


def _select_best(run: List[Match]) -> Chain:
    best = max(range(len(run)), key=lambda k: run[k].chain_score)

    total = 0
    lo = None
    hi = None
    k = best
    while k is not None:
        m = run[k]
        m.selected = True
        total += m.length
        if hi is None or m.ref_end > hi:
            hi = m.ref_end
        if lo is None or m.start_ref < lo:
            lo = m.start_ref
        k = m.chain_pred

    members = [m for m in run if m.selected]
    return Chain(
        members=members,
        adjustments=[m.chain_adjust for m in members],
        total_length=total,
        extent=hi - lo,
    )


def peel_chains(run: List[Match]) -> Iterator[Chain]:
    """
    Repeatedly take the best chain out of ``run`` until it is empty.

    ``run`` is one cluster sorted by query start, then reference start. It
    is compacted in place after each chain; every chain is yielded whether
    or not it would be printed.
    """
    while run:
        score_run(run)
        chain = _select_best(run)
        yield chain
        run[:] = [m for m in run if not m.selected]


def extract_chains(run: List[Match], config: ClusterConfig) -> Iterator[Chain]:
    """Chains of ``run`` whose score reaches ``config.min_output_score``."""
    for chain in peel_chains(run):
        if chain.score(config.use_extents) >= config.min_output_score:
            yield chain


__all__ = [
    'Chain',
    'ChainRow',
    'score_run',
    'peel_chains',
    'extract_chains',
]
