"""
Results writing utilities for the match clusterer.
Author: Rowel Facunla
"""

from typing import Iterable, List, TextIO

from ..algorithms.chain_extraction import Chain, ChainRow

FIRST_ROW_TRAILER = "   none      -      -"
CHAIN_SEPARATOR = "#"


def format_row(row: ChainRow) -> str:
    """
    Fixed-width row: start_ref(8) start_query(8) length(6), then the
    overlap adjustment(7) and the reference/query gaps(6).
    """
    head = f"{row.start_ref:8d} {row.start_query:8d} {row.length:6d} "
    if row.adjustment is None:
        return head + FIRST_ROW_TRAILER

    adj = "none" if row.adjustment == 0 else str(-row.adjustment)
    return head + f"{adj:>7} {row.ref_gap:6d} {row.query_gap:6d}"


def format_chain(chain: Chain) -> List[str]:
    return [format_row(row) for row in chain.rows()]


def write_lines(sink: TextIO, lines: Iterable[str]):
    for line in lines:
        sink.write(line)
        sink.write('\n')


__all__ = [
    'FIRST_ROW_TRAILER',
    'CHAIN_SEPARATOR',
    'format_row',
    'format_chain',
    'write_lines',
]
