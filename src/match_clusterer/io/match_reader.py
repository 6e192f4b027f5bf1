"""
Reading match lists grouped under header lines.
Author: Rowel Facunla
"""

import re
import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from ..core.exceptions import LabelCheckError
from ..core.match import Match

logger = logging.getLogger(__name__)

_MATCH_LINE = re.compile(r'^\s*([+-]?\d+)\s+([+-]?\d+)\s+([+-]?\d+)\s*$')


@dataclass
class MatchBlock:
    """One header line and the matches listed under it."""
    header: str
    matches: List[Match] = field(default_factory=list)
    skipped_lines: int = 0


class HeaderLabelChecker:
    """Requires every second header to carry the reverse-strand marker."""

    def __init__(self, marker: str = "Reverse"):
        self.marker = marker
        self.count = 0

    def check(self, header: str):
        self.count += 1
        if self.count % 2 == 0 and self.marker not in header:
            raise LabelCheckError(
                f"Header {self.count} does not contain '{self.marker}': {header}"
            )


def parse_match_line(line: str) -> Optional[Match]:
    """
    Parse ``start_ref start_query length``.

    Returns None for anything that is not exactly three integers.
    """
    m = _MATCH_LINE.match(line)
    if m is None:
        return None
    s1, s2, length = (int(g) for g in m.groups())
    return Match(s1, s2, length)


def read_blocks(
    lines: Iterable[str],
    header_marker: str = ">",
    label_checker: Optional[HeaderLabelChecker] = None
) -> Iterator[MatchBlock]:
    """
    Split a line stream into blocks, one per header.

    Lines before the first header are skipped. Each block is yielded
    before the next header is examined, so a failing label check happens
    after the previous block has been handled.
    """
    block = None
    for raw in lines:
        line = raw.rstrip('\r\n')

        if line.startswith(header_marker):
            if block is not None:
                yield block
            if label_checker is not None:
                label_checker.check(line)
            block = MatchBlock(header=line)
            continue

        if block is None:
            continue

        match = parse_match_line(line)
        if match is None:
            block.skipped_lines += 1
        else:
            block.matches.append(match)

    if block is not None:
        yield block


__all__ = [
    'MatchBlock',
    'HeaderLabelChecker',
    'parse_match_line',
    'read_blocks',
]
