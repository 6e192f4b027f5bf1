"""
Per-block orchestration: sort, filter, cluster, extract, format.
Author: Rowel Facunla
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, TextIO

from ..algorithms.chain_extraction import extract_chains
from ..algorithms.diagonal_clustering import assign_clusters, sort_by_cluster, iter_clusters
from ..algorithms.overlap_filter import filter_matches
from ..config.config_loader import ClusterConfig
from ..core.match import sort_matches
from ..core.union_find import UnionFind
from ..io.match_reader import MatchBlock
from ..io.results_writer import CHAIN_SEPARATOR, format_chain, write_lines

logger = logging.getLogger(__name__)


@dataclass
class BlockResult:
    header: str
    lines: List[str] = field(default_factory=list)
    match_count: int = 0
    filtered_count: int = 0
    cluster_count: int = 0
    chain_count: int = 0


@dataclass
class RunSummary:
    blocks: int = 0
    matches: int = 0
    chains: int = 0
    empty_blocks: int = 0
    skipped_lines: int = 0


class BlockDriver:
    """
    Turns one block of matches into its output lines.

    The union-find buffer is owned here and reused from block to block.
    """

    def __init__(self, config: Optional[ClusterConfig] = None):
        self.config = config or ClusterConfig()
        self.uf = UnionFind()

    def process_block(self, block: MatchBlock) -> BlockResult:
        matches = block.matches
        result = BlockResult(header=block.header, match_count=len(matches))

        if matches:
            self.uf.reset(len(matches))

            sort_matches(matches)
            filter_matches(matches)
            result.filtered_count = len(matches)

            result.cluster_count = assign_clusters(matches, self.uf, self.config)
            sort_by_cluster(matches)

            label = block.header
            for run in iter_clusters(matches):
                for chain in extract_chains(run, self.config):
                    result.lines.append(label)
                    result.lines.extend(format_chain(chain))
                    result.chain_count += 1
                    label = CHAIN_SEPARATOR

        # every block prints its header at least once
        if result.chain_count == 0:
            result.lines.append(block.header)

        logger.debug(
            f"{block.header}: {result.match_count} matches, {result.filtered_count} after filter, "
            f"{result.cluster_count} clusters, {result.chain_count} chains"
        )
        if block.skipped_lines:
            logger.debug(f"{block.header}: skipped {block.skipped_lines} unparsable lines")
        return result


def run_blocks(
    blocks: Iterable[MatchBlock],
    sink: TextIO,
    config: Optional[ClusterConfig] = None,
    monitor=None
) -> RunSummary:
    """Process blocks in input order, writing each block's lines to ``sink``."""
    driver = BlockDriver(config)
    summary = RunSummary()

    for block in blocks:
        result = driver.process_block(block)
        write_lines(sink, result.lines)

        summary.blocks += 1
        summary.matches += result.match_count
        summary.chains += result.chain_count
        summary.skipped_lines += block.skipped_lines
        if result.chain_count == 0:
            summary.empty_blocks += 1
        if monitor is not None:
            monitor.sample()

    return summary


__all__ = [
    'BlockResult',
    'RunSummary',
    'BlockDriver',
    'run_blocks',
]
