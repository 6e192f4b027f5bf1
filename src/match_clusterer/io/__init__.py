from .match_reader import (
    MatchBlock,
    HeaderLabelChecker,
    parse_match_line,
    read_blocks,
)

from .results_writer import (
    format_row,
    format_chain,
    write_lines,
    CHAIN_SEPARATOR,
)

__all__ = [
    # Match reader
    'MatchBlock',
    'HeaderLabelChecker',
    'parse_match_line',
    'read_blocks',

    # Results writer
    'format_row',
    'format_chain',
    'write_lines',
    'CHAIN_SEPARATOR',
]
