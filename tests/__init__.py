__version__ = "1.0.0"
__author__ = "Rowel Facunla"
__description__ = "Test suite for match-clusterer"

TEST_CATEGORIES = {
    'union_find': 'Disjoint-set partitioner tests',
    'overlap_filter': 'Repeat and same-diagonal filter tests',
    'clustering': 'Diagonal clustering tests',
    'chain_extraction': 'Chain DP and peeling tests',
    'io': 'Match reader and row formatting tests',
    'config': 'Configuration loading and validation tests',
    'integration': 'Block driver and command-line tests',
}
