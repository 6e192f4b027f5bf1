"""
Integration tests: block driver, stream run, and command line.
Author: Rowel Facunla
"""

import io

import pytest
import yaml

from match_clusterer.config.config_loader import ClusterConfig
from match_clusterer.core.match import Match
from match_clusterer.io.match_reader import MatchBlock, read_blocks
from match_clusterer.pipeline.block_driver import BlockDriver, run_blocks
from match_clusterer.scripts.run_clusterer import main as cli_main


def _run(text, **config_kwargs):
    sink = io.StringIO()
    summary = run_blocks(read_blocks(io.StringIO(text)), sink, ClusterConfig(**config_kwargs))
    return sink.getvalue().splitlines(), summary


def _cli(argv, text):
    stdout = io.StringIO()
    status = cli_main(argv, stdin=io.StringIO(text), stdout=stdout)
    return status, stdout.getvalue().splitlines()


SCENARIO_A = ">h1\n0 0 20\n5 5 20\n100 100 20\n"


def test_scenario_a_default_threshold_prints_header_only():
    """The merged match plus the third match score 45, below 200."""
    lines, summary = _run(SCENARIO_A)
    assert lines == [">h1"]
    assert summary.chains == 0
    assert summary.empty_blocks == 1


def test_scenario_a_low_threshold_prints_merged_chain():
    lines, _ = _run(SCENARIO_A, min_output_score=40)
    assert lines == [
        ">h1",
        "       0        0     25    none      -      -",
        "     100      100     20    none     75     75",
    ]


def test_scenario_a_gap_beyond_max_separation_splits_chain():
    """With a tighter separation limit the two pieces are separate clusters."""
    lines, _ = _run(SCENARIO_A, min_output_score=20, max_separation=50)
    assert lines == [
        ">h1",
        "       0        0     25    none      -      -",
        "#",
        "     100      100     20    none      -      -",
    ]


def test_scenario_b_short_match_prints_header_only():
    lines, _ = _run(">h\n10 10 50\n")
    assert lines == [">h"]


def test_scenario_c_malformed_rows_are_ignored():
    text = ">q\nabc def\n0 0 300\nnot a match line\n"
    lines, summary = _run(text)
    assert lines == [">q", "       0        0    300    none      -      -"]
    assert summary.skipped_lines == 2


def test_scenario_d_duplicates_keep_one():
    lines, _ = _run(">d\n10 20 250\n10 20 250\n")
    assert lines == [">d", "      10       20    250    none      -      -"]


def test_second_chain_uses_separator():
    """Chains after the first in a block are introduced by '#'."""
    lines, summary = _run(">h\n0 0 300\n5000 100 300\n")
    assert lines == [
        ">h",
        "       0        0    300    none      -      -",
        "#",
        "    5000      100    300    none      -      -",
    ]
    assert summary.chains == 2


def test_overlapping_chain_member_is_trimmed():
    lines, _ = _run(">h\n0 0 150\n145 150 100\n")
    assert lines == [
        ">h",
        "       0        0    150    none      -      -",
        "     150      155     95      -5      0      5",
    ]


def test_every_block_prints_a_header_in_order():
    text = "junk before\n>empty\n>short\n1 1 10\n>long\n0 0 300\n"
    lines, summary = _run(text)
    assert lines == [
        ">empty",
        ">short",
        ">long",
        "       0        0    300    none      -      -",
    ]
    assert summary.blocks == 3
    assert summary.matches == 2
    assert summary.empty_blocks == 2


def test_block_driver_reuses_partitioner():
    driver = BlockDriver(ClusterConfig())
    uf = driver.uf

    big = MatchBlock(">a", [Match(i * 2000, i * 2000, 10) for i in range(20)])
    small = MatchBlock(">b", [Match(0, 0, 300)])

    first = driver.process_block(big)
    second = driver.process_block(small)

    assert driver.uf is uf
    assert first.lines == [">a"]
    assert first.cluster_count == 20
    assert second.lines == [">b", "       0        0    300    none      -      -"]


def test_block_result_counts():
    driver = BlockDriver(ClusterConfig(min_output_score=20))
    result = driver.process_block(MatchBlock(">h", [Match(0, 0, 20), Match(0, 0, 20), Match(5000, 10, 30)]))
    assert result.match_count == 3
    assert result.filtered_count == 2
    assert result.cluster_count == 2
    assert result.chain_count == 2


# ================================================================
# Command line
# ================================================================
def test_cli_defaults():
    status, lines = _cli([], SCENARIO_A)
    assert status == 0
    assert lines == [">h1"]


def test_cli_min_score_option():
    status, lines = _cli(["-l", "40"], SCENARIO_A)
    assert status == 0
    assert lines[0] == ">h1"
    assert len(lines) == 3


def test_cli_extent_mode():
    text = ">h\n0 0 100\n150 150 100\n"
    status, lines = _cli(["-l", "220"], text)
    assert lines == [">h"]

    status, lines = _cli(["-e", "-l", "220"], text)
    assert status == 0
    assert lines == [
        ">h",
        "       0        0    100    none      -      -",
        "     150      150    100    none     50     50",
    ]


def test_cli_diagonal_options():
    text = ">h\n0 0 150\n158 150 150\n"
    status, lines = _cli(["-l", "100"], text)
    assert lines == [
        ">h",
        "       0        0    150    none      -      -",
        "#",
        "     158      150    150    none      -      -",
    ]

    status, lines = _cli(["-l", "100", "-d", "8"], text)
    assert lines[:2] == [">h", "       0        0    150    none      -      -"]
    assert "#" not in lines


def test_cli_label_check():
    text = ">a\n0 0 300\n>a Reverse\n0 0 300\n"
    status, lines = _cli(["-C"], text)
    assert status == 0
    assert lines.count("       0        0    300    none      -      -") == 2


def test_cli_label_check_failure_is_fatal():
    """Output for earlier blocks stays; the run stops with a failure status."""
    text = ">a\n0 0 300\n>b\n0 0 300\n"
    status, lines = _cli(["-C"], text)
    assert status == 1
    assert lines == [">a", "       0        0    300    none      -      -"]


def test_cli_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        cli_main(["-x"], stdin=io.StringIO(""), stdout=io.StringIO())
    assert excinfo.value.code != 0


def test_cli_rejects_positional_arguments():
    with pytest.raises(SystemExit) as excinfo:
        cli_main(["matches.txt"], stdin=io.StringIO(""), stdout=io.StringIO())
    assert excinfo.value.code != 0


def test_cli_rejects_non_numeric_threshold():
    with pytest.raises(SystemExit) as excinfo:
        cli_main(["-l", "abc"], stdin=io.StringIO(""), stdout=io.StringIO())
    assert excinfo.value.code != 0


def test_cli_version():
    status, lines = _cli(["--version"], "")
    assert status == 0
    assert lines[0].startswith("match-clusterer ")


def test_cli_files_and_config(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.safe_dump({
        'clustering': {'min_output_score': 40},
        'io': {'logs_dir': str(tmp_path / "logs")},
    }))
    in_path = tmp_path / "matches.txt"
    in_path.write_text(SCENARIO_A)
    out_path = tmp_path / "clusters.txt"

    status = cli_main([
        "--config", str(config_path),
        "--input", str(in_path),
        "--output", str(out_path),
        "--verbose",
    ])

    assert status == 0
    assert out_path.read_text().splitlines()[0] == ">h1"
    assert len(out_path.read_text().splitlines()) == 3
    assert (tmp_path / "logs" / "match_clusterer.log").exists()


def test_cli_missing_config_fails(tmp_path):
    status, lines = _cli(["--config", str(tmp_path / "nope.yaml")], SCENARIO_A)
    assert status == 1
    assert lines == []


def test_cli_invalid_config_fails(tmp_path):
    config_path = tmp_path / "bad.yaml"
    config_path.write_text(yaml.safe_dump({'clustering': {'separation_factor': 'wide'}}))
    status, lines = _cli(["--config", str(config_path)], SCENARIO_A)
    assert status == 1
    assert lines == []
