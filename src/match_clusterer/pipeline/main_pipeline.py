"""
Main entry point: configuration, logging, and the stream run.
Author: Rowel Facunla
"""

import sys
import logging
from contextlib import nullcontext
from pathlib import Path
from typing import Dict, Any, Optional, TextIO

import yaml

from ..config.config_loader import ConfigLoader
from ..core.exceptions import InvariantError
from ..diagnostics.performance import RunMonitor
from ..diagnostics.validation import validate_config
from ..io.match_reader import HeaderLabelChecker, read_blocks
from .block_driver import run_blocks


def setup_logging(config: Dict[str, Any]) -> logging.Logger:
    """Setup logging configuration. Console output goes to stderr."""
    debug = config.get('debug') or {}
    log_level_str = debug.get('log_level', 'WARNING')
    log_level = getattr(logging, str(log_level_str).upper(), logging.WARNING)

    logger = logging.getLogger('match_clusterer')
    logger.setLevel(log_level)

    # Remove existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Console handler
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # File handler
    logs_dir = (config.get('io') or {}).get('logs_dir')
    if logs_dir:
        log_dir = Path(logs_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / 'match_clusterer.log')
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


def _open_input(path: Optional[str], stdin: Optional[TextIO]):
    if not path or path == '-':
        return nullcontext(stdin if stdin is not None else sys.stdin)
    return open(path, 'r')


def _open_output(path: Optional[str], stdout: Optional[TextIO]):
    if not path or path == '-':
        return nullcontext(stdout if stdout is not None else sys.stdout)
    return open(path, 'w')


def main(
    config_path: Optional[str] = None,
    overrides: Optional[Dict] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None
) -> int:
    """Cluster the matches read from the configured input. Returns the exit status."""
    # Load configuration
    try:
        loader = ConfigLoader(config_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"ERROR loading configuration: {e}", file=sys.stderr)
        return 1
    loader.apply_overrides(overrides)

    logger = setup_logging(loader.config)
    logger.info("Starting match clustering")
    logger.info(f"Configuration loaded from {loader.config.get('_source', 'default')}")

    cluster_config = loader.cluster_config()
    is_valid, errors = validate_config(cluster_config)
    if not is_valid:
        for error in errors:
            logger.error(f"Configuration error: {error}")
        return 1

    logger.debug(f"Clustering parameters: {cluster_config}")

    checker = None
    if cluster_config.check_labels:
        checker = HeaderLabelChecker(cluster_config.reverse_marker)

    io_params = loader.get_io_params()
    monitor = RunMonitor()
    monitor.start()

    try:
        with _open_input(io_params.get('input'), stdin) as source, \
                _open_output(io_params.get('output'), stdout) as sink:
            blocks = read_blocks(source, cluster_config.header_marker, checker)
            summary = run_blocks(blocks, sink, cluster_config, monitor)
            sink.flush()
    except InvariantError as e:
        logger.error(f"Fatal: {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1

    monitor.stop()
    report = monitor.get_report()

    logger.info(
        f"Processed {summary.blocks} blocks, {summary.matches} matches, "
        f"{summary.chains} chains ({summary.empty_blocks} blocks without chains)"
    )
    if summary.skipped_lines:
        logger.info(f"Skipped {summary.skipped_lines} unparsable lines")
    logger.info(f"Total time: {report['total_time_seconds']:.2f}s")
    logger.info(f"Peak memory: {report['peak_memory_mb']:.1f} MB")
    return 0


__all__ = ['setup_logging', 'main']
