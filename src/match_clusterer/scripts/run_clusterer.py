"""
Command-line interface for the match clusterer.
Author: Rowel Facunla
"""

import sys
import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='match-clusterer',
        description="Clusters exact matches based on diagonals and separation. "
                    "Input is read from stdin in the format produced by mummer; "
                    "output goes to stdout.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default thresholds
  mummer -mum -b -c ref.fa qry.fa | %(prog)s > out.mgaps

  # Looser diagonal slack, shorter minimum cluster
  %(prog)s -d 10 -f 0.12 -l 65 -s 90 < matches.txt

  # Forward/reverse headers must alternate
  %(prog)s -C --input matches.txt --output clusters.txt
        """
    )

    parser.add_argument(
        '-C', '--check-labels',
        action='store_true',
        help='Check that header labels alternately have "Reverse"'
    )

    parser.add_argument(
        '-d', '--fixed-separation',
        type=int,
        metavar='NUM',
        help='Fixed diagonal difference to join matches'
    )

    parser.add_argument(
        '-e', '--use-extents',
        action='store_true',
        help='Use extent of match (end - start) rather than sum of piece '
             'lengths to determine length of cluster'
    )

    parser.add_argument(
        '-f', '--separation-factor',
        type=float,
        metavar='NUM',
        help='Fraction of separation for diagonal difference'
    )

    parser.add_argument(
        '-l', '--min-score',
        type=int,
        metavar='NUM',
        help='Minimum length of cluster match'
    )

    parser.add_argument(
        '-s', '--max-separation',
        type=int,
        metavar='NUM',
        help='Maximum separation between matches in cluster'
    )

    # Configuration
    parser.add_argument(
        '--config',
        type=str,
        help='Path to configuration YAML file'
    )

    parser.add_argument(
        '--input',
        type=str,
        help='Read matches from this file instead of stdin'
    )

    parser.add_argument(
        '--output',
        type=str,
        help='Write clusters to this file instead of stdout'
    )

    parser.add_argument(
        '--version',
        action='store_true',
        help='Show version information'
    )

    # Debug
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode'
    )

    return parser


def build_overrides(args: argparse.Namespace) -> dict:
    """Map parsed arguments onto configuration sections."""
    config_overrides = {}

    clustering = {}
    if args.fixed_separation is not None:
        clustering['fixed_separation'] = args.fixed_separation
    if args.separation_factor is not None:
        clustering['separation_factor'] = args.separation_factor
    if args.min_score is not None:
        clustering['min_output_score'] = args.min_score
    if args.max_separation is not None:
        clustering['max_separation'] = args.max_separation
    if args.use_extents:
        clustering['use_extents'] = True
    if clustering:
        config_overrides['clustering'] = clustering

    if args.check_labels:
        config_overrides['labels'] = {'check_labels': True}

    io_params = {}
    if args.input:
        io_params['input'] = args.input
    if args.output:
        io_params['output'] = args.output
    if io_params:
        config_overrides['io'] = io_params

    if args.verbose:
        config_overrides['debug'] = {'verbose': True, 'log_level': 'INFO'}
    if args.debug:
        config_overrides['debug'] = {'verbose': True, 'log_level': 'DEBUG'}

    return config_overrides


def main(argv=None, stdin=None, stdout=None) -> int:
    parser = build_parser()
    # usage errors print to stderr and exit with status 2
    args = parser.parse_args(argv)

    if args.version:
        from match_clusterer import __version__
        print(f"match-clusterer {__version__}", file=stdout or sys.stdout)
        return 0

    from match_clusterer.pipeline.main_pipeline import main as pipeline_main

    return pipeline_main(
        config_path=args.config,
        overrides=build_overrides(args),
        stdin=stdin,
        stdout=stdout
    )


if __name__ == "__main__":
    sys.exit(main())
