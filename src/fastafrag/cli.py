"""CLI entry point for the fastafrag package.

This module provides the ``fragment-sequence`` command, which breaks the
sequences of a FASTA file into overlapping or gapped fragments.

A fragment can either overlap the fragment before it::

    5'---------------------3'
                  5'----------------------------------3'

or be separated from it by a gap::

    5'---------------------3'
                                   5'----------------------------------3'

A positive --min_overlap_distance gives overlaps, a negative one gives gaps.
--max_overlap_distance is always positive. The sequence length divided by
--fragmentation_factor gives the fragment length, so a factor of 10 on a
1000 base sequence gives fragments of about 100 bases.

Example:
    $ fragment-sequence -i genome.fasta -o fragments.fasta -m 10 -n 100
    $ fragment-sequence -i genome.fasta -o fragments.fasta -m -200 -n 100 -f 8 -l skipped.log
    $ fragment-sequence -c run.yaml -o other_output.fasta
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from fastafrag.config import ConfigurationError, load_config
from fastafrag.logging_config import get_logger, setup_logging
from fastafrag.pipeline import fragment_fasta

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the fragment-sequence command."""
    parser = argparse.ArgumentParser(
        prog="fragment-sequence",
        description="Fragment FASTA sequences into overlapping or gapped pieces",
        epilog="Required options may also come from --config; command-line values win.",
    )
    parser.add_argument(
        "-i", "--input_file",
        type=Path,
        help="Path to the input FASTA file (required)",
    )
    parser.add_argument(
        "-o", "--output_file",
        type=Path,
        help="Path to the output FASTA file (required)",
    )
    parser.add_argument(
        "-m", "--min_overlap_distance",
        type=int,
        help="Minimal overlap distance (required). A negative value N places "
        "fragments at most |N| bases apart",
    )
    parser.add_argument(
        "-n", "--max_overlap_distance",
        type=int,
        help="Maximum overlap distance (required). Must be positive",
    )
    parser.add_argument(
        "-f", "--fragmentation_factor",
        type=int,
        help="Degree of fragmentation, at least 2. A higher factor yields more "
        "and shorter fragments (default: 5)",
    )
    parser.add_argument(
        "-l", "--log",
        type=Path,
        help="Log file recording skipped sequences (optional)",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="YAML file with option values keyed by long option name (optional)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point for fragmenting a FASTA file.

    Parses command-line arguments, validates them, then reads the input
    FASTA file and writes the fragments. Exits with status 1 on invalid
    options or when a file cannot be opened.

    Args:
        argv: Argument list; defaults to sys.argv[1:].
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging based on verbosity
    if args.verbose:
        setup_logging(level="DEBUG")

    options = {
        "input_file": args.input_file,
        "output_file": args.output_file,
        "min_overlap_distance": args.min_overlap_distance,
        "max_overlap_distance": args.max_overlap_distance,
        "fragmentation_factor": args.fragmentation_factor,
        "log": args.log,
    }

    try:
        config = load_config(options, config_path=args.config)
    except ConfigurationError as e:
        logger.error("%s", e)
        sys.exit(1)
    except OSError as e:
        logger.error("Can't read config file: %s", e)
        sys.exit(1)

    params = config.parameters
    logger.info("Fragmenting: %s", config.input_file)
    logger.debug(
        "  Overlap distances: %d..%d step %d",
        params.min_overlap,
        params.max_overlap,
        params.overlap_increment,
    )
    logger.debug("  Fragmentation factor: %d", params.fragmentation_factor)

    try:
        summary = fragment_fasta(
            config.input_file,
            config.output_file,
            params,
            log_path=config.log_file,
        )
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Fragmentation failed: %s", e)
        sys.exit(1)

    logger.info("Fragmentation complete!")
    logger.info("  Sequences: %d", summary.records)
    logger.info("  Fragments: %d", summary.fragments)
    logger.info("  Skipped: %d", summary.skipped)
    logger.info("  Output: %s", config.output_file)
    if config.log_file:
        logger.info("  Log: %s", config.log_file)


if __name__ == "__main__":
    main()
