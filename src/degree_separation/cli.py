"""Command-line interface for degree separation statistics."""

import argparse
import logging
import sys

from degree_separation.graph.errors import EdgeListError
from degree_separation.report import OUTPUT_FORMATS
from degree_separation.solver.solve import main_solve

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="degree-separation",
        description="Compute degree-of-separation statistics of an undirected graph.",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default="euroroad.csv",
        help="Path to the edge list (CSV: NodeA,NodeB per row, default: euroroad.csv)",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of BFS workers (default: one per CPU)",
    )

    parser.add_argument(
        "--isolated-node",
        dest="isolated_nodes",
        type=int,
        action="append",
        default=[],
        metavar="NODE",
        help="Include a node with no edges (may be repeated)",
    )

    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    if args.workers is not None and args.workers < 1:
        parser.error(f"--workers must be positive, got {args.workers}")

    try:
        main_solve(
            input_path=args.input_file,
            workers=args.workers,
            isolated_nodes=args.isolated_nodes,
            output_format=args.output_format,
        )
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.input_file, exc.strerror or exc)
        return 1
    except EdgeListError as exc:
        logger.error("Malformed edge list %s: %s", args.input_file, exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
