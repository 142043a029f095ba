"""
CLI entry point for the pathgen-generate command.

Loads a saved path document, regenerates its motion profile (optionally with
config overrides) and writes the updated document.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pathgen.config import TRACE, CurvatureSource, PathAlgorithm, SamplingStrategy
from pathgen.document import export_document, load_document, read_document, write_document
from pathgen.generate import generate
from pathgen.utils.errors import ConfigurationError, PathDocumentError

logger = logging.getLogger("pathgen.cli.generate")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Regenerate the motion profile of a path document")
    parser.add_argument("input", help="Path document (JSON)")
    parser.add_argument("-o", "--output", help="Output document (default: stdout)")
    parser.add_argument("--algorithm", choices=[a.value for a in PathAlgorithm], help="Curve family")
    parser.add_argument("--sampling", choices=[s.value for s in SamplingStrategy], help="Sampling strategy")
    parser.add_argument(
        "--curvature-source", choices=[c.value for c in CurvatureSource], help="Angular velocity curvature"
    )
    parser.add_argument("--spacing", type=float, help="Distance between generated points")
    parser.add_argument("-k", type=float, help="Cornering constant")
    parser.add_argument("--max-velocity", type=float, help="Speed limit")
    parser.add_argument("--max-acceleration", type=float, help="Acceleration limit")

    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase verbosity; -v=INFO, -vv=DEBUG, -vvv=TRACE')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Enable quiet logging (ERROR level)')
    parser.add_argument('--log-level', choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set specific log level')
    return parser


def _log_level(args: argparse.Namespace) -> int:
    if args.log_level:
        if args.log_level == 'TRACE':
            return TRACE
        return getattr(logging, args.log_level)
    if args.verbose >= 3:
        return TRACE
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    if args.quiet:
        return logging.ERROR
    return logging.WARNING


def main(argv: list[str] | None = None) -> int:
    """Run the generator CLI; returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=_log_level(args),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    try:
        waypoints, config, flag_points = load_document(read_document(args.input))
        config = config.with_overrides(
            algorithm=args.algorithm,
            sampling=args.sampling,
            curvature_source=args.curvature_source,
            spacing=args.spacing,
            k=args.k,
            max_velocity=args.max_velocity,
            max_acceleration=args.max_acceleration,
        )
    except (OSError, PathDocumentError, ConfigurationError) as e:
        logger.error(f"Failed to load {args.input}: {e}")
        return 1

    generated = generate(waypoints, config)
    logger.info(
        f"{config.algorithm.value}: {len(waypoints)} waypoints -> {len(generated)} points"
        + (f", {generated[-1].time:.2f}s" if generated else "")
    )

    document = export_document(waypoints, config, generated, flag_points)
    if args.output:
        try:
            write_document(args.output, document)
        except OSError as e:
            logger.error(f"Failed to write {args.output}: {e}")
            return 1
    else:
        json.dump(document, sys.stdout, indent=2)
        sys.stdout.write("\n")
    return 0


def main_entry():
    """Entry point for the pathgen-generate command."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
