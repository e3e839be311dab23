"""
Command Line Interface

Filters a movie catalog down to one decade and writes the result to
``<output-dir>/<decade>s-movies.json``.

Usage:
    moviefilter --decade 1980 --input-file movies.json --output-dir out/
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import FilterConfig, LoggingConfig
from .data.catalog_store import CatalogStore
from .data.loader import load_catalog, write_results
from .errors import (
    CatalogLoadError,
    EmptyCatalogError,
    InvalidDecadeError,
    ResultWriteError,
)
from .service import FilterService
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moviefilter",
        description="Filter a movie catalog down to the movies released in one decade."
    )
    parser.add_argument(
        "-d", "--decade", type=int, required=True,
        help="The decade of interest in the format yyyy, e.g. 1980"
    )
    parser.add_argument(
        "-i", "--input-file", type=Path, required=True,
        help="JSON or CSV file containing all movies supported by the application"
    )
    parser.add_argument(
        "-o", "--output-dir", type=Path, required=True,
        help="Directory the filtered movies file is written to"
    )
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
        help="Log level (default: $MOVIEFILTER_LOG_LEVEL or INFO)"
    )
    parser.add_argument(
        "--json-logs", action="store_true", default=None,
        help="Emit logs as JSON lines"
    )
    parser.add_argument(
        "--log-file", type=Path, default=None,
        help="Also write JSON logs to this file"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_config(args: argparse.Namespace, parser: argparse.ArgumentParser) -> FilterConfig:
    """Merge parsed arguments over environment defaults."""
    log_config = LoggingConfig.from_env()

    if args.log_level:
        log_config.level = args.log_level
    elif log_config.level.upper() not in LOG_LEVELS:
        parser.error(f"invalid log level in environment: {log_config.level!r}")
    if args.json_logs:
        log_config.json_output = True
    if args.log_file:
        log_config.log_file = args.log_file

    return FilterConfig(
        decade=args.decade,
        input_file=args.input_file,
        output_dir=args.output_dir,
        logging=log_config
    )


def run(config: FilterConfig) -> int:
    """
    Load, filter and write; map every failure to an exit code.

    Returns:
        EXIT_OK on success, including an empty result; EXIT_FAILURE otherwise
    """
    try:
        records = load_catalog(config.input_file)
        service = FilterService(CatalogStore(records))
        movies = service.filter(config.decade)
        output_file = write_results(movies, config.output_file)
    except CatalogLoadError as e:
        logger.error(f"Can't load the movies supported by the application: {e}")
        return EXIT_FAILURE
    except EmptyCatalogError:
        logger.error(f"The catalog {config.input_file} doesn't contain any movies")
        return EXIT_FAILURE
    except InvalidDecadeError as e:
        logger.error(
            f"{e.decade} can't be used as a decade: {e.reason}. "
            "Use the first year of a decade from 1900 on, e.g. 1980"
        )
        return EXIT_FAILURE
    except ResultWriteError as e:
        logger.error(f"Can't write the filtered movies: {e}")
        return EXIT_FAILURE

    if not movies:
        logger.warning(f"No movies from the {config.decade}s in {config.input_file}")
    logger.info(f"Wrote {len(movies)} movies to {output_file}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = build_config(args, parser)

    try:
        setup_logging(
            level=config.logging.level,
            json_output=config.logging.json_output,
            log_file=config.logging.log_file
        )
    except OSError as e:
        print(f"moviefilter: can't open log file {config.logging.log_file}: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return run(config)


if __name__ == "__main__":
    sys.exit(main())
