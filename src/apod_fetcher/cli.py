"""Command-line interface for apod-fetcher."""

import argparse
import logging
import sys

from apod_fetcher.config import load_config
from apod_fetcher.exceptions import ApodError
from apod_fetcher.pipeline import Orchestrator


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    Log records go to stderr; stdout is reserved for the written path.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def fetch_image(args: argparse.Namespace) -> int:
    """Fetch today's picture and print where it was written.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = load_config()
        with Orchestrator(config) as orchestrator:
            path = orchestrator.run()
    except ApodError as e:
        logger.error(e.message)
        return 1

    print(path)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="apod-fetcher",
        description=(
            "Download today's Astronomy Picture of the Day in full resolution. "
            "Reads an optional JSON config from ~/.apod with 'api_key' and "
            "'image_dir' keys."
        ),
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.set_defaults(func=fetch_image)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
