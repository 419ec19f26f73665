"""
misw CLI - Command-line entry point for the minesweeper client.

Usage:
    misw play [--base-url URL] [--timeout S] [-v]   Start the interactive client
    misw version                                    Print the client version
"""

import argparse
import dataclasses
import logging
import sys

from . import __version__
from .app import run_client
from .config import ClientConfig
from .errors import FatalError
from .terminal import Terminal


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="misw - Minesweeper terminal client",
        prog="misw",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Start the interactive client")
    play_parser.add_argument("--base-url", help="Default API base URL offered at the prompt")
    play_parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    play_parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    # Version command
    subparsers.add_parser("version", help="Print the client version")

    args = parser.parse_args(argv)

    if args.command == "play":
        cmd_play(args)
    elif args.command == "version":
        print(__version__)
    else:
        parser.print_help()
        sys.exit(1)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_play(args):
    """Start the interactive client."""
    try:
        config = ClientConfig.from_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.base_url:
        config = dataclasses.replace(config, base_url=args.base_url)
    if args.timeout is not None:
        config = dataclasses.replace(config, timeout=args.timeout)
    if args.verbose:
        config = dataclasses.replace(config, log_level="DEBUG")

    configure_logging(config.log_level)

    try:
        run_client(Terminal(), config)
    except FatalError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
