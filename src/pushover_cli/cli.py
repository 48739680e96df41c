"""CLI entry point for pushover-cli.

Parses arguments, loads the configuration, and dispatches a single
notification. Prints nothing on success; on failure prints one line to
stderr and exits with status 1.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from .config import ConfigProvider, FileConfigProvider
from .errors import ConfigurationError, DispatchError
from .form import MAX_PRIORITY, MIN_PRIORITY, DispatchRequest
from .notify.dispatch import dispatch
from .paths import LOCAL_CONFIG, SYSTEM_CONFIG, config_candidates, user_config_dir


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _priority(value: str) -> int:
    try:
        p = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError("Priority must be a valid integer.")
    if not MIN_PRIORITY <= p <= MAX_PRIORITY:
        raise argparse.ArgumentTypeError(f"Priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}.")
    return p


def _timeout(value: str) -> float:
    try:
        t = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError("Timeout must be a number of seconds.")
    if t <= 0:
        raise argparse.ArgumentTypeError("Timeout must be greater than 0.")
    return t


def parse_args(argv=None) -> argparse.Namespace:
    """Build the argument parser and return parsed arguments."""
    parser = _Parser(
        prog="pushover",
        description="Send a notification through the Pushover API.",
        epilog=(
            f"Configuration is read from {SYSTEM_CONFIG}, then "
            f"{user_config_dir() / 'config.toml'}, then {LOCAL_CONFIG}."
        ),
    )
    parser.add_argument("-t", dest="title", metavar="<title>", help="Title of the notification")
    parser.add_argument("-m", dest="message", metavar="<message>", help="Message of the notification")
    parser.add_argument(
        "-p", dest="priority", metavar="<priority>", type=_priority, default=0,
        help="Priority (-2 to 2, default: 0)",
    )
    parser.add_argument("--app-token", metavar="<token>", help="Application token overriding the configured one")
    parser.add_argument(
        "--config", default=os.getenv("PUSHOVER_CONFIG", ""),
        help="Read configuration from this file only",
    )
    parser.add_argument("--timeout", type=_timeout, default=None, help="Network timeout in seconds (default: none)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log connection details to stderr")

    args = parser.parse_args(argv)

    if not args.message:
        parser.error("Message is required.")

    return args


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


def main(argv=None, provider: Optional[ConfigProvider] = None) -> None:
    """Entry point: load config, build the request, send it."""
    args = parse_args(argv)
    _configure_logging(args.verbose)

    if provider is None:
        provider = FileConfigProvider(config_candidates(args.config))

    try:
        config = provider.load()
    except ConfigurationError as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        sys.exit(1)

    request = DispatchRequest.from_config(
        config,
        message=args.message,
        title=args.title,
        priority=args.priority,
        token_override=args.app_token,
    )

    try:
        dispatch(config, request, timeout=args.timeout)
    except DispatchError as e:
        print(f"Error sending notification: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
