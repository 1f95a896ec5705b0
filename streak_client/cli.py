#!/usr/bin/env python3
"""Command-line access to the streak tracker backend.

Usage examples:
    streak-client status
    streak-client log --date 2024-05-01 --session-type 2-hours
    streak-client --base-url http://localhost:8080 stats
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from streak_client.api.client import StreakApiClient, StreakApiError
from streak_client.config import parse_args as parse_base
from streak_client.helpers.state import DashboardController

logger = logging.getLogger(__name__)


def parse_cli(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    base = parse_base(argv)
    # Global flags are valid before or after the subcommand; values come from parse_base.
    common = argparse.ArgumentParser(add_help=False, argument_default=argparse.SUPPRESS)
    common.add_argument("--base-url", dest="base_url", help="Root URL of the backend")
    common.add_argument("--timeout", dest="timeout", type=float, help="HTTP timeout in seconds")
    common.add_argument("--log-level", dest="log_level", help="Logging level")

    parser = argparse.ArgumentParser(
        prog="streak-client",
        description="Query or update the session streak tracker.",
        parents=[common],
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("status", parents=[common], help="Show current time, streak and points")
    log_cmd = sub.add_parser("log", parents=[common], help="Log a session")
    log_cmd.add_argument("--date", required=True, help="Session date (YYYY-MM-DD)")
    log_cmd.add_argument(
        "--session-type", dest="session_type", required=True, help="e.g. 1-hour, 2-hours"
    )
    sub.add_parser("stats", parents=[common], help="Show overall statistics")

    args = parser.parse_args(argv)
    args.settings = base.to_client_settings()
    return args


def dump_json(data: Any):
    print(json.dumps(data, indent=2, ensure_ascii=False))


def run(args: argparse.Namespace) -> int:
    settings = args.settings
    with StreakApiClient(settings=settings) as client:
        if args.command == "stats":
            try:
                dump_json(client.get_overall_statistics().to_dict())
            except StreakApiError as e:
                print(f"Error: {e}", file=sys.stderr)
                return 1
            return 0

        controller = DashboardController(client, settings=settings)
        if args.command == "log":
            controller.set_date(args.date)
            controller.set_session(args.session_type)
            state = controller.submit()
        else:
            state = controller.load()

    if controller.last_error is not None:
        print(f"Error: {controller.last_error}", file=sys.stderr)
        return 1

    dump_json(
        {
            "current_time": state.current_time,
            "streak": state.streak,
            "total_points": state.total_points,
        }
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return its exit status."""
    args = parse_cli(argv)
    logging.basicConfig(level=getattr(logging, args.settings.log_level, logging.INFO))
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
