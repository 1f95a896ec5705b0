import argparse
import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv  # type: ignore

from streak_client.config.settings import ClientSettings, update_from_kwargs

# Load .env if present
load_dotenv()


@dataclass
class CliSettings:
    base_url: str
    timeout: float
    log_level: str

    def to_client_settings(self) -> ClientSettings:
        return update_from_kwargs(
            api_base_url=self.base_url,
            api_timeout_sec=self.timeout,
            log_level=self.log_level,
        )


def parse_args(argv: Optional[List[str]] = None) -> CliSettings:
    parser = argparse.ArgumentParser(description="Streak tracker backend configuration")
    parser.add_argument(
        "--base-url",
        dest="base_url",
        help="Root URL of the streak tracker backend",
        default=os.getenv("STREAK_API_BASE_URL", "http://127.0.0.1:8080"),
    )
    parser.add_argument(
        "--timeout",
        dest="timeout",
        type=float,
        help="HTTP timeout in seconds",
        default=float(os.getenv("STREAK_API_TIMEOUT_SEC", "10")),
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        help="Logging level (DEBUG, INFO, WARNING, ...)",
        default=os.getenv("STREAK_LOG_LEVEL", "INFO"),
    )

    # Use parse_known_args so that scripts can define additional CLI flags
    # (e.g., --date) without config failing due to unknown args.
    args = parser.parse_known_args(argv)[0]

    if args.timeout <= 0:
        parser.error("--timeout must be a positive number of seconds.")

    return CliSettings(
        base_url=args.base_url,
        timeout=args.timeout,
        log_level=args.log_level.upper(),
    )
