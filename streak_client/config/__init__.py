"""Client configuration: environment settings and command-line flags."""

from streak_client.config.core import CliSettings, parse_args
from streak_client.config.settings import SETTINGS, ClientSettings, update_from_kwargs

__all__ = ["parse_args", "CliSettings", "SETTINGS", "ClientSettings", "update_from_kwargs"]
