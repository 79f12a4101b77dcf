"""
Configuration loading for the Pocket to Mastodon relay.
Reads credentials from the environment once at startup.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from errors import MissingConfiguration

POCKET_CONSUMER_KEY = "POCKET_CONSUMER_KEY"
POCKET_ACCESS_TOKEN = "POCKET_ACCESS_TOKEN"
MASTODON_SERVER = "MASTODON_SERVER"
MASTODON_TOKEN = "MASTODON_TOKEN"

REQUIRED_VARIABLES = (
    POCKET_CONSUMER_KEY,
    POCKET_ACCESS_TOKEN,
    MASTODON_SERVER,
    MASTODON_TOKEN,
)


@dataclass(frozen=True)
class Configuration:
    pocket_consumer_key: str
    pocket_access_token: str
    mastodon_server: str
    mastodon_token: str

    def __repr__(self) -> str:
        # Keep tokens out of logs and tracebacks
        return f"Configuration(mastodon_server={self.mastodon_server!r})"


def load_config(environ: Optional[Mapping[str, str]] = None) -> Configuration:
    """
    Build a Configuration from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Configuration with the four values exactly as found

    Raises:
        MissingConfiguration: if any variable is absent or empty
    """
    if environ is None:
        environ = os.environ

    values = {name: environ.get(name) for name in REQUIRED_VARIABLES}
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise MissingConfiguration(missing)

    return Configuration(
        pocket_consumer_key=values[POCKET_CONSUMER_KEY],
        pocket_access_token=values[POCKET_ACCESS_TOKEN],
        mastodon_server=values[MASTODON_SERVER],
        mastodon_token=values[MASTODON_TOKEN],
    )
