#!/usr/bin/env python3
"""
pocket2fedi
Reposts recent unarchived Pocket saves as Mastodon statuses.
"""

import sys
import time
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

import requests
from dotenv import load_dotenv

from config import Configuration, load_config
from data_fetcher import DEFAULT_COUNT, PocketDataFetcher, create_data_fetcher
from errors import DestinationRejected, MissingConfiguration, Pocket2FediError
from publisher import MastodonPublisher, create_publisher

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

DEFAULT_DELAY = 2.0

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_FETCH_ERROR = 2


@dataclass
class RunSummary:
    fetched: int = 0
    published: int = 0
    failed: int = 0


def run(
    config: Configuration,
    fetcher: Optional[PocketDataFetcher] = None,
    publisher: Optional[MastodonPublisher] = None,
    delay: float = DEFAULT_DELAY,
    count: int = DEFAULT_COUNT,
    sleep: Callable[[float], None] = time.sleep,
    session: Optional[requests.Session] = None,
) -> RunSummary:
    """
    Fetch recent saves and post one status for each.

    Fetch errors propagate to the caller. A rejected status is logged and
    the remaining items are still posted. Missing components are built
    from config and share session when one is given.
    """
    fetcher = fetcher or create_data_fetcher(config, session)
    publisher = publisher or create_publisher(config, session)

    saves = fetcher.fetch_recent_saves(count=count)
    summary = RunSummary(fetched=len(saves))

    for index, save in enumerate(saves):
        if index > 0:
            # Fixed spacing between posts to stay under the server's rate limit
            sleep(delay)
        try:
            publisher.publish(save)
            summary.published += 1
        except DestinationRejected as e:
            summary.failed += 1
            logger.error(f"❌ Error posting to Mastodon for '{save.title}': {e}")

    return summary


def main(argv: Optional[List[str]] = None) -> int:
    import argparse
    parser = argparse.ArgumentParser(description="Repost recent Pocket saves to Mastodon")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT,
                        help=f"Number of recent saves to fetch (default: {DEFAULT_COUNT})")
    parser.add_argument("--delay", type=float, default=DEFAULT_DELAY,
                        help=f"Seconds to wait between posts (default: {DEFAULT_DELAY})")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    args = parser.parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    load_dotenv()
    try:
        config = load_config()
    except MissingConfiguration as e:
        logger.error(f"Error loading configuration: {e}")
        return EXIT_CONFIG_ERROR

    with requests.Session() as session:
        try:
            summary = run(config, delay=args.delay, count=args.count, session=session)
        except Pocket2FediError as e:
            logger.error(f"Error fetching Pocket saves: {e}")
            return EXIT_FETCH_ERROR

    logger.info(
        f"🎉 Finished processing recent Pocket saves: {summary.fetched} fetched, "
        f"{summary.published} posted, {summary.failed} failed"
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
