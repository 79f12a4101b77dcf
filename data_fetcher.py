#!/usr/bin/env python3
"""
Data Fetcher Module for pocket2fedi
Retrieves the most recent saves from the Pocket API.
"""

import json
import logging
from typing import Dict, List, Optional

import requests
from requests import Session

from data_parser import extract_saved_items
from errors import SourceResponseInvalid, SourceUnavailable
from models import SavedItem

logger = logging.getLogger(__name__)

POCKET_GET_URL = "https://getpocket.com/v3/get"
DEFAULT_COUNT = 10
DEFAULT_TIMEOUT = 10


class PocketDataFetcher:
    """Fetches recent saves from the Pocket API."""

    def __init__(
        self,
        session: Session,
        consumer_key: str,
        access_token: str,
        base_url: str = POCKET_GET_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.session = session
        self.consumer_key = consumer_key
        self.access_token = access_token
        self.base_url = base_url
        self.timeout = timeout

    def fetch_recent_saves(self, count: int = DEFAULT_COUNT) -> List[SavedItem]:
        """
        Fetch the newest saves and keep the unarchived ones.

        Args:
            count: Number of items to request from Pocket

        Returns:
            List of SavedItem, empty when nothing is unarchived

        Raises:
            SourceUnavailable: on a non-2xx status or a network error
            SourceResponseInvalid: when the body cannot be decoded
        """
        logger.info(f"Fetching {count} most recent Pocket saves")

        data = self._retrieve(count=count, sort="newest", detail_type="simple")
        articles = data.get("list", {})

        # Pocket sends an empty array instead of an object when nothing matches
        if articles == [] or articles is None:
            articles = {}
        if not isinstance(articles, dict):
            raise SourceResponseInvalid(
                f"'list' field is {type(articles).__name__}, expected object"
            )

        saves = extract_saved_items(articles.values())
        logger.info(
            f"Successfully retrieved {len(saves)} recent Pocket saves "
            f"({len(articles) - len(saves)} archived or deleted skipped)"
        )
        return saves

    def _retrieve(self, count: int, sort: str, detail_type: str) -> Dict:
        payload = {
            "consumer_key": self.consumer_key,
            "access_token": self.access_token,
            "count": count,
            "sort": sort,
            "detailType": detail_type,
        }

        try:
            response = self.session.post(
                self.base_url,
                json=payload,
                headers={
                    "Content-Type": "application/json; charset=UTF-8",
                    "X-Accept": "application/json",
                },
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error during Pocket API request: {e}")
            raise SourceUnavailable(None, str(e)) from e

        if not 200 <= response.status_code < 300:
            # Pocket explains failures in the X-Error header
            reason = response.headers.get("X-Error", "")
            if response.status_code in (401, 403):
                logger.error("Authentication failed. Check your Pocket credentials.")
            raise SourceUnavailable(response.status_code, reason)

        try:
            data = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            raise SourceResponseInvalid(f"body is not valid JSON ({e})") from e

        if not isinstance(data, dict):
            raise SourceResponseInvalid(
                f"top-level value is {type(data).__name__}, expected object"
            )

        logger.debug(f"Pocket returned {len(data.get('list') or {})} items")
        return data


def create_data_fetcher(config, session: Optional[Session] = None) -> PocketDataFetcher:
    """
    Create a data fetcher from a Configuration.

    Args:
        config: Configuration instance
        session: Optional requests session to reuse

    Returns:
        PocketDataFetcher instance
    """
    return PocketDataFetcher(
        session=session or requests.Session(),
        consumer_key=config.pocket_consumer_key,
        access_token=config.pocket_access_token,
    )


def fetch_recent_saves(
    config, session: Optional[Session] = None, count: int = DEFAULT_COUNT
) -> List[SavedItem]:
    return create_data_fetcher(config, session).fetch_recent_saves(count=count)
