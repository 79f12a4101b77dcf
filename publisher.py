#!/usr/bin/env python3
"""
Publisher Module for pocket2fedi
Posts statuses to a Mastodon-compatible server.
"""

import json
import logging
from typing import Any, Dict, Optional

import requests
from requests import Session

from errors import DestinationRejected
from models import SavedItem

logger = logging.getLogger(__name__)

STATUS_TEMPLATE = "New Pocket save: {title} - {url}"
DEFAULT_TIMEOUT = 10


def format_status(item: SavedItem) -> str:
    return STATUS_TEMPLATE.format(title=item.title, url=item.url)


class MastodonPublisher:
    """Creates statuses through the Mastodon REST API."""

    def __init__(
        self,
        session: Session,
        server: str,
        access_token: str,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.session = session
        self.server = server
        self.access_token = access_token
        self.timeout = timeout

    @property
    def statuses_url(self) -> str:
        return f"{self.server.rstrip('/')}/api/v1/statuses"

    def publish(self, item: SavedItem) -> Optional[Dict[str, Any]]:
        """
        Post one status announcing a Pocket save.

        Args:
            item: SavedItem to announce

        Returns:
            The created status as returned by the server, if it sent JSON

        Raises:
            DestinationRejected: on a non-2xx status or a network error
        """
        return self.post_status(format_status(item))

    def post_status(self, status: str) -> Optional[Dict[str, Any]]:
        try:
            response = self.session.post(
                self.statuses_url,
                data={"status": status},
                headers={"Authorization": f"Bearer {self.access_token}"},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise DestinationRejected(None, message=str(e)) from e

        if not 200 <= response.status_code < 300:
            raise DestinationRejected(
                response.status_code,
                error=self._decode_error(response),
                message=response.text,
            )

        logger.info(f"Successfully posted to Mastodon: {status}")
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _decode_error(response) -> Optional[Any]:
        # Mastodon answers errors as {"error": "..."}
        try:
            body = response.json()
        except (json.JSONDecodeError, ValueError):
            return None
        if isinstance(body, dict) and "error" in body:
            return body["error"]
        return body


def create_publisher(config, session: Optional[Session] = None) -> MastodonPublisher:
    return MastodonPublisher(
        session=session or requests.Session(),
        server=config.mastodon_server,
        access_token=config.mastodon_token,
    )


def publish(config, item: SavedItem, session: Optional[Session] = None) -> None:
    create_publisher(config, session).publish(item)
