"""
Exception types raised by the Pocket to Mastodon relay.
"""

from typing import Any, List, Optional


class Pocket2FediError(Exception):
    """Base class for all relay errors."""


class MissingConfiguration(Pocket2FediError):
    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(
            f"Missing required environment variables: {', '.join(self.missing)}"
        )


class SourceUnavailable(Pocket2FediError):
    """Pocket answered with a non-2xx status or could not be reached."""

    def __init__(self, status_code: Optional[int], message: str = ""):
        self.status_code = status_code
        self.message = message
        if status_code is None:
            text = f"Pocket API unreachable: {message}"
        else:
            text = f"Pocket API request failed with status {status_code}"
            if message:
                text += f": {message}"
        super().__init__(text)


class SourceResponseInvalid(Pocket2FediError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid Pocket API response: {reason}")


class DestinationRejected(Pocket2FediError):
    """The Mastodon server refused a status, or could not be reached."""

    def __init__(
        self,
        status_code: Optional[int],
        error: Optional[Any] = None,
        message: str = "",
    ):
        self.status_code = status_code
        self.error = error
        self.message = message
        if status_code is None:
            text = f"Mastodon server unreachable: {message}"
        else:
            text = f"Mastodon server rejected status with {status_code}"
            if error is not None:
                text += f": {error}"
            elif message:
                text += f": {message}"
        super().__init__(text)
