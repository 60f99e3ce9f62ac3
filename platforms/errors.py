"""
Exceptions raised by platform clients.

A platform without credentials is not an error: the client reports it through
``validate_credentials()`` and the cross-poster skips it.
"""

BODY_SNIPPET_LENGTH = 200


class PlatformError(Exception):
    """Base exception for a failed call against a platform API."""

    def __init__(self, message, *, platform, status_code=None, body=""):
        super().__init__(message)
        self.platform = platform
        self.status_code = status_code
        self.body = (body or "")[:BODY_SNIPPET_LENGTH]

    def __str__(self):
        text = f"{self.platform}: {self.args[0]}"
        if self.status_code is not None:
            text += f" (HTTP {self.status_code})"
        if self.body:
            text += f": {self.body}"
        return text


class UploadError(PlatformError):
    """Raised when a media upload fails."""


class PublishError(PlatformError):
    """Raised when publishing a status fails."""
