import logging

from platforms import build_clients
from platforms.base import PostResult
from platforms.errors import PlatformError

logger = logging.getLogger(__name__)


class CrossPoster:
    """Send one post to every configured platform, best effort."""

    def __init__(self, clients):
        self.clients = list(clients)

    @classmethod
    def from_config(cls, **kwargs):
        return cls(build_clients(**kwargs))

    def send(self, post):
        """Post to each platform in turn and return one PostResult per attempt.

        Platforms without credentials are skipped with a warning. A platform
        error is logged and reported in its result; it never stops the
        remaining platforms and is never raised to the caller.
        """
        results = []
        for client in self.clients:
            if not client.validate_credentials():
                logger.warning(
                    "Not posting to %s due to missing credentials: %r",
                    client.name,
                    post.text,
                )
                continue

            try:
                result = client.post(post)
            except PlatformError as e:
                logger.error("Posting to %s failed: %s", client.name, e)
                result = PostResult(platform=client.name, success=False, error=str(e))
            results.append(result)
        return results
