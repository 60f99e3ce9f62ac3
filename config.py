import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

X_API_KEY = os.getenv("X_API_KEY", "")
X_API_SECRET = os.getenv("X_API_SECRET", "")
X_ACCESS_TOKEN = os.getenv("X_ACCESS_TOKEN", "")
X_ACCESS_TOKEN_SECRET = os.getenv("X_ACCESS_TOKEN_SECRET", "")

MASTODON_HOST = (
    os.getenv("MASTODON_HOST", "")
    .removeprefix("https://")
    .removeprefix("http://")
    .rstrip("/")
)
MASTODON_ACCESS_TOKEN = os.getenv("MASTODON_ACCESS_TOKEN", "")

HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30"))
MAX_UPLOAD_WORKERS = max(1, int(os.getenv("MAX_UPLOAD_WORKERS", "4")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

MAX_IMAGES = 4
ALLOWED_EXTENSIONS = {"png", "jpg", "jpeg", "gif", "webp"}


@dataclass(frozen=True)
class XCredentials:
    api_key: str
    api_secret: str
    access_token: str
    access_token_secret: str


@dataclass(frozen=True)
class MastodonCredentials:
    host: str
    access_token: str


def x_configured():
    return bool(X_API_KEY and X_API_SECRET and X_ACCESS_TOKEN and X_ACCESS_TOKEN_SECRET)


def mastodon_configured():
    return bool(MASTODON_HOST and MASTODON_ACCESS_TOKEN)


def x_credentials():
    """Return X credentials, or None when any of the four values is missing."""
    if not x_configured():
        return None
    return XCredentials(
        api_key=X_API_KEY,
        api_secret=X_API_SECRET,
        access_token=X_ACCESS_TOKEN,
        access_token_secret=X_ACCESS_TOKEN_SECRET,
    )


def mastodon_credentials():
    """Return Mastodon credentials, or None when host or token is missing."""
    if not mastodon_configured():
        return None
    return MastodonCredentials(host=MASTODON_HOST, access_token=MASTODON_ACCESS_TOKEN)


def configure_logging(level=None):
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
