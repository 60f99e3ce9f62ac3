from unittest.mock import MagicMock

import pytest

from config import MastodonCredentials, XCredentials
from platforms.mastodon_client import MastodonClient
from platforms.x_client import XClient


# Smallest valid PNG: 1x1 transparent pixel
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f"
    b"\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


@pytest.fixture
def x_credentials():
    return XCredentials(
        api_key="test-key",
        api_secret="test-secret",
        access_token="test-token",
        access_token_secret="test-token-secret",
    )


@pytest.fixture
def mastodon_credentials():
    return MastodonCredentials(host="mastodon.example", access_token="masto-token")


@pytest.fixture
def x_client(x_credentials):
    """XClient with the tweepy v1.1 API and v2 Client replaced by mocks."""
    client = XClient(x_credentials, timeout=5)
    client._api_v1 = MagicMock()
    client._client_v2 = MagicMock()
    return client


@pytest.fixture
def mastodon_client(mastodon_credentials):
    return MastodonClient(mastodon_credentials, timeout=5)


@pytest.fixture
def png_bytes():
    return PNG_BYTES
