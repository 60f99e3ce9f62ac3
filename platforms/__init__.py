import config
from platforms.x_client import XClient
from platforms.mastodon_client import MastodonClient

# Insertion order is the order posts are sent in
PLATFORMS = {
    "x": XClient,
    "mastodon": MastodonClient,
}


def get_credentials(name):
    """Return the configured credentials for a platform, or None if disabled."""
    if name == "x":
        return config.x_credentials()
    if name == "mastodon":
        return config.mastodon_credentials()
    raise ValueError(f"Unknown platform: {name}")


def get_platform(name, **kwargs):
    cls = PLATFORMS.get(name)
    if cls is None:
        raise ValueError(f"Unknown platform: {name}")
    return cls(get_credentials(name), **kwargs)


def build_clients(**kwargs):
    """Build one client per platform from configured credentials, in send order."""
    return [get_platform(name, **kwargs) for name in PLATFORMS]
