from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

import config


@dataclass(frozen=True)
class MediaAttachment:
    data: bytes = field(repr=False)
    mime_type: str
    alt_text: str = ""

    def __post_init__(self):
        if not self.data:
            raise ValueError("Media attachment data must not be empty")


@dataclass(frozen=True)
class Post:
    text: str
    media: tuple = ()

    def __post_init__(self):
        # Freeze whatever sequence the caller passed
        object.__setattr__(self, "media", tuple(self.media))


@dataclass
class PostResult:
    platform: str
    success: bool
    post_id: str = ""
    post_url: str = ""
    error: str = ""


class PlatformClient(ABC):
    name: str = ""

    def __init__(self, credentials=None, timeout=None, max_upload_workers=None):
        self.credentials = credentials
        self.timeout = timeout if timeout is not None else config.HTTP_TIMEOUT
        self.max_upload_workers = max_upload_workers or config.MAX_UPLOAD_WORKERS

    def validate_credentials(self):
        """Check if credentials are configured. Returns bool."""
        return self.credentials is not None

    @abstractmethod
    def upload_media(self, data, mime_type, alt_text=""):
        """Upload one file. Returns the platform's media id."""
        pass

    @abstractmethod
    def publish_status(self, text, media_ids):
        """Publish a status referencing uploaded media. Returns a PostResult."""
        pass

    def upload_all(self, media):
        """Upload attachments concurrently, returning ids in attachment order."""
        if not media:
            return []

        def upload(attachment):
            return self.upload_media(
                attachment.data, attachment.mime_type, attachment.alt_text
            )

        workers = min(len(media), self.max_upload_workers)
        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix=f"{self.name}-upload"
        ) as executor:
            # map() yields results by input position, not completion order
            return list(executor.map(upload, media))

    def post(self, post):
        """Upload the post's media, then publish it. Returns a PostResult."""
        media_ids = self.upload_all(post.media)
        return self.publish_status(post.text, media_ids)
