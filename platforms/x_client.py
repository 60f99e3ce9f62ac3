import logging
import mimetypes
from io import BytesIO

import requests
import tweepy
from platforms.base import PlatformClient, PostResult
from platforms.errors import PublishError, UploadError

logger = logging.getLogger(__name__)


def media_filename(mime_type):
    """tweepy infers the upload type from the filename extension."""
    extension = mimetypes.guess_extension(mime_type or "") or ".png"
    if extension == ".jpe":
        extension = ".jpg"
    return f"media{extension}"


class TimeoutSession(requests.Session):
    """Session applying a default timeout; tweepy.Client sets none itself."""

    def __init__(self, timeout):
        super().__init__()
        self.timeout = timeout

    def request(self, method, url, **kwargs):
        kwargs.setdefault("timeout", self.timeout)
        return super().request(method, url, **kwargs)


def _wrap_error(error_cls, message, exc):
    status_code = None
    body = ""
    if isinstance(exc, tweepy.HTTPException):
        status_code = exc.response.status_code
        body = exc.response.text
    else:
        body = str(exc)
    return error_cls(message, platform=XClient.name, status_code=status_code, body=body)


class XClient(PlatformClient):
    name = "x"

    def __init__(self, credentials=None, **kwargs):
        super().__init__(credentials, **kwargs)
        self._client_v2 = None
        self._api_v1 = None

    def _get_client_v2(self):
        if self._client_v2 is None:
            creds = self.credentials
            self._client_v2 = tweepy.Client(
                consumer_key=creds.api_key,
                consumer_secret=creds.api_secret,
                access_token=creds.access_token,
                access_token_secret=creds.access_token_secret,
            )
            self._client_v2.session = TimeoutSession(self.timeout)
        return self._client_v2

    def _get_api_v1(self):
        if self._api_v1 is None:
            creds = self.credentials
            auth = tweepy.OAuth1UserHandler(
                creds.api_key,
                creds.api_secret,
                creds.access_token,
                creds.access_token_secret,
            )
            self._api_v1 = tweepy.API(auth, timeout=self.timeout)
        return self._api_v1

    def upload_media(self, data, mime_type, alt_text=""):
        api = self._get_api_v1()
        try:
            upload = api.media_upload(
                filename=media_filename(mime_type),
                file=BytesIO(data),
            )
            # Alt text is a separate metadata call keyed by the new media id
            if alt_text:
                api.create_media_metadata(upload.media_id, alt_text)
        except tweepy.TweepyException as e:
            raise _wrap_error(UploadError, "Media upload failed", e) from e

        logger.info("Uploaded media to X: %s", upload.media_id)
        return upload.media_id

    def publish_status(self, text, media_ids):
        client = self._get_client_v2()
        try:
            response = client.create_tweet(
                text=text,
                media_ids=list(media_ids) if media_ids else None,
            )
        except (tweepy.TweepyException, requests.RequestException) as e:
            # tweepy.Client lets transport errors through unwrapped
            raise _wrap_error(PublishError, "Tweet failed", e) from e

        tweet_id = str(response.data["id"])
        logger.info("Posted tweet %s", tweet_id)
        return PostResult(
            platform=self.name,
            success=True,
            post_id=tweet_id,
            post_url=f"https://x.com/i/status/{tweet_id}",
        )
