import logging

import requests
from platforms.base import PlatformClient, PostResult
from platforms.errors import PlatformError, PublishError, UploadError

logger = logging.getLogger(__name__)

UPLOAD_FILENAME = "media.png"


class MastodonClient(PlatformClient):
    name = "mastodon"

    def __init__(self, credentials=None, session=None, **kwargs):
        super().__init__(credentials, **kwargs)
        # Shared by upload worker threads
        self._session = session if session is not None else requests.Session()

    @property
    def api_url(self):
        return f"https://{self.credentials.host}/api/v1/"

    def _auth_headers(self):
        return {"Authorization": f"Bearer {self.credentials.access_token}"}

    def _request(self, method, path, json=None, data=None, files=None, error_cls=PlatformError):
        """Send an authenticated request and return the decoded JSON body.

        A multipart form is sent as-is when ``files`` is given; otherwise
        ``json`` is serialized as the body. Any non-2xx response raises
        ``error_cls`` with the status code and a snippet of the response text,
        as does a 2xx body that is not an entity object with an ``id``.
        """
        try:
            resp = self._session.request(
                method,
                self.api_url + path,
                headers=self._auth_headers(),
                json=json if files is None else None,
                data=data,
                files=files,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise error_cls(
                f"{method} {path} failed: {type(e).__name__}",
                platform=self.name,
            ) from e

        if not 200 <= resp.status_code < 300:
            logger.error(
                "Unexpected response from Mastodon API: %s %s",
                resp.status_code,
                resp.text[:200],
            )
            raise error_cls(
                f"Unexpected response from Mastodon API for {method} {path}",
                platform=self.name,
                status_code=resp.status_code,
                body=resp.text,
            )

        try:
            result = resp.json()
        except ValueError as e:
            raise error_cls(
                f"Invalid JSON from Mastodon API for {method} {path}",
                platform=self.name,
                status_code=resp.status_code,
                body=resp.text,
            ) from e

        if not isinstance(result, dict) or "id" not in result:
            raise error_cls(
                f"Unexpected payload from Mastodon API for {method} {path}",
                platform=self.name,
                status_code=resp.status_code,
                body=resp.text,
            )
        return result

    def upload_media(self, data, mime_type, alt_text=""):
        form = {"description": alt_text} if alt_text else None
        result = self._request(
            "POST",
            "media",
            data=form,
            files={"file": (UPLOAD_FILENAME, data, mime_type)},
            error_cls=UploadError,
        )
        logger.info("Uploaded media %s", result["id"])
        return result["id"]

    def publish_status(self, text, media_ids):
        result = self._request(
            "POST",
            "statuses",
            json={
                "status": text,
                "media_ids": list(media_ids),
                # public, unlisted, private (followers), direct (mentions)
                "visibility": "public",
                "language": "en",
            },
            error_cls=PublishError,
        )
        logger.info("Posted status %s %s", result["id"], result.get("uri"))
        return PostResult(
            platform=self.name,
            success=True,
            post_id=str(result["id"]),
            post_url=result.get("url") or result.get("uri", ""),
        )
