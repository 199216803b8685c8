"""Document download for mdblog.

ContentFetcher performs exactly one GET per document and hands back the raw
body. There is no retry; a failure aborts the generation run.
"""

from __future__ import annotations

import httpx

from .errors import DownloadFailed, ReadFailed
from .logging import get_logger

logger = get_logger("fetcher")


class ContentFetcher:
    """Downloads raw document bytes from direct-download URLs."""

    def __init__(self, client: httpx.Client | None = None):
        """Initialize the fetcher.

        Args:
            client: Optional HTTP client; a short-lived one is used per call otherwise.
        """
        self._client = client

    def fetch(self, url: str) -> bytes:
        """Download the body at ``url``.

        Args:
            url: Direct download URL of a document.

        Returns:
            The full response body.

        Raises:
            DownloadFailed: If the request cannot be sent or returns a non-2xx status.
            ReadFailed: If the body cannot be read to the end.
        """
        logger.debug("Fetching %s", url)
        if self._client is not None:
            return self._fetch_with(self._client, url)
        with httpx.Client(follow_redirects=True) as client:
            return self._fetch_with(client, url)

    def _fetch_with(self, client: httpx.Client, url: str) -> bytes:
        try:
            request = client.build_request("GET", url)
            response = client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise DownloadFailed(f"failed to download file {url}: {exc}") from exc

        try:
            if not response.is_success:
                raise DownloadFailed(
                    f"failed to download file {url}: HTTP {response.status_code}"
                )
            try:
                return response.read()
            except httpx.HTTPError as exc:
                raise ReadFailed(f"failed to read file {url}: {exc}") from exc
        finally:
            response.close()
