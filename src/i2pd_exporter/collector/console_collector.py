"""
Source for a live i2pd web console. Fetches the main page over HTTP;
the client timeout is the only deadline and there are no retries.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from i2pd_exporter.collector.base import ScrapeError, StatusPageSource

log = logging.getLogger(__name__)

DEFAULT_CONSOLE_URL = "http://127.0.0.1:7070"


class WebConsoleSource(StatusPageSource):

    def __init__(
        self,
        url: str = DEFAULT_CONSOLE_URL,
        timeout_seconds: float = 5.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._url = url
        self._timeout = timeout_seconds
        self._client = httpx.Client(
            timeout=self._timeout,
            follow_redirects=True,
            transport=transport,
        )

    def fetch(self) -> str:
        try:
            response = self._client.get(self._url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ScrapeError(f"scrape error: {e}") from e

        if response.status_code != 200:
            raise ScrapeError(f"i2pd returned status {response.status_code}")

        log.debug("Fetched %d bytes from %s", len(response.content), self._url)
        return response.text

    def name(self) -> str:
        return f"i2pd console ({self._url})"

    def close(self):
        self._client.close()
