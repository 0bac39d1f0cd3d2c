from __future__ import annotations

from dataclasses import dataclass

import requests
import structlog
from bs4 import UnicodeDammit

from ..config import DEFAULT_SOURCE_URL, DEFAULT_USER_AGENT
from ..errors import FetchFailure

logger = structlog.get_logger()


@dataclass
class PageFetcher:
    """Downloads the basin authority's real-time rainfall page.

    One GET per call, no retries: a failed attempt is reported to the caller
    and the next cache miss tries again.
    """

    url: str = DEFAULT_SOURCE_URL
    timeout_connect: float = 5.0
    timeout_read: float = 20.0
    user_agent: str = DEFAULT_USER_AGENT

    def fetch(self) -> str:
        timeout = (self.timeout_connect, self.timeout_read)
        headers = {"User-Agent": self.user_agent}
        try:
            with requests.Session() as s:
                resp = s.get(self.url, headers=headers, timeout=timeout)
                resp.raise_for_status()
                return decode_markup(resp)
        except requests.RequestException as e:
            logger.warning("rainfall_fetch_failed", url=self.url, error=str(e))
            raise FetchFailure("Failed to load the rainfall page") from e


def decode_markup(resp: requests.Response) -> str:
    """Return the response body as text.

    A charset in the Content-Type header is trusted. Without one, requests
    falls back to ISO-8859-1 for text/*, so the page's own <meta charset>
    (or a sniffed encoding) is used instead.
    """
    content_type = resp.headers.get("Content-Type", "")
    if "charset=" in content_type.lower():
        return resp.text
    dammit = UnicodeDammit(resp.content, is_html=True)
    if dammit.unicode_markup is None:
        return resp.text
    return dammit.unicode_markup
