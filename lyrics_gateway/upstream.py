from __future__ import annotations

import logging

import requests

from . import config

logger = logging.getLogger(__name__)


class UpstreamClient:
    """Thin wrapper over a ``requests.Session`` for every outbound call.

    All methods raise ``requests.RequestException`` (including ``HTTPError``
    for non-2xx replies); callers decide what a failure means for their route.
    """

    def __init__(self, session=None, *, timeout=config.UPSTREAM_TIMEOUT_SECS, user_agent: str = config.UA):
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.user_agent = user_agent

    def get(self, url: str, **kwargs) -> requests.Response:
        headers = kwargs.pop("headers", {}) or {}
        headers.setdefault("User-Agent", self.user_agent)
        kwargs.setdefault("timeout", self.timeout)
        return self.session.get(url, headers=headers, **kwargs)

    def fetch_page(self, url: str) -> str:
        r = self.get(url)
        r.raise_for_status()
        # requests falls back to ISO-8859-1 for text/* without a charset
        if "charset" not in (r.headers.get("content-type") or "").lower():
            r.encoding = "utf-8"
        return r.text

    def search(self, q: str, api_key: str) -> requests.Response:
        r = self.get(config.GENIUS_SEARCH_URL, params={"q": q},
                     headers={"Authorization": f"Bearer {api_key}"})
        r.raise_for_status()
        return r

    def open_image(self, url: str) -> requests.Response:
        r = self.get(url, stream=True)
        try:
            r.raise_for_status()
        except requests.RequestException:
            r.close()
            raise
        return r
