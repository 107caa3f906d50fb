from __future__ import annotations

import logging
from typing import Optional

import requests

from . import config
from .cache import LyricsCache
from .entities import decode_entities
from .extract import NotFound as LyricsMissing
from .extract import extract_lyrics
from .outcomes import BadRequest, ConfigError, NotFound, Ok, Outcome, Streamed, UpstreamFailure
from .upstream import UpstreamClient

logger = logging.getLogger(__name__)

IMAGE_CHUNK_SIZE = 64 * 1024


def lyrics_outcome(url: Optional[str], cache: LyricsCache, client: UpstreamClient) -> Outcome:
    """Cache lookup, then fetch -> extract -> decode -> store.

    Only a successful extraction writes to the cache; fetch failures and
    extraction misses leave it untouched.
    """
    if not url:
        logger.debug("/lyrics called without url")
        return BadRequest("Missing url parameter")

    cached = cache.get(url)
    if cached is not None:
        logger.debug("Lyrics cache hit for %s", url)
        return Ok({"lyrics": cached})

    try:
        html = client.fetch_page(url)
    except requests.RequestException as e:
        logger.warning("Failed to fetch lyrics page %s: %s", url, e)
        return UpstreamFailure("Failed to fetch lyrics page")

    result = extract_lyrics(html)
    if isinstance(result, LyricsMissing):
        logger.info("No lyrics structure found on %s", url)
        return NotFound("Lyrics not found on the page")

    lyrics = decode_entities(result.text)
    cache.put(url, lyrics)
    return Ok({"lyrics": lyrics})


def _error_details(e: requests.RequestException):
    resp = e.response
    if resp is None:
        return str(e)
    try:
        return resp.json()
    except ValueError:
        return resp.text


def search_outcome(q: Optional[str], api_key: str, client: UpstreamClient) -> Outcome:
    if not q:
        logger.debug("/api/search called without q")
        return BadRequest("Missing query parameter 'q'")

    if not api_key:
        logger.error("Missing Genius API key in environment variables")
        return ConfigError("Missing Genius API key")

    try:
        r = client.search(q, api_key)
        return Ok(r.json(), r.status_code)
    except requests.RequestException as e:
        resp = e.response
        details = _error_details(e)
        logger.error(
            "Error fetching search results: %s (upstream status=%s, body=%r)",
            e, resp.status_code if resp is not None else None, details if resp is not None else None,
        )
        return UpstreamFailure("Error fetching search results", details=details)


def image_outcome(url: Optional[str], client: UpstreamClient) -> Outcome:
    if not url:
        logger.debug("/image-proxy called without url")
        return BadRequest("Missing url parameter")

    try:
        r = client.open_image(url)
    except requests.RequestException as e:
        logger.warning("Failed to fetch image %s: %s", url, e)
        return UpstreamFailure("Failed to fetch image")

    def generate():
        try:
            yield from r.iter_content(chunk_size=IMAGE_CHUNK_SIZE)
        finally:
            r.close()

    return Streamed(
        chunks=generate(),
        content_type=r.headers.get("content-type") or config.DEFAULT_IMAGE_TYPE,
        headers={"Access-Control-Allow-Origin": "*"},
    )
