"""Pull lyrics text out of a lyrics page's markup.

Three page layouts are recognised, tried in order:

1. ``div[data-lyrics-container="true"]`` blocks (current layout, one block per
   verse group, joined with a newline after each block);
2. a single legacy ``div.lyrics`` block;
3. ``div.Lyrics__Container`` blocks (transitional layout, joined like 1).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from bs4 import BeautifulSoup

CONTAINER_SELECTOR = 'div[data-lyrics-container="true"]'
LEGACY_SELECTOR = "div.lyrics"
CLASSIC_CONTAINER_SELECTOR = "div.Lyrics__Container"


@dataclass(frozen=True)
class Found:
    text: str


@dataclass(frozen=True)
class NotFound:
    pass


ExtractionResult = Union[Found, NotFound]


def _joined_text(soup: BeautifulSoup, selector: str) -> str:
    # get_text() with no separator walks every descendant text node,
    # so <br> contributes nothing and inline tags don't split words.
    return "".join(el.get_text() + "\n" for el in soup.select(selector))


def extract_lyrics(markup: str) -> ExtractionResult:
    soup = BeautifulSoup(markup or "", "html.parser")

    text = _joined_text(soup, CONTAINER_SELECTOR)

    if text.strip() == "":
        legacy = soup.select_one(LEGACY_SELECTOR)
        if legacy is not None:
            legacy_text = legacy.get_text()
            if legacy_text:
                text = legacy_text.strip()

    if text.strip() == "":
        text += _joined_text(soup, CLASSIC_CONTAINER_SELECTOR)

    text = text.strip()
    if not text:
        return NotFound()
    return Found(text)
