"""Ordered HTML entity decoding for scraped lyrics text.

Only the references lyrics pages actually emit are handled: decimal numeric
references, the five common named entities and the hex apostrophe. The steps
run in a fixed order and text produced by one step is never fed to a later
one, so ``&amp;lt;`` decodes to ``&lt;`` and not ``<``.
"""

from __future__ import annotations

import re
from typing import Callable, List, Tuple, Union

_MAX_CODE_POINT = 0x10FFFF
_MAX_CODE_POINT_DIGITS = len(str(_MAX_CODE_POINT))


def _numeric_ref(m: re.Match) -> str:
    digits = m.group(1).lstrip("0") or "0"
    if len(digits) > _MAX_CODE_POINT_DIGITS:
        return m.group(0)
    cp = int(digits)
    # Surrogates and out-of-range values have no character; keep the reference.
    if cp > _MAX_CODE_POINT or 0xD800 <= cp <= 0xDFFF:
        return m.group(0)
    return chr(cp)


Replacement = Union[str, Callable[[re.Match], str]]

DECODE_STEPS: Tuple[Tuple["re.Pattern[str]", Replacement], ...] = (
    (re.compile(r"&#(\d+);"), _numeric_ref),
    (re.compile(re.escape("&quot;")), '"'),
    (re.compile(re.escape("&amp;")), "&"),
    (re.compile(re.escape("&lt;")), "<"),
    (re.compile(re.escape("&gt;")), ">"),
    (re.compile(re.escape("&apos;")), "'"),
    (re.compile(re.escape("&#x27;")), "'"),
)


def _apply_step(segments: List[Tuple[str, bool]], pattern, repl: Replacement) -> List[Tuple[str, bool]]:
    out: List[Tuple[str, bool]] = []
    for text, decoded in segments:
        if decoded:
            out.append((text, True))
            continue
        pos = 0
        for m in pattern.finditer(text):
            if m.start() > pos:
                out.append((text[pos:m.start()], False))
            value = repl(m) if callable(repl) else repl
            # An untouched numeric reference stays raw so later steps still see it.
            out.append((value, value != m.group(0)))
            pos = m.end()
        if pos < len(text):
            out.append((text[pos:], False))
    return out


def decode_entities(text: str) -> str:
    segments = [(text, False)]
    for pattern, repl in DECODE_STEPS:
        segments = _apply_step(segments, pattern, repl)
    return "".join(s for s, _ in segments)
