from __future__ import annotations

import logging
import os


def setup_logging(debug: bool) -> None:
    default = logging.DEBUG if debug else logging.INFO
    level = default
    # Explicit override, e.g. LYRICS_GATEWAY_LOG_LEVEL=WARNING under a process manager
    level_name = os.getenv("LYRICS_GATEWAY_LOG_LEVEL")
    if level_name:
        level = getattr(logging, level_name.strip().upper(), default)
        if not isinstance(level, int):
            level = default

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)
