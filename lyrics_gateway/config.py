import os

from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))

# Set LYRICS_GATEWAY_DEBUG=1 for DEBUG logging (cache hits, client errors).
DEBUG = os.getenv("LYRICS_GATEWAY_DEBUG", "").strip() == "1"

UA = os.getenv("LYRICS_GATEWAY_UA", "LyricsGateway/1.0").strip() or "LyricsGateway/1.0"

GENIUS_SEARCH_URL = "https://api.genius.com/search"

# Fallback content type for /image-proxy when the origin sends none
DEFAULT_IMAGE_TYPE = "image/jpeg"


def _timeout_from_env(raw: str):
    try:
        secs = float(raw)
    except ValueError:
        return 25.0
    return secs if secs > 0 else None


# 0 disables the timeout; requests then waits on the origin indefinitely.
UPSTREAM_TIMEOUT_SECS = _timeout_from_env(os.getenv("UPSTREAM_TIMEOUT_SECS", "25"))


def genius_api_key() -> str:
    """Search credential, read from the environment on every call."""
    return os.getenv("GENIUS_API_KEY", "").strip()
