"""Lyrics scraping gateway with Genius search and image proxies."""

__version__ = "1.0.0"
