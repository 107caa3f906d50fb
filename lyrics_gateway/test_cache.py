from lyrics_gateway.cache import MemoryLyricsCache


def test_memory_cache_roundtrip():
    cache = MemoryLyricsCache()
    assert cache.get("https://example.com/a") is None
    assert len(cache) == 0
    assert "https://example.com/a" not in cache

    cache.put("https://example.com/a", "words")
    assert cache.get("https://example.com/a") == "words"
    assert "https://example.com/a" in cache
    assert len(cache) == 1


def test_keys_are_used_verbatim():
    cache = MemoryLyricsCache()
    cache.put("https://example.com/a", "words")
    assert cache.get("https://example.com/a/") is None
    assert cache.get(" https://example.com/a") is None
    assert cache.get("HTTPS://example.com/a") is None
