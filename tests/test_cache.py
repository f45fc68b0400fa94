from adiparse.cache import DEFAULT_TTL_SECONDS, ResponseCache


def test_set_then_get_returns_value(clock) -> None:
    cache: ResponseCache[dict] = ResponseCache(timer=clock)

    cache.set("sunstream.acme", {"name": "main"})

    assert cache.get("sunstream.acme") == {"name": "main"}
    assert "sunstream.acme" in cache
    assert len(cache) == 1


def test_default_ttl_is_five_minutes() -> None:
    assert DEFAULT_TTL_SECONDS == 300
    assert ResponseCache().ttl == 300


def test_entry_expires_at_ttl(clock) -> None:
    cache: ResponseCache[str] = ResponseCache(300, timer=clock)
    cache.set("k", "v")

    clock.advance(299)
    assert cache.get("k") == "v"

    clock.advance(1)
    assert cache.get("k") is None
    assert "k" not in cache
    assert len(cache) == 0


def test_set_after_expiry_starts_fresh_entry(clock) -> None:
    cache: ResponseCache[str] = ResponseCache(300, timer=clock)
    cache.set("k", "old")
    clock.advance(400)
    assert cache.get("k") is None

    cache.set("k", "new")
    entry = cache.entry("k")

    assert entry is not None
    assert entry.value == "new"
    assert entry.stored_at == clock.now


def test_delete_and_clear(clock) -> None:
    cache: ResponseCache[str] = ResponseCache(timer=clock)
    cache.set("a", "1")
    cache.set("b", "2")

    cache.delete("a")
    cache.delete("missing")
    assert cache.get("a") is None
    assert cache.get("b") == "2"

    cache.clear()
    assert len(cache) == 0
