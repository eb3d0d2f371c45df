"""Tests for FormatCache (runtime/cache.py)."""

import threading
from decimal import Decimal

import pytest
from hypothesis import given

from icuformatter.runtime.cache import FormatCache
from tests.strategies import values_mappings


class TestFormatCacheBasics:
    """Test get/put/clear and statistics."""

    def test_invalid_maxsize(self) -> None:
        """maxsize must be positive."""
        with pytest.raises(ValueError, match="maxsize must be positive"):
            FormatCache(maxsize=0)

    def test_miss_then_hit(self) -> None:
        """A stored result is returned on the next lookup."""
        cache = FormatCache()

        assert cache.get("Hi {name}", {"name": "A"}) is None
        cache.put("Hi {name}", {"name": "A"}, "Hi A")

        assert cache.get("Hi {name}", {"name": "A"}) == "Hi A"
        assert cache.hits == 1
        assert cache.misses == 1

    def test_none_and_empty_values_share_key(self) -> None:
        """No values and an empty mapping are the same key."""
        cache = FormatCache()
        cache.put("msg", None, "msg")

        assert cache.get("msg", {}) == "msg"

    def test_key_order_does_not_matter(self) -> None:
        """Equal mappings in different insertion order share an entry."""
        cache = FormatCache()
        cache.put("m", {"a": 1, "b": 2}, "x")

        assert cache.get("m", {"b": 2, "a": 1}) == "x"

    def test_equal_but_distinct_types_do_not_collide(self) -> None:
        """1, 1.0 and True compare equal but are different keys."""
        cache = FormatCache()
        cache.put("m", {"v": 1}, "int")

        assert cache.get("m", {"v": 1.0}) is None
        assert cache.get("m", {"v": True}) is None

    def test_lru_eviction(self) -> None:
        """The least recently used entry is evicted when full."""
        cache = FormatCache(maxsize=2)
        cache.put("a", None, "A")
        cache.put("b", None, "B")
        cache.get("a", None)
        cache.put("c", None, "C")

        assert cache.get("b", None) is None
        assert cache.get("a", None) == "A"
        assert cache.get("c", None) == "C"
        assert len(cache) == 2

    def test_clear_resets_stats(self) -> None:
        """clear() empties the cache and resets counters."""
        cache = FormatCache()
        cache.put("a", None, "A")
        cache.get("a", None)
        cache.clear()

        assert cache.get_stats() == {
            "size": 0,
            "maxsize": 1000,
            "hits": 0,
            "misses": 0,
            "hit_rate": 0.0,
            "unhashable_skips": 0,
        }

    def test_hit_rate(self) -> None:
        """hit_rate is a percentage rounded to two places."""
        cache = FormatCache()
        cache.put("a", None, "A")
        cache.get("a", None)
        cache.get("a", None)
        cache.get("b", None)

        assert cache.get_stats()["hit_rate"] == 66.67


class TestFormatCacheValueSnapshots:
    """Test deep-equality keying of composite values."""

    def test_lists_and_dicts_are_cacheable(self) -> None:
        """Unhashable containers are converted to hashable snapshots."""
        cache = FormatCache()
        values = {"items": [1, 2], "meta": {"k": {"x", "y"}}}
        cache.put("m", values, "out")

        assert cache.get("m", {"items": [1, 2], "meta": {"k": {"x", "y"}}}) == "out"
        assert cache.unhashable_skips == 0

    def test_mutation_changes_key(self) -> None:
        """Mutating a mapping in place misses the old entry."""
        cache = FormatCache()
        values: dict[str, object] = {"items": [1]}
        cache.put("m", values, "one")
        values["items"] = [1, 2]

        assert cache.get("m", values) is None

    def test_list_and_set_do_not_collide(self) -> None:
        """Containers of different kinds are distinct keys."""
        cache = FormatCache()
        cache.put("m", {"v": [1]}, "list")

        assert cache.get("m", {"v": {1}}) is None

    @pytest.mark.parametrize(
        ("first", "second"),
        [
            (0.0, -0.0),
            (Decimal("1"), Decimal("1.0")),
            (["a"], ("a",)),
            ({"a": 1, "b": 2}, {"b": 2, "a": 1}),
        ],
    )
    def test_equal_values_that_render_differently(self, first: object, second: object) -> None:
        """Equal values with different str() output get separate entries."""
        cache = FormatCache()
        cache.put("m", {"v": first}, str(first))

        assert cache.get("m", {"v": second}) is None
        assert cache.get("m", {"v": first}) == str(first)

    def test_unhashable_values_skip_cache(self) -> None:
        """Values that cannot be snapshotted bypass the cache."""

        class Unhashable:
            __hash__ = None  # type: ignore[assignment]

        cache = FormatCache()
        cache.put("m", {"v": Unhashable()}, "out")

        assert cache.get("m", {"v": Unhashable()}) is None
        assert cache.unhashable_skips == 2
        assert len(cache) == 0

    @given(values=values_mappings())
    def test_snapshot_of_copy_hits(self, values: dict[str, object]) -> None:
        """Property: a deep copy of the values finds the same entry."""
        import copy

        cache = FormatCache()
        cache.put("m", values, "out")

        assert cache.get("m", copy.deepcopy(values)) == "out"


class TestFormatCacheConcurrency:
    """Test thread-safe access."""

    def test_concurrent_put_get(self) -> None:
        """Concurrent writers and readers keep consistent statistics."""
        cache = FormatCache(maxsize=50)

        def worker(n: int) -> None:
            for i in range(200):
                key = f"m{(n * 7 + i) % 80}"
                if cache.get(key, None) is None:
                    cache.put(key, None, key.upper())

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        stats = cache.get_stats()
        assert stats["size"] <= 50
        assert stats["hits"] + stats["misses"] == 8 * 200
