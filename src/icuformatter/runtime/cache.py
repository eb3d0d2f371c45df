"""Thread-safe LRU cache for format() results.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - LRU eviction via OrderedDict
    - Immutable cache keys built from a deep snapshot of the values
    - Only successful results are stored

Cache Key Structure:
    (message, values_tuple)
    - message: str
    - values_tuple: tuple[tuple[str, HashableValue], ...] (sorted, frozen)

Keying is by deep equality, not identity: two equal mappings share an
entry, and a mapping mutated between calls produces a different key.
Equality alone is not enough, since values that compare equal may still
format differently (0.0 and -0.0, [1] and (1,)), so each snapshot also
records the concrete type and, for scalars, the repr.
Values that cannot be made hashable bypass the cache entirely.

Python 3.11+. Zero external dependencies.
"""

from collections import OrderedDict
from collections.abc import Mapping
from threading import RLock
from typing import Any

from icuformatter.constants import DEFAULT_CACHE_SIZE

__all__ = ["FormatCache"]

# Hashable snapshot of a value: primitives plus nested tuples/frozensets.
HashableValue = Any

_CacheKey = tuple[str, tuple[tuple[str, HashableValue], ...]]


class FormatCache:
    """Thread-safe LRU cache for format() results.

    Uses OrderedDict for LRU eviction and RLock for thread safety.
    Transparent to caller - returns None on cache miss.

    Attributes:
        maxsize: Maximum number of cache entries
        hits: Number of cache hits (for metrics)
        misses: Number of cache misses (for metrics)
    """

    __slots__ = ("_cache", "_hits", "_lock", "_maxsize", "_misses", "_unhashable_skips")

    def __init__(self, maxsize: int = DEFAULT_CACHE_SIZE) -> None:
        """Initialize format cache.

        Args:
            maxsize: Maximum number of entries (default: 1000)

        Raises:
            ValueError: If maxsize is not positive
        """
        if maxsize <= 0:
            msg = "maxsize must be positive"
            raise ValueError(msg)

        self._cache: OrderedDict[_CacheKey, str] = OrderedDict()
        self._maxsize = maxsize
        self._lock = RLock()
        self._hits = 0
        self._misses = 0
        self._unhashable_skips = 0

    def get(self, message: str, values: Mapping[str, object] | None) -> str | None:
        """Get cached text if it exists.

        Args:
            message: Message template
            values: Value mapping (may contain lists, dicts, sets)

        Returns:
            Cached formatted text or None
        """
        key = self._make_key(message, values)

        with self._lock:
            if key is None:
                self._unhashable_skips += 1
                self._misses += 1
                return None

            if key in self._cache:
                self._cache.move_to_end(key)
                self._hits += 1
                return self._cache[key]

            self._misses += 1
            return None

    def put(self, message: str, values: Mapping[str, object] | None, result: str) -> None:
        """Store formatted text, evicting the least recently used entry if full.

        Args:
            message: Message template
            values: Value mapping
            result: Formatted text
        """
        key = self._make_key(message, values)

        with self._lock:
            if key is None:
                self._unhashable_skips += 1
                return

            if key in self._cache:
                self._cache.move_to_end(key)
            elif len(self._cache) >= self._maxsize:
                self._cache.popitem(last=False)

            self._cache[key] = result

    def clear(self) -> None:
        """Clear all cached entries and reset metrics."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0
            self._unhashable_skips = 0

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached entries
            - maxsize (int): Maximum cache capacity
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
            - unhashable_skips (int): Operations skipped due to unhashable values
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0

            return {
                "size": len(self._cache),
                "maxsize": self._maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
                "unhashable_skips": self._unhashable_skips,
            }

    @staticmethod
    def _make_hashable(value: object) -> HashableValue:
        """Convert a potentially unhashable value to a hashable equivalent.

        Converts:
            - list/tuple -> (type name, tuple of items) (recursively)
            - dict/Mapping -> (type name, tuple of key-value pairs) (recursively)
            - set/frozenset -> (type name, tuple of items) (recursively)
            - Other values -> (type name, value, repr(value))

        Two values share a snapshot only when they would render the same:
        ``[1]`` and ``(1,)`` differ by type, ``0.0`` and ``-0.0`` or
        ``Decimal("1")`` and ``Decimal("1.0")`` differ by repr. Containers
        keep their iteration order, since str() of a dict or set follows it.
        """
        match value:
            case list() | tuple() | set() | frozenset():
                return (
                    type(value).__qualname__,
                    tuple(FormatCache._make_hashable(v) for v in value),
                )
            case Mapping():
                return (
                    type(value).__qualname__,
                    tuple((k, FormatCache._make_hashable(v)) for k, v in value.items()),
                )
            case _:
                return (type(value).__qualname__, value, repr(value))

    @staticmethod
    def _make_key(message: str, values: Mapping[str, object] | None) -> _CacheKey | None:
        """Create an immutable cache key.

        Keys are sorted so that ``{"a": 1, "b": 2}`` and ``{"b": 2, "a": 1}``
        share an entry.

        Robustness:
            Catches RecursionError for deeply nested structures and TypeError
            for unhashable values. Returns None in both cases to bypass caching
            without failing the format operation.

        Returns:
            Immutable cache key tuple, or None if conversion fails
        """
        if not values:
            return (message, ())

        try:
            items = tuple(
                sorted(
                    ((k, FormatCache._make_hashable(v)) for k, v in values.items()),
                    key=lambda item: str(item[0]),
                )
            )
            hash(items)
        except (TypeError, RecursionError):
            return None

        return (message, items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Maximum cache size."""
        return self._maxsize

    @property
    def hits(self) -> int:
        """Number of cache hits."""
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses."""
        with self._lock:
            return self._misses

    @property
    def unhashable_skips(self) -> int:
        """Number of operations skipped due to unhashable values."""
        with self._lock:
            return self._unhashable_skips
