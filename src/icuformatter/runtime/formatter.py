"""MessageFormatter - Main API for ICU-style message formatting.

Interprets ``{key}`` and ``{key, type, format}`` placeholders in a message,
substituting values and dispatching typed placeholders to registered type
handlers. Handlers receive a ``recurse`` callback so they can interpret the
nested message syntax found in their own format body (the chosen case of a
``plural`` or ``select``, for instance).

Python 3.11+.
"""

import logging
from collections.abc import Mapping

from icuformatter.constants import DEFAULT_CACHE_SIZE, MAX_DEPTH, OPEN_BRACE
from icuformatter.core.depth_guard import DepthGuard
from icuformatter.locale_utils import get_system_locale
from icuformatter.syntax import Placeholder, require_closing_bracket

from .cache import FormatCache
from .handlers import HandlerRegistry, TypeHandler
from .result import EMPTY, Handled, Leaf, Result, Sequence, flatten, to_result

__all__ = ["MessageFormatter"]

logger = logging.getLogger(__name__)

# Debug messages are high-volume; keep logged message excerpts short.
_LOG_TRUNCATE_DEBUG: int = 50


class MessageFormatter:
    """Formatter for a single locale and a fixed set of type handlers.

    The locale is opaque to the formatter: it is handed to type handlers
    unchanged. Handlers and locale are fixed at construction; the only
    mutable state is the result cache used by format().

    Thread Safety:
        process() keeps all state on the call stack. The format() cache is
        guarded by an RLock, so one formatter can be shared between threads
        as long as its handlers are thread-safe.

    Examples:
        >>> formatter = MessageFormatter("en")
        >>> formatter.format("Hello, {name}!", {"name": "Ada"})
        'Hello, Ada!'
        >>>
        >>> def upper(value, format, locale, values, recurse):
        ...     return str(value).upper()
        >>> formatter = MessageFormatter("en", {"upper": upper})
        >>> formatter.format("{name, upper}", {"name": "Ada"})
        'ADA'
    """

    __slots__ = (
        "_cache",
        "_cache_size",
        "_handlers",
        "_locale",
        "_max_nesting_depth",
    )

    def __init__(
        self,
        locale: str,
        /,
        type_handlers: Mapping[str, TypeHandler] | HandlerRegistry | None = None,
        *,
        enable_cache: bool = True,
        cache_size: int = DEFAULT_CACHE_SIZE,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize formatter.

        Args:
            locale: Locale code, passed through to type handlers [positional-only]
            type_handlers: Mapping of type name to handler, or a
                HandlerRegistry (copied, so later registrations on the
                original do not leak into this formatter)
            enable_cache: Memoize format() results (default: True)
            cache_size: Maximum cache entries when caching enabled (default: 1000)
            max_nesting_depth: Maximum depth of nested recurse() calls made
                by handlers (default: 100)

        Raises:
            ValueError: If cache_size is not positive while caching is enabled
        """
        self._locale = locale

        if isinstance(type_handlers, HandlerRegistry):
            self._handlers = type_handlers.copy()
        else:
            self._handlers = HandlerRegistry(type_handlers)

        self._max_nesting_depth = max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH

        self._cache: FormatCache | None = None
        self._cache_size = cache_size
        if enable_cache:
            self._cache = FormatCache(maxsize=cache_size)

        logger.info(
            "MessageFormatter initialized for locale: %s (handlers=%s, cache=%s)",
            locale,
            self._handlers.list_handlers(),
            "enabled" if enable_cache else "disabled",
        )

    @classmethod
    def for_system_locale(
        cls,
        type_handlers: Mapping[str, TypeHandler] | HandlerRegistry | None = None,
        *,
        enable_cache: bool = True,
        cache_size: int = DEFAULT_CACHE_SIZE,
        max_nesting_depth: int | None = None,
    ) -> "MessageFormatter":
        """Create a MessageFormatter for the detected system locale.

        Raises:
            RuntimeError: If system locale cannot be determined
        """
        return cls(
            get_system_locale(raise_on_failure=True),
            type_handlers,
            enable_cache=enable_cache,
            cache_size=cache_size,
            max_nesting_depth=max_nesting_depth,
        )

    @property
    def locale(self) -> str:
        """Locale code handed to type handlers (read-only)."""
        return self._locale

    @property
    def handlers(self) -> HandlerRegistry:
        """Copy of the registered type handlers (read-only)."""
        return self._handlers.copy()

    @property
    def cache_enabled(self) -> bool:
        """Whether format() results are memoized."""
        return self._cache is not None

    @property
    def cache_size(self) -> int:
        """Maximum cache entries (0 if caching disabled)."""
        return self._cache_size if self._cache is not None else 0

    @property
    def max_nesting_depth(self) -> int:
        """Maximum depth of nested recurse() calls."""
        return self._max_nesting_depth

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> MessageFormatter("lv_LV")
            MessageFormatter(locale='lv_LV', handlers=[])
        """
        return (
            f"MessageFormatter(locale={self._locale!r}, "
            f"handlers={self._handlers.list_handlers()!r})"
        )

    def format(self, message: str, values: Mapping[str, object] | None = None) -> str:
        """Format a message to text.

        Runs process() and flattens the result. Results are memoized per
        (message, values) when caching is enabled; values are compared by
        deep equality, so a mapping mutated between calls is re-formatted.

        Args:
            message: Message with ``{...}`` placeholders
            values: Placeholder values (default: none)

        Returns:
            Formatted text

        Raises:
            UnbalancedBracesError: If message, or a nested message passed to
                ``recurse`` by a handler, has an unmatched '{'
            DepthLimitExceededError: If handlers recurse too deeply

        Handler exceptions propagate unchanged and are never cached.
        """
        if self._cache is not None:
            cached = self._cache.get(message, values)
            if cached is not None:
                return cached

        text = flatten(self.process(message, values))

        if self._cache is not None:
            self._cache.put(message, values, text)
        return text

    def process(self, message: str, values: Mapping[str, object] | None = None) -> Sequence:
        """Interpret a message into a structured result.

        The result keeps each part separate: literal text as Leaf, handler
        output as returned by the handler, and the remainder of the message
        after each placeholder as a nested Sequence. This is useful for
        renderers that want to emit components instead of a string;
        format() is the plain-text renderer.

        Args:
            message: Message with ``{...}`` placeholders
            values: Placeholder values (default: none)

        Returns:
            ``Sequence([head?, contribution, rest?])``; an empty Sequence for
            an empty message and ``Sequence([Leaf(message)])`` when the
            message has no placeholders.

        Raises:
            UnbalancedBracesError: If a '{' has no matching '}'
            DepthLimitExceededError: If handlers recurse too deeply

        Example:
            >>> MessageFormatter("en").process("Hi {name}!", {"name": "Sam"})
            Sequence(items=(Leaf(text='Hi '), Leaf(text='Sam'), Sequence(items=(Leaf(text='!'),))))
        """
        guard = DepthGuard(max_depth=self._max_nesting_depth)
        return self._process(message, values if values is not None else {}, guard)

    def clear_cache(self) -> None:
        """Clear the format() cache."""
        if self._cache is not None:
            self._cache.clear()
            logger.debug("Cache manually cleared")

    def get_cache_stats(self) -> dict[str, int | float] | None:
        """Get cache statistics, or None if caching disabled.

        Keys: size, maxsize, hits, misses, hit_rate (0.0-100.0),
        unhashable_skips.
        """
        if self._cache is not None:
            return self._cache.get_stats()
        return None

    def _process(
        self, message: str, values: Mapping[str, object], guard: DepthGuard
    ) -> Sequence:
        """Scan ``message`` block by block using offsets into the string.

        Blocks are resolved left to right in a loop, then folded from the
        right into the nested ``[head?, contribution, rest?]`` shape, so the
        number of placeholders never costs stack depth.
        """
        if not message:
            return EMPTY

        end = len(message)
        start = 0
        resolved: list[tuple[str, Result]] = []

        while True:
            open_index = message.find(OPEN_BRACE, start, end)
            if open_index == -1:
                break
            close_index = require_closing_bracket(message, open_index, start, end)
            placeholder = Placeholder.from_contents(message[open_index + 1 : close_index])
            resolved.append(
                (message[start:open_index], self._resolve(placeholder, values, guard))
            )
            start = close_index + 1
            if start >= end:
                break

        rest: Sequence | None = Sequence((Leaf(message[start:end]),)) if start < end else None
        for head, contribution in reversed(resolved):
            items: list[Result] = [Leaf(head)] if head else []
            items.append(contribution)
            if rest is not None:
                items.append(rest)
            rest = Sequence(tuple(items))

        return rest if rest is not None else EMPTY

    def _resolve(
        self, placeholder: Placeholder, values: Mapping[str, object], guard: DepthGuard
    ) -> Result:
        """Produce one block's contribution."""
        value = values.get(placeholder.key)
        if value is None:
            value = ""

        handler = self._handlers.get_handler(placeholder.type) if placeholder.type else None
        if handler is None:
            if placeholder.type:
                logger.debug(
                    "No handler for type '%s' in %s, using raw value",
                    placeholder.type,
                    repr(str(placeholder)[:_LOG_TRUNCATE_DEBUG]),
                )
            return Leaf(value) if isinstance(value, str) else Handled(value)

        def recurse(
            message: str, nested_values: Mapping[str, object] | None = None
        ) -> Sequence:
            with guard:
                return self._process(
                    message, values if nested_values is None else nested_values, guard
                )

        logger.debug("Dispatching '%s' to handler '%s'", placeholder.key, placeholder.type)
        return to_result(handler(value, placeholder.format, self._locale, values, recurse))
