"""Type handler contract and registry.

A type handler turns a resolved value plus the raw format field of a
``{key, type, format}`` block into output. The engine looks handlers up by
the block's ``type`` name and calls them with five positional arguments:

    handler(value, format, locale, values, recurse)

``recurse`` is the engine's own interpretation entry point, bound to the
current call, so a handler can format a selected case body that itself
contains placeholders.

Example:
    >>> def shout(value, format, locale, values, recurse):
    ...     return str(value).upper()
    >>> registry = HandlerRegistry()
    >>> registry.register(shout, name="shout")
    >>> "shout" in registry
    True

Python 3.11+. Zero external dependencies.
"""

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Protocol

from .result import Result

__all__ = ["HandlerInfo", "HandlerRegistry", "Recurse", "TypeHandler"]

# Signature of the callback handlers receive for nested interpretation.
# ``values`` defaults to the mapping of the call that invoked the handler.
Recurse = Callable[..., Result]


# pylint: disable=redefined-builtin
# Reason: the handler contract names its second parameter 'format'
class TypeHandler(Protocol):
    """Protocol for type handlers.

    Handlers receive:
    - value: The resolved value ("" when the key is missing or None)
    - format: The raw format field ("" when absent)
    - locale: The formatter's locale, passed through unchanged
    - values: The full value mapping of the current call
    - recurse: Callback interpreting a nested message, returning a Result

    They may return a string, a Result (typically from ``recurse``), a
    list of such items, or any other object, which is rendered with str().
    """

    def __call__(
        self,
        value: object,
        format: str,
        locale: str,
        values: Mapping[str, object],
        recurse: Recurse,
        /,
    ) -> object:
        ...  # pragma: no cover  # Protocol stub - not executable
# pylint: enable=redefined-builtin


@dataclass(frozen=True, slots=True)
class HandlerInfo:
    """Handler metadata.

    Attributes:
        name: Type name used in messages (``{n, plural, ...}`` -> "plural")
        python_name: ``__name__`` of the registered callable
        callable: The handler itself
    """

    name: str
    python_name: str
    callable: TypeHandler


class HandlerRegistry:
    """Named collection of type handlers.

    Supports dict-like introspection:
        - list_handlers(): List all registered type names
        - get_handler(name): Get the callable for a type name
        - __iter__, __len__, __contains__

    Example:
        >>> registry = HandlerRegistry({"upper": lambda v, f, l, vs, r: str(v).upper()})
        >>> registry.list_handlers()
        ['upper']
    """

    __slots__ = ("_handlers",)

    def __init__(self, handlers: Mapping[str, TypeHandler] | None = None) -> None:
        """Initialize registry, optionally from a name -> handler mapping."""
        self._handlers: dict[str, HandlerInfo] = {}
        for name, handler in (handlers or {}).items():
            self.register(handler, name=name)

    def register(self, handler: TypeHandler, *, name: str | None = None) -> None:
        """Register a handler under a type name.

        Args:
            handler: Callable satisfying the TypeHandler protocol
            name: Type name (default: ``handler.__name__``, with a
                ``_type_handler`` or ``_handler`` suffix removed)

        Raises:
            TypeError: If handler is not callable
            ValueError: If the name is empty or contains ',', '{' or '}'
        """
        if not callable(handler):
            msg = f"Type handler must be callable, got {type(handler).__name__}"
            raise TypeError(msg)

        python_name = getattr(handler, "__name__", "unknown")
        if name is None:
            name = python_name.removesuffix("_type_handler").removesuffix("_handler")

        if not name or name != name.strip() or any(c in name for c in ",{}"):
            msg = f"Invalid type handler name: {name!r}"
            raise ValueError(msg)

        self._handlers[name] = HandlerInfo(name=name, python_name=python_name, callable=handler)

    def unregister(self, name: str) -> None:
        """Remove a handler.

        Raises:
            KeyError: If no handler is registered under ``name``
        """
        del self._handlers[name]

    def get_handler(self, name: str) -> TypeHandler | None:
        """Get the callable registered under ``name``, or None."""
        info = self._handlers.get(name)
        return info.callable if info else None

    def get_handler_info(self, name: str) -> HandlerInfo | None:
        """Get handler metadata by type name."""
        return self._handlers.get(name)

    def list_handlers(self) -> list[str]:
        """List all registered type names in registration order."""
        return list(self._handlers.keys())

    def copy(self) -> "HandlerRegistry":
        """Create a shallow copy of this registry.

        HandlerInfo objects are shared, but registering or removing handlers
        on the copy does not affect the original.
        """
        new_registry = HandlerRegistry()
        new_registry._handlers = self._handlers.copy()
        return new_registry

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(HandlerRegistry())
            'HandlerRegistry(handlers=[])'
        """
        return f"HandlerRegistry(handlers={self.list_handlers()!r})"
