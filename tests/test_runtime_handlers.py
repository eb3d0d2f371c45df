"""Tests for HandlerRegistry (runtime/handlers.py)."""

from collections.abc import Mapping

import pytest

from icuformatter.runtime.handlers import HandlerRegistry, Recurse


def upper_type_handler(
    value: object, fmt: str, locale: str, values: Mapping[str, object], recurse: Recurse
) -> str:
    return str(value).upper()


def echo_handler(
    value: object, fmt: str, locale: str, values: Mapping[str, object], recurse: Recurse
) -> str:
    return fmt


class TestHandlerRegistry:
    """Test registration and lookup."""

    def test_empty_registry(self) -> None:
        """A new registry has no handlers."""
        registry = HandlerRegistry()

        assert len(registry) == 0
        assert registry.list_handlers() == []
        assert registry.get_handler("plural") is None

    def test_register_with_explicit_name(self) -> None:
        """Handlers are found under the given name."""
        registry = HandlerRegistry()
        registry.register(upper_type_handler, name="shout")

        assert "shout" in registry
        assert registry.get_handler("shout") is upper_type_handler

    def test_default_name_strips_suffix(self) -> None:
        """Default names drop '_type_handler' / '_handler' suffixes."""
        registry = HandlerRegistry()
        registry.register(upper_type_handler)
        registry.register(echo_handler)

        assert registry.list_handlers() == ["upper", "echo"]

    def test_init_from_mapping(self) -> None:
        """A plain mapping seeds the registry."""
        registry = HandlerRegistry({"a": upper_type_handler, "b": echo_handler})

        assert list(registry) == ["a", "b"]

    def test_handler_info(self) -> None:
        """Metadata records both names."""
        registry = HandlerRegistry({"shout": upper_type_handler})
        info = registry.get_handler_info("shout")

        assert info is not None
        assert info.name == "shout"
        assert info.python_name == "upper_type_handler"
        assert info.callable is upper_type_handler

    def test_reregister_replaces(self) -> None:
        """Registering the same name again replaces the handler."""
        registry = HandlerRegistry({"x": upper_type_handler})
        registry.register(echo_handler, name="x")

        assert registry.get_handler("x") is echo_handler
        assert len(registry) == 1

    def test_unregister(self) -> None:
        """Handlers can be removed; unknown names raise KeyError."""
        registry = HandlerRegistry({"x": upper_type_handler})
        registry.unregister("x")

        assert "x" not in registry
        with pytest.raises(KeyError):
            registry.unregister("x")

    def test_copy_is_isolated(self) -> None:
        """Changes to a copy do not affect the original."""
        original = HandlerRegistry({"x": upper_type_handler})
        clone = original.copy()
        clone.register(echo_handler, name="y")

        assert "y" in clone
        assert "y" not in original

    @pytest.mark.parametrize("name", ["", " padded ", "a,b", "{x}"])
    def test_invalid_names_rejected(self, name: str) -> None:
        """Names that could not appear in a type field are rejected."""
        with pytest.raises(ValueError, match="Invalid type handler name"):
            HandlerRegistry().register(upper_type_handler, name=name)

    def test_non_callable_rejected(self) -> None:
        """Only callables can be registered."""
        with pytest.raises(TypeError, match="must be callable"):
            HandlerRegistry().register("nope", name="x")  # type: ignore[arg-type]

    def test_repr(self) -> None:
        """repr() lists handler names."""
        assert repr(HandlerRegistry({"a": echo_handler})) == "HandlerRegistry(handlers=['a'])"
