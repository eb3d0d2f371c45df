"""Tests for placeholder introspection (introspection.py)."""

import pytest

from icuformatter.diagnostics import UnbalancedBracesError
from icuformatter.introspection import extract_placeholder_keys, extract_placeholders
from icuformatter.syntax import Placeholder


class TestExtractPlaceholders:
    """Test top-level placeholder listing."""

    def test_order_and_fields(self) -> None:
        result = extract_placeholders("{a} and {b, number, percent}")

        assert result == (Placeholder("a"), Placeholder("b", "number", "percent"))

    def test_nested_blocks_not_listed(self) -> None:
        result = extract_placeholders("{g, select, f{{name}} other{x}}")

        assert [p.key for p in result] == ["g"]

    def test_no_placeholders(self) -> None:
        assert extract_placeholders("plain text") == ()

    def test_unbalanced_raises(self) -> None:
        with pytest.raises(UnbalancedBracesError):
            extract_placeholders("{a} {b")


class TestExtractPlaceholderKeys:
    """Test recursive key extraction."""

    def test_keys_in_every_case(self) -> None:
        message = "{g, select, f{Hi {name}} other{Bye {other_name}}}"

        assert extract_placeholder_keys(message) == {"g", "name", "other_name"}

    def test_deeply_nested(self) -> None:
        message = "{a, select, x{{b, plural, one{{c}} other{#}}} other{}}"

        assert extract_placeholder_keys(message) == {"a", "b", "c"}

    def test_formats_without_cases(self) -> None:
        assert extract_placeholder_keys("{d, date, short} {n, number}") == {"d", "n"}

    def test_empty_block_ignored(self) -> None:
        assert extract_placeholder_keys("{} {x}") == {"x"}
