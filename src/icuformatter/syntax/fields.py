"""Placeholder block decomposition into key, type and format fields.

Only the first two top-level commas separate fields. Anything after the
second comma, further commas included, belongs to the format field, so
nested sub-syntax such as ``one{a, b}`` is never cut apart.

Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass

from icuformatter.constants import FIELD_SEPARATOR, MAX_FIELDS

__all__ = ["Placeholder", "split_formatted_argument", "split_placeholder"]


def split_placeholder(contents: str) -> list[str]:
    """Split the interior of a placeholder block into at most three fields.

    Args:
        contents: Block contents without the outer braces

    Returns:
        ``[key]``, ``[key, type]`` or ``[key, type, format]``; an empty list
        for blank input. Every field is stripped of surrounding whitespace.

    Examples:
        >>> split_placeholder("name")
        ['name']
        >>> split_placeholder("count, plural, one{# item} other{# items, total}")
        ['count', 'plural', 'one{# item} other{# items, total}']
    """
    fields: list[str] = []
    start = 0
    while len(fields) < MAX_FIELDS - 1:
        comma = contents.find(FIELD_SEPARATOR, start)
        if comma == -1:
            break
        fields.append(contents[start:comma].strip())
        start = comma + 1

    remainder = contents[start:].strip()
    if remainder or fields:
        fields.append(remainder)
    return fields


def split_formatted_argument(block: str) -> list[str]:
    """Split a whole ``{key, type, format}`` block, braces included."""
    return split_placeholder(block[1:-1])


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Parsed placeholder block.

    Attributes:
        key: Lookup key into the value mapping
        type: Name of the type handler ("" when absent)
        format: Raw, unparsed handler format ("" when absent)
    """

    key: str
    type: str = ""
    format: str = ""

    @classmethod
    def from_contents(cls, contents: str) -> "Placeholder":
        """Build a Placeholder from block contents (outer braces excluded)."""
        fields = split_placeholder(contents)
        fields.extend([""] * (MAX_FIELDS - len(fields)))
        key, type_name, fmt = fields
        return cls(key, type_name, fmt)

    def __str__(self) -> str:
        fields = [self.key, self.type, self.format]
        while len(fields) > 1 and not fields[-1]:
            fields.pop()
        return "{" + ", ".join(fields) + "}"
