"""Message introspection.

Lists the placeholders a message uses without formatting it, for example
to check in CI that every value a translation needs is supplied.

Python 3.11+. Zero external dependencies.
"""

from icuformatter.constants import OPEN_BRACE
from icuformatter.syntax import Placeholder, parse_cases, require_closing_bracket

__all__ = ["extract_placeholder_keys", "extract_placeholders"]


def extract_placeholders(message: str) -> tuple[Placeholder, ...]:
    """Top-level placeholders of ``message``, in order of appearance.

    Raises:
        UnbalancedBracesError: If a '{' has no matching '}'

    Example:
        >>> [p.key for p in extract_placeholders("{a} and {b, number}")]
        ['a', 'b']
    """
    placeholders: list[Placeholder] = []
    start = 0
    while (open_index := message.find(OPEN_BRACE, start)) != -1:
        close_index = require_closing_bracket(message, open_index, start)
        placeholders.append(Placeholder.from_contents(message[open_index + 1 : close_index]))
        start = close_index + 1
    return tuple(placeholders)


def extract_placeholder_keys(message: str) -> frozenset[str]:
    """All keys referenced by ``message``, including inside case bodies.

    Every typed placeholder's format is read as a case set, so keys nested
    in ``select``/``plural`` branches are found regardless of which branch
    would be chosen at runtime. Formats without cases (``short``,
    ``percent``) contribute nothing.

    Example:
        >>> sorted(extract_placeholder_keys("{g, select, f{Hi {name}} other{Bye}}"))
        ['g', 'name']
    """
    keys: set[str] = set()
    pending = [message]
    while pending:
        for placeholder in extract_placeholders(pending.pop()):
            if placeholder.key:
                keys.add(placeholder.key)
            if placeholder.type and placeholder.format:
                pending.extend(parse_cases(placeholder.format).cases.values())
    return frozenset(keys)
