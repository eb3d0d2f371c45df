"""Balanced curly-brace matching.

Every '{' and '}' is significant: there is no escaping mechanism, so braces
inside what a handler treats as literal text still count towards nesting.

Python 3.11+. Zero external dependencies.
"""

from icuformatter.constants import CLOSE_BRACE, NOT_FOUND, OPEN_BRACE
from icuformatter.diagnostics import ErrorTemplate, UnbalancedBracesError

__all__ = ["find_closing_bracket", "require_closing_bracket"]


def find_closing_bracket(text: str, open_index: int, end: int | None = None) -> int:
    """Find the index of the '}' balancing the '{' at ``open_index``.

    Scanning starts at ``open_index + 1`` with a depth counter of zero. A '{'
    increments the depth; a '}' either closes the block (depth zero) or
    decrements it.

    Args:
        text: String to scan
        open_index: Index of an opening brace
        end: Exclusive upper bound of the scan (default: ``len(text)``)

    Returns:
        Index of the matching closing brace, or -1 (``NOT_FOUND``) if the
        scan range ends first.

    Examples:
        >>> find_closing_bracket("{a}", 0)
        2
        >>> find_closing_bracket("{a {b} c}", 0)
        8
        >>> find_closing_bracket("{a {b}", 0)
        -1
    """
    if end is None:
        end = len(text)
    depth = 0
    for i in range(open_index + 1, end):
        char = text[i]
        if char == CLOSE_BRACE:
            if depth == 0:
                return i
            depth -= 1
        elif char == OPEN_BRACE:
            depth += 1
    return NOT_FOUND


def require_closing_bracket(
    text: str, open_index: int, start: int = 0, end: int | None = None
) -> int:
    """Like find_closing_bracket() but raise when no match exists.

    ``start`` and ``end`` delimit the string being interpreted; they only
    shape the error report, which quotes ``text[start:end]`` and gives the
    brace position relative to ``start``.

    Raises:
        UnbalancedBracesError: If the brace at ``open_index`` is unmatched
    """
    if end is None:
        end = len(text)
    close_index = find_closing_bracket(text, open_index, end)
    if close_index == NOT_FOUND:
        scanned = text[start:end]
        position = open_index - start
        raise UnbalancedBracesError(
            ErrorTemplate.unbalanced_braces(scanned, position),
            text=scanned,
            position=position,
        )
    return close_index
