"""Case extraction for branch-based type handlers.

Most branch-based handlers are built around "cases": ``select`` and
``plural`` compare a value against case labels to choose a sub-message.
This module splits a handler's format body into those case bodies and
extracts any leading bare arguments, such as the ``offset:1`` modifier
understood by ``plural``.

A term (a run of characters other than whitespace and '{') is a case
label when the next non-whitespace character is '{'; otherwise it is a bare
argument. Both ``one{# item}`` and ``one {# item}`` declare a case.

Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass, field

from icuformatter.constants import OPEN_BRACE

from .brackets import require_closing_bracket

__all__ = ["CaseSet", "parse_cases"]


@dataclass(frozen=True, slots=True)
class CaseSet:
    """Result of parse_cases().

    Attributes:
        args: Bare arguments in order of appearance
        cases: Case label to raw case body (braces stripped, not yet parsed)
    """

    args: tuple[str, ...] = ()
    cases: dict[str, str] = field(default_factory=dict)

    def select(self, *labels: str) -> tuple[str, str] | None:
        """Return ``(label, body)`` for the first label present, if any.

        Example:
            >>> parse_cases("one{A} other{B}").select("=1", "one", "other")
            ('one', 'A')
        """
        for label in labels:
            if label in self.cases:
                return label, self.cases[label]
        return None

    def argument(self, name: str) -> str | None:
        """Value of a ``name:value`` bare argument, or None when absent.

        Example:
            >>> parse_cases("offset:2 other{x}").argument("offset")
            '2'
        """
        prefix = f"{name}:"
        for arg in self.args:
            if arg.startswith(prefix):
                return arg[len(prefix):]
        return None


def parse_cases(text: str) -> CaseSet:
    """Split a handler format body into bare arguments and cases.

    Args:
        text: Raw format field, e.g. ``"offset:1 one{A} other{B}"``

    Returns:
        CaseSet with ``args`` and ``cases``. When a label repeats, the
        last body wins. A brace group with no label in front of it is kept
        verbatim (braces included) as a bare argument.

    Raises:
        UnbalancedBracesError: If a case body's braces are unbalanced

    Example:
        >>> result = parse_cases("offset:1 one{A} other{B}")
        >>> result.args
        ('offset:1',)
        >>> result.cases
        {'one': 'A', 'other': 'B'}
    """
    args: list[str] = []
    cases: dict[str, str] = {}

    # Most recent complete term whose role depends on what follows it
    pending: str | None = None
    i = 0
    length = len(text)

    while i < length:
        char = text[i]

        if char.isspace():
            i += 1
            continue

        if char == OPEN_BRACE:
            close_index = require_closing_bracket(text, i)
            if pending is not None:
                cases[pending] = text[i + 1 : close_index]
                pending = None
            else:
                args.append(text[i : close_index + 1])
            i = close_index + 1
            continue

        # A new term starts, so the previous one was not a label
        if pending is not None:
            args.append(pending)

        start = i
        while i < length and not text[i].isspace() and text[i] != OPEN_BRACE:
            i += 1
        pending = text[start:i]

    if pending is not None:
        args.append(pending)

    return CaseSet(args=tuple(args), cases=cases)
