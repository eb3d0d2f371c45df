"""Structured formatting results.

process() returns a tree instead of text so renderers can treat each leaf
separately (for example, turning handler output into UI components).
format() is just the string renderer: it flattens the tree depth-first and
concatenates the leaves.

Variants:
    Leaf      plain text (message literals, string values)
    Handled   any non-string value, typically whatever a handler returned
    Sequence  ordered children, each itself a Result

Python 3.11+.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from icuformatter.diagnostics import ErrorTemplate, MessageFormatError

__all__ = [
    "EMPTY",
    "Handled",
    "Leaf",
    "Result",
    "Sequence",
    "flatten",
    "iter_leaves",
    "to_result",
]


@dataclass(frozen=True, slots=True)
class Leaf:
    """Plain text fragment."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Handled:
    """Opaque value produced by a handler or passed through unformatted.

    Rendered with ``str()`` when flattened.
    """

    value: object

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Sequence:
    """Ordered, possibly nested, group of results."""

    items: tuple["Result", ...] = ()

    def __iter__(self) -> Iterator["Result"]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> "Result":
        return self.items[index]

    def __str__(self) -> str:
        return flatten(self)


Result = Leaf | Handled | Sequence

EMPTY = Sequence()


def to_result(value: object) -> Result:
    """Convert a handler return value into a Result.

    - Result instances are kept as they are
    - ``str`` becomes a Leaf
    - lists and tuples become a Sequence, converted element-wise
    - anything else is wrapped in Handled

    Conversion of nested lists is iterative, so arbitrarily deep handler
    output does not hit the recursion limit.

    Raises:
        MessageFormatError: If a list or tuple contains itself
    """
    match value:
        case Leaf() | Handled() | Sequence():
            return value
        case str():
            return Leaf(value)
        case list() | tuple():
            pass
        case _:
            return Handled(value)

    # Post-order conversion of nested lists/tuples. ``expanding`` holds the
    # containers on the current path; meeting one again means a cycle.
    converted: dict[int, Result] = {}
    expanding: set[int] = set()
    stack: list[tuple[list[object] | tuple[object, ...], bool]] = [(value, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            expanding.discard(id(node))
            converted[id(node)] = Sequence(
                tuple(
                    converted[id(child)] if isinstance(child, (list, tuple)) else to_result(child)
                    for child in node
                )
            )
            continue
        if id(node) in converted:
            continue
        if id(node) in expanding:
            raise MessageFormatError(ErrorTemplate.cyclic_result(type(node).__name__))
        expanding.add(id(node))
        stack.append((node, True))
        stack.extend((child, False) for child in node if isinstance(child, (list, tuple)))
    return converted[id(value)]


def iter_leaves(result: Result) -> Iterator[Leaf | Handled]:
    """Yield leaves depth-first, left to right.

    Iterative: right-nested sequences produced by long messages do not
    consume interpreter stack.
    """
    stack: list[Result] = [result]
    while stack:
        node = stack.pop()
        if isinstance(node, Sequence):
            stack.extend(reversed(node.items))
        else:
            yield node


def flatten(result: Result) -> str:
    """Concatenate every leaf of ``result`` into the final text.

    Example:
        >>> flatten(Sequence((Leaf("Hi "), Sequence((Handled(3), Leaf("!"))))))
        'Hi 3!'
    """
    return "".join(str(leaf) for leaf in iter_leaves(result))
