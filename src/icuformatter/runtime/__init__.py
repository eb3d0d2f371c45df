"""Formatting runtime package.

Provides the MessageFormatter engine, the structured result model, the type
handler registry and the optional built-in handlers. Depends on the syntax
package for scanning.

Python 3.11+.
"""

from .builtins import create_default_handlers
from .cache import FormatCache
from .formatter import MessageFormatter
from .handlers import HandlerInfo, HandlerRegistry, Recurse, TypeHandler
from .plural_rules import PluralKind, select_category
from .result import Handled, Leaf, Result, Sequence, flatten, iter_leaves, to_result

__all__ = [
    "FormatCache",
    "Handled",
    "HandlerInfo",
    "HandlerRegistry",
    "Leaf",
    "MessageFormatter",
    "PluralKind",
    "Recurse",
    "Result",
    "Sequence",
    "TypeHandler",
    "create_default_handlers",
    "flatten",
    "iter_leaves",
    "select_category",
    "to_result",
]
