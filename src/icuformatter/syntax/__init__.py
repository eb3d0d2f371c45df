"""Message syntax package.

Provides the three scanning utilities the formatting engine and the
branch-based handlers are built on: balanced brace matching, placeholder
field splitting and case parsing.

Python 3.11+. Zero external dependencies.
"""

from .brackets import find_closing_bracket, require_closing_bracket
from .cases import CaseSet, parse_cases
from .fields import Placeholder, split_formatted_argument, split_placeholder

__all__ = [
    "CaseSet",
    "Placeholder",
    "find_closing_bracket",
    "parse_cases",
    "require_closing_bracket",
    "split_formatted_argument",
    "split_placeholder",
]
