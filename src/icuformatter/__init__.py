"""icuformatter - ICU-style message formatting with pluggable type handlers.

Interprets ``{key}`` and ``{key, type, format}`` placeholders in strings,
substitutes runtime values, and hands typed placeholders to caller-supplied
type handlers (plural, select, date ...) that can recurse into nested
message syntax.

Public API:
    MessageFormatter - Formats messages for one locale and handler set
    HandlerRegistry - Named collection of type handlers
    create_default_handlers - Registry with CLDR-backed plural, select,
        selectordinal, number, date and time handlers
    parse_cases - Split a handler format body into arguments and cases
    flatten - Render a structured result to text

Exceptions:
    MessageFormatError - Base exception class
    UnbalancedBracesError - A '{' has no matching '}'
    DepthLimitExceededError - Handlers recursed too deeply
    MissingCaseError - Built-in branch handler found no matching case

Submodules:
    icuformatter.syntax - Bracket matching, field splitting, case parsing
    icuformatter.runtime - Engine, result model, handlers, cache
    icuformatter.introspection - Placeholder key extraction
    icuformatter.diagnostics - Error types and diagnostic codes
"""

from .diagnostics import (
    DepthLimitExceededError,
    MessageFormatError,
    MissingCaseError,
    UnbalancedBracesError,
)
from .runtime import (
    Handled,
    HandlerRegistry,
    Leaf,
    MessageFormatter,
    Result,
    Sequence,
    TypeHandler,
    create_default_handlers,
    flatten,
)
from .syntax import CaseSet, parse_cases

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("icuformatter")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CaseSet",
    "DepthLimitExceededError",
    "Handled",
    "HandlerRegistry",
    "Leaf",
    "MessageFormatError",
    "MessageFormatter",
    "MissingCaseError",
    "Result",
    "Sequence",
    "TypeHandler",
    "UnbalancedBracesError",
    "__version__",
    "create_default_handlers",
    "flatten",
    "parse_cases",
]
