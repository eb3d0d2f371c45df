"""Diagnostic system for icuformatter errors.

Provides structured error diagnostics with codes, positions and hints.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DepthLimitExceededError,
    MessageFormatError,
    MissingCaseError,
    UnbalancedBracesError,
)
from .templates import ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "MessageFormatError",
    "MissingCaseError",
    "UnbalancedBracesError",
]
