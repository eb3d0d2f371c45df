"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic attached to exceptions.
Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = ["Diagnostic", "DiagnosticCode"]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Syntax errors (brace matching)
        2000-2999: Resolution errors (handler recursion, case selection, handler output)
    """

    # Syntax errors (1000-1999)
    UNBALANCED_BRACES = 1001

    # Resolution errors (2000-2999)
    MAX_DEPTH_EXCEEDED = 2001
    CASE_NOT_FOUND = 2002
    INVALID_ARGUMENT = 2003
    CYCLIC_RESULT = 2004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Error code
        message: Primary, human-readable error message
        position: Character offset the error refers to (optional)
        hint: Suggestion for fixing the problem (optional)
    """

    code: DiagnosticCode
    message: str
    position: int | None = None
    hint: str | None = None

    def format_error(self) -> str:
        """Render the diagnostic as a single-line-first error text.

        Returns:
            Formatted error, e.g.::

                error[UNBALANCED_BRACES]: Unbalanced curly braces in string: "{a"
                  = position: 0
                  = help: Every '{' needs a matching '}'
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.position is not None:
            lines.append(f"  = position: {self.position}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
