"""Exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DepthLimitExceededError",
    "MessageFormatError",
    "MissingCaseError",
    "UnbalancedBracesError",
]


class MessageFormatError(Exception):
    """Base exception for all icuformatter errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MessageFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnbalancedBracesError(MessageFormatError):
    """An opening '{' has no matching '}' before the string ends.

    Raised for top-level messages and for case bodies alike. The whole
    format()/process() call fails; there is no partial result.

    Attributes:
        text: The string that was being scanned
        position: Index of the unmatched opening brace within ``text``
    """

    def __init__(self, message: str | Diagnostic, *, text: str = "", position: int = -1) -> None:
        """Initialize UnbalancedBracesError.

        Args:
            message: Error message string OR Diagnostic object
            text: The string that was being scanned
            position: Index of the unmatched opening brace
        """
        super().__init__(message)
        self.text = text
        self.position = position


class DepthLimitExceededError(MessageFormatError):
    """Raised when nested recurse() calls exceed the configured depth.

    This indicates either adversarial input or a handler that keeps
    recursing into its own output.
    """


class MissingCaseError(MessageFormatError):
    """Raised by branch handlers when no case matches the value.

    Attributes:
        handler: Name of the handler that failed to select a case
    """

    def __init__(self, message: str | Diagnostic, *, handler: str = "") -> None:
        super().__init__(message)
        self.handler = handler
