"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]

# Long messages are shortened in diagnostics; the full text stays on the
# exception's ``text`` attribute.
_MAX_QUOTED_LENGTH: int = 80


def _quote(text: str) -> str:
    if len(text) > _MAX_QUOTED_LENGTH:
        text = text[: _MAX_QUOTED_LENGTH - 3] + "..."
    return f'"{text}"'


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. No f-strings in exception
    constructors.
    """

    @staticmethod
    def unbalanced_braces(text: str, position: int) -> Diagnostic:
        """Opening brace without a matching closing brace.

        Args:
            text: The string being scanned
            position: Index of the unmatched opening brace

        Returns:
            Diagnostic for UNBALANCED_BRACES
        """
        msg = f"Unbalanced curly braces in string: {_quote(text)}"
        return Diagnostic(
            code=DiagnosticCode.UNBALANCED_BRACES,
            message=msg,
            position=position,
            hint="Every '{' needs a matching '}' at the same nesting depth",
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Nested handler recursion went deeper than allowed.

        Args:
            max_depth: The configured limit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Check for a handler that recurses into its own output",
        )

    @staticmethod
    def case_not_found(handler: str, candidates: tuple[str, ...]) -> Diagnostic:
        """No case matched and no 'other' fallback was supplied.

        Args:
            handler: Handler name (e.g. "plural")
            candidates: Case labels that were tried, in order

        Returns:
            Diagnostic for CASE_NOT_FOUND
        """
        tried = ", ".join(repr(c) for c in candidates)
        msg = f"No matching case for '{handler}' (tried {tried})"
        return Diagnostic(
            code=DiagnosticCode.CASE_NOT_FOUND,
            message=msg,
            hint="Add an 'other{...}' case",
        )

    @staticmethod
    def invalid_argument(handler: str, argument: str, reason: str) -> Diagnostic:
        """A handler received a value or argument it cannot use.

        Args:
            handler: Handler name
            argument: Offending argument or value (as text)
            reason: Short explanation

        Returns:
            Diagnostic for INVALID_ARGUMENT
        """
        msg = f"Invalid argument {argument!r} for '{handler}': {reason}"
        return Diagnostic(code=DiagnosticCode.INVALID_ARGUMENT, message=msg)

    @staticmethod
    def cyclic_result(container_type: str) -> Diagnostic:
        """Handler output contains itself.

        Args:
            container_type: Type name of the self-referencing container

        Returns:
            Diagnostic for CYCLIC_RESULT
        """
        msg = f"Handler returned a {container_type} that contains itself"
        return Diagnostic(
            code=DiagnosticCode.CYCLIC_RESULT,
            message=msg,
            hint="Return a fresh list or the result of recurse()",
        )
