"""Tests for error types and diagnostic rendering (diagnostics/)."""

from icuformatter.diagnostics import (
    DepthLimitExceededError,
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    MessageFormatError,
    MissingCaseError,
    UnbalancedBracesError,
)


class TestDiagnostic:
    """Test Diagnostic.format_error()."""

    def test_message_only(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.INVALID_ARGUMENT, message="bad")

        assert diagnostic.format_error() == "error[INVALID_ARGUMENT]: bad"

    def test_position_and_hint(self) -> None:
        diagnostic = ErrorTemplate.unbalanced_braces("{a", 0)

        assert diagnostic.format_error() == (
            'error[UNBALANCED_BRACES]: Unbalanced curly braces in string: "{a"\n'
            "  = position: 0\n"
            "  = help: Every '{' needs a matching '}' at the same nesting depth"
        )

    def test_long_text_is_shortened(self) -> None:
        diagnostic = ErrorTemplate.unbalanced_braces("{" + "x" * 200, 0)

        assert diagnostic.message.endswith('..."')
        assert len(diagnostic.message) < 150


class TestErrorHierarchy:
    """Test exception classes."""

    def test_all_errors_share_base(self) -> None:
        for cls in (UnbalancedBracesError, DepthLimitExceededError, MissingCaseError):
            assert issubclass(cls, MessageFormatError)

    def test_plain_message(self) -> None:
        error = MessageFormatError("plain")

        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        diagnostic = ErrorTemplate.case_not_found("select", ("x", "other"))
        error = MissingCaseError(diagnostic, handler="select")

        assert error.diagnostic is diagnostic
        assert error.handler == "select"
        assert str(error).startswith("error[CASE_NOT_FOUND]: No matching case for 'select'")

    def test_unbalanced_attributes(self) -> None:
        error = UnbalancedBracesError("msg", text="a {b", position=2)

        assert error.text == "a {b"
        assert error.position == 2
