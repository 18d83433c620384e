"""Error message templates.

Centralized failure message templates for testable, consistent diagnostics.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized diagnostic templates.

    All failure messages are created here. Primitive parsers and combinators
    call these factories instead of formatting strings inline, which keeps
    the wording consistent and testable.
    """

    @staticmethod
    def empty_input(label: str, position: int) -> Diagnostic:
        """Matcher ran with no input left.

        Args:
            label: Label of the failing parser
            position: Offset of the failure

        Returns:
            Diagnostic for EMPTY_INPUT
        """
        return Diagnostic(
            label=label,
            message="Empty input",
            code=DiagnosticCode.EMPTY_INPUT,
            position=position,
        )

    @staticmethod
    def unexpected_character(label: str, found: str, position: int) -> Diagnostic:
        """Matcher rejected the character at the cursor.

        Args:
            label: Label of the failing parser
            found: The rejected character
            position: Offset of the rejected character

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        return Diagnostic(
            label=label,
            message=f"Unexpected '{found}'",
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            position=position,
        )

    @staticmethod
    def unexpected_end_of_input(label: str, position: int) -> Diagnostic:
        """Input ended part-way through a multi-character literal.

        Args:
            label: Label of the failing parser
            position: Offset where input ran out

        Returns:
            Diagnostic for UNEXPECTED_END_OF_INPUT
        """
        return Diagnostic(
            label=label,
            message="Unexpected end of input",
            code=DiagnosticCode.UNEXPECTED_END_OF_INPUT,
            position=position,
        )

    @staticmethod
    def expected_end_of_input(label: str, found: str, position: int) -> Diagnostic:
        """Input continues where the grammar requires it to end.

        Args:
            label: Label of the failing parser
            found: First unconsumed character
            position: Offset of that character

        Returns:
            Diagnostic for EXPECTED_END_OF_INPUT
        """
        return Diagnostic(
            label=label,
            message=f"Expected end of input, found '{found}'",
            code=DiagnosticCode.EXPECTED_END_OF_INPUT,
            position=position,
        )

    @staticmethod
    def no_alternative(
        label: str, position: int, causes: tuple[Diagnostic, ...]
    ) -> Diagnostic:
        """Every branch of a choice failed.

        Args:
            label: Combined label of the choice ("a or b or c")
            position: Offset at which every branch was attempted
            causes: Each branch's diagnostic, in attempt order

        Returns:
            Diagnostic for NO_ALTERNATIVE
        """
        return Diagnostic(
            label=label,
            message="No alternative matched",
            code=DiagnosticCode.NO_ALTERNATIVE,
            position=position,
            causes=causes,
        )

    @staticmethod
    def explicit_failure(label: str, message: str, position: int) -> Diagnostic:
        """Grammar author requested failure.

        Args:
            label: Label of the failing parser
            message: Author-supplied explanation
            position: Offset of the failure

        Returns:
            Diagnostic for EXPLICIT_FAILURE
        """
        return Diagnostic(
            label=label,
            message=message,
            code=DiagnosticCode.EXPLICIT_FAILURE,
            position=position,
        )

    @staticmethod
    def nesting_depth_exceeded(label: str, position: int) -> Diagnostic:
        """Grammar recursion went past max_nesting_depth or the interpreter stack.

        Args:
            label: Label of the lazy parser entered one level too deep, or of
                   the top-level parser when the stack ran out
            position: Offset of that entry (0 when the stack ran out)

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        return Diagnostic(
            label=label,
            message="Maximum nesting depth exceeded",
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            position=position,
        )
