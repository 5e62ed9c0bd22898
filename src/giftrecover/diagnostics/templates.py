"""Error message templates.

Centralized diagnostic templates for testable, consistent messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized diagnostic templates.

    All recovery diagnostics are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every failure case in one place.
    """

    @staticmethod
    def null_token(offset: int) -> Diagnostic:
        """Grammar reported no unexpected character.

        Args:
            offset: Offset the grammar reported

        Returns:
            Diagnostic for NULL_TOKEN
        """
        return Diagnostic(
            code=DiagnosticCode.NULL_TOKEN,
            message="Grammar reported no unexpected character",
            offset=offset,
            hint="The parser stopped in a state no single escape can repair",
        )

    @staticmethod
    def token_not_found(token: str, offset: int, radius: int) -> Diagnostic:
        """Reported token is not within the search window.

        Args:
            token: Character the grammar reported as unexpected
            offset: Offset the grammar reported
            radius: Search radius that was used

        Returns:
            Diagnostic for TOKEN_NOT_FOUND
        """
        msg = f"Token {token!r} not found within {radius} of offset {offset}"
        return Diagnostic(
            code=DiagnosticCode.TOKEN_NOT_FOUND,
            message=msg,
            offset=offset,
            hint="Increase RecoveryConfig.search_radius if the grammar reports loose offsets",
        )

    @staticmethod
    def already_escaped(token: str, offset: int) -> Diagnostic:
        """Token already carries an escape marker.

        Args:
            token: Character at the offset
            offset: Offset of the token

        Returns:
            Diagnostic for ALREADY_ESCAPED
        """
        msg = f"Token {token!r} at offset {offset} is already escaped"
        return Diagnostic(
            code=DiagnosticCode.ALREADY_ESCAPED,
            message=msg,
            offset=offset,
            hint="Escaping the same token twice cannot make further progress",
        )

    @staticmethod
    def token_not_escapable(char: str | None, offset: int) -> Diagnostic:
        """Character at offset is not an escapable token.

        Args:
            char: Character at the offset (None when offset is out of range)
            offset: Offset that was requested

        Returns:
            Diagnostic for TOKEN_NOT_ESCAPABLE
        """
        if char is None:
            msg = f"Offset {offset} is outside the text"
        else:
            msg = f"Character {char!r} at offset {offset} cannot be escaped"
        return Diagnostic(
            code=DiagnosticCode.TOKEN_NOT_ESCAPABLE,
            message=msg,
            offset=offset,
            hint="Only the tokens : ~ = # { } and newline can be escaped",
        )

    @staticmethod
    def iteration_exhausted(limit: int) -> Diagnostic:
        """Recovery loop hit its iteration limit.

        Args:
            limit: Configured iteration limit

        Returns:
            Diagnostic for ITERATION_EXHAUSTED
        """
        msg = f"Recovery stopped after {limit} re-parses; error list is incomplete"
        return Diagnostic(
            code=DiagnosticCode.ITERATION_EXHAUSTED,
            message=msg,
            hint="Raise RecoveryConfig.iteration_limit to collect more errors",
            severity="warning",
        )
