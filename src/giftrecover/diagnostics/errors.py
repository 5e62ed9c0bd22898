"""Exception hierarchy with structured diagnostics.

Recovery failures are returned as values, never raised. The exceptions
here signal programming errors at the boundary with the grammar engine.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["GiftRecoveryError", "GrammarContractError"]


class GiftRecoveryError(Exception):
    """Base exception for all giftrecover errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize GiftRecoveryError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GrammarContractError(GiftRecoveryError):
    """Grammar engine returned something other than a ParseOutcome.

    Malformed input text never raises this; only a grammar engine that
    breaks its interface does.
    """
