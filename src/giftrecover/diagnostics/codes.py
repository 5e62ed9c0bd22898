"""Diagnostic codes and data structures.

Defines the codes for every recovery failure and the Diagnostic record
that carries them.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Recovery failure codes with unique identifiers.

    Organized by the component that reports them:
        1000-1999: Token locator
        2000-2999: Token escaper
        3000-3999: Recovery engine
    """

    # Token locator (1000-1999)
    NULL_TOKEN = 1001
    TOKEN_NOT_FOUND = 1002

    # Token escaper (2000-2999)
    ALREADY_ESCAPED = 2001
    TOKEN_NOT_ESCAPABLE = 2002

    # Recovery engine (3000-3999)
    ITERATION_EXHAUSTED = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique failure code
        message: Human-readable description
        offset: Character offset in the text variant being processed
            (None when the failure is not tied to a position)
        hint: Suggestion for the caller
        severity: Diagnostic severity level
    """

    code: DiagnosticCode
    message: str
    offset: int | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[TOKEN_NOT_FOUND]: Token ':' not found within 1 of offset 12
              --> offset 12
              = help: Increase RecoveryConfig.search_radius if the grammar reports loose offsets

        Returns:
            Formatted diagnostic
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.offset is not None:
            lines.append(f"  --> offset {self.offset}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
