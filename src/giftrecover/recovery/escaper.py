"""Token escaper.

Makes a structural GIFT token inert by inserting the escape marker next to
it, so that the next parse treats it as literal text and advances past it.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from giftrecover.constants import ESCAPABLE_TOKENS, ESCAPE, NEWLINE
from giftrecover.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate

__all__ = ["EscapeFailure", "escape_token"]


@dataclass(frozen=True, slots=True)
class EscapeFailure:
    """Token could not be escaped.

    Attributes:
        diagnostic: ALREADY_ESCAPED or TOKEN_NOT_ESCAPABLE diagnostic
    """

    diagnostic: Diagnostic

    @property
    def code(self) -> DiagnosticCode:
        """Failure code."""
        return self.diagnostic.code


def escape_token(text: str, offset: int) -> str | EscapeFailure:
    """Insert an escape marker next to the token at ``offset``.

    A newline is escaped by marking the start of the following line; every
    other token is escaped by a marker immediately before it. A token that
    already carries a marker is refused, so repeated recovery at the same
    position cannot loop.

    Args:
        text: Text containing the token
        offset: Offset of the token

    Returns:
        New text with the marker inserted, or an EscapeFailure

    Example:
        >>> escape_token("Q1 ~ A : B", 7)
        'Q1 ~ A \\\\: B'
        >>> escape_token("a\\nb", 1)
        'a\\n\\\\b'
        >>> escape_token("a\\\\:b", 2).code
        <DiagnosticCode.ALREADY_ESCAPED: 2001>
    """
    if not 0 <= offset < len(text):
        return EscapeFailure(ErrorTemplate.token_not_escapable(None, offset))

    token = text[offset]
    if token not in ESCAPABLE_TOKENS:
        return EscapeFailure(ErrorTemplate.token_not_escapable(token, offset))

    # Newline: the marker opens the next line
    insert_at = offset + 1 if token == NEWLINE else offset
    neighbour = offset + 1 if token == NEWLINE else offset - 1
    if 0 <= neighbour < len(text) and text[neighbour] == ESCAPE:
        return EscapeFailure(ErrorTemplate.already_escaped(token, offset))

    return f"{text[:insert_at]}{ESCAPE}{text[insert_at:]}"
