"""Token locator.

Finds the character the grammar engine reported as unexpected. Engines do
not always point exactly at the character (some report the position after
a consumed prefix), so the search widens outward from the reported offset.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from giftrecover.constants import SEARCH_RADIUS
from giftrecover.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate

__all__ = ["LocateFailure", "locate_token"]


@dataclass(frozen=True, slots=True)
class LocateFailure:
    """Token could not be located.

    Attributes:
        diagnostic: NULL_TOKEN or TOKEN_NOT_FOUND diagnostic
    """

    diagnostic: Diagnostic

    @property
    def code(self) -> DiagnosticCode:
        """Failure code."""
        return self.diagnostic.code


def locate_token(
    text: str,
    token: str | None,
    hint_offset: int,
    *,
    radius: int = SEARCH_RADIUS,
) -> int | LocateFailure:
    """Find the occurrence of ``token`` nearest to ``hint_offset``.

    Checks ``hint_offset`` first, then ``hint_offset - 1`` and
    ``hint_offset + 1``, and so on up to ``radius``. At each step the lower
    candidate is tested before the upper one, so earlier occurrences win
    ties. Candidates outside ``[0, len(text))`` are skipped.

    Args:
        text: Text the grammar engine parsed
        token: Character the grammar engine reported (None if it reported none)
        hint_offset: Offset the grammar engine reported
        radius: Maximum distance from ``hint_offset`` to search

    Returns:
        Offset of the token, or a LocateFailure

    Example:
        >>> locate_token("a:b", ":", 1)
        1
        >>> locate_token(":a:", ":", 1)
        0
        >>> locate_token("abc", ":", 1).code
        <DiagnosticCode.TOKEN_NOT_FOUND: 1002>
    """
    if token is None:
        return LocateFailure(ErrorTemplate.null_token(hint_offset))

    length = len(text)
    for step in range(radius + 1):
        for candidate in (hint_offset - step, hint_offset + step):
            if 0 <= candidate < length and text[candidate] == token:
                return candidate

    return LocateFailure(ErrorTemplate.token_not_found(token, hint_offset, radius))
