"""Enumerations for giftrecover type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LineEnding(StrEnum):
    """Line terminator convention of an original document.

    The member value is the terminator itself, so ``len(LineEnding.CRLF) == 2``
    gives the number of characters each line ending occupies in the document.
    """

    LF = "\n"
    """Unix line ending"""

    CRLF = "\r\n"
    """Windows line ending"""

    CR = "\r"
    """Classic Mac line ending"""


class RecoveryState(StrEnum):
    """Terminal state of a recovery loop.

    All three states produce the same observable result (the errors
    accumulated so far); the state only records why the loop stopped.
    """

    CLEAN = "clean"
    """An escaped variant parsed successfully"""

    ABORTED = "aborted"
    """The offending token could not be located or escaped"""

    EXHAUSTED = "exhausted"
    """The iteration limit was reached; the error list is known to be incomplete"""


__all__ = [
    "LineEnding",
    "RecoveryState",
]
