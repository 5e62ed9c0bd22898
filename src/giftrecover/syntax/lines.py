"""Line ending utilities for original documents.

Chunks reach the grammar with LF separators, but offsets reported back to
the caller must count the document's real line terminators. These helpers
detect the terminator and tabulate per-line lengths.

Python 3.13+. Zero external dependencies.
"""

from itertools import accumulate

from giftrecover.constants import NEWLINE
from giftrecover.enums import LineEnding

__all__ = [
    "LineOffsets",
    "detect_line_ending",
    "is_blank",
    "line_lengths",
    "offset_before_line",
]


def detect_line_ending(text: str) -> LineEnding:
    """Detect the line terminator used by a document.

    The first terminator in the text decides. CRLF is recognized before a
    bare CR so that Windows files are not mistaken for classic Mac files.

    Args:
        text: Original document text

    Returns:
        Detected line ending (LF if the text has no terminator)

    Example:
        >>> detect_line_ending("a\\r\\nb")
        <LineEnding.CRLF: '\\r\\n'>
        >>> detect_line_ending("single line")
        <LineEnding.LF: '\\n'>
    """
    for i, char in enumerate(text):
        if char == "\n":
            return LineEnding.LF
        if char == "\r":
            return LineEnding.CRLF if text.startswith("\n", i + 1) else LineEnding.CR
    return LineEnding.LF


def line_lengths(source: str, line_ending: str) -> tuple[int, ...]:
    """Length of every line of ``source`` including its terminator.

    Args:
        source: Document text, raw or LF-normalized
        line_ending: Terminator used by the original document

    Returns:
        One entry per line of ``source``

    Example:
        >>> line_lengths("ab\\ncde", "\\r\\n")
        (4, 5)
        >>> line_lengths("ab\\r\\ncde", "\\r\\n")
        (4, 5)
    """
    ending_length = len(line_ending)
    normalized = source.replace("\r\n", NEWLINE).replace("\r", NEWLINE)
    return tuple(len(line) + ending_length for line in normalized.split(NEWLINE))


class LineOffsets:
    """Start offset of every line of a document, counted in original terminators.

    Built once per document in a single pass; each lookup is then O(1).
    Use this when correcting many chunks of the same document instead of
    calling offset_before_line() per chunk, which rescans the whole text.

    Example:
        >>> offsets = LineOffsets("ab\\ncde\\nf", "\\r\\n")
        >>> offsets.offset_before(1)
        0
        >>> offsets.offset_before(3)
        9

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_starts",)

    def __init__(self, source: str, line_ending: str) -> None:
        """Build the table.

        Args:
            source: Document text, raw or LF-normalized
            line_ending: Terminator used by the original document
        """
        # _starts[k] is where line k + 1 starts; the last entry is the sum of all lengths
        self._starts: tuple[int, ...] = (0, *accumulate(line_lengths(source, line_ending)))

    @property
    def line_count(self) -> int:
        """Number of lines in the document."""
        return len(self._starts) - 1

    def offset_before(self, line: int) -> int:
        """Document offset at which ``line`` (1-indexed) starts.

        Lines past the end of the document map to the sum of all line lengths.

        Raises:
            ValueError: If line < 1
        """
        if line < 1:
            msg = f"Line number must be >= 1, got {line}"
            raise ValueError(msg)
        return self._starts[min(line, len(self._starts)) - 1]


def offset_before_line(source: str, line: int, line_ending: str) -> int:
    """Document offset at which a given line starts.

    Sums the lengths of the ``line - 1`` lines preceding it. Lines past the
    end of ``source`` contribute nothing. Scans all of ``source``; build a
    LineOffsets once when looking up several lines of the same document.

    Args:
        source: Document text, raw or LF-normalized
        line: Line number (1-indexed)
        line_ending: Terminator used by the original document

    Returns:
        Offset of the first character of ``line`` in the original document
    """
    return LineOffsets(source, line_ending).offset_before(line)


def is_blank(text: str) -> bool:
    """True for empty or whitespace-only text."""
    return not text.strip()
