"""Coordinate correction for recovered errors.

Errors leave the recovery loop in two kinds of wrong coordinates:

1. Escape drift: every escape marker inserted during recovery shifts
   everything after it by one character, so the error found in variant
   ``i`` is ``i`` characters too far along (and, on a line that already
   had errors, its column is off by the number of earlier errors there).
2. Chunk space: lines and offsets count from the start of the chunk with
   LF separators, not from the start of the original document with its
   own line terminators.

:func:`correct_token_drift` undoes the first, :func:`correct_chunk_offsets`
undoes the second, and :func:`correct_errors` applies both in that order.
Correction must run exactly once per chunk.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from giftrecover.syntax.lines import LineOffsets
from giftrecover.syntax.location import GrammarError, Span

__all__ = ["correct_chunk_offsets", "correct_errors", "correct_token_drift"]


@dataclass(frozen=True, slots=True)
class _LineRun:
    """Fold accumulator: how many earlier errors share the current error's line."""

    previous_line: int | None = None
    same_line_count: int = 0

    def advance(self, line: int) -> _LineRun:
        if line == self.previous_line:
            return _LineRun(line, self.same_line_count + 1)
        return _LineRun(line, 0)


def _undo_drift(error: GrammarError, index: int, same_line_count: int) -> GrammarError:
    start = error.start.shifted(column=-same_line_count, offset=-index)
    # A multi-line span ends on a line the escapes before it did not touch
    end_column = 0 if error.span.is_multiline else -same_line_count
    end = error.end.shifted(column=end_column, offset=-index)
    return error.with_span(Span(start=start, end=end))


def correct_token_drift(errors: Sequence[GrammarError]) -> tuple[GrammarError, ...]:
    """Remove the drift caused by escape markers inserted during recovery.

    Walks the errors in discovery order. The error at index ``i`` was found
    after ``i`` escape insertions, so ``i`` is subtracted from both offsets.
    Columns are reduced by the number of directly preceding errors on the
    same line (only the start column for multi-line spans).

    Args:
        errors: Errors in discovery order, as returned by recovery

    Returns:
        Corrected errors, same order and length

    Example:
        Errors at ':' offsets 1 and 4 of ``"a:b\\\\:c"`` come from ``"a:b:c"``;
        the second is moved back to offset 3.
    """
    run = _LineRun()
    corrected: list[GrammarError] = []
    for index, error in enumerate(errors):
        run = run.advance(error.start.line)
        corrected.append(_undo_drift(error, index, run.same_line_count))
    return tuple(corrected)


def correct_chunk_offsets(
    errors: Sequence[GrammarError],
    source: str,
    start_line: int,
    line_ending: str,
    *,
    offsets: LineOffsets | None = None,
) -> tuple[GrammarError, ...]:
    """Translate chunk-relative coordinates into document coordinates.

    Lines move down by ``start_line - 1``. Offsets move forward by the
    length of the lines before the chunk, counted with the document's real
    line terminator. Columns are chunk-relative already and stay as they are.

    Args:
        errors: Errors relative to the chunk
        source: Original (pre-escape) document text, raw or LF-normalized
        start_line: Document line the chunk starts on (1-indexed)
        line_ending: Line terminator of the original document
        offsets: Line table of ``source`` built once for the whole document
            (default: built from ``source`` and ``line_ending`` on this call)

    Returns:
        Errors in document coordinates, same order and length
    """
    table = offsets if offsets is not None else LineOffsets(source, line_ending)
    delta = table.offset_before(start_line)
    line_shift = start_line - 1
    return tuple(
        error.with_span(error.span.shifted(line=line_shift, offset=delta))
        for error in errors
    )


def correct_errors(
    errors: Sequence[GrammarError],
    source: str,
    start_line: int,
    line_ending: str,
    *,
    offsets: LineOffsets | None = None,
) -> tuple[GrammarError, ...]:
    """Apply escape drift correction, then chunk-to-document correction.

    Args:
        errors: Errors in discovery order, as returned by recovery
        source: Original (pre-escape) document text, raw or LF-normalized
        start_line: Document line the chunk starts on (1-indexed)
        line_ending: Line terminator of the original document
        offsets: Line table of ``source`` shared across chunks

    Returns:
        Errors in document coordinates
    """
    if not errors:
        return ()
    return correct_chunk_offsets(
        correct_token_drift(errors), source, start_line, line_ending, offsets=offsets
    )
