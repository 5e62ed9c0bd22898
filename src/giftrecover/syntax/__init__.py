"""Value types shared by recovery and correction.

Provides source locations, grammar error records, parse outcomes, chunk
records and line ending helpers.

Python 3.13+.
"""

from .lines import LineOffsets, detect_line_ending, is_blank, line_lengths, offset_before_line
from .location import GrammarError, Position, Span
from .outcome import (
    Chunk,
    ChunkParse,
    CorrectedChunkResult,
    Failure,
    GrammarEngine,
    GrammarLike,
    ParseOutcome,
    Success,
    run_grammar,
)

__all__ = [
    "Chunk",
    "ChunkParse",
    "CorrectedChunkResult",
    "Failure",
    "GrammarEngine",
    "GrammarError",
    "GrammarLike",
    "LineOffsets",
    "ParseOutcome",
    "Position",
    "Span",
    "Success",
    "detect_line_ending",
    "is_blank",
    "line_lengths",
    "offset_before_line",
    "run_grammar",
]
