"""Per-chunk error handling for whole documents.

Ties recovery and correction together for the chunks a segmenter produced:

- blank chunks are skipped and never reach the grammar engine
- chunks that parse cleanly produce no result
- a chunk whose first parse reports exactly one error is recovered and
  corrected into document coordinates
- a chunk whose parse reports any other number of errors is taken as
  already converged and returned as-is

The document's line table (:class:`LineOffsets`) is built once per call
and shared by every chunk. It is immutable and chunks share nothing else,
so :func:`check_chunks` can spread them over a thread pool; results always
come back in input order.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from giftrecover.correction import correct_errors
from giftrecover.recovery import RecoveryConfig, RecoveryEngine
from giftrecover.syntax.lines import LineOffsets, detect_line_ending, is_blank
from giftrecover.syntax.location import GrammarError
from giftrecover.syntax.outcome import (
    Chunk,
    ChunkParse,
    CorrectedChunkResult,
    Failure,
    GrammarLike,
    run_grammar,
)

__all__ = ["check_chunks", "handle_errors", "handle_single_error", "merge_errors"]

logger = logging.getLogger(__name__)


def handle_single_error(
    parse: ChunkParse,
    source: str,
    line_ending: str,
    *,
    grammar: GrammarLike,
    config: RecoveryConfig | None = None,
    offsets: LineOffsets | None = None,
) -> CorrectedChunkResult | None:
    """Collect and correct every error of one parsed chunk.

    The grammar engine reports a single error for text it has not seen
    before, so a single error means more may be hiding behind it. Any
    other count means the errors are already final.

    Args:
        parse: Chunk and the outcome of its first parse
        source: Original document text, raw or LF-normalized
        line_ending: Line terminator of the original document
        grammar: Grammar engine used for re-parsing
        config: Recovery limits
        offsets: Line table of ``source`` shared by all chunks of the
            document (default: built for this chunk alone)

    Returns:
        Corrected errors, or None if the chunk parsed cleanly
    """
    outcome = parse.outcome
    if not isinstance(outcome, Failure):
        return None

    chunk = parse.chunk
    if len(outcome.errors) != 1:
        logger.debug(
            "Chunk at line %d reported %d errors; skipping recovery",
            chunk.start_line,
            len(outcome.errors),
        )
        return CorrectedChunkResult(chunk=chunk, errors=outcome.errors)

    recovery = RecoveryEngine(grammar, config).recover(chunk.text, outcome.errors[0])
    errors = correct_errors(
        recovery.errors, source, chunk.start_line, line_ending, offsets=offsets
    )
    logger.debug(
        "Chunk at line %d: %d errors (%s)",
        chunk.start_line,
        len(errors),
        recovery.state,
    )
    return CorrectedChunkResult(chunk=chunk, errors=errors)


def handle_errors(
    parses: Iterable[ChunkParse],
    source: str,
    line_ending: str,
    *,
    grammar: GrammarLike,
    config: RecoveryConfig | None = None,
) -> list[CorrectedChunkResult]:
    """Handle already-parsed chunks of a document.

    Args:
        parses: Chunks with the outcomes of their first parse, in document order
        source: Original document text, raw or LF-normalized
        line_ending: Line terminator of the original document
        grammar: Grammar engine used for re-parsing
        config: Recovery limits

    Returns:
        Results for the failing chunks, in input order
    """
    offsets = LineOffsets(source, line_ending)
    results: list[CorrectedChunkResult] = []
    for parse in parses:
        if is_blank(parse.chunk.text):
            continue
        result = handle_single_error(
            parse, source, line_ending, grammar=grammar, config=config, offsets=offsets
        )
        if result is not None:
            results.append(result)
    return results


def check_chunks(
    chunks: Iterable[Chunk],
    grammar: GrammarLike,
    source: str,
    line_ending: str | None = None,
    *,
    config: RecoveryConfig | None = None,
    max_workers: int | None = None,
) -> list[CorrectedChunkResult]:
    """Parse every non-blank chunk and report its errors in document coordinates.

    Args:
        chunks: Chunks of the document, in document order
        grammar: Grammar engine
        source: Original document text, raw or LF-normalized
        line_ending: Line terminator of the original document
            (default: detected from ``source``)
        config: Recovery limits
        max_workers: Process chunks on a thread pool of this size when
            greater than 1 (default: sequential)

    Returns:
        Results for the failing chunks, in input order

    Example:
        >>> results = check_chunks(chunks, grammar, document)
        >>> for result in results:
        ...     for error in result.errors:
        ...         print(error.start.line, error.start.column, error.found)
    """
    ending = line_ending if line_ending is not None else detect_line_ending(source)
    offsets = LineOffsets(source, ending)
    pending = [chunk for chunk in chunks if not is_blank(chunk.text)]

    def check(chunk: Chunk) -> CorrectedChunkResult | None:
        parse = ChunkParse(chunk=chunk, outcome=run_grammar(grammar, chunk.text))
        return handle_single_error(
            parse, source, ending, grammar=grammar, config=config, offsets=offsets
        )

    if max_workers is not None and max_workers > 1 and len(pending) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            checked = list(executor.map(check, pending))
    else:
        checked = [check(chunk) for chunk in pending]

    results = [result for result in checked if result is not None]
    logger.debug(
        "Checked %d chunks: %d with errors",
        len(pending),
        len(results),
    )
    return results


def merge_errors(results: Sequence[CorrectedChunkResult]) -> tuple[GrammarError, ...]:
    """Flatten chunk results into one document-level error list.

    Args:
        results: Chunk results in document order

    Returns:
        All errors, chunk order first, then discovery order within each chunk
    """
    return tuple(error for result in results for error in result.errors)
