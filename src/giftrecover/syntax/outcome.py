"""Parse outcomes, the grammar engine interface, and chunk records.

The grammar engine itself is external. This module fixes the shape of what
it returns (Success or Failure) and of the chunks the segmenter hands over.

Python 3.13+.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from giftrecover.diagnostics import GrammarContractError

from .location import GrammarError

__all__ = [
    "Chunk",
    "ChunkParse",
    "CorrectedChunkResult",
    "Failure",
    "GrammarEngine",
    "GrammarLike",
    "ParseOutcome",
    "Success",
    "run_grammar",
]


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Grammar engine accepted the text.

    Attributes:
        value: Whatever the grammar engine produced (typically an AST)
    """

    value: T


@dataclass(frozen=True, slots=True)
class Failure:
    """Grammar engine rejected the text.

    Attributes:
        errors: Errors in discovery order (never empty)
    """

    errors: tuple[GrammarError, ...]

    def __post_init__(self) -> None:
        """Validate that at least one error is present."""
        if not self.errors:
            msg = "Failure requires at least one error"
            raise ValueError(msg)


type ParseOutcome = Success[Any] | Failure


@runtime_checkable
class GrammarEngine(Protocol):
    """Parser for GIFT text that reports the first syntax error it meets.

    Contract:
        On text not yet processed by recovery, a Failure carries exactly
        one error.
    """

    def parse(self, text: str) -> ParseOutcome:
        """Parse ``text`` and return its outcome."""
        ...


type GrammarLike = GrammarEngine | Callable[[str], ParseOutcome]


def run_grammar(grammar: GrammarLike, text: str) -> ParseOutcome:
    """Invoke a grammar engine or a plain parse callable.

    Args:
        grammar: Object with a ``parse(text)`` method, or a callable
        text: Text to parse

    Returns:
        The outcome reported by the grammar

    Raises:
        GrammarContractError: If the grammar returns something that is not
            a Success or Failure
    """
    parse = grammar.parse if isinstance(grammar, GrammarEngine) else grammar
    outcome = parse(text)
    if not isinstance(outcome, (Success, Failure)):
        msg = f"Grammar engine returned {type(outcome).__name__}, expected Success or Failure"
        raise GrammarContractError(msg)
    return outcome


@dataclass(frozen=True, slots=True)
class Chunk:
    """Isolated region of a document, as produced by the segmenter.

    Attributes:
        text: Chunk text with LF line separators
        start_line: Document line (1-indexed) the chunk starts on
    """

    text: str
    start_line: int = 1

    def __post_init__(self) -> None:
        """Validate the starting line."""
        if self.start_line < 1:
            msg = f"Chunk.start_line must be >= 1 (1-indexed), got {self.start_line}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ChunkParse:
    """A chunk together with the outcome of its first parse.

    Attributes:
        chunk: The chunk that was parsed
        outcome: What the grammar engine returned for ``chunk.text``
    """

    chunk: Chunk
    outcome: ParseOutcome


@dataclass(frozen=True, slots=True)
class CorrectedChunkResult:
    """Errors of one chunk in document-absolute coordinates.

    Attributes:
        chunk: The chunk the errors belong to
        errors: Errors in discovery order (never reordered)
    """

    chunk: Chunk
    errors: tuple[GrammarError, ...]
