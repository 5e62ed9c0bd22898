"""giftrecover - multi-error recovery for GIFT grammar parsers.

A GIFT grammar parser stops at the first syntax error in a chunk of text.
giftrecover escapes the offending token, re-parses, and repeats until the
chunk is clean or a limit is hit, collecting every error along the way.
It then rewrites each error's coordinates from the escaped, isolated chunk
back into the original document.

Public API:
    check_chunks - Parse, recover and correct all chunks of a document
    handle_errors - Recover and correct chunks that were already parsed
    handle_single_error - Recover and correct one parsed chunk
    merge_errors - Flatten chunk results into one error list
    recover_errors - Run the recovery loop on one chunk
    correct_errors - Map recovered errors into document coordinates
    RecoveryConfig - Iteration limit and search radius

Submodules:
    giftrecover.syntax - Positions, errors, parse outcomes, chunks, line endings
    giftrecover.recovery - Token locator, token escaper, recovery engine
    giftrecover.correction - Escape drift and chunk offset correction
    giftrecover.diagnostics - Failure codes, templates and exceptions
"""

from .correction import correct_errors
from .diagnostics import GiftRecoveryError, GrammarContractError
from .enums import LineEnding, RecoveryState
from .pipeline import check_chunks, handle_errors, handle_single_error, merge_errors
from .recovery import RecoveryConfig, RecoveryEngine, RecoveryResult, recover_errors
from .syntax import (
    Chunk,
    ChunkParse,
    CorrectedChunkResult,
    Failure,
    GrammarEngine,
    GrammarError,
    LineOffsets,
    Position,
    Span,
    Success,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("giftrecover")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Chunk",
    "ChunkParse",
    "CorrectedChunkResult",
    "Failure",
    "GiftRecoveryError",
    "GrammarContractError",
    "GrammarEngine",
    "GrammarError",
    "LineEnding",
    "LineOffsets",
    "Position",
    "RecoveryConfig",
    "RecoveryEngine",
    "RecoveryResult",
    "RecoveryState",
    "Span",
    "Success",
    "__version__",
    "check_chunks",
    "correct_errors",
    "handle_errors",
    "handle_single_error",
    "merge_errors",
    "recover_errors",
]
