"""Error recovery engine.

The grammar engine stops at the first syntax error. To report every error
in a chunk, the engine repeatedly escapes the offending token and re-parses
the whole chunk, accumulating one error per pass:

    locate -> escape -> re-parse -> accumulate

The loop ends when an escaped variant parses (CLEAN), when the token cannot
be located or escaped (ABORTED), or when the iteration limit is reached
(EXHAUSTED). Every terminal state returns the errors collected so far;
recovery failures are never raised.

Reported coordinates are relative to the escaped variant each error was
found in. :mod:`giftrecover.correction` undoes that drift.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from giftrecover.diagnostics import Diagnostic, ErrorTemplate
from giftrecover.enums import RecoveryState
from giftrecover.syntax.location import GrammarError
from giftrecover.syntax.outcome import Failure, GrammarLike, run_grammar

from .config import RecoveryConfig
from .escaper import EscapeFailure, escape_token
from .locator import LocateFailure, locate_token

__all__ = ["RecoveryEngine", "RecoveryResult", "recover_errors"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RecoveryResult:
    """Outcome of one recovery loop over a chunk.

    Attributes:
        errors: Accumulated errors in discovery order; always starts with
            the error recovery was given
        variants: Every text variant parsed, original text first; the last
            one is the variant the final parse ran on
        state: Why the loop stopped
        failure: Diagnostic explaining an ABORTED or EXHAUSTED stop
        iterations: Number of failing re-parses performed
    """

    errors: tuple[GrammarError, ...]
    variants: tuple[str, ...]
    state: RecoveryState
    failure: Diagnostic | None = None
    iterations: int = 0

    @property
    def is_complete(self) -> bool:
        """True if recovery ran until an escaped variant parsed cleanly."""
        return self.state is RecoveryState.CLEAN


class RecoveryEngine:
    """Drives the locate/escape/re-parse loop for single chunks.

    Holds no per-chunk state; one engine may serve many chunks, including
    from several threads at once.

    Attributes:
        grammar: Grammar engine (or parse callable) used for re-parsing
        config: Recovery limits
    """

    __slots__ = ("_config", "_grammar")

    def __init__(self, grammar: GrammarLike, config: RecoveryConfig | None = None) -> None:
        """Initialize engine.

        Args:
            grammar: Object with ``parse(text)`` or a ``text -> ParseOutcome`` callable
            config: Recovery limits (default: ``RecoveryConfig()``)
        """
        self._grammar = grammar
        self._config = config if config is not None else RecoveryConfig()

    @property
    def grammar(self) -> GrammarLike:
        """Grammar engine used for re-parsing."""
        return self._grammar

    @property
    def config(self) -> RecoveryConfig:
        """Recovery limits."""
        return self._config

    def recover(self, text: str, first_error: GrammarError) -> RecoveryResult:
        """Collect every error the grammar reports for ``text``.

        Args:
            text: Chunk text the grammar failed on
            first_error: The single error from that failed parse

        Returns:
            RecoveryResult with all errors found

        Raises:
            GrammarContractError: If the grammar returns a non-outcome
        """
        variants = [text]
        errors = [first_error]
        limit = self._config.iteration_limit
        iterations = 0

        while iterations < limit:
            step = self._escape_last(variants[-1], errors[-1])
            if isinstance(step, (LocateFailure, EscapeFailure)):
                logger.debug(
                    "Recovery aborted after %d iterations: %s",
                    iterations,
                    step.diagnostic.message,
                )
                return RecoveryResult(
                    errors=tuple(errors),
                    variants=tuple(variants),
                    state=RecoveryState.ABORTED,
                    failure=step.diagnostic,
                    iterations=iterations,
                )

            variants.append(step)
            outcome = run_grammar(self._grammar, step)
            if not isinstance(outcome, Failure):
                logger.debug("Recovery converged after %d iterations", iterations)
                return RecoveryResult(
                    errors=tuple(errors),
                    variants=tuple(variants),
                    state=RecoveryState.CLEAN,
                    iterations=iterations,
                )

            errors.extend(outcome.errors)
            iterations += 1
            logger.debug(
                "Recovery iteration %d found %d error(s) at offset %d",
                iterations,
                len(outcome.errors),
                outcome.errors[0].start.offset,
            )

        logger.warning(
            "Recovery reached the iteration limit (%d); %d errors collected, more may exist",
            limit,
            len(errors),
        )
        return RecoveryResult(
            errors=tuple(errors),
            variants=tuple(variants),
            state=RecoveryState.EXHAUSTED,
            failure=ErrorTemplate.iteration_exhausted(limit),
            iterations=iterations,
        )

    def _escape_last(
        self, text: str, error: GrammarError
    ) -> str | LocateFailure | EscapeFailure:
        """Locate the token ``error`` reports and escape it."""
        offset = locate_token(
            text, error.found, error.start.offset, radius=self._config.search_radius
        )
        if isinstance(offset, LocateFailure):
            return offset
        return escape_token(text, offset)


def recover_errors(
    text: str,
    first_error: GrammarError,
    grammar: GrammarLike,
    *,
    config: RecoveryConfig | None = None,
) -> RecoveryResult:
    """Collect every error the grammar reports for ``text``.

    Convenience function for RecoveryEngine.recover().

    Args:
        text: Chunk text the grammar failed on
        first_error: The single error from that failed parse
        grammar: Grammar engine or parse callable
        config: Recovery limits (default: ``RecoveryConfig()``)

    Returns:
        RecoveryResult with all errors found
    """
    return RecoveryEngine(grammar, config).recover(text, first_error)
