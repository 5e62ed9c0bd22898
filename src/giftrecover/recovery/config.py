"""Configuration for the recovery loop.

Provides a single frozen dataclass that encapsulates the tunable limits of
error recovery.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from giftrecover.constants import ITERATION_LIMIT, SEARCH_RADIUS

__all__ = ["RecoveryConfig"]


@dataclass(frozen=True, slots=True)
class RecoveryConfig:
    """Immutable configuration for error recovery.

    All fields have sensible defaults; constructing ``RecoveryConfig()`` with
    no arguments reproduces the standard behavior.

    Attributes:
        iteration_limit: Maximum failing re-parses per chunk (default: 50).
            Reaching it stops recovery with a known-incomplete error list.
        search_radius: How many characters the token locator looks on each
            side of the reported offset (default: 1).

    Example:
        >>> config = RecoveryConfig(iteration_limit=10)
        >>> config.search_radius
        1
    """

    iteration_limit: int = ITERATION_LIMIT
    search_radius: int = SEARCH_RADIUS

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If iteration_limit is not positive or search_radius
                is negative.
        """
        if self.iteration_limit < 1:
            msg = "iteration_limit must be positive"
            raise ValueError(msg)
        if self.search_radius < 0:
            msg = "search_radius must be non-negative"
            raise ValueError(msg)
