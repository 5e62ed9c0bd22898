"""Shared constants for giftrecover.

Centralized configuration constants used across the syntax, recovery and
correction packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Escaping: the escape marker and the tokens it may neutralize
- Recovery limits: bounds on the locate/escape/reparse loop

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Escaping
    "ESCAPE",
    "NEWLINE",
    "ESCAPABLE_TOKENS",
    # Recovery limits
    "ITERATION_LIMIT",
    "SEARCH_RADIUS",
]

# ============================================================================
# ESCAPING
# ============================================================================

# Escape marker understood by the GIFT grammar. A token preceded by it is
# parsed as literal text.
ESCAPE: str = "\\"

# Normalized line separator inside chunk text. Chunks reach the grammar with
# LF endings regardless of the document's own convention.
NEWLINE: str = "\n"

# Tokens that carry structure in GIFT and can therefore be made inert.
# The newline is escaped by marking the start of the following line.
ESCAPABLE_TOKENS: frozenset[str] = frozenset({":", "~", "=", "#", "{", "}", NEWLINE})

# ============================================================================
# RECOVERY LIMITS
# ============================================================================

# Maximum number of failing re-parses per chunk. Each iteration is a full
# parse of the chunk, so this bounds worst-case work deterministically.
ITERATION_LIMIT: int = 50

# How far the token locator looks outward from the reported offset.
# Grammar engines report the unexpected character at or right next to the
# offset they give, so one step in each direction is enough in practice.
SEARCH_RADIUS: int = 1
