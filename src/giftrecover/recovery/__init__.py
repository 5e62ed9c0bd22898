"""Error recovery package.

Module Organization:
- locator.py: Finds the token the grammar reported
- escaper.py: Makes a token inert with an escape marker
- engine.py: The locate/escape/re-parse loop
- config.py: Recovery limits

Public API:
    RecoveryEngine: Recovery loop bound to a grammar engine
    recover_errors: Functional form of RecoveryEngine.recover()
    RecoveryConfig: Iteration limit and search radius
"""

from .config import RecoveryConfig
from .engine import RecoveryEngine, RecoveryResult, recover_errors
from .escaper import EscapeFailure, escape_token
from .locator import LocateFailure, locate_token

__all__ = [
    "EscapeFailure",
    "LocateFailure",
    "RecoveryConfig",
    "RecoveryEngine",
    "RecoveryResult",
    "escape_token",
    "locate_token",
    "recover_errors",
]
