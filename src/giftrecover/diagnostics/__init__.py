"""Diagnostic system for recovery failures.

Provides failure codes, diagnostic records, message templates and the
exception hierarchy.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import GiftRecoveryError, GrammarContractError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "GiftRecoveryError",
    "GrammarContractError",
]
