"""Source locations and grammar error records.

Positions are reported by the grammar engine relative to the text it was
given. Every type here is immutable; shifting a position returns a new one,
so a correction pass can never corrupt the record it started from.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

__all__ = ["GrammarError", "Position", "Span"]


@dataclass(frozen=True, slots=True)
class Position:
    """Point in a text.

    Attributes:
        line: Line number (1-indexed)
        column: Column number as reported by the grammar engine
        offset: Character offset from the start of the text

    Example:
        >>> Position(line=2, column=3, offset=14).shifted(line=4, offset=40)
        Position(line=6, column=3, offset=54)
    """

    line: int
    column: int
    offset: int

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if self.line < 1:
            msg = f"Position line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 0:
            msg = f"Position column must be >= 0, got {self.column}"
            raise ValueError(msg)
        if self.offset < 0:
            msg = f"Position offset must be >= 0, got {self.offset}"
            raise ValueError(msg)

    def shifted(self, *, line: int = 0, column: int = 0, offset: int = 0) -> "Position":
        """Return a new position moved by the given deltas (negative deltas move back)."""
        return Position(
            line=self.line + line,
            column=self.column + column,
            offset=self.offset + offset,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Position":
        """Build a position from a ``{"line", "column", "offset"}`` mapping.

        Raises:
            ValueError: If a key is missing, not an integer, or out of range
        """
        try:
            return cls(line=int(data["line"]), column=int(data["column"]), offset=int(data["offset"]))
        except (KeyError, TypeError, ValueError) as e:
            msg = f"Invalid position record: {data!r}"
            raise ValueError(msg) from e

    def to_dict(self) -> dict[str, int]:
        """Return the ``{"line", "column", "offset"}`` mapping."""
        return {"line": self.line, "column": self.column, "offset": self.offset}


@dataclass(frozen=True, slots=True)
class Span:
    """Region between two positions.

    Attributes:
        start: Position of the first character
        end: Position after the last character
    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.end.offset < self.start.offset:
            msg = f"Span end ({self.end.offset}) must be >= start ({self.start.offset})"
            raise ValueError(msg)

    @property
    def is_multiline(self) -> bool:
        """True if the span ends on a later line than it starts."""
        return self.end.line > self.start.line

    def shifted(self, *, line: int = 0, column: int = 0, offset: int = 0) -> "Span":
        """Return a new span with both ends moved by the given deltas."""
        return Span(
            start=self.start.shifted(line=line, column=column, offset=offset),
            end=self.end.shifted(line=line, column=column, offset=offset),
        )


@dataclass(frozen=True, slots=True)
class GrammarError:
    """Syntax error reported by the grammar engine.

    Attributes:
        found: The unexpected character at ``span.start``, or None when the
            parser stopped in a state that no single character explains
            (typically end of input)
        span: Location of the error
        message: Human-readable message from the grammar engine
        expected: Descriptions of what the grammar would have accepted

    Example:
        >>> error = GrammarError(
        ...     found=":",
        ...     span=Span(Position(1, 8, 7), Position(1, 9, 8)),
        ... )
        >>> error.span.start.offset
        7
    """

    found: str | None
    span: Span
    message: str = ""
    expected: tuple[str, ...] = field(default_factory=tuple)

    @property
    def start(self) -> Position:
        """Start position of the error."""
        return self.span.start

    @property
    def end(self) -> Position:
        """End position of the error."""
        return self.span.end

    def with_span(self, span: Span) -> "GrammarError":
        """Return a copy located at ``span``; all other fields are kept."""
        return replace(self, span=span)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GrammarError":
        """Build an error from a peggy-style record.

        Accepted shape::

            {
                "found": ":" | null,
                "location": {"start": {...}, "end": {...}},
                "message": "...",             # optional
                "expected": [...],            # optional
            }

        ``expected`` entries may be plain strings or peggy expectation
        objects, in which case their ``text`` (or ``description``) is used.

        Raises:
            ValueError: If the record lacks a location or a position is malformed
        """
        try:
            location = data["location"]
            span = Span(
                start=Position.from_dict(location["start"]),
                end=Position.from_dict(location["end"]),
            )
        except (KeyError, TypeError) as e:
            msg = f"Grammar error record has no usable location: {data!r}"
            raise ValueError(msg) from e

        found = data.get("found")
        expected = tuple(_describe_expectation(item) for item in data.get("expected") or ())
        return cls(
            found=None if found is None else str(found),
            span=span,
            message=str(data.get("message") or ""),
            expected=expected,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the peggy-style record accepted by :meth:`from_dict`."""
        return {
            "found": self.found,
            "message": self.message,
            "expected": list(self.expected),
            "location": {
                "start": self.span.start.to_dict(),
                "end": self.span.end.to_dict(),
            },
        }


def _describe_expectation(item: Any) -> str:
    if isinstance(item, Mapping):
        return str(item.get("text") or item.get("description") or "")
    return str(item)
