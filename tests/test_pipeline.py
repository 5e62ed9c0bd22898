"""Tests for pipeline.py: per-chunk handling of whole documents.

Uses a five-line document with two blank chunks, one clean chunk and
one chunk with two errors:

    line 1: alpha
    line 2: (empty)
    line 3: b:c:d
    line 4: (spaces)
    line 5: ok
"""

from __future__ import annotations

import logging

import pytest

from giftrecover import (
    Chunk,
    ChunkParse,
    CorrectedChunkResult,
    Failure,
    GrammarContractError,
    LineOffsets,
    Position,
    RecoveryConfig,
    Success,
    check_chunks,
    handle_errors,
    handle_single_error,
    merge_errors,
)
from tests.helpers.grammar import ForbiddenCharGrammar, error_at

SOURCE = "alpha\n\nb:c:d\n   \nok"
CHUNKS = (
    Chunk("alpha", 1),
    Chunk("", 2),
    Chunk("b:c:d", 3),
    Chunk("   ", 4),
    Chunk("ok", 5),
)


class TestHandleSingleError:
    """One parsed chunk."""

    def test_clean_chunk_has_no_result(self) -> None:
        grammar = ForbiddenCharGrammar(":")
        parse = ChunkParse(Chunk("ok", 5), Success("ok"))
        assert handle_single_error(parse, SOURCE, "\n", grammar=grammar) is None
        assert grammar.calls == []

    def test_single_error_is_recovered_and_corrected(self) -> None:
        grammar = ForbiddenCharGrammar(":")
        chunk = Chunk("b:c:d", 3)
        parse = ChunkParse(chunk, Failure((grammar.first_error(chunk.text),)))

        result = handle_single_error(parse, SOURCE, "\n", grammar=grammar)

        assert result is not None
        assert result.chunk == chunk
        assert [e.start for e in result.errors] == [Position(3, 2, 8), Position(3, 4, 10)]
        assert all(SOURCE[e.start.offset] == ":" for e in result.errors)
        assert grammar.calls == ["b\\:c:d", "b\\:c\\:d"]

    def test_multiple_errors_returned_as_is(self) -> None:
        """Several errors on a first parse skip recovery and correction."""
        grammar = ForbiddenCharGrammar(":")
        chunk = Chunk("b:c:d", 3)
        errors = (error_at(chunk.text, 1), error_at(chunk.text, 3))
        parse = ChunkParse(chunk, Failure(errors))

        result = handle_single_error(parse, SOURCE, "\n", grammar=grammar)

        assert result == CorrectedChunkResult(chunk=chunk, errors=errors)
        assert grammar.calls == []

    def test_multiple_errors_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        chunk = Chunk("b:c:d", 3)
        parse = ChunkParse(chunk, Failure((error_at(chunk.text, 1), error_at(chunk.text, 3))))
        with caplog.at_level(logging.DEBUG, logger="giftrecover.pipeline"):
            handle_single_error(parse, SOURCE, "\n", grammar=ForbiddenCharGrammar())
        assert "reported 2 errors" in caplog.text

    def test_config_limits_recovery(self) -> None:
        grammar = ForbiddenCharGrammar(":")
        chunk = Chunk("::::", 1)
        parse = ChunkParse(chunk, Failure((grammar.first_error(chunk.text),)))
        result = handle_single_error(
            parse, chunk.text, "\n", grammar=grammar, config=RecoveryConfig(iteration_limit=2)
        )
        assert result is not None
        assert [e.start.offset for e in result.errors] == [0, 1, 2]


class TestHandleErrors:
    """Already-parsed chunks."""

    def test_blank_chunks_skipped(self) -> None:
        grammar = ForbiddenCharGrammar(":")
        blank_error = Failure((error_at(" : ", 1),))
        parses = [
            ChunkParse(Chunk("", 2), blank_error),
            ChunkParse(Chunk("   ", 4), blank_error),
        ]
        assert handle_errors(parses, SOURCE, "\n", grammar=grammar) == []
        assert grammar.calls == []

    def test_only_failing_chunks_reported(self) -> None:
        grammar = ForbiddenCharGrammar(":")
        parses = [ChunkParse(chunk, grammar.parse(chunk.text)) for chunk in CHUNKS]
        grammar.calls.clear()

        results = handle_errors(parses, SOURCE, "\n", grammar=grammar)

        assert [r.chunk.start_line for r in results] == [3]
        assert [e.start.offset for e in results[0].errors] == [8, 10]


class TestCheckChunks:
    """Parsing, recovery and correction in one call."""

    def test_document_errors(self) -> None:
        grammar = ForbiddenCharGrammar(":")
        results = check_chunks(CHUNKS, grammar, SOURCE)

        assert len(results) == 1
        errors = results[0].errors
        assert [e.start for e in errors] == [Position(3, 2, 8), Position(3, 4, 10)]
        assert [e.end for e in errors] == [Position(3, 3, 9), Position(3, 5, 11)]

    def test_blank_chunks_never_parsed(self) -> None:
        grammar = ForbiddenCharGrammar(":")
        check_chunks(CHUNKS, grammar, SOURCE)
        assert grammar.calls == ["alpha", "b:c:d", "b\\:c:d", "b\\:c\\:d", "ok"]

    def test_crlf_detected_from_raw_source(self) -> None:
        raw = SOURCE.replace("\n", "\r\n")
        results = check_chunks(CHUNKS, ForbiddenCharGrammar(":"), raw)
        offsets = [e.start.offset for e in results[0].errors]
        assert offsets == [10, 12]
        assert all(raw[offset] == ":" for offset in offsets)

    def test_explicit_line_ending_wins(self) -> None:
        results = check_chunks(CHUNKS, ForbiddenCharGrammar(":"), SOURCE, "\r\n")
        assert [e.start.offset for e in results[0].errors] == [10, 12]

    def test_clean_document(self) -> None:
        assert check_chunks(CHUNKS, ForbiddenCharGrammar("#"), SOURCE) == []

    def test_empty_chunk_list(self) -> None:
        assert check_chunks([], ForbiddenCharGrammar(), "") == []

    def test_plain_callable_grammar(self) -> None:
        grammar = ForbiddenCharGrammar(":")
        results = check_chunks(CHUNKS, grammar.parse, SOURCE)
        assert len(results[0].errors) == 2

    def test_thread_pool_keeps_order(self) -> None:
        chunks = [Chunk(f"q{i}:a", i + 1) for i in range(12)]
        source = "\n".join(chunk.text for chunk in chunks)

        sequential = check_chunks(chunks, ForbiddenCharGrammar(":"), source)
        grammar = ForbiddenCharGrammar(":")
        pooled = check_chunks(chunks, grammar, source, max_workers=4)

        assert pooled == sequential
        assert [r.chunk.start_line for r in pooled] == list(range(1, 13))
        assert len(grammar.calls) == 24

    def test_grammar_contract_violation_propagates(self) -> None:
        with pytest.raises(GrammarContractError, match="expected Success or Failure"):
            check_chunks(CHUNKS, lambda text: "not an outcome", SOURCE)  # type: ignore[arg-type, return-value]


class TestMergeErrors:
    """Flattening results."""

    def test_chunk_order_then_discovery_order(self) -> None:
        first = Chunk("a:b:", 1)
        second = Chunk(":z", 2)
        source = "a:b:\n:z"
        results = check_chunks([first, second], ForbiddenCharGrammar(":"), source)

        merged = merge_errors(results)

        assert [e.start.offset for e in merged] == [1, 3, 5]
        assert [e.start.line for e in merged] == [1, 1, 2]

    def test_empty(self) -> None:
        assert merge_errors([]) == ()


class TestSharedLineTable:
    """One line table per document, however many chunks fail."""

    @pytest.fixture
    def built(self, monkeypatch: pytest.MonkeyPatch) -> list[int]:
        """Record the source length of every line table constructed."""
        sizes: list[int] = []

        class CountingOffsets(LineOffsets):
            def __init__(self, source: str, line_ending: str) -> None:
                sizes.append(len(source))
                super().__init__(source, line_ending)

        monkeypatch.setattr("giftrecover.pipeline.LineOffsets", CountingOffsets)
        monkeypatch.setattr("giftrecover.correction.LineOffsets", CountingOffsets)
        return sizes

    @staticmethod
    def _document() -> tuple[list[Chunk], str]:
        chunks = [Chunk(f"q{i}:a:b", i + 1) for i in range(20)]
        return chunks, "\n".join(chunk.text for chunk in chunks)

    def test_check_chunks_builds_table_once(self, built: list[int]) -> None:
        chunks, source = self._document()
        results = check_chunks(chunks, ForbiddenCharGrammar(":"), source)

        assert len(results) == 20
        assert built == [len(source)]
        for result in results:
            assert all(source[e.start.offset] == ":" for e in result.errors)

    def test_thread_pool_shares_table(self, built: list[int]) -> None:
        chunks, source = self._document()
        check_chunks(chunks, ForbiddenCharGrammar(":"), source, max_workers=4)
        assert len(built) == 1

    def test_handle_errors_builds_table_once(self, built: list[int]) -> None:
        chunks, source = self._document()
        grammar = ForbiddenCharGrammar(":")
        parses = [ChunkParse(chunk, grammar.parse(chunk.text)) for chunk in chunks]

        results = handle_errors(parses, source, "\n", grammar=grammar)

        assert len(results) == 20
        assert len(built) == 1

    def test_single_chunk_without_table_builds_its_own(self, built: list[int]) -> None:
        grammar = ForbiddenCharGrammar(":")
        chunk = Chunk("b:c:d", 3)
        parse = ChunkParse(chunk, Failure((grammar.first_error(chunk.text),)))
        handle_single_error(parse, SOURCE, "\n", grammar=grammar)
        assert built == [len(SOURCE)]
