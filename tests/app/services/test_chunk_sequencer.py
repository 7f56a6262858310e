"""Testes para split_into_chunks e count_chunks."""

from __future__ import annotations

import array

import pytest

from app.services.chunk_sequencer import count_chunks, split_into_chunks

MIB = 1024 * 1024


class TestCountChunks:
    """Contagem é o teto de total/chunk_size."""

    @pytest.mark.parametrize(
        ("total", "chunk_size", "expected"),
        [
            (0, 5, 0),
            (1, 5, 1),
            (5, 5, 1),
            (6, 5, 2),
            (12 * MIB, 5 * MIB, 3),
        ],
    )
    def test_ceil_division(self, total: int, chunk_size: int, expected: int) -> None:
        assert count_chunks(total, chunk_size) == expected


class TestSplitIntoChunks:
    """Segmentação preguiçosa e sem cópia."""

    def test_chunks_concatenate_back_to_buffer(self) -> None:
        buffer = bytes(range(256)) * 50
        chunks = list(split_into_chunks(buffer, 1000))

        assert [c.index for c in chunks] == list(range(len(chunks)))
        assert b"".join(bytes(c.data) for c in chunks) == buffer
        assert all(len(c) == 1000 for c in chunks[:-1])
        assert 1 <= len(chunks[-1]) <= 1000

    def test_exact_multiple_has_no_empty_tail(self) -> None:
        chunks = list(split_into_chunks(b"x" * 10, 5))
        assert [len(c) for c in chunks] == [5, 5]

    def test_empty_buffer_yields_nothing(self) -> None:
        assert list(split_into_chunks(b"", 5)) == []

    def test_chunks_are_read_only_views(self) -> None:
        buffer = bytearray(b"abcdef")
        first = next(iter(split_into_chunks(buffer, 4)))
        assert first.data.readonly is True
        assert bytes(first.data) == b"abcd"

    def test_invalid_chunk_size_raises(self) -> None:
        with pytest.raises(ValueError):
            split_into_chunks(b"abc", 0)

    def test_wide_item_buffer_is_split_in_bytes(self) -> None:
        """Buffer com itens de 2 bytes é segmentado por bytes, não por itens."""
        buffer = array.array("H", range(10))
        chunks = list(split_into_chunks(memoryview(buffer), 8))

        assert [len(c) for c in chunks] == [8, 8, 4]
        assert b"".join(bytes(c.data) for c in chunks) == buffer.tobytes()
