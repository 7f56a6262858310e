"""Divisão do buffer de mídia em segmentos ordenados para o APPEND."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.media_upload import Chunk

if TYPE_CHECKING:
    from collections.abc import Iterator


def count_chunks(total_bytes: int, chunk_size: int) -> int:
    """Retorna ceil(total_bytes / chunk_size)."""
    if chunk_size <= 0:
        raise ValueError("chunk_size deve ser > 0")
    return -(-total_bytes // chunk_size)


def split_into_chunks(buffer: bytes | bytearray | memoryview, chunk_size: int) -> Iterator[Chunk]:
    """Gera os segmentos do buffer em ordem, com index zero-based.

    Todos os segmentos têm chunk_size bytes, exceto possivelmente o último.
    Buffer vazio não gera segmentos; cabe ao chamador rejeitá-lo.

    Raises:
        ValueError: Se chunk_size <= 0.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size deve ser > 0")
    # Formato "B": tamanhos e offsets sempre em bytes, qualquer que seja o buffer
    return _iter_chunks(memoryview(buffer).cast("B").toreadonly(), chunk_size)


def _iter_chunks(view: memoryview, chunk_size: int) -> Iterator[Chunk]:
    for index, offset in enumerate(range(0, len(view), chunk_size)):
        yield Chunk(index=index, data=view[offset : offset + chunk_size])
