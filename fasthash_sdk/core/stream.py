"""Chunked consumption of byte sources into incremental hashers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable

from fasthash_sdk.config import HashingConfig, StreamConfig
from fasthash_sdk.core.errors import StreamReadError

if TYPE_CHECKING:
    from fasthash_sdk.core.hasher import FastHasher

logger = logging.getLogger(__name__)


def _resolve_chunk_size(config: HashingConfig | StreamConfig | None) -> int:
    if config is None:
        config = StreamConfig()
    elif isinstance(config, HashingConfig):
        config = config.stream
    if config.chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {config.chunk_size}")
    return config.chunk_size


def _read_failed(exc: OSError, consumed: int) -> StreamReadError:
    logger.warning("Byte source failed after %d bytes: %s", consumed, exc)
    return StreamReadError(
        f"byte source failed after {consumed} bytes: {exc}", bytes_consumed=consumed
    )


def consume_stream(
    hasher: FastHasher,
    source: Any,
    config: HashingConfig | StreamConfig | None = None,
) -> int:
    """Feed ``source`` into ``hasher`` until it is exhausted.

    Sources exposing ``readinto`` are read into a single reused buffer of
    ``chunk_size`` bytes; sources exposing only ``read`` are asked for at most
    ``chunk_size`` bytes per call. Returns the number of bytes consumed.

    An ``OSError`` from the source is re-raised as ``StreamReadError``
    carrying the byte count already written. Those bytes stay in the hasher.
    """
    chunk_size = _resolve_chunk_size(config)
    readinto = getattr(source, "readinto", None)
    if readinto is None:
        return _consume_read(hasher, source, chunk_size)

    total = 0
    chunks = 0
    buf = bytearray(chunk_size)
    with memoryview(buf) as view:
        while True:
            try:
                n = readinto(buf)
            except OSError as exc:
                raise _read_failed(exc, total) from exc
            if n is None:
                raise StreamReadError("source would block", bytes_consumed=total)
            if not n:
                break
            hasher.write(view[:n])
            total += n
            chunks += 1

    logger.debug("Consumed %d bytes in %d chunks", total, chunks)
    return total


def _consume_read(hasher: FastHasher, source: Any, chunk_size: int) -> int:
    total = 0
    chunks = 0
    while True:
        try:
            chunk = source.read(chunk_size)
        except OSError as exc:
            raise _read_failed(exc, total) from exc
        if chunk is None:
            raise StreamReadError("source would block", bytes_consumed=total)
        if not chunk:
            break
        hasher.write(chunk)
        total += len(chunk)
        chunks += 1

    logger.debug("Consumed %d bytes in %d chunks", total, chunks)
    return total


def consume_chunks(hasher: FastHasher, chunks: Iterable[Any]) -> int:
    """Feed an iterable of byte chunks into ``hasher``; returns bytes consumed."""
    total = 0
    for chunk in chunks:
        hasher.write(chunk)
        total += memoryview(chunk).nbytes
    return total
