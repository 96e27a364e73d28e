"""Shared test fixtures."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Any

import pytest

from fasthash_sdk import city, murmur3, xx, xxh3
from fasthash_sdk.core.hasher import BaseHasher
from fasthash_sdk.core.types import Seed


@dataclass
class Variant:
    hasher_cls: type[BaseHasher]
    seed: Seed = None

    def new(self) -> BaseHasher:
        return self.hasher_cls(self.seed)

    def one_shot(self, data: Any) -> int:
        alg = self.hasher_cls.algorithm
        if self.seed is None:
            return alg.hash(data)
        return alg.hash_with_seed(data, self.seed)

    def __str__(self) -> str:
        suffix = "" if self.seed is None else f"-seed{self.seed}"
        return f"{self.hasher_cls.__module__.rsplit('.', 1)[-1]}.{self.hasher_cls.__name__}{suffix}"


VARIANTS = [
    Variant(xx.Hasher32),
    Variant(xx.Hasher32, 123),
    Variant(xx.Hasher64),
    Variant(xx.Hasher64, 123),
    Variant(xxh3.Hasher64),
    Variant(xxh3.Hasher64, 123),
    Variant(xxh3.Hasher128),
    Variant(xxh3.Hasher128, 123),
    Variant(murmur3.Hasher32),
    Variant(murmur3.Hasher32, 42),
    Variant(murmur3.Hasher128),
    Variant(murmur3.Hasher128, 42),
    Variant(murmur3.Hasher128x86),
    Variant(murmur3.Hasher128x86, 42),
    Variant(city.Hasher32),
    Variant(city.Hasher64),
    Variant(city.Hasher64, 123),
    Variant(city.Hasher64WithSeeds, (123, 456)),
    Variant(city.Hasher128),
    Variant(city.Hasher128, (123 << 64) | 456),
]


@pytest.fixture(params=VARIANTS, ids=str)
def variant(request) -> Variant:
    return request.param


class FailingReader(io.RawIOBase):
    """Serves ``data`` in chunks of at most ``chunk`` bytes, then raises."""

    def __init__(self, data: bytes, chunk: int = 4, error: OSError | None = None):
        self._data = data
        self._chunk = chunk
        self._pos = 0
        self._error = error or OSError("connection reset")

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        if self._pos >= len(self._data):
            raise self._error
        piece = self._data[self._pos:self._pos + min(self._chunk, len(buffer))]
        buffer[:len(piece)] = piece
        self._pos += len(piece)
        return len(piece)


class RecordingReader(io.RawIOBase):
    """Records every buffer it is asked to fill."""

    def __init__(self, data: bytes):
        self._source = io.BytesIO(data)
        self.buffers: list[int] = []
        self.sizes: list[int] = []

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        self.buffers.append(id(buffer))
        self.sizes.append(len(buffer))
        return self._source.readinto(buffer)


class ReadOnlySource:
    """Byte source exposing only ``read``."""

    def __init__(self, data: bytes):
        self._source = io.BytesIO(data)
        self.requested: list[int] = []

    def read(self, size: int) -> bytes:
        self.requested.append(size)
        return self._source.read(size)


class WouldBlockReader:
    def readinto(self, buffer) -> None:
        return None


@pytest.fixture
def zeros() -> bytes:
    return bytes(4567)
