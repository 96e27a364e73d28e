"""xxHash32 and xxHash64, backed by the ``xxhash`` extension.

Both are seeded, produce identical digests on little- and big-endian hosts,
and have native streaming states with an in-place reset.

    >>> from fasthash_sdk.algorithms import xx
    >>> xx.hash64(b"hello")
    2794345569481354659
"""

from __future__ import annotations

from typing import Any

import xxhash

from fasthash_sdk.core.hasher import OneShotHash
from fasthash_sdk.core.native import NativeStreamingHasher
from fasthash_sdk.core.types import HashWidth, Seed


class Hash32(OneShotHash):
    name = "xxh32"
    block_size = 16
    width = HashWidth.W32
    seed_width = HashWidth.W32

    @classmethod
    def _hash(cls, data: memoryview, seed: Seed) -> int:
        return xxhash.xxh32_intdigest(data, seed or 0)


class Hash64(OneShotHash):
    name = "xxh64"
    block_size = 32
    width = HashWidth.W64
    seed_width = HashWidth.W64

    @classmethod
    def _hash(cls, data: memoryview, seed: Seed) -> int:
        return xxhash.xxh64_intdigest(data, seed or 0)


class Hasher32(NativeStreamingHasher):
    algorithm = Hash32

    @classmethod
    def _create_state(cls, seed: Seed) -> Any:
        return xxhash.xxh32(seed=seed or 0)

    @classmethod
    def _query(cls, state: Any) -> int:
        return state.intdigest()


class Hasher64(NativeStreamingHasher):
    algorithm = Hash64

    @classmethod
    def _create_state(cls, seed: Seed) -> Any:
        return xxhash.xxh64(seed=seed or 0)

    @classmethod
    def _query(cls, state: Any) -> int:
        return state.intdigest()


def hash32(data: Any) -> int:
    return Hash32.hash(data)


def hash32_with_seed(data: Any, seed: int) -> int:
    return Hash32.hash_with_seed(data, seed)


def hash64(data: Any) -> int:
    return Hash64.hash(data)


def hash64_with_seed(data: Any, seed: int) -> int:
    return Hash64.hash_with_seed(data, seed)
