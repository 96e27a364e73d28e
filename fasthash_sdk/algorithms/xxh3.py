"""XXH3 64- and 128-bit variants, backed by the ``xxhash`` extension.

The 128-bit hasher reports the full value from ``finish_ext()``. Its
``finish()`` returns the low 64 bits (``low64`` of ``XXH128_hash_t``).
"""

from __future__ import annotations

from typing import Any

import xxhash

from fasthash_sdk.core.hasher import ExtendedResult, OneShotHash
from fasthash_sdk.core.native import NativeStreamingHasher
from fasthash_sdk.core.types import MASK64, HashWidth, Seed


class Hash64(OneShotHash):
    name = "xxh3_64"
    block_size = 64
    width = HashWidth.W64
    seed_width = HashWidth.W64

    @classmethod
    def _hash(cls, data: memoryview, seed: Seed) -> int:
        return xxhash.xxh3_64_intdigest(data, seed or 0)


class Hash128(OneShotHash):
    name = "xxh3_128"
    block_size = 64
    width = HashWidth.W128
    seed_width = HashWidth.W64

    @classmethod
    def _hash(cls, data: memoryview, seed: Seed) -> int:
        return xxhash.xxh3_128_intdigest(data, seed or 0)

    @classmethod
    def project(cls, value: int) -> int:
        # intdigest is (high64 << 64) | low64
        return value & MASK64


class Hasher64(NativeStreamingHasher):
    algorithm = Hash64

    @classmethod
    def _create_state(cls, seed: Seed) -> Any:
        return xxhash.xxh3_64(seed=seed or 0)

    @classmethod
    def _query(cls, state: Any) -> int:
        return state.intdigest()


class Hasher128(ExtendedResult, NativeStreamingHasher):
    algorithm = Hash128

    @classmethod
    def _create_state(cls, seed: Seed) -> Any:
        return xxhash.xxh3_128(seed=seed or 0)

    @classmethod
    def _query(cls, state: Any) -> int:
        return state.intdigest()


def hash64(data: Any) -> int:
    return Hash64.hash(data)


def hash64_with_seed(data: Any, seed: int) -> int:
    return Hash64.hash_with_seed(data, seed)


def hash128(data: Any) -> int:
    return Hash128.hash(data)


def hash128_with_seed(data: Any, seed: int) -> int:
    return Hash128.hash_with_seed(data, seed)
