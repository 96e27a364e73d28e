"""MurmurHash3 variants, backed by the ``mmh3`` extension.

``Hash32`` is MurmurHash3_x86_32; ``Hash128`` and ``Hash128x86`` are the x64
and x86 128-bit variants. All take an unsigned 32-bit seed. Digests are the
unsigned values ``mmh3`` reports.

The streaming objects in ``mmh3`` cannot be reset, so ``reset()`` always
builds a fresh state. For the 128-bit hashers ``finish()`` returns the low
64 bits, which is the first output word ``h1``.
"""

from __future__ import annotations

from typing import Any

import mmh3

from fasthash_sdk.core.hasher import ExtendedResult, OneShotHash
from fasthash_sdk.core.native import NativeStreamingHasher
from fasthash_sdk.core.types import MASK64, HashWidth, Seed


class Hash32(OneShotHash):
    name = "murmur3_32"
    block_size = 4
    width = HashWidth.W32
    seed_width = HashWidth.W32

    @classmethod
    def _hash(cls, data: memoryview, seed: Seed) -> int:
        return mmh3.mmh3_32_uintdigest(data, seed or 0)


class Hash128(OneShotHash):
    name = "murmur3_x64_128"
    block_size = 16
    width = HashWidth.W128
    seed_width = HashWidth.W32

    @classmethod
    def _hash(cls, data: memoryview, seed: Seed) -> int:
        return mmh3.mmh3_x64_128_uintdigest(data, seed or 0)

    @classmethod
    def project(cls, value: int) -> int:
        return value & MASK64


class Hash128x86(Hash128):
    name = "murmur3_x86_128"

    @classmethod
    def _hash(cls, data: memoryview, seed: Seed) -> int:
        return mmh3.mmh3_x86_128_uintdigest(data, seed or 0)


class _MurmurHasher(NativeStreamingHasher):
    native_reset = False

    @classmethod
    def _query(cls, state: Any) -> int:
        return state.uintdigest()


class Hasher32(_MurmurHasher):
    algorithm = Hash32

    @classmethod
    def _create_state(cls, seed: Seed) -> Any:
        return mmh3.mmh3_32(seed=seed or 0)


class Hasher128(ExtendedResult, _MurmurHasher):
    algorithm = Hash128

    @classmethod
    def _create_state(cls, seed: Seed) -> Any:
        return mmh3.mmh3_x64_128(seed=seed or 0)


class Hasher128x86(ExtendedResult, _MurmurHasher):
    algorithm = Hash128x86

    @classmethod
    def _create_state(cls, seed: Seed) -> Any:
        return mmh3.mmh3_x86_128(seed=seed or 0)


def hash32(data: Any) -> int:
    return Hash32.hash(data)


def hash32_with_seed(data: Any, seed: int) -> int:
    return Hash32.hash_with_seed(data, seed)


def hash128(data: Any) -> int:
    return Hash128.hash(data)


def hash128_with_seed(data: Any, seed: int) -> int:
    return Hash128.hash_with_seed(data, seed)
