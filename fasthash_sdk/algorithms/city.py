"""CityHash, backed by the ``cityhash`` extension.

CityHash is one-shot only, so every hasher here is a ``BufferingHasher``: it
keeps all written bytes and re-hashes them on each query.

``cityhash`` bundles Google's CityHash 1.1.x sources. Its 64- and 128-bit
digests are not the ones older CityHash revisions produce, so stored values
from those revisions will not match. ``CityHash32`` agrees across them.

Seeding differs per width:

- ``Hash32`` is unseeded. ``cityhash`` has no seeded 32-bit entry point.
- ``Hash64`` takes one 64-bit seed. ``Hash64WithSeeds`` takes a
  ``(seed0, seed1)`` pair. An unseeded ``Hash64.hash`` is not the same as
  seed 0.
- ``Hash128`` takes one 128-bit seed, laid out the same way as its digest.

``cityhash`` reports a 128-bit result as ``(first << 64) | second``, where
``first`` is CityHash's ``Uint128Low64`` word. ``Hasher128.finish()`` returns
that word, which is the *high* 64 bits of the integer.
"""

from __future__ import annotations

from typing import Any

from cityhash import (
    CityHash32,
    CityHash64,
    CityHash64WithSeed,
    CityHash64WithSeeds,
    CityHash128,
    CityHash128WithSeed,
)

from fasthash_sdk.core.buffering import BufferingHasher
from fasthash_sdk.core.hasher import ExtendedResult, OneShotHash
from fasthash_sdk.core.types import HashWidth, Seed, SeedShape


class Hash32(OneShotHash):
    name = "city32"
    block_size = 64
    width = HashWidth.W32
    seed_shape = SeedShape.NONE

    @classmethod
    def _hash(cls, data: memoryview, seed: Seed) -> int:
        return CityHash32(data.tobytes())


class Hash64(OneShotHash):
    name = "city64"
    block_size = 64
    width = HashWidth.W64
    seed_width = HashWidth.W64

    @classmethod
    def _hash(cls, data: memoryview, seed: Seed) -> int:
        if seed is None:
            return CityHash64(data.tobytes())
        return CityHash64WithSeed(data.tobytes(), seed)

    @classmethod
    def hash_with_seeds(cls, data: Any, seed0: int, seed1: int) -> int:
        return Hash64WithSeeds.hash_with_seed(data, (seed0, seed1))


class Hash64WithSeeds(OneShotHash):
    name = "city64_seeds"
    block_size = 64
    width = HashWidth.W64
    seed_shape = SeedShape.DUAL
    seed_width = HashWidth.W64

    @classmethod
    def _hash(cls, data: memoryview, seed: Seed) -> int:
        if seed is None:
            return CityHash64(data.tobytes())
        seed0, seed1 = seed  # type: ignore[misc]
        return CityHash64WithSeeds(data.tobytes(), seed0, seed1)


class Hash128(OneShotHash):
    name = "city128"
    block_size = 64
    width = HashWidth.W128
    seed_width = HashWidth.W128

    @classmethod
    def _hash(cls, data: memoryview, seed: Seed) -> int:
        if seed is None:
            return CityHash128(data.tobytes())
        return CityHash128WithSeed(data.tobytes(), seed)

    @classmethod
    def project(cls, value: int) -> int:
        return value >> 64


class Hasher32(BufferingHasher):
    algorithm = Hash32


class Hasher64(BufferingHasher):
    algorithm = Hash64


class Hasher64WithSeeds(BufferingHasher):
    algorithm = Hash64WithSeeds


class Hasher128(ExtendedResult, BufferingHasher):
    algorithm = Hash128


def hash32(data: Any) -> int:
    return Hash32.hash(data)


def hash64(data: Any) -> int:
    return Hash64.hash(data)


def hash64_with_seed(data: Any, seed: int) -> int:
    return Hash64.hash_with_seed(data, seed)


def hash64_with_seeds(data: Any, seed0: int, seed1: int) -> int:
    return Hash64.hash_with_seeds(data, seed0, seed1)


def hash128(data: Any) -> int:
    return Hash128.hash(data)


def hash128_with_seed(data: Any, seed: int) -> int:
    return Hash128.hash_with_seed(data, seed)
