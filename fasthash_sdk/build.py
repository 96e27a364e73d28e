"""Hasher factories bound to a seed."""

from __future__ import annotations

import random
from typing import Any, Generic, TypeVar

from fasthash_sdk.core.errors import SeedError
from fasthash_sdk.core.hasher import BaseHasher
from fasthash_sdk.core.types import Seed, SeedShape, check_seed

H = TypeVar("H", bound=BaseHasher)


class HasherBuilder(Generic[H]):
    """Builds hashers of one class, all bound to the same seed."""

    def __init__(self, hasher_cls: type[H], seed: Seed = None) -> None:
        self.hasher_cls = hasher_cls
        alg = hasher_cls.algorithm
        self.seed = check_seed(alg.seed_shape, alg.seed_width, seed)

    def build_hasher(self) -> H:
        return self.hasher_cls(self.seed)

    def hash_one(self, data: Any) -> int:
        hasher = self.build_hasher()
        hasher.write(data)
        return hasher.finish()

    def hash_str(self, value: str) -> int:
        hasher = self.build_hasher()
        hasher.write_str(value)
        return hasher.finish()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hasher_cls.__name__}, seed={self.seed!r})"


class RandomState(HasherBuilder[H]):
    """A ``HasherBuilder`` whose seed is drawn from the OS random source.

    Each instance is its own hash family, so keys that collide under one
    ``RandomState`` are unlikely to collide under another.
    """

    _rng = random.SystemRandom()

    def __init__(self, hasher_cls: type[H]) -> None:
        super().__init__(hasher_cls, self._draw_seed(hasher_cls))

    @classmethod
    def _draw_seed(cls, hasher_cls: type[BaseHasher]) -> Seed:
        alg = hasher_cls.algorithm
        if alg.seed_shape is SeedShape.NONE or alg.seed_width is None:
            raise SeedError(f"{alg.name} does not accept a seed")
        bits = alg.seed_width.value
        if alg.seed_shape is SeedShape.DUAL:
            return (cls._rng.getrandbits(bits), cls._rng.getrandbits(bits))
        return cls._rng.getrandbits(bits)
