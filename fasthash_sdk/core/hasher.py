"""Hashing capabilities: one-shot hash functions and incremental hashers.

``FastHash`` is the minimal contract every algorithm satisfies: hash a complete
buffer, optionally seeded. ``FastHasher`` is the incremental contract: write
chunks, query the digest at any point, reset, clone. ``HasherExt`` and
``StreamHasher`` extend it with full-width results and chunked consumption of
byte sources.

``OneShotHash`` and ``BaseHasher`` are the shared base classes the concrete
algorithms derive from.
"""

from __future__ import annotations

import abc
from typing import Any, ClassVar, Protocol

from fasthash_sdk.config import StreamConfig
from fasthash_sdk.core.stream import consume_stream
from fasthash_sdk.core.types import (
    MASK64,
    HashWidth,
    Seed,
    SeedShape,
    as_buffer,
    check_seed,
    to_bytes,
)

KEEP_SEED: Any = object()


# ---------------------------------------------------------------------------
# Capability protocols
# ---------------------------------------------------------------------------

class FastHash(Protocol):
    width: ClassVar[HashWidth]
    seed_shape: ClassVar[SeedShape]
    seed_width: ClassVar[HashWidth | None]

    @classmethod
    def hash(cls, data: Any) -> int: ...

    @classmethod
    def hash_with_seed(cls, data: Any, seed: Seed) -> int: ...


class FastHasher(Protocol):
    def write(self, data: Any) -> None: ...

    def finish(self) -> int: ...

    def intdigest(self) -> int: ...

    def reset(self, seed: Seed = KEEP_SEED) -> None: ...

    def copy(self) -> FastHasher: ...


class HasherExt(FastHasher, Protocol):
    def finish_ext(self) -> int: ...


class StreamHasher(FastHasher, Protocol):
    def write_stream(self, source: Any, chunk_size: int | None = None) -> int: ...


# ---------------------------------------------------------------------------
# One-shot base
# ---------------------------------------------------------------------------

class OneShotHash(abc.ABC):
    """Stateless hash function family over complete byte buffers."""

    name: ClassVar[str]
    width: ClassVar[HashWidth]
    block_size: ClassVar[int]
    seed_shape: ClassVar[SeedShape] = SeedShape.SINGLE
    seed_width: ClassVar[HashWidth | None] = None

    @classmethod
    @abc.abstractmethod
    def _hash(cls, data: memoryview, seed: Seed) -> int:
        """Call the native entry point; ``seed`` is ``None`` for the unseeded one."""

    @classmethod
    def hash(cls, data: Any) -> int:
        return cls._hash(as_buffer(data), None)

    @classmethod
    def hash_with_seed(cls, data: Any, seed: Seed) -> int:
        seed = check_seed(cls.seed_shape, cls.seed_width, seed)
        return cls._hash(as_buffer(data), seed)

    @classmethod
    def project(cls, value: int) -> int:
        """Narrow a digest to the 64-bit result returned by ``finish()``.

        Digests of 64 bits or fewer pass through unchanged. Wide algorithms
        override this with their own documented rule.
        """
        return value & MASK64


# ---------------------------------------------------------------------------
# Incremental base
# ---------------------------------------------------------------------------

class BaseHasher(abc.ABC):
    """Shared surface of every incremental hasher.

    Subclasses own the accumulated state and implement ``write``,
    ``intdigest``, ``reset`` and ``copy``. Everything else (``hashlib``-style
    accessors, typed writes, stream consumption) is derived from those.
    """

    algorithm: ClassVar[type[OneShotHash]]

    _seed: Seed

    def _bind_seed(self, seed: Seed) -> Seed:
        alg = self.algorithm
        self._seed = check_seed(alg.seed_shape, alg.seed_width, seed)
        return self._seed

    # --- state machine ---

    @abc.abstractmethod
    def write(self, data: Any) -> None: ...

    @abc.abstractmethod
    def intdigest(self) -> int:
        """Full-width digest of everything written so far."""

    @abc.abstractmethod
    def reset(self, seed: Seed = KEEP_SEED) -> None: ...

    @abc.abstractmethod
    def copy(self) -> BaseHasher: ...

    def finish(self) -> int:
        return self.algorithm.project(self.intdigest())

    # --- hashlib protocol ---

    @property
    def name(self) -> str:
        return self.algorithm.name

    @property
    def width(self) -> HashWidth:
        return self.algorithm.width

    @property
    def digest_size(self) -> int:
        return self.algorithm.width.nbytes

    @property
    def block_size(self) -> int:
        return self.algorithm.block_size

    @property
    def seed(self) -> Seed:
        return self._seed

    def update(self, data: Any) -> None:
        self.write(data)

    def digest(self) -> bytes:
        return to_bytes(self.intdigest(), self.algorithm.width)

    def hexdigest(self) -> str:
        return self.digest().hex()

    # --- typed writes (little-endian, fixed width) ---

    def _write_uint(self, value: int, nbytes: int) -> None:
        self.write(value.to_bytes(nbytes, "little", signed=False))

    def write_u8(self, value: int) -> None:
        self._write_uint(value, 1)

    def write_u16(self, value: int) -> None:
        self._write_uint(value, 2)

    def write_u32(self, value: int) -> None:
        self._write_uint(value, 4)

    def write_u64(self, value: int) -> None:
        self._write_uint(value, 8)

    def write_u128(self, value: int) -> None:
        self._write_uint(value, 16)

    write_usize = write_u64

    def write_str(self, value: str) -> None:
        # 0xff never occurs in UTF-8, so it delimits adjacent strings
        self.write(value.encode("utf-8"))
        self.write(b"\xff")

    # --- streams ---

    def write_stream(self, source: Any, chunk_size: int | None = None) -> int:
        if chunk_size is None:
            return consume_stream(self, source)
        return consume_stream(self, source, StreamConfig(chunk_size=chunk_size))

    # --- cloning ---

    def __copy__(self) -> BaseHasher:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> BaseHasher:
        return self.copy()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} seed={self._seed!r}>"


class ExtendedResult:
    """Mixin for hashers whose digest is wider than 64 bits."""

    def finish_ext(self) -> int:
        return self.intdigest()  # type: ignore[attr-defined]
