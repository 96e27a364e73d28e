"""Incremental hashing for algorithms that only have a one-shot entry point."""

from __future__ import annotations

from typing import Any

from fasthash_sdk.core.hasher import KEEP_SEED, BaseHasher
from fasthash_sdk.core.types import Seed, as_buffer


class BufferingHasher(BaseHasher):
    """Accumulates every written byte and re-hashes the whole buffer per query.

    Each query costs O(bytes written) and the buffer grows without bound, so
    this is only used where the native library offers no streaming state.
    Subclasses set ``algorithm`` to a ``OneShotHash`` class.
    """

    def __init__(self, seed: Seed = None) -> None:
        self._bind_seed(seed)
        self._buffer = bytearray()

    def write(self, data: Any) -> None:
        self._buffer += as_buffer(data)

    def intdigest(self) -> int:
        if self._seed is None:
            return self.algorithm.hash(self._buffer)
        return self.algorithm.hash_with_seed(self._buffer, self._seed)

    def reset(self, seed: Seed = KEEP_SEED) -> None:
        if seed is not KEEP_SEED:
            self._bind_seed(seed)
        self._buffer = bytearray()

    def copy(self) -> BufferingHasher:
        clone = type(self).__new__(type(self))
        clone._seed = self._seed
        clone._buffer = bytearray(self._buffer)
        return clone

    @property
    def buffered(self) -> int:
        """Number of bytes held for the next query."""
        return len(self._buffer)
