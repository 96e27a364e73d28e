"""Capability interfaces and the two incremental hashing strategies."""

from fasthash_sdk.core.buffering import BufferingHasher
from fasthash_sdk.core.errors import (
    ContextAllocationError,
    FastHashError,
    SeedError,
    StreamReadError,
)
from fasthash_sdk.core.hasher import (
    KEEP_SEED,
    BaseHasher,
    ExtendedResult,
    FastHash,
    FastHasher,
    HasherExt,
    OneShotHash,
    StreamHasher,
)
from fasthash_sdk.core.native import NativeState, NativeStreamingHasher
from fasthash_sdk.core.stream import consume_chunks, consume_stream
from fasthash_sdk.core.types import HashWidth, Seed, SeedShape

__all__ = [
    "KEEP_SEED",
    "BaseHasher",
    "BufferingHasher",
    "ContextAllocationError",
    "ExtendedResult",
    "FastHash",
    "FastHashError",
    "FastHasher",
    "HashWidth",
    "HasherExt",
    "NativeState",
    "NativeStreamingHasher",
    "OneShotHash",
    "Seed",
    "SeedError",
    "SeedShape",
    "StreamHasher",
    "StreamReadError",
    "consume_chunks",
    "consume_stream",
]
