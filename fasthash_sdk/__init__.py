"""fasthash SDK: one interface over non-cryptographic hash functions.

    >>> from fasthash_sdk import xx
    >>> h = xx.Hasher64()
    >>> h.write(b"hello")
    >>> h.write(b"world")
    >>> h.finish() == xx.hash64(b"helloworld")
    True
"""

import logging

from fasthash_sdk.algorithms import city, murmur3, xx, xxh3
from fasthash_sdk.build import HasherBuilder, RandomState
from fasthash_sdk.config import DEFAULT_CHUNK_SIZE, HashingConfig, StreamConfig
from fasthash_sdk.core.buffering import BufferingHasher
from fasthash_sdk.core.errors import (
    ContextAllocationError,
    FastHashError,
    SeedError,
    StreamReadError,
)
from fasthash_sdk.core.hasher import (
    BaseHasher,
    FastHash,
    FastHasher,
    HasherExt,
    OneShotHash,
    StreamHasher,
)
from fasthash_sdk.core.native import NativeStreamingHasher
from fasthash_sdk.core.stream import consume_chunks, consume_stream
from fasthash_sdk.core.types import HashWidth, SeedShape

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "BaseHasher",
    "BufferingHasher",
    "ContextAllocationError",
    "FastHash",
    "FastHashError",
    "FastHasher",
    "HashWidth",
    "HasherBuilder",
    "HasherExt",
    "HashingConfig",
    "NativeStreamingHasher",
    "OneShotHash",
    "RandomState",
    "SeedError",
    "SeedShape",
    "StreamConfig",
    "StreamHasher",
    "StreamReadError",
    "city",
    "consume_chunks",
    "consume_stream",
    "xx",
    "murmur3",
    "xxh3",
]
