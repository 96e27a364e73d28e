"""Runtime configuration models."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_CHUNK_SIZE = 64 * 1024


@dataclass
class StreamConfig:
    chunk_size: int = DEFAULT_CHUNK_SIZE


@dataclass
class HashingConfig:
    stream: StreamConfig = field(default_factory=StreamConfig)
