"""Concrete hash families."""

from fasthash_sdk.algorithms import city, murmur3, xx, xxh3

__all__ = ["city", "murmur3", "xx", "xxh3"]
