"""
Basic hashing example
=====================

Shows the same code working across hash families:
- one-shot hashing, seeded and unseeded
- incremental hashing with interleaved queries
- clone-then-diverge from a common prefix
- full 128-bit results next to their 64-bit projection

How to run:
    python examples/basic_hashing.py
"""

from fasthash_sdk import RandomState, city, murmur3, xx, xxh3
from fasthash_sdk.core.hasher import BaseHasher


# ---------------------------------------------------------------------------
# 1. One-shot functions
# ---------------------------------------------------------------------------

def one_shot() -> None:
    print("xx32      ", xx.hash32(b"hello"))
    print("xx64 seed ", xx.hash64_with_seed(b"hello", 123))
    print("city64 x2 ", city.hash64_with_seeds(b"hello", 123, 456))
    print("xxh3 128  ", hex(xxh3.hash128(b"hello")))


# ---------------------------------------------------------------------------
# 2. Algorithm-agnostic incremental hashing
# ---------------------------------------------------------------------------

def fingerprint(hasher: BaseHasher, parts: list[bytes]) -> int:
    for part in parts:
        hasher.write(part)
    return hasher.finish()


def incremental() -> None:
    parts = [b"hello", b"world"]
    for hasher in (xx.Hasher64(), xxh3.Hasher128(7), murmur3.Hasher32(), city.Hasher64()):
        print(f"{hasher.name:<16}", fingerprint(hasher, parts))


# ---------------------------------------------------------------------------
# 3. Clone, then diverge
# ---------------------------------------------------------------------------

def clone_and_diverge() -> None:
    base = xx.Hasher64()
    base.write(b"GET /api/v1/")
    users = base.copy()
    orders = base.copy()
    users.write(b"users")
    orders.write(b"orders")
    print("users ", users.hexdigest())
    print("orders", orders.hexdigest())


# ---------------------------------------------------------------------------
# 4. Wide results
# ---------------------------------------------------------------------------

def wide_results() -> None:
    for hasher in (xxh3.Hasher128(), murmur3.Hasher128(), city.Hasher128()):
        hasher.write(b"helloworld")
        print(f"{hasher.name:<16} full={hasher.finish_ext():#034x} finish={hasher.finish():#018x}")


# ---------------------------------------------------------------------------
# 5. Per-process hash family
# ---------------------------------------------------------------------------

def random_state() -> None:
    state = RandomState(xxh3.Hasher64)
    buckets = [state.hash_str(key) % 8 for key in ("alpha", "beta", "gamma")]
    print("buckets", buckets)


if __name__ == "__main__":
    one_shot()
    incremental()
    clone_and_diverge()
    wide_results()
    random_state()
