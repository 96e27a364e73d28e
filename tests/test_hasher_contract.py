"""Contract tests for incremental hashers.

Every hasher class, under both strategies and every seed shape, must pass
these tests.
"""

from __future__ import annotations

import copy
import random

import pytest

from fasthash_sdk.core.hasher import KEEP_SEED
from fasthash_sdk.core.types import MASK64


def test_hello_world_matches_one_shot(variant):
    h = variant.new()
    h.write(b"hello")
    assert h.intdigest() == variant.one_shot(b"hello")
    h.write(b"world")
    assert h.intdigest() == variant.one_shot(b"helloworld")


def test_finish_is_projection_of_full_digest(variant):
    h = variant.new()
    h.write(b"helloworld")
    full = variant.one_shot(b"helloworld")
    alg = variant.hasher_cls.algorithm
    assert h.finish() == alg.project(full)
    assert 0 <= h.finish() <= MASK64


def test_split_at_every_boundary(variant):
    data = bytes(range(48)) + b"the quick brown fox"
    expected = variant.one_shot(data)
    for i in range(len(data) + 1):
        h = variant.new()
        h.write(data[:i])
        h.write(data[i:])
        assert h.intdigest() == expected, f"split at {i}"


def test_random_splits_of_large_input(variant):
    rng = random.Random(1234)
    data = rng.randbytes(20000)
    expected = variant.one_shot(data)
    for _ in range(5):
        h = variant.new()
        pos = 0
        while pos < len(data):
            step = rng.randint(0, 700)
            h.write(data[pos:pos + step])
            pos += step
        assert h.intdigest() == expected


def test_query_is_non_destructive(variant):
    h = variant.new()
    h.write(b"hello")
    first = h.intdigest()
    assert h.intdigest() == first
    assert h.finish() == h.finish()
    h.write(b"!")
    assert h.intdigest() != first


def test_interleaved_queries_and_writes(variant):
    h = variant.new()
    for part in (b"a", b"bc", b"", b"def"):
        h.write(part)
        h.intdigest()
    assert h.intdigest() == variant.one_shot(b"abcdef")


def test_empty_input(variant):
    h = variant.new()
    assert h.intdigest() == variant.one_shot(b"")
    h.write(b"")
    assert h.intdigest() == variant.one_shot(b"")


def test_reset_behaves_like_fresh(variant):
    h = variant.new()
    h.write(b"some earlier history")
    h.reset()
    assert h.seed == variant.seed
    h.write(b"hello")
    assert h.intdigest() == variant.one_shot(b"hello")


def test_reset_with_same_seed(variant):
    h = variant.new()
    h.write(b"history")
    h.reset(variant.seed)
    h.write(b"helloworld")
    assert h.intdigest() == variant.one_shot(b"helloworld")


def test_reset_keep_seed_sentinel(variant):
    h = variant.new()
    h.write(b"history")
    h.reset(KEEP_SEED)
    assert h.intdigest() == variant.one_shot(b"")


def test_clone_independence(variant):
    h = variant.new()
    h.write(b"common prefix ")
    clone = h.copy()
    h.write(b"left")
    clone.write(b"right")
    assert h.intdigest() == variant.one_shot(b"common prefix left")
    assert clone.intdigest() == variant.one_shot(b"common prefix right")


def test_copy_module_produces_independent_clones(variant):
    h = variant.new()
    h.write(b"prefix")
    shallow = copy.copy(h)
    deep = copy.deepcopy(h)
    h.write(b"-a")
    shallow.write(b"-b")
    assert deep.intdigest() == variant.one_shot(b"prefix")
    assert shallow.intdigest() == variant.one_shot(b"prefix-b")
    assert h.intdigest() == variant.one_shot(b"prefix-a")


def test_hashlib_surface(variant):
    h = variant.new()
    h.update(b"hello")
    width = variant.hasher_cls.algorithm.width
    assert h.digest_size == width.nbytes
    assert len(h.digest()) == width.nbytes
    assert int.from_bytes(h.digest(), "big") == h.intdigest()
    assert h.hexdigest() == h.digest().hex()
    assert h.name == variant.hasher_cls.algorithm.name


def test_write_rejects_str(variant):
    h = variant.new()
    with pytest.raises(TypeError):
        h.write("hello")


def test_wide_hashers_expose_finish_ext(variant):
    h = variant.new()
    h.write(b"helloworld")
    if variant.hasher_cls.algorithm.width.value > 64:
        assert h.finish_ext() == variant.one_shot(b"helloworld")
    else:
        assert not hasattr(h, "finish_ext")


def test_block_size_is_internal_block_not_digest(variant):
    h = variant.new()
    assert h.block_size == variant.hasher_cls.algorithm.block_size
    assert h.block_size > 0
    assert h.block_size % 4 == 0


def test_non_contiguous_view_hashes_like_its_bytes(variant):
    strided = memoryview(b"hheelllloowwoorrlldd")[::2]
    h = variant.new()
    h.write(strided)
    assert h.intdigest() == variant.one_shot(b"helloworld")
    assert variant.one_shot(strided) == variant.one_shot(b"helloworld")
