"""Digest widths, seed shapes and input coercion."""

from __future__ import annotations

from enum import Enum

from fasthash_sdk.core.errors import SeedError


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class HashWidth(int, Enum):
    W32 = 32
    W64 = 64
    W128 = 128

    @property
    def mask(self) -> int:
        return (1 << self.value) - 1

    @property
    def nbytes(self) -> int:
        return self.value // 8


class SeedShape(str, Enum):
    NONE = "none"
    SINGLE = "single"
    DUAL = "dual"


MASK32 = HashWidth.W32.mask
MASK64 = HashWidth.W64.mask
MASK128 = HashWidth.W128.mask

Seed = int | tuple[int, int] | None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def as_buffer(data: object) -> memoryview:
    """Return a read-only, C-contiguous byte view of ``data``.

    Contiguous buffers are viewed without copying. Strided views are copied
    into a flat buffer.
    """
    if isinstance(data, str):
        raise TypeError("Strings must be encoded before hashing")
    try:
        view = memoryview(data)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(
            f"object supporting the buffer API required, not {type(data).__name__}"
        ) from None
    if not view.c_contiguous:
        view = memoryview(view.tobytes())
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view.toreadonly()


def _check_seed_value(value: object, width: HashWidth) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SeedError(f"seed must be an int, not {type(value).__name__}")
    if value < 0 or value > width.mask:
        raise SeedError(f"seed {value} does not fit in {width.value} bits")
    return value


def check_seed(shape: SeedShape, width: HashWidth | None, seed: object) -> Seed:
    """Validate ``seed`` against an algorithm's seed shape and width.

    ``None`` is always accepted and selects the unseeded entry point.
    """
    if seed is None:
        return None
    if shape is SeedShape.NONE or width is None:
        raise SeedError("algorithm does not accept a seed")
    if shape is SeedShape.SINGLE:
        return _check_seed_value(seed, width)
    if not isinstance(seed, tuple) or len(seed) != 2:
        raise SeedError("seed must be a (seed0, seed1) pair")
    return (_check_seed_value(seed[0], width), _check_seed_value(seed[1], width))


def to_bytes(value: int, width: HashWidth) -> bytes:
    """Big-endian encoding of a digest, the canonical form used by ``xxhash``."""
    return value.to_bytes(width.nbytes, "big")
