"""Incremental hashing backed by a native streaming state object."""

from __future__ import annotations

import abc
import logging
from typing import Any, ClassVar, Protocol

from fasthash_sdk.core.errors import ContextAllocationError
from fasthash_sdk.core.hasher import KEEP_SEED, BaseHasher
from fasthash_sdk.core.types import Seed, as_buffer, check_seed

logger = logging.getLogger(__name__)


class NativeState(Protocol):
    """What a native library's streaming object must provide.

    ``reset`` is only called when the hasher class sets ``native_reset``.
    """

    def update(self, data: Any) -> None: ...

    def copy(self) -> NativeState: ...


class NativeStreamingHasher(BaseHasher):
    """Owns one native streaming state for its whole lifetime.

    The state is private: it is created in ``__init__``, replaced only by
    ``reset`` and freed by the library when the hasher is collected. Clones
    duplicate it through the library's own ``copy()``.
    """

    native_reset: ClassVar[bool] = True

    def __init__(self, seed: Seed = None) -> None:
        self._bind_seed(seed)
        self._state = self._acquire(self._seed)

    @classmethod
    @abc.abstractmethod
    def _create_state(cls, seed: Seed) -> NativeState: ...

    @classmethod
    @abc.abstractmethod
    def _query(cls, state: Any) -> int:
        """Non-destructive digest of ``state``."""

    @classmethod
    def _acquire(cls, seed: Seed) -> NativeState:
        try:
            return cls._create_state(seed)
        except (MemoryError, SystemError) as exc:
            logger.warning("Failed to allocate %s state: %s", cls.__name__, exc)
            raise ContextAllocationError(
                f"could not allocate {cls.algorithm.name} state"
            ) from exc

    def write(self, data: Any) -> None:
        view = as_buffer(data)
        if view.nbytes:
            self._state.update(view)

    def intdigest(self) -> int:
        return self._query(self._state)

    def reset(self, seed: Seed = KEEP_SEED) -> None:
        if seed is KEEP_SEED:
            seed = self._seed
        else:
            alg = self.algorithm
            seed = check_seed(alg.seed_shape, alg.seed_width, seed)
        if self.native_reset and seed == self._seed:
            self._state.reset()  # type: ignore[attr-defined]
            return
        logger.debug(
            "Recreating %s state (seed %r -> %r)", type(self).__name__, self._seed, seed
        )
        self._state = self._acquire(seed)
        self._seed = seed

    def copy(self) -> NativeStreamingHasher:
        clone = type(self).__new__(type(self))
        clone._seed = self._seed
        clone._state = self._state.copy()
        return clone
