"""Exception hierarchy for the fasthash SDK."""


class FastHashError(Exception):
    """SDK base exception."""


class SeedError(FastHashError):
    """Seed has the wrong shape, sign or width for the algorithm."""


class ContextAllocationError(FastHashError):
    """Native hash state could not be created."""


class StreamReadError(FastHashError):
    """Byte source failed while being consumed by a hasher."""

    def __init__(self, message: str, bytes_consumed: int = 0) -> None:
        super().__init__(message)
        self.bytes_consumed = bytes_consumed
