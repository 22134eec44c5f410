class NetworkError(Exception):
    """Base class for every error raised by the engine."""


class AllocationFailure(NetworkError, MemoryError):
    pass


class DimensionMismatch(NetworkError, ValueError):
    pass


class InvalidRange(NetworkError, ValueError):
    pass
