"""Error taxonomy for shape, index and slice failures."""


class NDCoreError(Exception):
    """Base class for every error raised by ndcore."""


class RankMismatchError(NDCoreError, ValueError):
    """Number of supplied coordinates or slices does not match the target rank."""


class IndexOutOfBoundsError(NDCoreError, IndexError):
    """A coordinate, flat offset or axis position lies outside its extent."""


class SliceOutOfBoundsError(NDCoreError, IndexError):
    """A slice's begin/end exceeds its axis extent, or begin >= end."""


class InvalidStrideError(NDCoreError, ValueError):
    """A slice stride is not a positive integer."""


class CapacityExceededError(NDCoreError, ValueError):
    """A dimension buffer would grow beyond its fixed maximum rank."""


class InvalidDimensionError(NDCoreError, ValueError):
    """A dimension value is negative or not an integer, or a shape has no axes."""
