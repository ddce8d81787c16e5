"""Precondition and configuration errors raised by the generation passes.

Every error derives from :class:`GenerationError` (itself a ``ValueError``)
so callers can catch the whole family at once. They are raised before a pass
writes anything the caller can observe.
"""

from __future__ import annotations

__all__ = [
    "GenerationError",
    "InvalidCellValueError",
    "InvalidDimensionError",
    "InvalidIterationCountError",
    "InvalidProbabilityError",
    "InvalidRadiusError",
    "InvalidRoomSizeError",
    "InvalidStepCountError",
    "InvalidThresholdError",
    "InvalidWalkCountError",
    "OutOfBoundsError",
]


class GenerationError(ValueError):
    """Base class for invalid generation inputs."""


class InvalidDimensionError(GenerationError):
    """Grid width or height is not a positive integer."""


class OutOfBoundsError(GenerationError, IndexError):
    """A coordinate lies outside ``[0, W) x [0, H)``."""


class InvalidCellValueError(GenerationError):
    """A cell value other than 0 or 1 was supplied."""


class InvalidRadiusError(GenerationError):
    """Cellular-automata radius below 1."""


class InvalidThresholdError(GenerationError):
    """Cellular-automata threshold outside ``[0, 1]``."""


class InvalidWalkCountError(GenerationError):
    """Negative number of walk phases."""


class InvalidStepCountError(GenerationError):
    """Negative number of steps per walk phase."""


class InvalidProbabilityError(GenerationError):
    """A configured probability or increment outside ``[0, 1]``."""


class InvalidRoomSizeError(GenerationError):
    """Maximum room width or height below the minimum room size."""


class InvalidIterationCountError(GenerationError):
    """Negative number of generation iterations."""
