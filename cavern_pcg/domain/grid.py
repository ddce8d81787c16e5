"""Rectangular 0/1 occupancy grid shared by every generation pass.

Cells are stored row-major in a ``(height, width)`` ``uint8`` array and
addressed as ``(x, y)`` with ``0 <= x < width`` and ``0 <= y < height``.
Passes never mutate the grid they read; they :meth:`Grid.copy` it and write
into the copy.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from random import Random

import numpy as np

from cavern_pcg.config.constants import EMPTY, OCCUPIED
from cavern_pcg.config.types import validate_dimensions, validate_probability
from cavern_pcg.errors import InvalidCellValueError, InvalidDimensionError, OutOfBoundsError

CELL_DTYPE = np.uint8


def _check_cell_value(value: object) -> int:
    if isinstance(value, bool) or value not in (EMPTY, OCCUPIED):
        raise InvalidCellValueError(f"cell value must be 0 or 1, got {value!r}")
    return int(value)  # type: ignore[call-overload]


class Grid:
    """Occupancy grid with bounds-checked accessors."""

    __slots__ = ("_cells",)

    def __init__(self, cells: np.ndarray) -> None:
        if cells.ndim != 2:
            raise InvalidDimensionError(f"grid array must be 2-D, got shape {cells.shape}")
        height, width = cells.shape
        validate_dimensions(width, height)
        if cells.size and not np.isin(cells, (EMPTY, OCCUPIED)).all():
            raise InvalidCellValueError("grid array may only contain 0 and 1")
        self._cells = cells.astype(CELL_DTYPE, copy=False)

    # -- construction -------------------------------------------------------

    @classmethod
    def create(cls, width: int, height: int, fill: int = EMPTY) -> Grid:
        """Return a ``width`` x ``height`` grid with every cell set to ``fill``."""
        validate_dimensions(width, height)
        value = _check_cell_value(fill)
        return cls(np.full((height, width), value, dtype=CELL_DTYPE))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Grid:
        """Build a grid from nested row lists (``rows[y][x]``)."""
        if not rows or not rows[0]:
            raise InvalidDimensionError("rows must be a non-empty list of non-empty rows")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidDimensionError("all rows must have the same length")
        for row in rows:
            for value in row:
                _check_cell_value(value)
        return cls(np.array(rows, dtype=CELL_DTYPE))

    @classmethod
    def from_array(cls, array: np.ndarray) -> Grid:
        """Build a grid from a ``(height, width)`` array. The array is copied.

        Values are checked before the cast to ``uint8``, so fractional or
        out-of-range entries are rejected rather than truncated.
        """
        source = np.asarray(array)
        if source.size and not np.isin(source, (EMPTY, OCCUPIED)).all():
            raise InvalidCellValueError("grid array may only contain 0 and 1")
        return cls(source.astype(CELL_DTYPE))

    @classmethod
    def random(cls, width: int, height: int, density: float, rng: Random) -> Grid:
        """Seed-noise grid: each cell is occupied with probability ``density``.

        Cells are drawn row by row from ``rng`` so a seeded generator always
        reproduces the same grid.
        """
        validate_dimensions(width, height)
        validate_probability(density, "density")
        rows = [
            [OCCUPIED if rng.random() < density else EMPTY for _ in range(width)]
            for _ in range(height)
        ]
        return cls(np.array(rows, dtype=CELL_DTYPE))

    # -- shape --------------------------------------------------------------

    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    @property
    def shape(self) -> tuple[int, int]:
        """``(width, height)``."""
        return (self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    # -- access -------------------------------------------------------------

    def _require_in_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(f"({x}, {y}) outside {self.width}x{self.height} grid")

    def get(self, x: int, y: int) -> int:
        self._require_in_bounds(x, y)
        return int(self._cells[y, x])

    def set(self, x: int, y: int, value: int) -> None:
        """Write one cell of *this* grid.

        Callers that must not disturb a grid another pass is reading should
        :meth:`copy` first.
        """
        self._require_in_bounds(x, y)
        self._cells[y, x] = _check_cell_value(value)

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, value: int = OCCUPIED) -> None:
        """Set every cell with ``x0 <= x <= x1`` and ``y0 <= y <= y1``.

        Bounds must already be clipped to the grid.
        """
        self._require_in_bounds(x0, y0)
        self._require_in_bounds(x1, y1)
        self._cells[y0 : y1 + 1, x0 : x1 + 1] = _check_cell_value(value)

    def copy(self) -> Grid:
        return Grid(self._cells.copy())

    def to_array(self) -> np.ndarray:
        """Return a copy of the underlying ``(height, width)`` array."""
        return self._cells.copy()

    def view(self) -> np.ndarray:
        """Read-only view of the underlying array, for vectorized readers."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def rows(self) -> list[list[int]]:
        return [[int(v) for v in row] for row in self._cells]

    def occupied_count(self) -> int:
        return int(self._cells.sum(dtype=np.int64))

    def occupied_cells(self) -> Iterable[tuple[int, int]]:
        """Yield ``(x, y)`` for every occupied cell in row-major order."""
        ys, xs = np.nonzero(self._cells)
        for x, y in zip(xs.tolist(), ys.tolist(), strict=True):
            yield (x, y)

    # -- dunder -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells.shape == other._cells.shape and bool(
            np.array_equal(self._cells, other._cells)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, occupied={self.occupied_count()})"
