"""
Grid
====

Fixed-size three-dimensional array of wind samples for one cell.

Rows are latitude and columns are longitude, both on six-minute intervals
offset from the anchor; planes are the stacked altitude layers. Samples
live in two flat read-only arrays addressed row-major by
``(row * CELL_SIZE_HORIZONTAL + column) * CELL_SIZE_VERTICAL + plane``.
"""

from typing import Tuple

import numpy as np

from .datatypes import CALM, Coordinate2D, Directional, Velocity

# Horizontal size of the square cell: 11 samples cover 60 minutes
CELL_SIZE_HORIZONTAL = 11

# Vertical size of the cell: one plane per altitude layer
CELL_SIZE_VERTICAL = 6

# Span in minutes of latitude or longitude between two samples
MINUTES_PER_SUBCELL = 60 // (CELL_SIZE_HORIZONTAL - 1)

# Altitude planes (feet)
ALTITUDES = (0, 3000, 6000, 9000, 12000, 15000)

GRID_SIZE = CELL_SIZE_HORIZONTAL * CELL_SIZE_HORIZONTAL * CELL_SIZE_VERTICAL

assert len(ALTITUDES) == CELL_SIZE_VERTICAL


def flat_index(row: int, column: int, plane: int) -> int:
    """Offset of a sample in the flat storage."""
    assert 0 <= row < CELL_SIZE_HORIZONTAL, row
    assert 0 <= column < CELL_SIZE_HORIZONTAL, column
    assert 0 <= plane < CELL_SIZE_VERTICAL, plane
    return (row * CELL_SIZE_HORIZONTAL + column) * CELL_SIZE_VERTICAL + plane


class Grid:
    """
    Immutable wind samples of a cell plus its anchor.

    The anchor is the bottom-right corner of the cell; its minutes and
    seconds are always zero.
    """

    def __init__(self, anchor: Coordinate2D, directions: np.ndarray, speeds: np.ndarray):
        """
        Initialize grid.

        Args:
            anchor: Bottom-right corner of the cell
            directions: Flat sample directions (degrees), GRID_SIZE long
            speeds: Flat sample speeds (knots), GRID_SIZE long
        """
        if directions.shape != (GRID_SIZE,) or speeds.shape != (GRID_SIZE,):
            raise ValueError(f"grid needs {GRID_SIZE} samples, got "
                             f"{directions.shape} directions and {speeds.shape} speeds")
        if anchor.latitude.minutes_and_seconds or anchor.longitude.minutes_and_seconds:
            raise ValueError(f"anchor {anchor} must be a whole degree")

        self._anchor = anchor

        self._directions = np.array(directions, dtype=np.float64)
        self._speeds = np.array(speeds, dtype=np.float64)
        self._directions.flags.writeable = False
        self._speeds.flags.writeable = False

    @classmethod
    def calm(cls, anchor: Coordinate2D) -> 'Grid':
        """A grid with no wind anywhere."""
        return cls(anchor, np.zeros(GRID_SIZE), np.zeros(GRID_SIZE))

    @property
    def anchor(self) -> Coordinate2D:
        return self._anchor

    @property
    def directions(self) -> np.ndarray:
        """Read-only flat direction samples."""
        return self._directions

    @property
    def speeds(self) -> np.ndarray:
        """Read-only flat speed samples."""
        return self._speeds

    def velocity_at(self, row: int, column: int, plane: int) -> Velocity:
        """Sample at a grid index."""
        offset = flat_index(row, column, plane)

        speed = float(self._speeds[offset])
        if speed == 0:
            return CALM
        return Directional(float(self._directions[offset]), speed)

    def __getitem__(self, index: Tuple[int, int, int]) -> Velocity:
        return self.velocity_at(*index)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self._anchor == other._anchor
                and np.array_equal(self._directions, other._directions)
                and np.array_equal(self._speeds, other._speeds))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Grid(anchor={self._anchor}, winds={int(np.count_nonzero(self._speeds))})"
