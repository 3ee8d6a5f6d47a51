"""
Cell
====

A square cell one degree of latitude and longitude in a flat-earth world,
anchored by its bottom-right corner. Six stacked altitude planes define
the wind at 0, 3000, 6000, 9000, 12000 and 15000 feet; altitudes outside
this range clamp to the limits.
"""

import io
from pathlib import Path
from typing import TextIO, Union

from .datatypes import Coordinate2D, Coordinate3D, Velocity
from .grid import ALTITUDES, CELL_SIZE_HORIZONTAL, CELL_SIZE_VERTICAL, Grid
from .interpolation import InterpolationEngine
from .loader import CellLoader


class Cell:
    """
    Wind lookup for one cell.

    Built once from a definition, then queried any number of times. The
    underlying grid is never modified, so a cell can be shared between
    threads.
    """

    def __init__(self, grid: Grid, source_name: str = '<memory>'):
        self._grid = grid
        self._source_name = source_name

    @classmethod
    def load(cls, source: Union[str, Path, TextIO]) -> 'Cell':
        """
        Load a cell from a definition file path or an open text stream.

        Raises:
            FormatError: If the definition is malformed
            DecodeError: If it contains an unknown encoding character
        """
        if isinstance(source, (str, Path)):
            return cls(CellLoader.load_path(source), str(source))

        source_name = str(getattr(source, 'name', '<stream>'))
        return cls(CellLoader.load(source, source_name=source_name), source_name)

    @classmethod
    def from_text(cls, text: str, source_name: str = '<text>') -> 'Cell':
        """Load a cell from the definition text itself."""
        return cls(CellLoader.load(io.StringIO(text), source_name=source_name), source_name)

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def anchor(self) -> Coordinate2D:
        """Bottom-right corner; minutes and seconds are always zero."""
        return self._grid.anchor

    @property
    def source_name(self) -> str:
        """Where the definition came from, usually its file path."""
        return self._source_name

    def interpolate(self, coordinate: Coordinate3D) -> Velocity:
        """
        Estimate the wind velocity at a coordinate.

        Raises:
            UnsupportedCoordinateError: If the coordinate is not on this cell
        """
        return InterpolationEngine.interpolate(self._grid, coordinate)

    def dump(self) -> str:
        """
        Tabular representation of the definition.

        Each sample is ``direction:speed`` in navigational degrees and knots,
        one block of rows per altitude plane.
        """
        lines = [self._source_name, str(self.anchor), '']

        for plane in range(CELL_SIZE_VERTICAL):
            lines.append(f"ALTITUDE {ALTITUDES[plane]}")

            for row in range(CELL_SIZE_HORIZONTAL):
                samples = []
                for column in range(CELL_SIZE_HORIZONTAL):
                    velocity = self._grid[row, column, plane]
                    samples.append(f"{velocity.direction:03.0f}:{velocity.speed:02.0f}")
                lines.append(' '.join(samples))

            lines.append('')

        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"Cell(anchor={self.anchor}, source={self._source_name!r})"
