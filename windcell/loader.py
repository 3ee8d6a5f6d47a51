"""
Cell Loader
===========

Parses a cell definition into a Grid.

The definition is an anchor line followed by one row per latitude sample.
Each row holds every altitude plane left to right, one block of encoding
characters per plane, blocks separated by a single space:

    latitude_degrees,longitude_degrees
    ........... ........... ........... ........... ........... ...........
    (11 rows in total)

Columns within a block are longitude, rows are latitude, both descending
from the top-left so the anchor is the bottom-right sample.
"""

import logging
import re
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

import numpy as np

from .datatypes import Coordinate2D, Latitude, Longitude
from .encoding import EncodingTable
from .errors import DecodeError, FormatError, FormatErrorKind
from .grid import CELL_SIZE_HORIZONTAL, CELL_SIZE_VERTICAL, GRID_SIZE, Grid, flat_index

logger = logging.getLogger(__name__)

# Every plane block plus a delimiter, minus the delimiter after the last plane
ROW_LENGTH = (CELL_SIZE_HORIZONTAL + 1) * CELL_SIZE_VERTICAL - 1

PLANE_DELIMITER = ' '

# Optionally signed ASCII digits only
ANCHOR_TOKEN_PATTERN = re.compile(r'[+-]?[0-9]+')


class CellLoader:
    """
    Loader for cell definition files.

    Loading is all-or-nothing: samples are decoded into local buffers and
    the Grid is only built once the whole definition has been validated.
    """

    @classmethod
    def load_path(cls, path: Union[str, Path]) -> Grid:
        """
        Load a cell definition from a file.

        Args:
            path: Path to the definition file

        Returns:
            The loaded grid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Cell definition not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            return cls.load(f, source_name=str(path))

    @classmethod
    def load(cls, stream: TextIO, source_name: Optional[str] = None) -> Grid:
        """
        Load a cell definition from a text stream.

        Args:
            stream: Open text stream positioned at the anchor line
            source_name: Name used in log messages

        Returns:
            The loaded grid

        Raises:
            FormatError: At the first structural violation
            DecodeError: At the first unknown encoding character
        """
        if source_name is None:
            source_name = str(getattr(stream, 'name', '<stream>'))

        lines = cls._lines(stream)

        anchor = cls._parse_anchor(next(lines, None))
        logger.debug(f"{source_name}: anchor {anchor}")

        directions = np.zeros(GRID_SIZE, dtype=np.float64)
        speeds = np.zeros(GRID_SIZE, dtype=np.float64)

        # Line 1 is the anchor, so row i sits on line i + 2
        for row in range(CELL_SIZE_HORIZONTAL):
            line = next(lines, None)
            if line is None:
                raise FormatError(FormatErrorKind.MISSING_ROW, line=row + 2,
                                  expected=CELL_SIZE_HORIZONTAL, actual=row)
            cls._parse_row(line, row, row + 2, directions, speeds)

        for line_number, line in enumerate(lines, start=CELL_SIZE_HORIZONTAL + 2):
            if line.strip():
                raise FormatError(FormatErrorKind.EXTRA_ROW, line=line_number,
                                  expected=CELL_SIZE_HORIZONTAL)

        grid = Grid(anchor, directions, speeds)

        logger.info(f"Loaded cell {anchor} from {source_name} "
                    f"({int(np.count_nonzero(speeds))} wind samples)")

        return grid

    @staticmethod
    def _lines(stream: TextIO) -> Iterator[str]:
        """Lines of the stream without their line terminators."""
        for line in stream:
            yield line.rstrip('\r\n')

    @staticmethod
    def _parse_anchor(line: Optional[str]) -> Coordinate2D:
        """
        Parse the anchor line ``latitude_degrees,longitude_degrees``.

        Surrounding whitespace around either number is tolerated.
        """
        if line is None:
            raise FormatError(FormatErrorKind.MALFORMED_ANCHOR, line=1, text='')

        tokens = line.split(',')
        if len(tokens) != 2:
            raise FormatError(FormatErrorKind.MALFORMED_ANCHOR, line=1, text=line)

        tokens = [token.strip() for token in tokens]
        if not all(ANCHOR_TOKEN_PATTERN.fullmatch(token) for token in tokens):
            raise FormatError(FormatErrorKind.MALFORMED_ANCHOR, line=1, text=line)

        latitude_degrees = int(tokens[0])
        longitude_degrees = int(tokens[1])

        return Coordinate2D(Latitude(latitude_degrees), Longitude(longitude_degrees))

    @staticmethod
    def _parse_row(line: str, row: int, line_number: int,
                   directions: np.ndarray, speeds: np.ndarray):
        """Decode one latitude row across all altitude planes into the buffers."""
        if len(line) != ROW_LENGTH:
            raise FormatError(FormatErrorKind.ROW_LENGTH, line=line_number,
                              expected=ROW_LENGTH, actual=len(line))

        position = 0

        for plane in range(CELL_SIZE_VERTICAL):
            for column in range(CELL_SIZE_HORIZONTAL):
                encoding = line[position]
                try:
                    velocity = EncodingTable.decode(encoding)
                except DecodeError:
                    raise DecodeError(encoding, line=line_number, column=position + 1) from None

                offset = flat_index(row, column, plane)
                directions[offset] = velocity.direction
                speeds[offset] = velocity.speed

                position += 1

            if position < ROW_LENGTH:
                if line[position] != PLANE_DELIMITER:
                    raise FormatError(FormatErrorKind.PLANE_DELIMITER, line=line_number,
                                      character=line[position])
                position += 1

        if position != ROW_LENGTH:
            raise FormatError(FormatErrorKind.COLUMN_COUNT, line=line_number,
                              expected=ROW_LENGTH, actual=position)
