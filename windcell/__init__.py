"""
Wind Cell
=========

Approximates wind velocity at any point inside a one-degree cell by
decoding a compact textual grid of wind samples and interpolating
trilinearly across latitude, longitude and altitude.
"""

from .datatypes import (
    CALM,
    Calm,
    Coordinate2D,
    Coordinate3D,
    Directional,
    Latitude,
    Longitude,
    Velocity,
)
from .errors import (
    DecodeError,
    FormatError,
    FormatErrorKind,
    UnsupportedCoordinateError,
    WindCellError,
)
from .encoding import EncodingTable
from .grid import Grid
from .loader import CellLoader
from .mapping import CoordinateMapper, GridIndex
from .interpolation import InterpolationEngine, blend
from .cell import Cell

__all__ = [
    # Values
    'CALM', 'Calm', 'Directional', 'Velocity',
    'Coordinate2D', 'Coordinate3D', 'Latitude', 'Longitude',
    # Errors
    'WindCellError', 'DecodeError', 'FormatError', 'FormatErrorKind',
    'UnsupportedCoordinateError',
    # Core
    'EncodingTable', 'Grid', 'CellLoader',
    'CoordinateMapper', 'GridIndex',
    'InterpolationEngine', 'blend',
    'Cell',
]
