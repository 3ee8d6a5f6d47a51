"""
Coordinate Mapper
=================

Maps world coordinates onto grid indices and interpolation scalers.

Latitude increases upward and longitude leftward while array indices
increase downward and rightward, so an index decreases as the angular
value increases within the cell.
"""

import math
from dataclasses import dataclass

from .datatypes import Coordinate2D, Coordinate3D, LatitudeOrLongitude
from .errors import UnsupportedCoordinateError
from .grid import ALTITUDES, CELL_SIZE_HORIZONTAL, CELL_SIZE_VERTICAL, MINUTES_PER_SUBCELL


@dataclass(frozen=True)
class GridIndex:
    """Row, column and lower bounding plane of a coordinate."""
    row: int        # [0, CELL_SIZE_HORIZONTAL)
    column: int     # [0, CELL_SIZE_HORIZONTAL)
    plane: int      # [0, CELL_SIZE_VERTICAL - 1), the plane below

    def __post_init__(self):
        assert 0 <= self.row < CELL_SIZE_HORIZONTAL, self.row
        assert 0 <= self.column < CELL_SIZE_HORIZONTAL, self.column
        assert 0 <= self.plane < CELL_SIZE_VERTICAL - 1, self.plane


def clamp_altitude(altitude: float) -> float:
    """Clamp an altitude onto the supported planes."""
    return max(ALTITUDES[0], min(ALTITUDES[-1], altitude))


class CoordinateMapper:
    """Stateless coordinate to grid mapping."""

    @staticmethod
    def validate(coordinate: Coordinate2D, anchor: Coordinate2D):
        """
        Check that a coordinate lies on the cell with this anchor.

        Raises:
            UnsupportedCoordinateError: If either degree component differs
        """
        is_valid_latitude = coordinate.latitude.degrees == anchor.latitude.degrees
        is_valid_longitude = coordinate.longitude.degrees == anchor.longitude.degrees

        if not (is_valid_latitude and is_valid_longitude):
            raise UnsupportedCoordinateError(coordinate, anchor)

    @staticmethod
    def row_column_index(latitude_or_longitude: LatitudeOrLongitude) -> int:
        """Row index of a latitude, or column index of a longitude."""
        index = CELL_SIZE_HORIZONTAL - 1 - latitude_or_longitude.minutes // MINUTES_PER_SUBCELL

        assert 0 <= index < CELL_SIZE_HORIZONTAL, index

        return index

    @staticmethod
    def plane_index(altitude: float) -> int:
        """Index of the altitude plane at or below an altitude, after clamping."""
        altitude = clamp_altitude(altitude)

        for index in range(CELL_SIZE_VERTICAL - 2, -1, -1):
            if altitude >= ALTITUDES[index]:
                return index

        return 0

    @staticmethod
    def scaler_horizontal(latitude_or_longitude: LatitudeOrLongitude) -> float:
        """
        Scaler between the two nearest latitude or longitude samples.

        It weights toward the sample with the higher index, which is the
        one nearer the anchor.
        """
        fraction = latitude_or_longitude.minutes_and_seconds / MINUTES_PER_SUBCELL

        return 1.0 - (fraction - math.floor(fraction))

    @classmethod
    def scaler_altitude(cls, altitude: float) -> float:
        """Scaler between the altitude planes below and above an altitude."""
        clamped = clamp_altitude(altitude)

        index = cls.plane_index(altitude)
        altitude_below = ALTITUDES[index]
        altitude_above = ALTITUDES[index + 1]

        return (clamped - altitude_below) / (altitude_above - altitude_below)

    @classmethod
    def map(cls, coordinate: Coordinate3D) -> GridIndex:
        """
        Grid index of a coordinate.

        Takes no grid: every grid has the same fixed geometry, so the index
        depends on the coordinate alone. Validate against the grid anchor
        first.
        """
        return GridIndex(
            row=cls.row_column_index(coordinate.latitude),
            column=cls.row_column_index(coordinate.longitude),
            plane=cls.plane_index(coordinate.altitude),
        )
