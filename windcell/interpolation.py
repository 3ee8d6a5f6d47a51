"""
Interpolation Engine
====================

Trilinear interpolation of wind velocity inside a cell: bilinear within
the altitude planes below and above a coordinate, then linear between
the two planes.
"""

from .datatypes import CALM, Coordinate3D, Directional, Velocity, angle_difference
from .grid import Grid
from .mapping import CoordinateMapper, GridIndex


def lerp(a: float, b: float, scaler: float) -> float:
    """Linear interpolation, exact at both ends."""
    return a * (1.0 - scaler) + b * scaler


def blend(velocity1: Velocity, velocity2: Velocity, scaler: float) -> Velocity:
    """
    Interpolate between two velocities.

    The rules are:
    - neither has wind: no wind
    - only one has wind: its direction, speed interpolated against zero
    - both have wind: direction along the shortest arc and speed interpolated

    Args:
        velocity1: First sample
        velocity2: Second sample
        scaler: Weight toward the second sample, 0 to 1

    Returns:
        Interpolated velocity; Calm whenever the resulting speed is zero
    """
    if velocity1.is_calm and velocity2.is_calm:
        return CALM

    speed = lerp(velocity1.speed, velocity2.speed, scaler)
    if speed <= 0:
        return CALM

    if velocity2.is_calm:
        return Directional(velocity1.direction, speed)
    if velocity1.is_calm:
        return Directional(velocity2.direction, speed)

    direction = velocity1.direction + angle_difference(velocity1.direction, velocity2.direction) * scaler

    return Directional(direction, speed)


class InterpolationEngine:
    """Stateless trilinear interpolation over a grid."""

    @classmethod
    def interpolate(cls, grid: Grid, coordinate: Coordinate3D) -> Velocity:
        """
        Estimate the wind velocity at a coordinate.

        Args:
            grid: Cell samples
            coordinate: Query point; altitude is clamped to the planes

        Returns:
            The interpolated velocity

        Raises:
            UnsupportedCoordinateError: If the coordinate is not on the grid's cell
        """
        CoordinateMapper.validate(coordinate.coordinate2d, grid.anchor)

        index = CoordinateMapper.map(coordinate)
        scaler_latitude = CoordinateMapper.scaler_horizontal(coordinate.latitude)
        scaler_longitude = CoordinateMapper.scaler_horizontal(coordinate.longitude)

        # horizontal interpolation in the planes bounding the altitude
        velocity_below = cls._interpolate_plane(grid, index, index.plane,
                                                scaler_latitude, scaler_longitude)
        velocity_above = cls._interpolate_plane(grid, index, index.plane + 1,
                                                scaler_latitude, scaler_longitude)

        # vertical interpolation
        scaler_altitude = CoordinateMapper.scaler_altitude(coordinate.altitude)

        return blend(velocity_below, velocity_above, scaler_altitude)

    @staticmethod
    def _interpolate_plane(grid: Grid, index: GridIndex, plane: int,
                           scaler_latitude: float, scaler_longitude: float) -> Velocity:
        """Bilinear interpolation of the box around an index within one plane."""
        row_above = index.row - 1
        row_below = index.row

        column_left = index.column - 1
        column_right = index.column

        interpolation_row_above = blend(grid[row_above, column_left, plane],
                                        grid[row_above, column_right, plane],
                                        scaler_longitude)

        interpolation_row_below = blend(grid[row_below, column_left, plane],
                                        grid[row_below, column_right, plane],
                                        scaler_longitude)

        return blend(interpolation_row_above, interpolation_row_below, scaler_latitude)
