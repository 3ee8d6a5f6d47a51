"""
Data Types
==========

Value types for positions and wind inside a cell.

The navigation model is limited to the northern and western hemisphere:
latitude is degrees north and increases upward, longitude is degrees west
and increases leftward.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

# Navigational angles in increasing order, 45 degree steps from north
ANGLES = (0, 45, 90, 135, 180, 225, 270, 315)

# Wind rates (knots) for encoding base plus 0, 1, 2, 3 and 4
WIND_RATES = (10, 20, 30, 40, 50)


@dataclass(frozen=True)
class _Angle:
    """Degrees, minutes and seconds of a latitude or longitude."""
    degrees: int
    minutes: int = 0
    seconds: float = 0.0

    def __post_init__(self):
        if not isinstance(self.degrees, int) or not isinstance(self.minutes, int):
            raise ValueError(f"degrees and minutes must be whole numbers, got {self.degrees}, {self.minutes}")
        if not 0 <= self.minutes < 60:
            raise ValueError(f"minutes out of range: {self.minutes}")
        if not 0 <= self.seconds < 60:
            raise ValueError(f"seconds out of range: {self.seconds}")

    @property
    def minutes_and_seconds(self) -> float:
        """Minutes with seconds folded in as a fraction."""
        return self.minutes + self.seconds / 60.0

    @property
    def value(self) -> float:
        """Decimal degrees."""
        return self.degrees + self.minutes_and_seconds / 60.0

    @classmethod
    def parse(cls, text: str):
        """
        Parse ``D``, ``D:M`` or ``D:M:S``.

        Examples:
            - "45" -> 45 0' 0"
            - "45:30:15.5" -> 45 30' 15.5"
        """
        parts = text.strip().split(':')
        if not 1 <= len(parts) <= 3:
            raise ValueError(f"expected D[:M[:S]], got {text!r}")
        degrees = int(parts[0])
        minutes = int(parts[1]) if len(parts) > 1 else 0
        seconds = float(parts[2]) if len(parts) > 2 else 0.0
        return cls(degrees, minutes, seconds)

    def __str__(self) -> str:
        return f"{self.degrees}°{self.minutes:02d}'{self.seconds:05.2f}\""


class Latitude(_Angle):
    """Latitude in degrees north."""

    def __str__(self) -> str:
        return super().__str__() + 'N'


class Longitude(_Angle):
    """Longitude in degrees west."""

    def __str__(self) -> str:
        return super().__str__() + 'W'


LatitudeOrLongitude = Union[Latitude, Longitude]


@dataclass(frozen=True)
class Coordinate2D:
    """A point in the world."""
    latitude: Latitude
    longitude: Longitude

    def __str__(self) -> str:
        return f"{self.latitude} {self.longitude}"


@dataclass(frozen=True)
class Coordinate3D:
    """A point in the world with altitude."""
    latitude: Latitude
    longitude: Longitude
    altitude: float     # Feet

    @property
    def coordinate2d(self) -> Coordinate2D:
        return Coordinate2D(self.latitude, self.longitude)

    def __str__(self) -> str:
        return f"{self.latitude} {self.longitude} {self.altitude:.0f}ft"


@dataclass(frozen=True)
class Velocity(ABC):
    """
    Wind velocity.

    Never instantiated directly: a velocity is either ``Calm`` or
    ``Directional``.
    """

    @property
    @abstractmethod
    def direction(self) -> float:
        """Navigational degrees the wind blows toward."""

    @property
    @abstractmethod
    def speed(self) -> float:
        """Knots."""

    @property
    def is_calm(self) -> bool:
        return isinstance(self, Calm)

    def deltas(self) -> Tuple[float, float]:
        """
        Split the velocity into longitude and latitude components.

        Longitude grows westward, so an easterly component is negative.

        Returns:
            (d_longitude, d_latitude) in knots
        """
        theta = np.radians(self.direction)
        return (float(-self.speed * np.sin(theta)), float(self.speed * np.cos(theta)))


@dataclass(frozen=True)
class Calm(Velocity):
    """No wind. Direction is meaningless and reported as 0."""

    @property
    def direction(self) -> float:
        return 0.0

    @property
    def speed(self) -> float:
        return 0.0

    def __str__(self) -> str:
        return "calm"


@dataclass(frozen=True)
class Directional(Velocity):
    """Wind with a direction and a positive speed."""
    bearing: float
    knots: float

    def __post_init__(self):
        if not self.knots > 0:
            raise ValueError(f"directional wind needs a positive speed, got {self.knots}")
        if not 0 <= self.bearing < 360:
            object.__setattr__(self, 'bearing', normalize_bearing(self.bearing))

    @property
    def direction(self) -> float:
        return self.bearing

    @property
    def speed(self) -> float:
        return self.knots

    def __str__(self) -> str:
        return f"{self.bearing:.1f}° at {self.knots:.1f}kt"


CALM = Calm()


def normalize_bearing(degrees: float) -> float:
    """Wrap an angle onto [0, 360)."""
    degrees = degrees % 360.0
    # tiny negative inputs wrap to exactly 360.0
    if degrees >= 360.0:
        degrees = 0.0
    return degrees


def angle_difference(from_deg: float, to_deg: float) -> float:
    """Signed shortest rotation from one bearing to another, in [-180, 180)."""
    return (to_deg - from_deg + 180.0) % 360.0 - 180.0
