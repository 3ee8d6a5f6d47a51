"""
Encoding Table
==============

Single-character encoding of discrete wind velocities.

The direction is one of the eight cardinal and intercardinal directions,
each with a base character indicating 10 knots. Each step up the alphabet
from the base adds 10 knots, up to 50:

    Char  Direction     Char  Direction
    ----  ---------     ----  ---------
     a         0         u       180
     f        45         z       225
     k        90         E       270
     p       135         J       315

so ``b`` is 0 degrees at 20 knots and ``N`` is 315 degrees at 50 knots.
A dot means no wind.
"""

from .datatypes import ANGLES, CALM, WIND_RATES, Directional, Velocity
from .errors import DecodeError

ENCODING_NO_WIND = '.'
ENCODING_WIND = 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMN'

assert len(ENCODING_WIND) == len(ANGLES) * len(WIND_RATES)


class EncodingTable:
    """Bidirectional mapping between characters and discrete velocities."""

    @staticmethod
    def decode(encoding: str) -> Velocity:
        """
        Decode a character into a velocity.

        Args:
            encoding: Single encoding character

        Returns:
            Calm for the no-wind marker, otherwise the directional velocity

        Raises:
            DecodeError: If the character is not in the table
        """
        if encoding == ENCODING_NO_WIND:
            return CALM

        position = ENCODING_WIND.find(encoding) if len(encoding) == 1 else -1
        if position == -1:
            raise DecodeError(encoding)

        direction_index, speed_index = divmod(position, len(WIND_RATES))

        return Directional(float(ANGLES[direction_index]), float(WIND_RATES[speed_index]))

    @staticmethod
    def encode(velocity: Velocity) -> str:
        """
        Encode a discrete velocity as its character.

        Raises:
            ValueError: If the velocity is not one of the table entries
        """
        if velocity.is_calm:
            return ENCODING_NO_WIND

        try:
            direction_index = ANGLES.index(int(velocity.direction))
            speed_index = WIND_RATES.index(int(velocity.speed))
        except ValueError:
            raise ValueError(f"velocity {velocity} has no encoding") from None

        if (ANGLES[direction_index] != velocity.direction
                or WIND_RATES[speed_index] != velocity.speed):
            raise ValueError(f"velocity {velocity} has no encoding")

        return ENCODING_WIND[direction_index * len(WIND_RATES) + speed_index]

    @staticmethod
    def characters() -> str:
        """All valid encoding characters, no-wind marker first."""
        return ENCODING_NO_WIND + ENCODING_WIND
