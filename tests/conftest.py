"""
Shared test fixtures for wind cell unit tests.
"""

import pytest

from windcell.cell import Cell
from windcell.datatypes import Coordinate3D, Latitude, Longitude
from windcell.grid import CELL_SIZE_HORIZONTAL, CELL_SIZE_VERTICAL

ANCHOR_LATITUDE = 45
ANCHOR_LONGITUDE = 15


def make_rows(overrides=None, fill='.'):
    """
    Build the 11 body rows of a definition.

    Args:
        overrides: Mapping of (row, column, plane) to encoding character
        fill: Character used everywhere else

    Returns:
        List of 71-character rows
    """
    overrides = overrides or {}
    rows = []
    for row in range(CELL_SIZE_HORIZONTAL):
        blocks = []
        for plane in range(CELL_SIZE_VERTICAL):
            block = ''.join(
                overrides.get((row, column, plane), fill)
                for column in range(CELL_SIZE_HORIZONTAL)
            )
            blocks.append(block)
        rows.append(' '.join(blocks))
    return rows


def make_definition(overrides=None, fill='.', anchor=None, rows=None):
    """Full definition text: anchor line plus body rows."""
    if anchor is None:
        anchor = f"{ANCHOR_LATITUDE},{ANCHOR_LONGITUDE}"
    if rows is None:
        rows = make_rows(overrides, fill)
    return '\n'.join([anchor] + rows) + '\n'


def grid_coordinate(row, column, altitude=0.0):
    """Coordinate of the sample at (row, column) in the test cell."""
    latitude_minutes = (CELL_SIZE_HORIZONTAL - 1 - row) * 6
    longitude_minutes = (CELL_SIZE_HORIZONTAL - 1 - column) * 6
    return Coordinate3D(
        Latitude(ANCHOR_LATITUDE, latitude_minutes, 0),
        Longitude(ANCHOR_LONGITUDE, longitude_minutes, 0),
        altitude,
    )


@pytest.fixture
def calm_cell():
    """Cell with no wind anywhere."""
    return Cell.from_text(make_definition(), source_name='calm.txt')


@pytest.fixture
def center_cell():
    """Cell with a single 0°/10kt sample at the center of the lowest plane."""
    return Cell.from_text(make_definition({(5, 5, 0): 'a'}), source_name='center.txt')


@pytest.fixture
def uniform_cell():
    """Cell with 90°/30kt everywhere."""
    return Cell.from_text(make_definition(fill='m'), source_name='uniform.txt')


@pytest.fixture
def definition_file(tmp_path):
    """Definition with one wind sample written to disk."""
    path = tmp_path / '45_15.txt'
    path.write_text(make_definition({(5, 5, 0): 'a'}), encoding='utf-8')
    return path
