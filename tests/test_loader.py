"""
Unit tests for the cell definition loader.
"""

import io

import numpy as np
import pytest

from windcell.datatypes import CALM, Directional
from windcell.errors import DecodeError, FormatError, FormatErrorKind
from windcell.grid import GRID_SIZE
from windcell.loader import ROW_LENGTH, CellLoader

from conftest import make_definition, make_rows


def load_text(text):
    return CellLoader.load(io.StringIO(text), source_name='test')


class TestAnchor:
    """Tests for the anchor line."""

    def test_anchor_degrees(self):
        grid = load_text(make_definition(anchor='45,15'))

        assert grid.anchor.latitude.degrees == 45
        assert grid.anchor.longitude.degrees == 15
        assert grid.anchor.latitude.minutes_and_seconds == 0
        assert grid.anchor.longitude.minutes_and_seconds == 0

    def test_anchor_whitespace_tolerated(self):
        grid = load_text(make_definition(anchor=' 44 , 16 '))

        assert grid.anchor.latitude.degrees == 44
        assert grid.anchor.longitude.degrees == 16

    @pytest.mark.parametrize("anchor", ['45', '45,15,3', '45;15', 'a,15', '45,1.5', '',
                                        '4_5,15', '45,1_5', '\u0664\u0665,15'])
    def test_malformed_anchor(self, anchor):
        with pytest.raises(FormatError) as excinfo:
            load_text(make_definition(anchor=anchor))

        assert excinfo.value.kind is FormatErrorKind.MALFORMED_ANCHOR
        assert excinfo.value.line == 1
        assert excinfo.value.text == anchor

    def test_empty_stream(self):
        with pytest.raises(FormatError) as excinfo:
            load_text('')

        assert excinfo.value.kind is FormatErrorKind.MALFORMED_ANCHOR


class TestBody:
    """Tests for the body rows."""

    def test_row_length_constant(self):
        assert ROW_LENGTH == 71

    def test_all_calm(self):
        grid = load_text(make_definition())

        assert grid.speeds.shape == (GRID_SIZE,)
        assert not np.any(grid.speeds)

    def test_sample_placement(self):
        """Row i, plane j, column k lands at grid[i][k][j]."""
        grid = load_text(make_definition({(2, 7, 4): 'N', (10, 0, 1): 'k'}))

        assert grid[2, 7, 4] == Directional(315, 50)
        assert grid[10, 0, 1] == Directional(90, 10)
        assert grid[7, 2, 4] == CALM
        assert grid[2, 7, 3] == CALM
        assert np.count_nonzero(grid.speeds) == 2

    def test_crlf_line_endings(self):
        text = make_definition({(0, 0, 0): 'b'}).replace('\n', '\r\n')

        grid = load_text(text)

        assert grid[0, 0, 0] == Directional(0, 20)

    def test_trailing_blank_lines_ignored(self):
        grid = load_text(make_definition() + '\n   \n')

        assert not np.any(grid.speeds)

    def test_grid_read_only(self):
        grid = load_text(make_definition())

        with pytest.raises(ValueError):
            grid.speeds[0] = 10.0


class TestFormatErrors:
    """Tests for structural violations."""

    def test_row_length_mismatch(self):
        rows = make_rows()
        rows[3] = rows[3][:-1]

        with pytest.raises(FormatError) as excinfo:
            load_text(make_definition(rows=rows))

        error = excinfo.value
        assert error.kind is FormatErrorKind.ROW_LENGTH
        assert error.expected == 71
        assert error.actual == 70
        assert error.line == 5

    def test_row_too_long(self):
        rows = make_rows()
        rows[0] = rows[0] + '.'

        with pytest.raises(FormatError) as excinfo:
            load_text(make_definition(rows=rows))

        assert excinfo.value.kind is FormatErrorKind.ROW_LENGTH
        assert excinfo.value.actual == 72

    def test_missing_row(self):
        rows = make_rows()[:10]

        with pytest.raises(FormatError) as excinfo:
            load_text(make_definition(rows=rows))

        error = excinfo.value
        assert error.kind is FormatErrorKind.MISSING_ROW
        assert error.expected == 11
        assert error.actual == 10

    def test_extra_row(self):
        rows = make_rows() + [make_rows()[0]]

        with pytest.raises(FormatError) as excinfo:
            load_text(make_definition(rows=rows))

        error = excinfo.value
        assert error.kind is FormatErrorKind.EXTRA_ROW
        assert error.line == 13

    def test_extra_row_after_blank_line(self):
        text = make_definition() + '\nxyz\n'

        with pytest.raises(FormatError) as excinfo:
            load_text(text)

        assert excinfo.value.kind is FormatErrorKind.EXTRA_ROW
        assert excinfo.value.line == 14

    def test_bad_plane_delimiter(self):
        rows = make_rows()
        rows[6] = rows[6][:11] + '|' + rows[6][12:]

        with pytest.raises(FormatError) as excinfo:
            load_text(make_definition(rows=rows))

        error = excinfo.value
        assert error.kind is FormatErrorKind.PLANE_DELIMITER
        assert error.character == '|'
        assert error.line == 8

    def test_unknown_encoding(self):
        rows = make_rows()
        rows[1] = 'O' + rows[1][1:]

        with pytest.raises(DecodeError) as excinfo:
            load_text(make_definition(rows=rows))

        error = excinfo.value
        assert error.character == 'O'
        assert error.line == 3
        assert error.column == 1

    def test_errors_are_value_errors(self):
        """Loader errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            load_text('bogus')


class TestLoadPath:
    """Tests for loading from disk."""

    def test_load_path(self, definition_file):
        grid = CellLoader.load_path(definition_file)

        assert grid[5, 5, 0] == Directional(0, 10)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            CellLoader.load_path(tmp_path / 'missing.txt')
