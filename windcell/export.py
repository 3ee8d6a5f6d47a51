"""
Gnuplot Exporter
================

Sweeps a cell over an altitude range and writes one Gnuplot vector data
file per altitude, plus a script that combines them into an animated GIF.

Usage:
    windcell gnuplot cells/45_15.txt out/
    cd out && gnuplot script.gnu
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

import numpy as np

from .cell import Cell
from .datatypes import Coordinate3D, Latitude, Longitude

logger = logging.getLogger(__name__)

# Vector components are scaled from knots to a fraction of a degree
DELTA_SCALE = 3600.0


@dataclass
class ExportConfig:
    """Configuration for the Gnuplot sweep."""
    altitude_min: int = 0           # Feet
    altitude_max: int = 15000       # Feet
    altitude_step: int = 100        # Feet between frames
    seconds_step: int = 60          # Seconds between samples; 60 means whole minutes
    animation_delay: int = 10       # Hundredths of a second between frames
    output_gif: str = 'wind.gif'

    def __post_init__(self):
        if self.altitude_step <= 0:
            raise ValueError(f"altitude_step must be positive, got {self.altitude_step}")
        if not 0 < self.seconds_step <= 60:
            raise ValueError(f"seconds_step must be in (0, 60], got {self.seconds_step}")
        if self.altitude_max < self.altitude_min:
            raise ValueError(f"altitude range is empty: {self.altitude_min}..{self.altitude_max}")

    @property
    def altitudes(self) -> range:
        return range(self.altitude_min, self.altitude_max + 1, self.altitude_step)


class GnuplotExporter:
    """Writes interpolated wind fields of a cell for Gnuplot."""

    def __init__(self, cell: Cell, config: Optional[ExportConfig] = None):
        self.cell = cell
        self.config = config or ExportConfig()

    def sample_altitude(self, altitude: float) -> np.ndarray:
        """
        Interpolate the cell at every sample point of one altitude.

        Args:
            altitude: Altitude in feet

        Returns:
            Array of rows (longitude, latitude, d_longitude, d_latitude)
        """
        anchor = self.cell.anchor
        seconds = range(0, 60, self.config.seconds_step)

        rows = []
        for latitude_minutes in range(60):
            for latitude_seconds in seconds:
                latitude = Latitude(anchor.latitude.degrees, latitude_minutes, latitude_seconds)

                for longitude_minutes in range(60):
                    for longitude_seconds in seconds:
                        longitude = Longitude(anchor.longitude.degrees,
                                              longitude_minutes, longitude_seconds)

                        coordinate = Coordinate3D(latitude, longitude, altitude)
                        velocity = self.cell.interpolate(coordinate)
                        d_longitude, d_latitude = velocity.deltas()

                        rows.append((longitude.value, latitude.value,
                                     d_longitude / DELTA_SCALE, d_latitude / DELTA_SCALE))

        return np.array(rows, dtype=np.float64)

    def build_script(self, data_files: List[str]) -> str:
        """Gnuplot script that animates the data files in order."""
        longitude = self.cell.anchor.longitude.degrees

        # longitude grows westward, so the x axis runs right to left
        lines = [
            '',
            'reset',
            f'set xrange [{longitude + 1}:{longitude}]',
            f'set terminal gif animate delay {self.config.animation_delay}',
            f"set output '{self.config.output_gif}'",
        ]
        for data_file in data_files:
            lines.append(f"print 'generating {data_file}'")
            lines.append(f"plot '{data_file}' using 1:2:3:4 with vectors head filled lt 1")

        return '\n'.join(lines) + '\n'

    def export(self, output_dir: Union[str, Path]) -> List[Path]:
        """
        Write the data files and the script.

        Args:
            output_dir: Directory for the output, created if missing

        Returns:
            Paths written, data files first and the script last
        """
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"Generating from {self.cell.source_name}")

        written = []
        for altitude in self.config.altitudes:
            data_path = output_dir / f'gnuplot_{altitude}.txt'

            samples = self.sample_altitude(altitude)
            np.savetxt(data_path, samples, fmt='%.6f', delimiter=' ')

            logger.debug(f"altitude {altitude} as {data_path}: {len(samples)} vectors")
            written.append(data_path)

        script_path = output_dir / 'script.gnu'
        script_path.write_text(self.build_script([p.name for p in written]), encoding='utf-8')
        written.append(script_path)

        logger.info(f"Wrote {len(written) - 1} data files and {script_path}")

        return written
