"""
Wind Cell CLI
=============

Command-line entry point over a cell definition file.

Usage:
    windcell dump cells/45_15.txt
    windcell query cells/45_15.txt --lat 45:30 --lon 15:12:30 --alt 4500
    windcell gnuplot cells/45_15.txt out/ --altitude-step 500
"""

import argparse
import logging
import sys

from .cell import Cell
from .datatypes import Coordinate3D, Latitude, Longitude
from .errors import WindCellError
from .export import ExportConfig, GnuplotExporter

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Send log records to stderr so stdout carries only command output."""
    if verbose:
        level, format_str = logging.DEBUG, '%(asctime)s %(name)s %(levelname)s: %(message)s'
    else:
        level, format_str = logging.INFO, 'windcell: %(message)s'

    logging.basicConfig(level=level, format=format_str, stream=sys.stderr)


def cmd_dump(args) -> int:
    cell = Cell.load(args.cell)
    print(cell.dump())
    return 0


def cmd_query(args) -> int:
    cell = Cell.load(args.cell)

    coordinate = Coordinate3D(Latitude.parse(args.lat), Longitude.parse(args.lon), args.alt)
    velocity = cell.interpolate(coordinate)

    print(f"{coordinate}: direction {velocity.direction:.1f} speed {velocity.speed:.1f}")
    return 0


def cmd_gnuplot(args) -> int:
    cell = Cell.load(args.cell)

    config = ExportConfig(
        altitude_min=args.altitude_min,
        altitude_max=args.altitude_max,
        altitude_step=args.altitude_step,
        seconds_step=args.seconds_step,
        animation_delay=args.delay,
    )

    written = GnuplotExporter(cell, config).export(args.output)

    print(f"Wrote {len(written)} files to {args.output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='windcell',
        description='Interpolate wind inside a cell definition',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s dump cells/45_15.txt
  %(prog)s query cells/45_15.txt --lat 45:30 --lon 15:12:30 --alt 4500
  %(prog)s gnuplot cells/45_15.txt out/ --altitude-step 500
"""
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose logging'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    dump = subparsers.add_parser('dump', help='Print the decoded definition')
    dump.add_argument('cell', help='Path to cell definition file')
    dump.set_defaults(func=cmd_dump)

    query = subparsers.add_parser('query', help='Interpolate wind at one point')
    query.add_argument('cell', help='Path to cell definition file')
    query.add_argument('--lat', required=True, help='Latitude as D[:M[:S]] north')
    query.add_argument('--lon', required=True, help='Longitude as D[:M[:S]] west')
    query.add_argument('--alt', type=float, default=0.0, help='Altitude in feet (default: 0)')
    query.set_defaults(func=cmd_query)

    gnuplot = subparsers.add_parser('gnuplot', help='Write Gnuplot animation files')
    gnuplot.add_argument('cell', help='Path to cell definition file')
    gnuplot.add_argument('output', help='Directory for the output files')
    gnuplot.add_argument('--altitude-min', type=int, default=0,
                         help='Lowest altitude in feet (default: 0)')
    gnuplot.add_argument('--altitude-max', type=int, default=15000,
                         help='Highest altitude in feet (default: 15000)')
    gnuplot.add_argument('--altitude-step', type=int, default=100,
                         help='Feet between frames (default: 100)')
    gnuplot.add_argument('--seconds-step', type=int, default=60,
                         help='Seconds between samples (default: 60)')
    gnuplot.add_argument('--delay', type=int, default=10,
                         help='Animation delay between frames (default: 10)')
    gnuplot.set_defaults(func=cmd_gnuplot)

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        return args.func(args)
    except (WindCellError, ValueError, FileNotFoundError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
