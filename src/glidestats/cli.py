#!/usr/bin/env python3
"""
Glider flight summary tool.
This script reads a GPX flight track, derives summary statistics such as
distance, duration, altitude range and maximum groundspeed, and optionally
generates an interactive HTML map of the flight.

Requirements:
    pip install gpxpy folium

"""

from typing import List, Optional
import argparse
import json
import logging
import os
import sys
import webbrowser
from gpxpy import gpx

from . import __version__
from .config import GlideStatsConfig
from .file_utils import generate_map_filename
from .gpx import load_gpx_flight
from .models import Summary
from .report import build_flight_report
from .summary import InvalidTrackError, compute_summary
from .visualization import create_flight_map

logger = logging.getLogger("glidestats")


def non_negative_int(value: str) -> int:
    """Argparse type accepting integers of 0 or more."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    defaults = GlideStatsConfig()
    parser = argparse.ArgumentParser(
        description="Glider flight track summary tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "filename",
        type=str,
        nargs="?",
        help="GPX flight track to process (use - for stdin)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full flight report as JSON",
    )
    parser.add_argument(
        "--map",
        action="store_true",
        help="Generate an interactive HTML map of the flight",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output HTML map file (default: auto-generated based on input filename)",
    )
    parser.add_argument(
        "--no-open",
        action="store_true",
        help="Don't automatically open the HTML map in browser",
    )
    parser.add_argument(
        "--max-speed",
        type=float,
        default=defaults.max_speed_kmh,
        help=f"Groundspeed in km/h at or above which intervals are treated as noise (default: {defaults.max_speed_kmh:g})",
    )
    parser.add_argument(
        "--fix-preview",
        type=non_negative_int,
        default=defaults.fix_preview_limit,
        help=f"Number of fixes included in the JSON report (default: {defaults.fix_preview_limit})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=defaults.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Set logging level (default: {defaults.log_level})",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"glidestats {__version__}",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GlideStatsConfig:
    """Build the configuration from parsed command-line arguments."""
    return GlideStatsConfig(
        max_speed_kmh=args.max_speed,
        fix_preview_limit=args.fix_preview,
        log_level=args.log_level,
    )


def setup_logging(config: GlideStatsConfig) -> None:
    """Setup logging configuration."""
    level = getattr(logging, config.log_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


def open_file_in_browser(filename: str) -> None:
    """
    Open the specified file in the default browser.

    Args:
        filename: Path to the file to open
    """
    abs_path = os.path.abspath(filename)
    try:
        webbrowser.open(f"file://{abs_path}")
        logger.debug(f"Opening {abs_path} in your default browser...")
    except webbrowser.Error as e:
        logger.warning(f"Could not automatically open browser: {e}")
        logger.warning(f"Please manually open {abs_path}")


def format_summary(summary: Summary) -> str:
    """
    Format a summary as human-readable text.

    Args:
        summary: The flight summary

    Returns:
        Multi-line text block
    """
    lines = [
        f"Pilot:          {summary.pilot}",
        f"Glider:         {summary.glider_type}",
        f"Fixes:          {summary.fix_count}",
    ]
    if summary.start_position and summary.end_position:
        start, end = summary.start_position, summary.end_position
        lines.append(
            f"Start:          {start.latitude:.5f}, {start.longitude:.5f} at {start.time.isoformat()}"
        )
        lines.append(
            f"End:            {end.latitude:.5f}, {end.longitude:.5f} at {end.time.isoformat()}"
        )
    lines.extend(
        [
            f"Flight time:    {summary.flight_time} min",
            f"Distance:       {summary.total_distance:.1f} km",
            f"Max speed:      {summary.max_speed} km/h",
            f"Altitude:       {summary.min_altitude}-{summary.max_altitude} m",
            f"Altitude gain:  {summary.altitude_gain} m",
        ]
    )
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> None:
    """
    Parses command-line arguments, loads the GPX flight track,
    computes its summary and prints it, optionally creating a map.
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.filename:
        parser.print_help()
        sys.exit(1)

    config = config_from_args(args)
    setup_logging(config)

    try:
        metadata, fixes = load_gpx_flight(args.filename)
    except FileNotFoundError:
        logger.error(f"GPX file not found: {args.filename}")
        sys.exit(1)
    except PermissionError:
        logger.error(f"Cannot read GPX file (permission denied): {args.filename}")
        sys.exit(1)
    except gpx.GPXException as e:
        logger.error(f"Invalid GPX file: {e}")
        sys.exit(1)
    logger.info(f"Loaded flight with {len(fixes)} fixes")

    try:
        summary = compute_summary(fixes, metadata, config)
    except InvalidTrackError as e:
        logger.error(f"Invalid flight track: {e}")
        sys.exit(1)

    if args.json:
        report = build_flight_report(fixes, metadata, summary, config=config)
        print(json.dumps(report, indent=2))
    else:
        print(format_summary(summary))

    if not args.map:
        return

    if not fixes:
        logger.error("Cannot create a map for a flight without fixes")
        sys.exit(1)

    try:
        if args.output is not None:
            output_filename = args.output
        elif args.filename == "-":
            output_filename = generate_map_filename("flight.gpx")
        else:
            output_filename = generate_map_filename(args.filename)
    except (RuntimeError, ValueError) as e:
        logger.error(f"Failed to generate output filename: {e}")
        sys.exit(1)
    logger.debug(f"Output filename: {output_filename}")

    try:
        create_flight_map(fixes, metadata, summary, output_filename)
    except OSError as e:
        logger.error(f"Failed to create map: {e}")
        sys.exit(1)

    if not args.no_open:
        open_file_in_browser(output_filename)


if __name__ == "__main__":
    main()
