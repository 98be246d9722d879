#!/usr/bin/env python3
"""
Flight track loading from GPX files.
"""

from typing import List, TextIO, Tuple
import logging
import sys

import gpxpy
import gpxpy.gpx

from .models import Fix, FlightMetadata, TaskPoint

logger = logging.getLogger(__name__)


def parse_gpx_flight(file_input: TextIO) -> Tuple[FlightMetadata, List[Fix]]:
    """
    Parse GPX data and concatenate all tracks/segments into a single flight.

    The document author is reported as the pilot and the type of the first
    track as the glider type. The first GPX route, if any, is taken as the
    declared task. Track points without a timestamp are skipped. GPX has no
    copilot, registration or callsign fields, so those stay None.

    Args:
        file_input: File-like object containing GPX data

    Returns:
        Tuple of (metadata, fixes in recorded order)

    Raises:
        gpxpy.gpx.GPXException: If GPX data is malformed
    """
    gpx_data = gpxpy.parse(file_input)

    fixes: List[Fix] = []
    skipped = 0

    for track in gpx_data.tracks:
        for segment in track.segments:
            for point in segment.points:
                if point.time is None:
                    skipped += 1
                    continue
                fixes.append(
                    Fix(
                        latitude=point.latitude,
                        longitude=point.longitude,
                        gps_altitude=point.elevation,
                        timestamp=point.time,
                    )
                )

    if skipped:
        logger.warning(f"Skipped {skipped} track points without a timestamp")

    if not fixes:
        logger.warning("No timed track points found in GPX data")

    task: Tuple[TaskPoint, ...] = ()
    if gpx_data.routes:
        task = tuple(
            TaskPoint(name=p.name, latitude=p.latitude, longitude=p.longitude)
            for p in gpx_data.routes[0].points
        )

    if gpx_data.time is not None:
        flight_date = gpx_data.time.date()
    elif fixes:
        flight_date = fixes[0].timestamp.date()
    else:
        flight_date = None

    metadata = FlightMetadata(
        pilot=gpx_data.author_name,
        glider_type=gpx_data.tracks[0].type if gpx_data.tracks else None,
        date=flight_date,
        task=task,
    )

    logger.debug(f"Parsed {len(fixes)} fixes from GPX data")

    return metadata, fixes


def load_gpx_flight(filename: str) -> Tuple[FlightMetadata, List[Fix]]:
    """
    Load a GPX file into flight metadata and fixes.

    Args:
        filename: Path to GPX file, or "-" for stdin

    Returns:
        Tuple of (metadata, fixes in recorded order)

    Raises:
        FileNotFoundError: If file doesn't exist
        PermissionError: If file can't be read
        gpxpy.gpx.GPXException: If GPX data is malformed
    """
    if filename == "-":
        logger.debug("Reading GPX data from stdin")
        return parse_gpx_flight(sys.stdin)

    logger.debug(f"Reading GPX file: {filename}")
    with open(filename, "r", encoding="utf-8") as f:
        return parse_gpx_flight(f)
