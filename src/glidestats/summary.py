#!/usr/bin/env python3
"""
Flight summary calculation over a recorded track.
"""

from datetime import datetime
from typing import Optional
import logging
import math
import numbers

from .config import GlideStatsConfig
from .geometry import haversine_distance
from .models import (
    NOT_AVAILABLE,
    Fix,
    FlightMetadata,
    Summary,
    Track,
    TrackPosition,
)

logger = logging.getLogger(__name__)


class InvalidTrackError(ValueError):
    """Raised when a track contains fixes outside the documented contract."""

    pass


def calculate_duration(track: Track) -> int:
    """
    Calculate the elapsed time between the first and last fix.

    Args:
        track: Sequence of fixes in temporal order

    Returns:
        Elapsed time in whole minutes, or 0 for tracks with fewer than two fixes
    """
    if len(track) < 2:
        return 0

    elapsed = track[-1].timestamp - track[0].timestamp
    return round(elapsed.total_seconds() / 60)


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _validate_fix(index: int, fix: Fix) -> None:
    """
    Check that a fix can take part in the summary computation.

    Raises:
        InvalidTrackError: If the fix is malformed
    """
    if not isinstance(fix, Fix):
        raise InvalidTrackError(
            f"Track element {index} is {type(fix).__name__}, expected Fix"
        )
    if not (
        _is_real(fix.latitude)
        and math.isfinite(fix.latitude)
        and -90.0 <= fix.latitude <= 90.0
    ):
        raise InvalidTrackError(f"Fix {index} has invalid latitude {fix.latitude!r}")
    if not (
        _is_real(fix.longitude)
        and math.isfinite(fix.longitude)
        and -180.0 <= fix.longitude <= 180.0
    ):
        raise InvalidTrackError(f"Fix {index} has invalid longitude {fix.longitude!r}")
    if fix.gps_altitude is not None and not (
        _is_real(fix.gps_altitude) and math.isfinite(fix.gps_altitude)
    ):
        raise InvalidTrackError(
            f"Fix {index} has invalid altitude {fix.gps_altitude!r}"
        )
    if not isinstance(fix.timestamp, datetime):
        raise InvalidTrackError(
            f"Fix {index} has invalid timestamp {fix.timestamp!r}"
        )


def _empty_summary(pilot: str, glider_type: str) -> Summary:
    return Summary(
        pilot=pilot,
        glider_type=glider_type,
        fix_count=0,
        start_position=None,
        end_position=None,
        max_altitude=0,
        min_altitude=0,
        max_speed=0,
        total_distance=0.0,
        flight_time=0,
        altitude_gain=0,
    )


def compute_summary(
    track: Track,
    metadata: Optional[FlightMetadata] = None,
    config: Optional[GlideStatsConfig] = None,
) -> Summary:
    """
    Derive summary statistics from a flight track in a single pass.

    Every interval contributes its haversine distance and any altitude gain.
    Intervals with non-positive elapsed time are skipped for speed estimation,
    and instantaneous speeds at or above the configured ceiling are rejected
    as noise without affecting distance or altitude aggregation.

    Args:
        track: Sequence of fixes in temporal order
        metadata: Optional descriptive flight information
        config: Optional configuration; defaults apply when omitted

    Returns:
        Summary of the flight. Tracks with fewer than two fixes yield a zeroed
        summary without positions.

    Raises:
        InvalidTrackError: If any fix is malformed
    """
    if config is None:
        config = GlideStatsConfig()
    if metadata is None:
        metadata = FlightMetadata()

    pilot = metadata.pilot or NOT_AVAILABLE
    glider_type = metadata.glider_type or NOT_AVAILABLE

    if len(track) < 2:
        for i, fix in enumerate(track):
            _validate_fix(i, fix)
        logger.debug(f"Track has {len(track)} fixes, returning empty summary")
        return _empty_summary(pilot, glider_type)

    max_altitude = -math.inf
    min_altitude = math.inf
    max_speed = 0.0
    total_distance = 0.0
    total_climb = 0.0
    rejected_speeds = 0

    previous: Optional[Fix] = None
    for i, fix in enumerate(track):
        _validate_fix(i, fix)
        altitude = fix.altitude
        max_altitude = max(max_altitude, altitude)
        min_altitude = min(min_altitude, altitude)

        if previous is not None:
            if (fix.timestamp.tzinfo is None) != (previous.timestamp.tzinfo is None):
                raise InvalidTrackError(
                    f"Fix {i} mixes naive and timezone-aware timestamps"
                )

            distance = haversine_distance(
                previous.latitude,
                previous.longitude,
                fix.latitude,
                fix.longitude,
                earth_radius=config.earth_radius_km,
            )
            total_distance += distance

            elapsed = (fix.timestamp - previous.timestamp).total_seconds()
            if elapsed > 0:
                speed = distance / elapsed * 3600
                if speed >= config.max_speed_kmh:
                    rejected_speeds += 1
                elif speed > max_speed:
                    max_speed = speed

            climb = altitude - previous.altitude
            if climb > 0:
                total_climb += climb

        previous = fix

    if rejected_speeds:
        logger.debug(
            f"Rejected {rejected_speeds} intervals at or above {config.max_speed_kmh} km/h"
        )

    summary = Summary(
        pilot=pilot,
        glider_type=glider_type,
        fix_count=len(track),
        start_position=TrackPosition.from_fix(track[0]),
        end_position=TrackPosition.from_fix(track[-1]),
        max_altitude=round(max_altitude),
        min_altitude=round(min_altitude),
        max_speed=round(max_speed),
        total_distance=round(total_distance, 1),
        flight_time=calculate_duration(track),
        altitude_gain=round(total_climb),
    )

    logger.debug(
        f"Summary: {summary.total_distance} km in {summary.flight_time} min, "
        f"altitude {summary.min_altitude}-{summary.max_altitude} m"
    )
    return summary
