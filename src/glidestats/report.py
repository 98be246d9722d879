"""
Flight report assembly.

Combines the raw flight metadata, the computed summary and an optional
competition score into a single JSON-ready record.
"""

from typing import Any, Dict, Optional

from .config import GlideStatsConfig
from .models import FlightMetadata, Summary, Track
from .scoring import FlightScore


def _fix_to_dict(fix) -> Dict[str, Any]:
    return {
        "lat": fix.latitude,
        "lon": fix.longitude,
        "gps_altitude": fix.gps_altitude,
        "timestamp": fix.timestamp.isoformat(),
    }


def build_flight_report(
    track: Track,
    metadata: FlightMetadata,
    summary: Summary,
    score: Optional[FlightScore] = None,
    config: Optional[GlideStatsConfig] = None,
) -> Dict[str, Any]:
    """
    Build the response record for a processed flight.

    Args:
        track: Fixes of the flight, used for the preview
        metadata: Descriptive flight information, reported as recorded
        summary: Statistics computed for the track
        score: Optional competition scoring result
        config: Optional configuration controlling the fix preview length

    Returns:
        Dictionary ready for JSON serialization
    """
    if config is None:
        config = GlideStatsConfig()

    return {
        "pilot": metadata.pilot,
        "copilot": metadata.copilot,
        "glider_type": metadata.glider_type,
        "registration": metadata.registration,
        "callsign": metadata.callsign,
        "date": metadata.date.isoformat() if metadata.date else None,
        "task": [
            {"name": p.name, "lat": p.latitude, "lon": p.longitude}
            for p in metadata.task
        ],
        "summary": summary.to_dict(),
        "score": score.to_dict() if score else None,
        "fixes": [_fix_to_dict(fix) for fix in track[: config.fix_preview_limit]],
    }
