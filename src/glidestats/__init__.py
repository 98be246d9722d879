#!/usr/bin/env python3
"""
Glidestats - Summary statistics for glider flight tracks.

This package derives duration, track distance, altitude range and gain, and
maximum groundspeed from recorded GPS fixes, and renders flights on
interactive maps.
"""
import importlib.metadata

__version__ = importlib.metadata.version("glidestats")

# Import main classes for public API
from .models import Fix, FlightMetadata, Summary, TaskPoint, TrackPosition
from .summary import InvalidTrackError, calculate_duration, compute_summary
from .geometry import haversine_distance
from .config import GlideStatsConfig, ScoringClass

__all__ = [
    "Fix",
    "FlightMetadata",
    "Summary",
    "TaskPoint",
    "TrackPosition",
    "InvalidTrackError",
    "calculate_duration",
    "compute_summary",
    "haversine_distance",
    "GlideStatsConfig",
    "ScoringClass",
]
