#!/usr/bin/env python3
"""
Data models for flight tracks and their summaries.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, NamedTuple, Optional, Sequence, Tuple

# Marker substituted for descriptive metadata that the recording does not carry
NOT_AVAILABLE = "N/A"


class Fix(NamedTuple):
    """A single GPS sample of a flight track."""

    latitude: float
    longitude: float
    gps_altitude: Optional[float]
    timestamp: datetime

    @property
    def altitude(self) -> float:
        """GPS altitude in meters, with a missing value counted as 0."""
        return self.gps_altitude if self.gps_altitude is not None else 0.0


# Insertion order is temporal order
Track = Sequence[Fix]


class TaskPoint(NamedTuple):
    """A turnpoint of a declared task."""

    name: Optional[str]
    latitude: float
    longitude: float


@dataclass(frozen=True)
class FlightMetadata:
    """Descriptive flight information carried through unchanged."""

    pilot: Optional[str] = None
    glider_type: Optional[str] = None
    copilot: Optional[str] = None
    registration: Optional[str] = None
    callsign: Optional[str] = None
    date: Optional[date] = None
    task: Tuple[TaskPoint, ...] = ()


@dataclass(frozen=True)
class TrackPosition:
    """Position and time of a fix at a track boundary."""

    latitude: float
    longitude: float
    time: datetime

    @classmethod
    def from_fix(cls, fix: Fix) -> "TrackPosition":
        return cls(latitude=fix.latitude, longitude=fix.longitude, time=fix.timestamp)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lat": self.latitude,
            "lon": self.longitude,
            "time": self.time.isoformat(),
        }


@dataclass(frozen=True)
class Summary:
    """
    Aggregate statistics derived from a flight track.

    Altitudes are in meters, speed in km/h, distance in kilometers and
    flight time in minutes.
    """

    pilot: str
    glider_type: str
    fix_count: int
    start_position: Optional[TrackPosition]
    end_position: Optional[TrackPosition]
    max_altitude: int
    min_altitude: int
    max_speed: int
    total_distance: float
    flight_time: int
    altitude_gain: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert the summary into a JSON-serializable dictionary."""
        return {
            "pilot": self.pilot,
            "glider_type": self.glider_type,
            "fix_count": self.fix_count,
            "start_position": (
                self.start_position.to_dict() if self.start_position else None
            ),
            "end_position": (
                self.end_position.to_dict() if self.end_position else None
            ),
            "max_altitude": self.max_altitude,
            "min_altitude": self.min_altitude,
            "max_speed": self.max_speed,
            "total_distance": self.total_distance,
            "flight_time": self.flight_time,
            "altitude_gain": self.altitude_gain,
        }
