#!/usr/bin/env python3
"""
Flight visualization using folium maps.
"""

from typing import Tuple
import logging
import folium
from folium.template import Template

from .models import FlightMetadata, Summary, Track

logger = logging.getLogger(__name__)


class SummaryLegend(folium.MacroElement):
    """Fixed map panel listing the flight summary."""

    def __init__(self, summary: Summary):
        super().__init__()
        self.pilot = summary.pilot
        self.glider_type = summary.glider_type
        self.total_distance = summary.total_distance
        self.flight_time = summary.flight_time
        self.max_altitude = summary.max_altitude
        self.min_altitude = summary.min_altitude
        self.altitude_gain = summary.altitude_gain
        self.max_speed = summary.max_speed

        self._template = Template(
            """
        {% macro html(this, kwargs) %}
        <div id="flight-legend" style="
            position: fixed;
            bottom: 50px;
            left: 50px;
            width: 230px;
            background-color: white;
            border: 2px solid grey;
            z-index: 9999;
            font-size: 13px;
            padding: 12px;
            font-family: Arial, sans-serif;
            border-radius: 5px;
            box-shadow: 0 2px 5px rgba(0,0,0,0.2);
            box-sizing: border-box;
        ">
            <b>{{ this.pilot }}</b> ({{ this.glider_type }})<br>
            <div style="margin: 4px 0; line-height: 1.3;">
                <span style="color: #2E86AB; font-weight: bold; font-size: 18px;">—</span>
                Track: {{ this.total_distance }} km in {{ this.flight_time }} min
            </div>
            <div style="margin: 4px 0; line-height: 1.3;">
                Altitude: {{ this.min_altitude }}–{{ this.max_altitude }} m
                (gain {{ this.altitude_gain }} m)
            </div>
            <div style="margin: 4px 0; line-height: 1.3;">
                Max speed: {{ this.max_speed }} km/h
            </div>
        </div>
        {% endmacro %}
        """
        )


def _track_bounds(track: Track) -> Tuple[float, float, float, float]:
    """Return (south, west, north, east) of the track in decimal degrees."""
    latitudes = [fix.latitude for fix in track]
    longitudes = [fix.longitude for fix in track]
    return min(latitudes), min(longitudes), max(latitudes), max(longitudes)


def create_flight_map(
    track: Track,
    metadata: FlightMetadata,
    summary: Summary,
    output_filename: str,
) -> None:
    """
    Create an interactive map of a flight and save it as HTML.

    Args:
        track: Fixes of the flight
        metadata: Flight metadata, used for the declared task
        summary: Statistics shown in the map legend
        output_filename: Path to save the HTML map

    Raises:
        ValueError: If the track has no fixes
    """
    if not track:
        raise ValueError("Cannot create a map for an empty track")

    south, west, north, east = _track_bounds(track)
    center_lat = (south + north) / 2
    center_lon = (west + east) / 2

    logger.debug(f"Creating map centered at ({center_lat:.4f}, {center_lon:.4f})")

    flight_map = folium.Map(location=[center_lat, center_lon], tiles=None)

    folium.TileLayer(
        tiles="OpenTopoMap",
        name="Topographic",
        control=True,
        show=True,
    ).add_to(flight_map)

    folium.TileLayer(
        tiles="https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}",
        attr=(
            "Tiles &copy; Esri &mdash; Source: Esri, i-cubed, USDA, USGS, AEX, GeoEye, "
            "Getmapping, Aerogrid, IGN, IGP, UPR-EGP, and the GIS User Community"
        ),
        name="Satellite",
        control=True,
        show=False,
    ).add_to(flight_map)

    folium.LayerControl().add_to(flight_map)

    coordinates = [[fix.latitude, fix.longitude] for fix in track]

    folium.PolyLine(
        coordinates,
        color="#2E86AB",
        weight=3,
        opacity=0.8,
        popup="Flight track",
        z_index=1,
    ).add_to(flight_map)

    folium.Marker(
        [track[0].latitude, track[0].longitude],
        popup=f"Start {track[0].timestamp:%H:%M:%S}",
        icon=folium.Icon(color="green", icon="play"),
    ).add_to(flight_map)

    folium.Marker(
        [track[-1].latitude, track[-1].longitude],
        popup=f"End {track[-1].timestamp:%H:%M:%S}",
        icon=folium.Icon(color="red", icon="stop"),
    ).add_to(flight_map)

    if metadata.task:
        task_coordinates = [[p.latitude, p.longitude] for p in metadata.task]
        folium.PolyLine(
            task_coordinates,
            color="#D23C4C",
            weight=2,
            opacity=0.9,
            dash_array="6 6",
            popup="Declared task",
            z_index=2,
        ).add_to(flight_map)

        for i, point in enumerate(metadata.task):
            folium.CircleMarker(
                [point.latitude, point.longitude],
                radius=5,
                color="#D23C4C",
                fill=True,
                popup=point.name or f"TP{i}",
            ).add_to(flight_map)

    flight_map.add_child(SummaryLegend(summary))

    flight_map.fit_bounds([[south, west], [north, east]])

    flight_map.save(output_filename)

    logger.debug(f"Map saved to {output_filename} with {len(track)} fixes")
