#!/usr/bin/env python3
"""
Output filename helpers for flight maps.
"""

import logging
import os

logger = logging.getLogger(__name__)

MAX_NUMBERED_VARIANTS = 99


def _reserve(candidate: str) -> bool:
    """
    Create an empty file at candidate unless it already exists.

    Returns:
        True if the file was created, False if it already existed

    Raises:
        ValueError: If the file cannot be created
    """
    try:
        with open(candidate, "x"):
            pass
    except FileExistsError:
        return False
    except OSError as e:
        logger.error(f"Cannot create file {candidate}: {e}")
        raise ValueError(f"Cannot create file: {e}")
    return True


def generate_map_filename(input_filename: str) -> str:
    """
    Derive a map filename from a track filename and reserve it on disk.

    "flight.gpx" becomes "flight map.html"; if that exists, "flight map (1).html",
    "flight map (2).html" and so on are tried. Files are created exclusively so
    a concurrent run cannot claim the same name.

    Args:
        input_filename: Path to the input track file

    Returns:
        Path of the reserved, empty output file

    Raises:
        RuntimeError: If every numbered variant is taken
        ValueError: If a file cannot be created
    """
    input_dir = os.path.dirname(input_filename)
    base_name, ext = os.path.splitext(os.path.basename(input_filename))
    if ext.lower() != ".gpx":
        base_name += ext

    base_output = os.path.join(input_dir, base_name + " map")

    if _reserve(base_output + ".html"):
        return base_output + ".html"

    for i in range(1, MAX_NUMBERED_VARIANTS + 1):
        candidate = f"{base_output} ({i}).html"
        if _reserve(candidate):
            return candidate

    logger.error(
        f"Could not find an available filename after {MAX_NUMBERED_VARIANTS} attempts. "
        f"Please clean up your output directory or specify --output explicitly."
    )
    raise RuntimeError(
        f"No available filename found after {MAX_NUMBERED_VARIANTS} attempts"
    )
