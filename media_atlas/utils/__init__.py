"""Utility helpers for the Media Atlas project."""

from .geo import haversine_distance, initial_bearing, is_valid_coordinate, is_valid_point
from .io import detect_encoding, ensure_directory, read_text, safe_filename

__all__ = [
    "haversine_distance",
    "initial_bearing",
    "is_valid_coordinate",
    "is_valid_point",
    "detect_encoding",
    "ensure_directory",
    "read_text",
    "safe_filename",
]
