"""Static reference data."""

from .regions import CITY_CENTERS, COUNTRY_CENTERS, COUNTRY_NAMES, STATE_CENTERS

__all__ = ["CITY_CENTERS", "COUNTRY_CENTERS", "COUNTRY_NAMES", "STATE_CENTERS"]
