"""Resolve map centers for countries, states and cities."""

from __future__ import annotations

from ..core import RegionType
from ..data import CITY_CENTERS, COUNTRY_CENTERS, COUNTRY_NAMES, STATE_CENTERS

Coordinates = tuple[float, float]

WORLD_CENTER: Coordinates = (0.0, 0.0)

_NAME_TO_CODE = {
    name.upper(): code for code, names in COUNTRY_NAMES.items() for name in names
}


def resolve_country_code(name: str | None) -> str | None:
    """Map a country name or two-letter code to its ISO 3166-1 alpha-2 code."""

    if not name:
        return None
    normalized = name.strip().upper()
    if normalized in COUNTRY_CENTERS:
        return normalized
    code = _NAME_TO_CODE.get(normalized)
    if code:
        return code
    # Unlisted two-letter input is assumed to already be a code.
    if len(normalized) == 2:
        return normalized
    return None


def country_center(country: str | None) -> Coordinates | None:
    code = resolve_country_code(country)
    if code is None:
        return None
    return COUNTRY_CENTERS.get(code)


def state_center(country: str | None, state: str | None) -> Coordinates | None:
    """Center of a state, falling back to its country's center."""

    if not country:
        return WORLD_CENTER
    if not state:
        return country_center(country)
    return STATE_CENTERS.get(country, {}).get(state) or country_center(country)


def city_center(
    country: str | None, state: str | None, city: str | None
) -> Coordinates | None:
    """Center of a city, falling back to its state and then its country."""

    if not country:
        return WORLD_CENTER
    if not state:
        return country_center(country)
    if not city:
        return state_center(country, state)
    return CITY_CENTERS.get(country, {}).get(state, {}).get(city) or state_center(
        country, state
    )


def region_center(
    region_type: RegionType | str,
    country: str | None = None,
    state: str | None = None,
    city: str | None = None,
) -> Coordinates | None:
    """Center of a region bucket shown at the ``region_type`` zoom level."""

    if region_type == RegionType.WORLD:
        return country_center(country) if country else WORLD_CENTER
    if region_type == RegionType.COUNTRY:
        return state_center(country, state)
    if region_type == RegionType.STATE:
        return city_center(country, state, city)
    return None
