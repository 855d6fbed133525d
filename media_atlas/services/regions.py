"""Group and filter resources by administrative region."""

from __future__ import annotations

from typing import Iterable, Mapping

from ..core import RegionType, Resource

UNKNOWN_REGION = "Unknown"


def group_by_region(
    resources: Iterable[Resource],
    region_type: RegionType | str,
    active_country: str | None = None,
    active_state: str | None = None,
) -> dict[str, list[Resource]]:
    """Partition resources into buckets for the given zoom level.

    ``world`` buckets by country. ``country`` buckets by state, but only for
    resources in ``active_country``; everything else lands in ``"Unknown"``.
    ``state`` does the same with cities and ``active_state``. Resources without
    detail metadata, and every resource under an unrecognised zoom level, are
    left out. Buckets and their members keep first-seen order.
    """

    groups: dict[str, list[Resource]] = {}
    for resource in resources:
        key = _group_key(resource, region_type, active_country, active_state)
        if key is None:
            continue
        groups.setdefault(key, []).append(resource)
    return groups


def _group_key(
    resource: Resource,
    region_type: RegionType | str,
    active_country: str | None,
    active_state: str | None,
) -> str | None:
    detail = resource.detail
    if detail is None:
        return None

    country = detail.country or UNKNOWN_REGION
    state = detail.state or UNKNOWN_REGION
    city = detail.city or UNKNOWN_REGION

    if region_type == RegionType.WORLD:
        return country
    if region_type == RegionType.COUNTRY:
        if active_country and active_country == country:
            return state
        return UNKNOWN_REGION
    if region_type == RegionType.STATE:
        if active_state and active_state == state:
            return city
        return UNKNOWN_REGION
    return None


def filter_by_region(
    resources: Iterable[Resource],
    country: str | None = None,
    state: str | None = None,
) -> list[Resource]:
    """Keep resources matching the country and state filters that are set."""

    filtered = list(resources)
    if country:
        filtered = [r for r in filtered if r.detail is not None and r.detail.country == country]
    if state:
        filtered = [r for r in filtered if r.detail is not None and r.detail.state == state]
    return filtered


def region_counts(groups: Mapping[str, list[Resource]]) -> dict[str, int]:
    return {key: len(members) for key, members in groups.items()}
