"""Ordering and sampling of resources around the center of a map viewport."""

from __future__ import annotations

import logging
import math
import random
from typing import Iterable, Sequence, TypeVar

from ..core import BoundingBox, GeoPoint, Resource
from ..utils import haversine_distance

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Rough meters per degree of latitude, used to pre-filter radius searches.
_METERS_PER_DEGREE = 111_320.0


def distance_to_center(point: GeoPoint, bbox: BoundingBox) -> float:
    """Planar distance, in degrees, from ``point`` to the middle of ``bbox``."""

    center_lat, center_lng = bbox.center
    return math.hypot(point.latitude - center_lat, point.longitude - center_lng)


def sort_by_center_distance(resources: Iterable[Resource], bbox: BoundingBox) -> list[Resource]:
    """Return resources ordered from the center of ``bbox`` outwards.

    The sort is stable. Resources without usable coordinates follow all
    located ones, keeping their input order.
    """

    def sort_key(resource: Resource) -> tuple[int, float]:
        point = resource.point
        if point is None or not point.is_valid:
            return (1, 0.0)
        return (0, distance_to_center(point, bbox))

    return sorted(resources, key=sort_key)


def shuffled(items: Iterable[T], rng: random.Random | None = None) -> list[T]:
    """Return a shuffled copy of ``items``."""

    result = list(items)
    (rng or random.Random()).shuffle(result)
    return result


def sample_near_center(
    resources: Iterable[Resource],
    bbox: BoundingBox,
    limit: int,
    rng: random.Random | None = None,
) -> list[Resource]:
    """Pick ``limit`` resources at random among the ``2 * limit`` nearest the center.

    Only resources with valid coordinates are eligible. Pass a seeded
    :class:`random.Random` for a reproducible sample.
    """

    if limit <= 0:
        return []

    candidates = [
        (distance_to_center(resource.point, bbox), resource)
        for resource in resources
        if resource.point is not None and resource.point.is_valid
    ]
    candidates.sort(key=lambda item: item[0])
    nearest = [resource for _, resource in candidates[: limit * 2]]

    return shuffled(nearest, rng)[:limit]


def nearby_points(
    resources: Sequence[Resource],
    center: GeoPoint,
    radius_km: float = 1.0,
) -> list[Resource]:
    """Return resources within ``radius_km`` of ``center``.

    A resource sitting exactly on the center is not its own neighbour.
    """

    if not center.is_valid:
        return []

    radius_meters = radius_km * 1000
    lat_margin = radius_meters / _METERS_PER_DEGREE
    cos_lat = math.cos(math.radians(center.latitude))
    lng_margin = 180.0 if cos_lat < 1e-9 else lat_margin / cos_lat

    nearby: list[Resource] = []
    for resource in resources:
        point = resource.point
        if point is None or not point.is_valid:
            continue
        if point.latitude == center.latitude and point.longitude == center.longitude:
            continue
        if abs(point.latitude - center.latitude) > lat_margin:
            continue
        delta_lng = abs(point.longitude - center.longitude) % 360
        if min(delta_lng, 360 - delta_lng) > lng_margin:
            continue
        distance = haversine_distance(
            center.latitude, center.longitude, point.latitude, point.longitude
        )
        if distance <= radius_meters:
            nearby.append(resource)

    logger.debug("Found %d resources within %.2f km", len(nearby), radius_km)
    return nearby
