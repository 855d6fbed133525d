"""Bounding-box membership checks."""

from __future__ import annotations

from typing import Iterable

from ..core import BoundingBox, GeoPoint, Resource


def is_within_bbox(point: GeoPoint | None, bbox: BoundingBox) -> bool:
    """Return ``True`` when ``point`` lies inside ``bbox``, edges included.

    A box with ``min_lng > max_lng`` crosses the antimeridian and covers
    ``[min_lng, 180]`` plus ``[-180, max_lng]``. Missing or non-finite
    coordinates are never inside any box.
    """

    if point is None or not point.is_valid:
        return False

    lat_in_range = bbox.min_lat <= point.latitude <= bbox.max_lat

    if bbox.wraps_antimeridian:
        lng_in_range = point.longitude >= bbox.min_lng or point.longitude <= bbox.max_lng
    else:
        lng_in_range = bbox.min_lng <= point.longitude <= bbox.max_lng

    return lat_in_range and lng_in_range


def filter_by_bbox(resources: Iterable[Resource], bbox: BoundingBox | None) -> list[Resource]:
    """Keep the resources located inside ``bbox``; no box keeps everything."""

    if bbox is None:
        return list(resources)
    return [resource for resource in resources if is_within_bbox(resource.point, bbox)]
