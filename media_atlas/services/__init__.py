"""Service layer exports."""

from .bbox import filter_by_bbox, is_within_bbox
from .locations import (
    city_center,
    country_center,
    region_center,
    resolve_country_code,
    state_center,
)
from .proximity import (
    distance_to_center,
    nearby_points,
    sample_near_center,
    shuffled,
    sort_by_center_distance,
)
from .regions import UNKNOWN_REGION, filter_by_region, group_by_region, region_counts
from .resource_loader import ResourceLoader
from .sorting import order_resources, paginate
from .thumbnails import ThumbnailCache
from .trajectory import build_trajectory

__all__ = [
    "filter_by_bbox",
    "is_within_bbox",
    "city_center",
    "country_center",
    "region_center",
    "resolve_country_code",
    "state_center",
    "distance_to_center",
    "nearby_points",
    "sample_near_center",
    "shuffled",
    "sort_by_center_distance",
    "UNKNOWN_REGION",
    "filter_by_region",
    "group_by_region",
    "region_counts",
    "ResourceLoader",
    "order_resources",
    "paginate",
    "ThumbnailCache",
    "build_trajectory",
]
