"""Core domain primitives for Media Atlas."""

from .models import (
    BoundingBox,
    DetailMeta,
    GeoPoint,
    MapViewResult,
    RegionType,
    Resource,
    ResourceType,
    SortStrategy,
    TrajectoryPoint,
)
from .exceptions import ProcessingError, RequestError

__all__ = [
    "BoundingBox",
    "DetailMeta",
    "GeoPoint",
    "MapViewResult",
    "RegionType",
    "Resource",
    "ResourceType",
    "SortStrategy",
    "TrajectoryPoint",
    "ProcessingError",
    "RequestError",
]
