"""Domain models used throughout Media Atlas."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Mapping

from ..utils.geo import is_valid_point


class ResourceType(str, Enum):
    BOOKS = "books"
    DOCUMENTS = "documents"
    IMAGES = "images"
    MUSIC = "music"
    VIDEOS = "videos"


class RegionType(str, Enum):
    """Map zoom level deciding which administrative field groups resources."""

    WORLD = "world"
    COUNTRY = "country"
    STATE = "state"


class SortStrategy(str, Enum):
    NEWEST = "newest"
    CENTER = "center"
    CENTER_RANDOM = "center-random"
    SHUFFLE = "shuffle"
    RECORDED = "Recorded"


def parse_float(value: object) -> float | None:
    if value in (None, "", "null"):
        return None
    if isinstance(value, bool):
        return None
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def parse_text(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_datetime(value: object) -> datetime | None:
    """Parse ISO-8601 strings and epoch milliseconds into aware datetimes."""

    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    else:
        raw = str(value).strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _pick(data: Mapping[str, object], *keys: str) -> object:
    for key in keys:
        if key in data:
            return data[key]
    return None


@dataclass(frozen=True, slots=True)
class GeoPoint:
    latitude: float | None
    longitude: float | None

    @property
    def is_valid(self) -> bool:
        return is_valid_point(self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Rectangular lat/lng area.

    ``min_lng > max_lng`` encodes a box crossing the antimeridian. Callers must
    keep ``min_lat <= max_lat``; it is not checked here.
    """

    min_lat: float
    min_lng: float
    max_lat: float
    max_lng: float

    @property
    def wraps_antimeridian(self) -> bool:
        return self.min_lng > self.max_lng

    @property
    def center(self) -> tuple[float, float]:
        """Planar midpoint of the box as ``(lat, lng)``."""
        return (
            (self.min_lat + self.max_lat) / 2,
            (self.min_lng + self.max_lng) / 2,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "BoundingBox":
        values = {}
        for attr, camel in (
            ("min_lat", "minLat"),
            ("min_lng", "minLng"),
            ("max_lat", "maxLat"),
            ("max_lng", "maxLng"),
        ):
            number = parse_float(_pick(data, camel, attr))
            if number is None:
                raise ValueError(f"Bounding box is missing a numeric '{camel}'")
            values[attr] = number
        return cls(**values)

    def as_dict(self) -> dict:
        return {
            "minLat": self.min_lat,
            "minLng": self.min_lng,
            "maxLat": self.max_lat,
            "maxLng": self.max_lng,
        }


@dataclass(slots=True)
class DetailMeta:
    """Per-resource location and descriptive metadata."""

    resource_id: str | None = None
    title: str | None = None
    description: str | None = None
    country: str | None = None
    state: str | None = None
    city: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    storage_location: str | None = None
    recorded_at: datetime | None = None

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "DetailMeta":
        return cls(
            resource_id=parse_text(_pick(data, "resourceId", "resource_id")),
            title=parse_text(_pick(data, "title", "Title")),
            description=parse_text(_pick(data, "description", "Description")),
            country=parse_text(_pick(data, "country", "Country")),
            state=parse_text(_pick(data, "state", "State")),
            city=parse_text(_pick(data, "city", "City")),
            latitude=parse_float(_pick(data, "latitude", "Latitude", "lat")),
            longitude=parse_float(_pick(data, "longitude", "Longitude", "lng")),
            storage_location=parse_text(
                _pick(data, "storageLocation", "storage_location")
            ),
            recorded_at=parse_datetime(
                _pick(data, "recordedDateTime", "recorded_at", "recordedAt")
            ),
        )

    def as_dict(self) -> dict:
        return {
            "resourceId": self.resource_id,
            "title": self.title,
            "description": self.description,
            "country": self.country,
            "state": self.state,
            "city": self.city,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "storageLocation": self.storage_location,
            "recordedDateTime": (
                self.recorded_at.isoformat() if self.recorded_at else None
            ),
        }


_DETAIL_KEYS = (
    "title",
    "country",
    "state",
    "city",
    "latitude",
    "longitude",
    "lat",
    "lng",
    "Country",
    "State",
    "City",
    "Latitude",
    "Longitude",
    "recordedDateTime",
    "recorded_at",
)


@dataclass(slots=True)
class Resource:
    """A media library record as returned by the storage API."""

    resource_id: str
    resource_type: ResourceType | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    detail: DetailMeta | None = None
    attributes: dict = field(default_factory=dict)

    @property
    def point(self) -> GeoPoint | None:
        return self.detail.point if self.detail is not None else None

    @classmethod
    def from_record(cls, record: Mapping[str, object]) -> "Resource":
        """Build a resource from a nested API record or a flat export row."""

        basic = record.get("basicMeta")
        source: Mapping[str, object] = basic if isinstance(basic, Mapping) else record

        raw_detail = record.get("detailMeta")
        if isinstance(raw_detail, Mapping):
            detail = DetailMeta.from_mapping(raw_detail)
        elif source is record and any(parse_text(record.get(key)) for key in _DETAIL_KEYS):
            # Flat export row: detail fields sit next to the id.
            detail = DetailMeta.from_mapping(record)
        else:
            detail = None

        resource_id = parse_text(_pick(source, "resourceId", "resource_id", "id"))
        if resource_id is None:
            raise ValueError("Resource record has no resource id")

        raw_type = parse_text(_pick(source, "resourceType", "resource_type"))
        try:
            resource_type = ResourceType(raw_type) if raw_type else None
        except ValueError:
            resource_type = None

        known = {"basicMeta", "detailMeta"}
        return cls(
            resource_id=resource_id,
            resource_type=resource_type,
            created_at=parse_datetime(_pick(source, "createdAt", "created_at")),
            updated_at=parse_datetime(_pick(source, "updatedAt", "updated_at")),
            detail=detail,
            attributes={k: v for k, v in record.items() if k not in known},
        )

    def as_dict(self) -> dict:
        return {
            "basicMeta": {
                "resourceId": self.resource_id,
                "resourceType": self.resource_type.value if self.resource_type else None,
                "createdAt": self.created_at.isoformat() if self.created_at else None,
                "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
            },
            "detailMeta": self.detail.as_dict() if self.detail is not None else None,
        }


@dataclass(slots=True)
class TrajectoryPoint:
    latitude: float
    longitude: float
    recorded_at: datetime
    resource_id: str
    resource_index: int
    title: str
    direction: float | None = None
    speed: float | None = None

    def as_dict(self) -> dict:
        return {
            "lat": self.latitude,
            "lng": self.longitude,
            "recordedDateTime": self.recorded_at.isoformat(),
            "resourceId": self.resource_id,
            "resourceIndex": self.resource_index,
            "title": self.title,
            "direction": self.direction,
            "speed": self.speed,
        }


@dataclass(slots=True)
class MapViewResult:
    """Information returned to map view callers."""

    region_filtered_count: int
    total_count: int
    page: int
    page_size: int
    resources: list[Resource]
    bbox: BoundingBox | None = None
    thumbnails: dict[str, str] = field(default_factory=dict)

    def as_dict(self) -> dict:
        return {
            "regionFilteredCount": self.region_filtered_count,
            "totalCount": self.total_count,
            "page": self.page,
            "pageSize": self.page_size,
            "bbox": self.bbox.as_dict() if self.bbox else None,
            "resources": [resource.as_dict() for resource in self.resources],
            "thumbnails": dict(self.thumbnails),
        }
