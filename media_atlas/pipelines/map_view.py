"""Map view orchestration: filter, order and page a resource library."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Sequence

from ..config import APP_CONFIG, THUMBNAIL_CONFIG
from ..core import BoundingBox, MapViewResult, RegionType, Resource, SortStrategy
from ..services import (
    ResourceLoader,
    ThumbnailCache,
    filter_by_bbox,
    filter_by_region,
    group_by_region,
    order_resources,
    paginate,
    region_center,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MapViewPipeline:
    """Turns a resource library into what a map view displays."""

    loader: ResourceLoader
    thumbnails: ThumbnailCache
    max_page_size: int = APP_CONFIG.max_page_size

    def run(
        self,
        resources: Sequence[Resource],
        *,
        country: str | None = None,
        state: str | None = None,
        bbox: BoundingBox | None = None,
        strategy: SortStrategy | str = SortStrategy.NEWEST,
        page: int = 1,
        page_size: int = APP_CONFIG.default_page_size,
        rng: random.Random | None = None,
    ) -> MapViewResult:
        page_size = max(1, min(page_size, self.max_page_size))

        region_filtered = filter_by_region(resources, country, state)
        in_view = filter_by_bbox(region_filtered, bbox)
        ordered = order_resources(in_view, strategy, bbox, page_size, rng)
        visible = paginate(ordered, page, page_size)

        logger.debug(
            "Map view: %d resources, %d in region, %d in view, %d on page %d",
            len(resources),
            len(region_filtered),
            len(in_view),
            len(visible),
            page,
        )
        return MapViewResult(
            region_filtered_count=len(region_filtered),
            total_count=len(in_view),
            page=max(page, 1),
            page_size=page_size,
            resources=visible,
            bbox=bbox,
            thumbnails={r.resource_id: self.thumbnails.get(r.resource_id) for r in visible},
        )

    def summarize(
        self,
        resources: Iterable[Resource],
        region_type: RegionType | str,
        country: str | None = None,
        state: str | None = None,
    ) -> dict[str, dict]:
        """Count resources per region bucket, with a center for each bucket."""

        groups = group_by_region(resources, region_type, country, state)
        summary: dict[str, dict] = {}
        for key, members in groups.items():
            if region_type == RegionType.WORLD:
                center = region_center(region_type, country=key)
            elif region_type == RegionType.COUNTRY:
                center = region_center(region_type, country=country, state=key)
            else:
                center = region_center(region_type, country=country, state=state, city=key)
            summary[key] = {
                "count": len(members),
                "center": list(center) if center else None,
                "resourceIds": [member.resource_id for member in members],
            }
        return summary

    @classmethod
    def default(cls) -> "MapViewPipeline":
        return cls(
            loader=ResourceLoader(),
            thumbnails=ThumbnailCache(
                max_entries=THUMBNAIL_CONFIG.max_entries,
                placeholder=THUMBNAIL_CONFIG.placeholder,
            ),
        )
