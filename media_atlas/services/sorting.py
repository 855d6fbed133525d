"""Sort strategies and pagination for resource listings."""

from __future__ import annotations

import random
from datetime import datetime
from typing import Callable, Sequence, TypeVar

from ..core import BoundingBox, Resource, SortStrategy
from .proximity import sample_near_center, shuffled, sort_by_center_distance

T = TypeVar("T")


def order_resources(
    resources: Sequence[Resource],
    strategy: SortStrategy | str,
    bbox: BoundingBox | None = None,
    page_size: int = 20,
    rng: random.Random | None = None,
) -> list[Resource]:
    """Order resources the way the selected view preference asks for.

    ``Recorded`` lists the oldest recording first and undated resources
    last, whereas ``newest`` lists the latest upload first. Earlier
    front-ends sorted ``Recorded`` newest first; clients relying on that
    should reverse the page themselves.
    """

    if strategy == SortStrategy.NEWEST:
        return _by_date(resources, lambda r: r.created_at, newest_first=True)
    if strategy == SortStrategy.SHUFFLE:
        return shuffled(resources, rng)
    if strategy == SortStrategy.CENTER:
        return sort_by_center_distance(resources, bbox) if bbox else list(resources)
    if strategy == SortStrategy.CENTER_RANDOM:
        if bbox is None:
            return list(resources)
        return sample_near_center(resources, bbox, page_size * 2, rng)
    if strategy == SortStrategy.RECORDED:
        return _by_date(
            resources,
            lambda r: r.detail.recorded_at if r.detail is not None else None,
            newest_first=False,
        )
    return list(resources)


def _by_date(
    resources: Sequence[Resource],
    get_date: Callable[[Resource], datetime | None],
    *,
    newest_first: bool,
) -> list[Resource]:
    dated = [r for r in resources if get_date(r) is not None]
    undated = [r for r in resources if get_date(r) is None]
    dated.sort(key=get_date, reverse=newest_first)
    return dated + undated


def paginate(items: Sequence[T], page: int, page_size: int) -> list[T]:
    """Return the 1-based ``page`` of ``items``."""

    if page_size <= 0:
        return []
    page = max(page, 1)
    start = (page - 1) * page_size
    return list(items[start : start + page_size])
