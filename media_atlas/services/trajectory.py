"""Build time-ordered trajectories from located resources."""

from __future__ import annotations

from typing import Iterable

from ..core import Resource, TrajectoryPoint
from ..utils import haversine_distance, initial_bearing


def build_trajectory(resources: Iterable[Resource]) -> list[TrajectoryPoint]:
    """Return the recorded positions of ``resources`` in time order.

    Resources need valid coordinates and a recording time to appear. With two
    or more points each one carries a bearing (degrees) and speed (km/h): the
    first point is measured against the next, every other point against its
    predecessor.
    """

    points: list[TrajectoryPoint] = []
    for index, resource in enumerate(resources):
        detail = resource.detail
        if detail is None or detail.recorded_at is None or not detail.point.is_valid:
            continue
        points.append(
            TrajectoryPoint(
                latitude=detail.latitude,
                longitude=detail.longitude,
                recorded_at=detail.recorded_at,
                resource_id=resource.resource_id,
                resource_index=index,
                title=detail.title or "Untitled",
            )
        )

    points.sort(key=lambda point: point.recorded_at)
    if len(points) < 2:
        return points

    for index, point in enumerate(points):
        if index == 0:
            start, end = point, points[1]
        else:
            start, end = points[index - 1], point
        point.direction = initial_bearing(
            start.latitude, start.longitude, end.latitude, end.longitude
        )
        point.speed = _speed_kmh(start, end)
    return points


def _speed_kmh(start: TrajectoryPoint, end: TrajectoryPoint) -> float:
    hours = (end.recorded_at - start.recorded_at).total_seconds() / 3600
    if hours <= 0:
        return 0.0
    kilometers = haversine_distance(
        start.latitude, start.longitude, end.latitude, end.longitude
    ) / 1000
    return kilometers / hours
