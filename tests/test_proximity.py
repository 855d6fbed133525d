import math
import random

import pytest

from media_atlas.core import BoundingBox, GeoPoint
from media_atlas.services.proximity import (
    distance_to_center,
    nearby_points,
    sample_near_center,
    shuffled,
    sort_by_center_distance,
)

BOX = BoundingBox(min_lat=-10.0, min_lng=-10.0, max_lat=10.0, max_lng=10.0)


@pytest.fixture()
def ring(resource_factory):
    """Ten resources at increasing distance from the origin."""
    return [resource_factory(f"r{i}", lat=float(i), lng=0.0) for i in range(10)]


def test_distance_to_center_is_planar_norm():
    assert distance_to_center(GeoPoint(3.0, 4.0), BOX) == pytest.approx(5.0)


def test_sort_by_center_distance(resource_factory):
    far = resource_factory("far", lat=9.0, lng=9.0)
    near = resource_factory("near", lat=1.0, lng=0.0)
    middle = resource_factory("middle", lat=3.0, lng=3.0)

    result = sort_by_center_distance([far, near, middle], BOX)

    assert [r.resource_id for r in result] == ["near", "middle", "far"]


def test_sort_places_unlocated_resources_last_in_input_order(resource_factory):
    missing_a = resource_factory("missing-a")
    far = resource_factory("far", lat=8.0, lng=0.0)
    nan = resource_factory("nan", lat=math.nan, lng=0.0)
    near = resource_factory("near", lat=1.0, lng=0.0)
    no_detail = resource_factory("no-detail", with_detail=False)

    result = sort_by_center_distance([missing_a, far, nan, near, no_detail], BOX)

    assert [r.resource_id for r in result] == ["near", "far", "missing-a", "nan", "no-detail"]


def test_sort_is_idempotent(ring, resource_factory):
    mixed = list(reversed(ring)) + [resource_factory("x")]
    once = sort_by_center_distance(mixed, BOX)
    assert sort_by_center_distance(once, BOX) == once


def test_sort_uses_box_center(resource_factory):
    box = BoundingBox(min_lat=20.0, min_lng=20.0, max_lat=40.0, max_lng=40.0)
    origin = resource_factory("origin", lat=0.0, lng=0.0)
    centered = resource_factory("centered", lat=30.0, lng=30.0)
    assert [r.resource_id for r in sort_by_center_distance([origin, centered], box)] == [
        "centered",
        "origin",
    ]


def test_sample_returns_distinct_members_of_input(ring):
    sample = sample_near_center(ring, BOX, 3)

    assert len(sample) == 3
    assert len({r.resource_id for r in sample}) == 3
    assert all(r in ring for r in sample)


def test_sample_draws_only_from_nearest_candidates(ring):
    for seed in range(20):
        sample = sample_near_center(ring, BOX, 3, random.Random(seed))
        assert {r.resource_id for r in sample} <= {f"r{i}" for i in range(6)}


def test_sample_is_reproducible_with_seeded_rng(ring):
    first = sample_near_center(ring, BOX, 4, random.Random(42))
    second = sample_near_center(ring, BOX, 4, random.Random(42))
    assert first == second


def test_sample_with_large_limit_returns_available(ring, resource_factory):
    resources = ring[:4] + [resource_factory("missing")]
    sample = sample_near_center(resources, BOX, 10)
    assert sorted(r.resource_id for r in sample) == ["r0", "r1", "r2", "r3"]


def test_sample_excludes_nan_coordinates(resource_factory):
    valid = resource_factory("valid", lat=1.0, lng=1.0)
    nan = resource_factory("nan", lat=math.nan, lng=1.0)
    assert sample_near_center([nan, valid], BOX, 5) == [valid]


@pytest.mark.parametrize("limit", [0, -1])
def test_sample_with_non_positive_limit_is_empty(ring, limit):
    assert sample_near_center(ring, BOX, limit) == []


def test_shuffled_leaves_input_untouched():
    items = list(range(20))
    result = shuffled(items, random.Random(1))
    assert items == list(range(20))
    assert sorted(result) == items


def test_nearby_points_within_radius(resource_factory):
    center = GeoPoint(35.6812, 139.7671)
    same_spot = resource_factory("same", lat=35.6812, lng=139.7671)
    close = resource_factory("close", lat=35.6850, lng=139.7671)  # ~420 m north
    far = resource_factory("far", lat=35.6908, lng=139.7001)
    missing = resource_factory("missing")

    result = nearby_points([same_spot, close, far, missing], center, radius_km=1.0)

    assert [r.resource_id for r in result] == ["close"]


def test_nearby_points_across_antimeridian(resource_factory):
    center = GeoPoint(0.0, 179.999)
    across = resource_factory("across", lat=0.0, lng=-179.999)
    assert nearby_points([across], center, radius_km=1.0) == [across]
