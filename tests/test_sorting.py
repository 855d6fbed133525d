import random
from datetime import datetime, timezone

from media_atlas.core import BoundingBox, Resource, SortStrategy
from media_atlas.services.sorting import order_resources, paginate

BOX = BoundingBox(min_lat=-10.0, min_lng=-10.0, max_lat=10.0, max_lng=10.0)


def ids(resources):
    return [r.resource_id for r in resources]


def dated(resource_id, day):
    created = datetime(2024, 1, day, tzinfo=timezone.utc) if day else None
    return Resource(resource_id=resource_id, created_at=created)


def test_newest_first_with_undated_last():
    resources = [dated("old", 1), dated("none", None), dated("new", 20), dated("mid", 10)]
    assert ids(order_resources(resources, SortStrategy.NEWEST)) == ["new", "mid", "old", "none"]


def test_recorded_oldest_first(resource_factory):
    resources = [
        resource_factory("late", recorded_at=datetime(2024, 3, 1, tzinfo=timezone.utc)),
        resource_factory("undated"),
        resource_factory("early", recorded_at=datetime(2024, 1, 1, tzinfo=timezone.utc)),
    ]
    assert ids(order_resources(resources, "Recorded")) == ["early", "late", "undated"]


def test_center_strategy_needs_a_box(resource_factory):
    resources = [resource_factory("far", lat=5.0, lng=5.0), resource_factory("near", lat=0.0, lng=1.0)]
    assert ids(order_resources(resources, SortStrategy.CENTER)) == ["far", "near"]
    assert ids(order_resources(resources, SortStrategy.CENTER, BOX)) == ["near", "far"]


def test_center_random_samples_twice_the_page_size(resource_factory):
    resources = [resource_factory(f"r{i}", lat=float(i), lng=0.0) for i in range(10)]
    ordered = order_resources(resources, "center-random", BOX, page_size=2, rng=random.Random(3))
    assert len(ordered) == 4
    assert set(ids(ordered)) <= {f"r{i}" for i in range(8)}


def test_shuffle_is_a_permutation():
    resources = [dated(str(i), None) for i in range(10)]
    ordered = order_resources(resources, SortStrategy.SHUFFLE, rng=random.Random(0))
    assert sorted(ids(ordered), key=int) == ids(resources)


def test_unknown_strategy_keeps_input_order():
    resources = [dated("b", 2), dated("a", 1)]
    assert ids(order_resources(resources, "alphabetical")) == ["b", "a"]


def test_paginate():
    items = list(range(7))
    assert paginate(items, 1, 3) == [0, 1, 2]
    assert paginate(items, 3, 3) == [6]
    assert paginate(items, 4, 3) == []
    assert paginate(items, 0, 3) == [0, 1, 2]
    assert paginate(items, 1, 0) == []
