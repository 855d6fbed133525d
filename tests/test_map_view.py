import random

import pytest

from media_atlas.core import BoundingBox, RegionType, SortStrategy
from media_atlas.pipelines import MapViewPipeline
from media_atlas.services import ResourceLoader, ThumbnailCache


@pytest.fixture()
def pipeline():
    return MapViewPipeline(loader=ResourceLoader(), thumbnails=ThumbnailCache(placeholder="/none.png"))


@pytest.fixture()
def library(resource_factory):
    return [
        resource_factory("tokyo-1", lat=35.68, lng=139.76, country="Japan", state="Tokyo", city="Chiyoda"),
        resource_factory("osaka", lat=34.69, lng=135.50, country="Japan", state="Osaka", city="Kita"),
        resource_factory("tokyo-2", lat=35.66, lng=139.70, country="Japan", state="Tokyo", city="Shibuya"),
        resource_factory("paris", lat=48.85, lng=2.35, country="France", state="Île-de-France", city="Paris"),
        resource_factory("nowhere", country="Japan", state="Tokyo"),
    ]


def test_run_filters_by_region_then_bbox(pipeline, library):
    tokyo_box = BoundingBox(min_lat=35.5, min_lng=139.5, max_lat=35.82, max_lng=139.9)

    result = pipeline.run(
        library,
        country="Japan",
        bbox=tokyo_box,
        strategy=SortStrategy.CENTER,
    )

    assert result.region_filtered_count == 4
    assert result.total_count == 2
    assert [r.resource_id for r in result.resources] == ["tokyo-2", "tokyo-1"]


def test_run_paginates_and_attaches_thumbnails(pipeline, library):
    pipeline.thumbnails.preload({"osaka": "blob:osaka"})

    result = pipeline.run(library, strategy="unsorted", page=2, page_size=2)

    assert result.page == 2
    assert [r.resource_id for r in result.resources] == ["tokyo-2", "paris"]
    assert result.thumbnails == {"tokyo-2": "/none.png", "paris": "/none.png"}

    first_page = pipeline.run(library, strategy="unsorted", page=1, page_size=2)
    assert first_page.thumbnails["osaka"] == "blob:osaka"


def test_run_clamps_page_size(pipeline, library):
    pipeline.max_page_size = 3
    result = pipeline.run(library, page_size=50)
    assert result.page_size == 3
    assert len(result.resources) == 3


def test_center_random_is_reproducible(pipeline, library):
    world = BoundingBox(min_lat=-90, min_lng=-180, max_lat=90, max_lng=180)
    kwargs = dict(bbox=world, strategy=SortStrategy.CENTER_RANDOM, page_size=1)
    first = pipeline.run(library, rng=random.Random(7), **kwargs)
    second = pipeline.run(library, rng=random.Random(7), **kwargs)
    assert first.resources == second.resources
    assert first.total_count == 4


def test_result_serialises(pipeline, library):
    box = BoundingBox(min_lat=-10, min_lng=170, max_lat=10, max_lng=-170)
    payload = pipeline.run(library, bbox=box).as_dict()
    assert payload["totalCount"] == 0
    assert payload["bbox"] == {"minLat": -10, "minLng": 170, "maxLat": 10, "maxLng": -170}
    assert payload["resources"] == []


def test_summarize_world(pipeline, library):
    summary = pipeline.summarize(library, RegionType.WORLD)

    assert list(summary) == ["Japan", "France"]
    assert summary["Japan"]["count"] == 4
    assert summary["Japan"]["center"] == [36.2048, 138.2529]
    assert summary["France"]["resourceIds"] == ["paris"]


def test_summarize_country_and_state(pipeline, library):
    by_state = pipeline.summarize(library, RegionType.COUNTRY, country="Japan")
    assert {k: v["count"] for k, v in by_state.items()} == {"Tokyo": 3, "Osaka": 1, "Unknown": 1}
    assert by_state["Osaka"]["center"] == [34.6937, 135.5023]

    by_city = pipeline.summarize(library, RegionType.STATE, country="Japan", state="Tokyo")
    assert {k: v["count"] for k, v in by_city.items()} == {
        "Chiyoda": 1,
        "Unknown": 3,
        "Shibuya": 1,
    }
    assert by_city["Shibuya"]["center"] == [35.6581, 139.7017]
