from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

_STORAGE_ROOT = Path(tempfile.mkdtemp(prefix="media-atlas-tests-"))
os.environ.setdefault("MEDIA_ATLAS_UPLOADS", str(_STORAGE_ROOT / "uploads"))
os.environ.setdefault("MEDIA_ATLAS_OUTPUTS", str(_STORAGE_ROOT / "outputs"))

from media_atlas.core import DetailMeta, Resource  # noqa: E402


def make_resource(
    resource_id: str,
    *,
    lat: float | None = None,
    lng: float | None = None,
    country: str | None = None,
    state: str | None = None,
    city: str | None = None,
    with_detail: bool = True,
    **detail_fields,
) -> Resource:
    detail = (
        DetailMeta(
            resource_id=resource_id,
            country=country,
            state=state,
            city=city,
            latitude=lat,
            longitude=lng,
            **detail_fields,
        )
        if with_detail
        else None
    )
    return Resource(resource_id=resource_id, detail=detail)


@pytest.fixture()
def resource_factory():
    return make_resource
