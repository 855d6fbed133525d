"""REST API blueprint."""

from __future__ import annotations

import random
import uuid
from datetime import datetime, timezone
from pathlib import Path

from flask import Blueprint, current_app, jsonify, request
from rq.exceptions import NoSuchJobError
from rq.job import Job

from ..config import APP_CONFIG, STORAGE_PATHS
from ..core import BoundingBox, GeoPoint, RegionType, Resource, SortStrategy
from ..core.exceptions import RequestError
from ..pipelines import MapViewPipeline
from ..services import (
    build_trajectory,
    filter_by_bbox,
    group_by_region,
    nearby_points,
    region_counts,
    sample_near_center,
    sort_by_center_distance,
)
from ..utils import ensure_directory, safe_filename

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(RequestError)
def handle_request_error(exc: RequestError):
    return jsonify({"error": str(exc), **({"details": exc.details} if exc.details else {})}), exc.status_code


@api_bp.post("/regions/group")
def group_regions():
    payload = _payload()
    resources = _resources(payload)
    region_type = payload.get("regionType", RegionType.WORLD.value)
    groups = group_by_region(
        resources, region_type, payload.get("country"), payload.get("state")
    )
    return jsonify(
        {
            "groups": {key: _serialize(members) for key, members in groups.items()},
            "counts": region_counts(groups),
        }
    )


@api_bp.post("/regions/summary")
def summarize_regions():
    payload = _payload()
    summary = _pipeline().summarize(
        _resources(payload),
        payload.get("regionType", RegionType.WORLD.value),
        payload.get("country"),
        payload.get("state"),
    )
    return jsonify({"regions": summary})


@api_bp.post("/bbox/filter")
def bbox_filter():
    payload = _payload()
    bbox = _bbox(payload)
    return jsonify({"resources": _serialize(filter_by_bbox(_resources(payload), bbox))})


@api_bp.post("/bbox/sort")
def bbox_sort():
    payload = _payload()
    bbox = _bbox(payload)
    return jsonify({"resources": _serialize(sort_by_center_distance(_resources(payload), bbox))})


@api_bp.post("/bbox/sample")
def bbox_sample():
    payload = _payload()
    bbox = _bbox(payload)
    limit = _int(payload, "limit", APP_CONFIG.default_page_size)
    sample = sample_near_center(_resources(payload), bbox, limit, _rng(payload))
    return jsonify({"resources": _serialize(sample)})


@api_bp.post("/nearby")
def nearby():
    payload = _payload()
    try:
        center = GeoPoint(float(payload["lat"]), float(payload["lng"]))
        radius_km = float(payload.get("radiusKm", 1.0))
    except (KeyError, TypeError, ValueError) as exc:
        raise RequestError("'lat', 'lng' and 'radiusKm' must be numbers") from exc
    return jsonify({"resources": _serialize(nearby_points(_resources(payload), center, radius_km))})


@api_bp.post("/map-view")
def map_view():
    payload = _payload()
    bbox = _bbox(payload) if payload.get("bbox") is not None else None
    strategy = payload.get("sortStrategy", SortStrategy.NEWEST.value)
    result = _pipeline().run(
        _resources(payload),
        country=payload.get("country"),
        state=payload.get("state"),
        bbox=bbox,
        strategy=strategy,
        page=_int(payload, "page", 1),
        page_size=_int(payload, "pageSize", APP_CONFIG.default_page_size),
        rng=_rng(payload),
    )
    return jsonify(result.as_dict())


@api_bp.post("/trajectory")
def trajectory():
    payload = _payload()
    points = build_trajectory(_resources(payload))
    return jsonify({"points": [point.as_dict() for point in points]})


@api_bp.put("/thumbnails")
def preload_thumbnails():
    payload = _payload()
    thumbnails = {str(k): str(v) for k, v in payload.items() if v}
    _pipeline().thumbnails.preload(thumbnails)
    return jsonify({"cached": len(_pipeline().thumbnails)})


@api_bp.get("/thumbnails/<resource_id>")
def get_thumbnail(resource_id: str):
    return jsonify({"resourceId": resource_id, "url": _pipeline().thumbnails.get(resource_id)})


@api_bp.delete("/thumbnails")
@api_bp.delete("/thumbnails/<resource_id>")
def invalidate_thumbnails(resource_id: str | None = None):
    _pipeline().thumbnails.invalidate(resource_id)
    return jsonify({"cached": len(_pipeline().thumbnails)})


@api_bp.post("/jobs")
def create_job():
    """Queue a region summary for uploaded resource exports."""

    if "resource_files" not in request.files:
        raise RequestError("resource_files field is required")

    job_id = str(uuid.uuid4())
    job_dir = ensure_directory(STORAGE_PATHS.uploads / job_id)
    resource_paths: list[Path] = []

    for uploaded in request.files.getlist("resource_files"):
        if not uploaded.filename:
            continue
        if not _allowed(uploaded.filename, APP_CONFIG.allowed_export_extensions):
            raise RequestError(
                f"Invalid resource export: {uploaded.filename}",
                details={
                    "filename": uploaded.filename,
                    "allowed_extensions": list(APP_CONFIG.allowed_export_extensions),
                },
            )
        target = job_dir / safe_filename(uploaded.filename)
        uploaded.save(target)
        resource_paths.append(target)

    if not resource_paths:
        raise RequestError("No resource exports were uploaded")

    created_at = datetime.now(timezone.utc).isoformat()
    job = _queue().enqueue(
        "media_atlas.tasks.summarize_library",
        kwargs={
            "job_id": job_id,
            "resource_paths": [str(path) for path in resource_paths],
            "region_type": request.form.get("region_type", RegionType.WORLD.value),
            "country": request.form.get("country") or None,
            "state": request.form.get("state") or None,
        },
        job_id=job_id,
        meta={"created_at": created_at},
    )

    response = {
        "job_id": job.id,
        "status": job.get_status(refresh=False),
        "created_at": created_at,
    }
    return jsonify(response), 202


@api_bp.get("/jobs/<job_id>")
def job_status(job_id: str):
    try:
        job = Job.fetch(job_id, connection=_connection())
    except NoSuchJobError as exc:
        raise RequestError("Job not found", details={"job_id": job_id}, status_code=404) from exc

    payload: dict[str, object] = {
        "job_id": job.id,
        "status": job.get_status(refresh=True),
        "created_at": job.meta.get("created_at"),
    }

    if job.is_finished:
        payload["result"] = job.result or {}
        return jsonify(payload), 200
    if job.is_failed:
        payload["error"] = job.meta.get("error", job.exc_info)
        return jsonify(payload), 500

    payload["progress"] = job.meta.get("progress", 0)
    return jsonify(payload), 200


def _payload() -> dict:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise RequestError("Request body must be a JSON object")
    return payload


def _resources(payload: dict) -> list[Resource]:
    records = payload.get("resources", [])
    if not isinstance(records, list):
        raise RequestError("'resources' must be a list")
    return _pipeline().loader.parse_records(records, source="request")


def _bbox(payload: dict) -> BoundingBox:
    raw = payload.get("bbox")
    if not isinstance(raw, dict):
        raise RequestError("'bbox' must be an object with minLat, minLng, maxLat and maxLng")
    try:
        return BoundingBox.from_mapping(raw)
    except ValueError as exc:
        raise RequestError(str(exc)) from exc


def _int(payload: dict, key: str, default: int) -> int:
    value = payload.get(key, default)
    if isinstance(value, bool):
        raise RequestError(f"'{key}' must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise RequestError(f"'{key}' must be an integer") from exc


def _rng(payload: dict) -> random.Random | None:
    if payload.get("seed") is None:
        return None
    return random.Random(_int(payload, "seed", 0))


def _serialize(resources: list[Resource]) -> list[dict]:
    return [resource.as_dict() for resource in resources]


def _allowed(filename: str, extensions: tuple[str, ...]) -> bool:
    return "." in filename and filename.rsplit(".", 1)[1].lower() in extensions


def _pipeline() -> MapViewPipeline:
    return current_app.extensions["media_atlas"]


def _queue():
    return current_app.extensions["rq"]["queue"]


def _connection():
    return current_app.extensions["rq"]["connection"]
