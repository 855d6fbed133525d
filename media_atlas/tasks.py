"""RQ task definitions for asynchronous library summaries."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from rq import get_current_job

from .config import STORAGE_PATHS
from .core import RegionType
from .core.exceptions import ProcessingError
from .pipelines import MapViewPipeline
from .utils import ensure_directory, safe_filename

logger = logging.getLogger(__name__)


def summarize_library(
    *,
    job_id: str,
    resource_paths: Iterable[str],
    region_type: str = RegionType.WORLD.value,
    country: str | None = None,
    state: str | None = None,
) -> dict:
    """Load uploaded exports and count resources per region bucket."""

    job = get_current_job()
    if job:
        job.meta["progress"] = 0
        job.save_meta()

    pipeline = MapViewPipeline.default()
    created_at = datetime.now(timezone.utc)

    try:
        resources = pipeline.loader.load(Path(path) for path in resource_paths)
        if job:
            job.meta["progress"] = 50
            job.save_meta()
        regions = pipeline.summarize(resources, region_type, country, state)
    except ProcessingError as exc:
        logger.error("Job %s failed: %s", job_id, exc)
        if job:
            job.meta["error"] = exc.as_dict()
            job.save_meta()
        raise

    result = {
        "job_id": job_id,
        "created_at": created_at.isoformat(),
        "completed_at": datetime.now(timezone.utc).isoformat(),
        "region_type": region_type,
        "country": country,
        "state": state,
        "total_resources": len(resources),
        "regions": regions,
    }

    output_dir = ensure_directory(STORAGE_PATHS.outputs / safe_filename(job_id))
    output_file = output_dir / "summary.json"
    output_file.write_text(json.dumps(result, ensure_ascii=False, indent=2), encoding="utf-8")
    result["generated_files"] = [output_file.name]
    logger.info("Job %s summarised %d resources into %d regions", job_id, len(resources), len(regions))

    if job:
        job.meta["progress"] = 100
        job.save_meta()

    return result
