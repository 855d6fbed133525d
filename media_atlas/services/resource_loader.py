"""Load resource library exports into :class:`Resource` objects."""

from __future__ import annotations

import csv
import io
import json
import logging
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from ..core import Resource
from ..core.exceptions import ProcessingError
from ..utils import read_text

logger = logging.getLogger(__name__)


class ResourceLoader:
    """Read JSON or CSV exports of the storage API."""

    SUPPORTED_EXTENSIONS: Sequence[str] = ("json", "csv")

    def load(self, paths: Iterable[Path | str]) -> list[Resource]:
        resources: list[Resource] = []
        for path in paths:
            resources.extend(self._load_single(Path(path)))
        return resources

    def _load_single(self, path: Path) -> list[Resource]:
        if not path.exists():
            raise ProcessingError(f"Resource export not found: {path}")

        extension = path.suffix.lower().lstrip(".")
        if extension not in self.SUPPORTED_EXTENSIONS:
            raise ProcessingError(
                "Unsupported resource export format",
                details={"path": str(path), "extension": extension},
            )

        text = read_text(path)
        records = self._json_records(text, path) if extension == "json" else self._csv_records(text)
        resources = self.parse_records(records, source=str(path))
        logger.info("Loaded %d resources from %s", len(resources), path.name)
        return resources

    def parse_records(
        self, records: Iterable[object], *, source: str = "payload"
    ) -> list[Resource]:
        """Convert raw records, skipping the ones that cannot be identified."""

        resources: list[Resource] = []
        for position, record in enumerate(records):
            if not isinstance(record, Mapping):
                logger.warning("Skipping non-object record %d in %s", position, source)
                continue
            try:
                resources.append(Resource.from_record(record))
            except ValueError as exc:
                logger.warning("Skipping record %d in %s: %s", position, source, exc)
        return resources

    def _json_records(self, text: str, path: Path) -> list[object]:
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ProcessingError(
                "Resource export is not valid JSON",
                details={"path": str(path), "line": exc.lineno},
            ) from exc

        if isinstance(payload, Mapping):
            payload = payload.get("resources")
        if not isinstance(payload, list):
            raise ProcessingError(
                "JSON export must be a list of resources or contain a 'resources' list",
                details={"path": str(path)},
            )
        return payload

    def _csv_records(self, text: str) -> list[dict[str, str]]:
        reader = csv.DictReader(io.StringIO(text))
        return [row for row in reader if any(row.values())]
