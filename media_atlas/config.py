"""Runtime configuration for the Media Atlas project."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StoragePaths:
    """Collection of filesystem paths used by the application."""

    uploads: Path
    outputs: Path

    def ensure(self) -> None:
        """Ensure the backing directories exist."""
        self.uploads.mkdir(parents=True, exist_ok=True)
        self.outputs.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class AppConfig:
    """High level runtime configuration values."""

    max_upload_mb: int = 25
    allowed_export_extensions: tuple[str, ...] = ("json", "csv")
    default_page_size: int = 20
    max_page_size: int = 200

    @property
    def max_upload_bytes(self) -> int:
        """Maximum upload payload in bytes."""
        return self.max_upload_mb * 1024 * 1024


@dataclass(frozen=True)
class QueueConfig:
    """Configuration for the Redis-backed task queue."""

    redis_url: str = "redis://localhost:6379/0"
    queue_name: str = "media-atlas"
    default_timeout: int = 60 * 10  # seconds


@dataclass(frozen=True)
class ThumbnailConfig:
    max_entries: int = 500
    placeholder: str = "/images/no-thumbnail.png"


APP_CONFIG = AppConfig(
    max_upload_mb=int(os.environ.get("MEDIA_ATLAS_MAX_UPLOAD_MB", AppConfig.max_upload_mb)),
    default_page_size=int(
        os.environ.get("MEDIA_ATLAS_PAGE_SIZE", AppConfig.default_page_size)
    ),
)
STORAGE_PATHS = StoragePaths(
    uploads=Path(os.environ.get("MEDIA_ATLAS_UPLOADS", "uploads")),
    outputs=Path(os.environ.get("MEDIA_ATLAS_OUTPUTS", "outputs")),
)
QUEUE_CONFIG = QueueConfig(
    redis_url=os.environ.get("MEDIA_ATLAS_REDIS_URL", QueueConfig.redis_url),
    queue_name=os.environ.get("MEDIA_ATLAS_QUEUE", QueueConfig.queue_name),
    default_timeout=int(
        os.environ.get("MEDIA_ATLAS_QUEUE_TIMEOUT", QueueConfig.default_timeout)
    ),
)
THUMBNAIL_CONFIG = ThumbnailConfig(
    max_entries=int(
        os.environ.get("MEDIA_ATLAS_THUMBNAIL_CACHE_SIZE", ThumbnailConfig.max_entries)
    ),
)

STORAGE_PATHS.ensure()
