"""Bounded cache of resource thumbnail URLs."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Mapping

logger = logging.getLogger(__name__)


class ThumbnailCache:
    """Least-recently-used map from resource id to thumbnail URL.

    One cache is shared by every request of the app, so all access to the
    entries goes through an instance lock.
    """

    def __init__(self, *, max_entries: int = 500, placeholder: str = "/images/no-thumbnail.png"):
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self.max_entries = max_entries
        self.placeholder = placeholder
        self._entries: OrderedDict[str, str] = OrderedDict()
        self._lock = threading.Lock()

    def preload(self, thumbnails: Mapping[str, str]) -> None:
        with self._lock:
            for resource_id, url in thumbnails.items():
                self._entries[resource_id] = url
                self._entries.move_to_end(resource_id)
            self._evict()

    def get(self, resource_id: str) -> str:
        with self._lock:
            url = self._entries.get(resource_id)
            if not url:
                return self.placeholder
            self._entries.move_to_end(resource_id)
            return url

    def invalidate(self, resource_id: str | None = None) -> None:
        """Drop one thumbnail, or all of them when no id is given."""

        with self._lock:
            if resource_id is None:
                self._entries.clear()
            else:
                self._entries.pop(resource_id, None)

    def _evict(self) -> None:
        # Caller holds the lock.
        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted thumbnail for %s", evicted)

    def __contains__(self, resource_id: object) -> bool:
        with self._lock:
            return resource_id in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
