"""Top-level package for the Media Atlas backend."""

from .api.app_factory import create_app
from .pipelines.map_view import MapViewPipeline

__all__ = ["create_app", "MapViewPipeline"]
