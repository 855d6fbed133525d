from .map_view import MapViewPipeline

__all__ = ["MapViewPipeline"]
