"""
Routers package initialization.
"""
from app.routers import analytics
from app.routers import geospatial
from app.routers import metadata

__all__ = [
    "analytics",
    "geospatial",
    "metadata",
]
