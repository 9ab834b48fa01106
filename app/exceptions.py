"""
Domain errors raised by the choropleth engine.

Malformed dimension values and malformed bracket tables are programming
errors and raise ValueError instead of one of these.
"""
from typing import Optional


class ChoroplethError(Exception):
    """Base class for recoverable choropleth engine conditions."""


class MetricNotFoundError(ChoroplethError):
    """No metric vector exists for an (area, demographic key) pair."""

    def __init__(self, area_id: str, key: Optional[object] = None):
        self.area_id = area_id
        self.key = key
        if key is None:
            message = f"Area '{area_id}' has no metric data"
        else:
            message = f"Area '{area_id}' has no metric vector for key '{key}'"
        super().__init__(message)


class EmptyInputError(ChoroplethError):
    """Aggregation was requested over zero areas."""

    def __init__(self, message: str = "Cannot aggregate over an empty set of areas"):
        super().__init__(message)


class NotReadyError(ChoroplethError):
    """Area catalog and metric repository are still loading."""

    def __init__(self, message: str = "Area catalog and metrics are still loading"):
        super().__init__(message)


class LoadFailureError(ChoroplethError):
    """The area catalog or metric table could not be fetched or parsed."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load {source}: {reason}")
