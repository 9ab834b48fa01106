"""
Utils package initialization.
"""
from app.utils.formatters import (
    format_percentage,
    format_currency,
    format_count,
    format_metric_value,
)
from app.utils.constants import (
    METRIC_DISPLAY_NAMES,
    CHOROPLETH_PALETTE,
    BRACKET_THRESHOLDS,
    POLYGON_STYLE,
)

__all__ = [
    "format_percentage",
    "format_currency",
    "format_count",
    "format_metric_value",
    "METRIC_DISPLAY_NAMES",
    "CHOROPLETH_PALETTE",
    "BRACKET_THRESHOLDS",
    "POLYGON_STYLE",
]
