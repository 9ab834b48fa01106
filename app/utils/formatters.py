"""
Display formatting for metric values.
"""
from typing import Callable, Dict, Union

from app.models.demographics import Metric, ensure_exhaustive

Number = Union[int, float]


def format_percentage(value: Number) -> str:
    """65 -> '65.00%'"""
    return f"{value:.2f}%"


def format_currency(value: Number, symbol: str = "₹") -> str:
    """45000 -> '₹45,000', 45230.5 -> '₹45,230.50'"""
    if float(value).is_integer():
        return f"{symbol}{int(value):,}"
    return f"{symbol}{value:,.2f}"


def format_count(value: Number) -> str:
    """1234567 -> '1,234,567'"""
    return f"{int(value):,}"


METRIC_FORMATTERS: Dict[Metric, Callable[[Number], str]] = ensure_exhaustive({
    Metric.LITERACY: format_percentage,
    Metric.INCOME: format_currency,
    Metric.POPULATION: format_count,
}, Metric, "METRIC_FORMATTERS")


def format_metric_value(metric: Metric, value: Number) -> str:
    return METRIC_FORMATTERS[metric](value)
