"""
test_formatters.py - display strings for metric values.
"""
from app.models.demographics import Metric
from app.utils.formatters import format_count, format_currency, format_metric_value, format_percentage


def test_percentage():
    assert format_percentage(65) == "65.00%"
    assert format_percentage(79.333) == "79.33%"


def test_currency():
    assert format_currency(45000) == "₹45,000"
    assert format_currency(45230.5) == "₹45,230.50"
    assert format_currency(1200, symbol="$") == "$1,200"


def test_count():
    assert format_count(1234567) == "1,234,567"
    assert format_count(0) == "0"


def test_every_metric_has_a_formatter():
    assert format_metric_value(Metric.LITERACY, 90) == "90.00%"
    assert format_metric_value(Metric.INCOME, 80000) == "₹80,000"
    assert format_metric_value(Metric.POPULATION, 500000) == "500,000"
