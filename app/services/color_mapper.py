"""
Color Mapper - display color for a metric value.
"""
from typing import Optional, Union

from app.models.brackets import BracketTable, BRACKET_TABLES
from app.models.demographics import Metric
from app.services.bracket_classifier import classify_index


def color_of(metric: Metric, value: Union[int, float], bracket_table: Optional[BracketTable] = None) -> str:
    """
    Color of the bracket containing value.

    Uses the metric's default table unless one is given, so fill colors and
    distribution colors always come from the same brackets.
    """
    table = bracket_table if bracket_table is not None else BRACKET_TABLES[metric]
    return table[classify_index(value, table)].color
