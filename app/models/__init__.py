"""
Models package initialization.
"""
from app.models.demographics import Metric, Gender, AgeBand, SocialCategory, EconomicClass
from app.models.area import Area, MetricVector
from app.models.brackets import Bracket, BracketTable, BRACKET_TABLES

__all__ = [
    "Metric",
    "Gender",
    "AgeBand",
    "SocialCategory",
    "EconomicClass",
    "Area",
    "MetricVector",
    "Bracket",
    "BracketTable",
    "BRACKET_TABLES",
]
