"""
Shared query-parameter dependencies.
"""
from fastapi import Query

from app.models.demographics import Metric, Gender, AgeBand, SocialCategory, EconomicClass
from app.services.key_resolver import Selection


def get_selection(
    metric: Metric = Query(Metric.LITERACY, description="Metric to color and summarize"),
    gender: Gender = Query(Gender.ALL),
    age_band: AgeBand = Query(AgeBand.ALL, description="all, 0-18, 19-35, 36-50 or 51+"),
    social_category: SocialCategory = Query(SocialCategory.ALL),
    economic_class: EconomicClass = Query(EconomicClass.ALL),
) -> Selection:
    """Build the immutable selection from query parameters."""
    return Selection(
        metric=metric,
        gender=gender,
        age_band=age_band,
        social_category=social_category,
        economic_class=economic_class,
    )
