"""
Constants for metrics, demographic dimensions and choropleth styling.
"""
from app.models.demographics import (
    Metric,
    Gender,
    AgeBand,
    SocialCategory,
    EconomicClass,
    ensure_exhaustive,
)

# Display names shown in selectors and chart titles
METRIC_DISPLAY_NAMES = ensure_exhaustive({
    Metric.LITERACY: "Literacy Rate",
    Metric.INCOME: "Average Income",
    Metric.POPULATION: "Population",
}, Metric, "METRIC_DISPLAY_NAMES")

GENDER_DISPLAY_NAMES = ensure_exhaustive({
    Gender.ALL: "All Genders",
    Gender.MALE: "Male",
    Gender.FEMALE: "Female",
    Gender.OTHER: "Other",
}, Gender, "GENDER_DISPLAY_NAMES")

AGE_BAND_DISPLAY_NAMES = ensure_exhaustive({
    AgeBand.ALL: "All Ages",
    AgeBand.AGE_0_18: "0-18 years",
    AgeBand.AGE_19_35: "19-35 years",
    AgeBand.AGE_36_50: "36-50 years",
    AgeBand.AGE_51_PLUS: "51+ years",
}, AgeBand, "AGE_BAND_DISPLAY_NAMES")

SOCIAL_CATEGORY_DISPLAY_NAMES = ensure_exhaustive({
    SocialCategory.ALL: "All Categories",
    SocialCategory.OBC: "Other Backward Classes",
    SocialCategory.SC: "Scheduled Castes",
    SocialCategory.ST: "Scheduled Tribes",
    SocialCategory.OC: "Open Category",
}, SocialCategory, "SOCIAL_CATEGORY_DISPLAY_NAMES")

ECONOMIC_CLASS_DISPLAY_NAMES = ensure_exhaustive({
    EconomicClass.ALL: "All Classes",
    EconomicClass.BPL: "Below Poverty Line",
    EconomicClass.LOW: "Low Income",
    EconomicClass.MIDDLE: "Middle Income",
    EconomicClass.HIGH: "High Income",
    EconomicClass.AFFLUENT: "Affluent",
}, EconomicClass, "ECONOMIC_CLASS_DISPLAY_NAMES")

# Light to dark blue, one color per bracket
CHOROPLETH_PALETTE = ["#E0FFFF", "#ADD8E6", "#0000FF", "#00008B"]

# Lower bounds of every bracket after the first; the first starts at 0
# and the last is unbounded
BRACKET_THRESHOLDS = ensure_exhaustive({
    Metric.LITERACY: [70, 80, 90],
    Metric.INCOME: [30000, 50000, 80000],
    Metric.POPULATION: [50000, 100000, 500000],
}, Metric, "BRACKET_THRESHOLDS")

# Value ranges of the unsegmented synthetic vector, [low, high)
SYNTHETIC_RANGES = ensure_exhaustive({
    Metric.LITERACY: (0, 100),
    Metric.INCOME: (10000, 100000),
    Metric.POPULATION: (1000, 1000000),
}, Metric, "SYNTHETIC_RANGES")

# Approximate population share of each dimension value
GENDER_SHARES = ensure_exhaustive({
    Gender.ALL: 1.0,
    Gender.MALE: 0.51,
    Gender.FEMALE: 0.48,
    Gender.OTHER: 0.01,
}, Gender, "GENDER_SHARES")

AGE_BAND_SHARES = ensure_exhaustive({
    AgeBand.ALL: 1.0,
    AgeBand.AGE_0_18: 0.32,
    AgeBand.AGE_19_35: 0.30,
    AgeBand.AGE_36_50: 0.22,
    AgeBand.AGE_51_PLUS: 0.16,
}, AgeBand, "AGE_BAND_SHARES")

SOCIAL_CATEGORY_SHARES = ensure_exhaustive({
    SocialCategory.ALL: 1.0,
    SocialCategory.OBC: 0.41,
    SocialCategory.SC: 0.19,
    SocialCategory.ST: 0.09,
    SocialCategory.OC: 0.31,
}, SocialCategory, "SOCIAL_CATEGORY_SHARES")

ECONOMIC_CLASS_SHARES = ensure_exhaustive({
    EconomicClass.ALL: 1.0,
    EconomicClass.BPL: 0.22,
    EconomicClass.LOW: 0.28,
    EconomicClass.MIDDLE: 0.30,
    EconomicClass.HIGH: 0.14,
    EconomicClass.AFFLUENT: 0.06,
}, EconomicClass, "ECONOMIC_CLASS_SHARES")

# Leaflet path options applied to every polygon
POLYGON_STYLE = {
    "weight": 1,
    "opacity": 1,
    "color": "white",
    "fillOpacity": 0.7,
}

# Geometry types that can be filled on the map
FILLABLE_GEOMETRY_TYPES = ("Polygon", "MultiPolygon")
