"""
Area and metric vector records.
"""
from dataclasses import dataclass, asdict
from typing import Dict, Any, Union

from app.models.demographics import Metric


@dataclass(frozen=True)
class Area:
    """One administrative unit from the area catalog."""
    id: str
    display_name: str


@dataclass(frozen=True)
class MetricVector:
    """Tracked statistics for one area under one demographic key."""
    literacy: float  # 0-100 percent
    income: int  # rupees, non-negative
    population: int  # head count, non-negative

    def value_of(self, metric: Metric) -> Union[float, int]:
        """Return the value of one metric."""
        if metric is Metric.LITERACY:
            return self.literacy
        if metric is Metric.INCOME:
            return self.income
        if metric is Metric.POPULATION:
            return self.population
        raise ValueError(f"Unknown metric: {metric!r}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MetricVector":
        """Build a vector from a mapping with literacy/income/population fields."""
        vector = cls(
            literacy=float(data["literacy"]),
            income=_whole_number("income", data["income"]),
            population=_whole_number("population", data["population"]),
        )
        if not 0 <= vector.literacy <= 100:
            raise ValueError(f"literacy must be within [0, 100], got {vector.literacy}")
        if vector.income < 0 or vector.population < 0:
            raise ValueError("income and population must be non-negative")
        return vector


def _whole_number(field: str, value: Any) -> int:
    """Convert a table value to int, rejecting fractional counts."""
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"{field} must be a whole number, got {value}")
    return int(number)
