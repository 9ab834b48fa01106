"""
KPI Calculator service - average/min/max of one metric across all areas.
"""
import math
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional, Sequence, Union

import numpy as np

from app.exceptions import EmptyInputError
from app.models.area import Area
from app.models.demographics import Metric
from app.services.key_resolver import DemographicKey
from app.services.metric_repository import MetricRepository, MissingDataLog

Number = Union[int, float]


@dataclass
class KPIResult:
    """Summary statistics for one metric under one demographic key."""
    metric: Metric
    key: DemographicKey
    average: Number
    min: Number
    max: Number
    area_count: int
    missing_area_ids: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metric": self.metric.value,
            "key": self.key.code,
            "average": self.average,
            "min": self.min,
            "max": self.max,
            "area_count": self.area_count,
            "missing_area_ids": list(self.missing_area_ids),
        }


def round_average(metric: Metric, mean: float) -> Number:
    """
    Round a mean the way KPIs are reported.

    Literacy and income keep 2 decimals; population is additionally
    floored to a whole head count.
    """
    rounded = round(mean, 2)
    if metric is Metric.POPULATION:
        return int(math.floor(rounded))
    return rounded


class KPICalculator:
    """Calculate KPI summaries over the metric repository."""

    def __init__(self, repository: MetricRepository):
        self.repository = repository

    def aggregate(
        self,
        metric: Metric,
        key: DemographicKey,
        areas: Sequence[Area],
        diagnostics: Optional[MissingDataLog] = None,
    ) -> KPIResult:
        """
        Compute average, min and max of a metric across all areas.

        Areas without a vector at the key contribute 0 and are listed in
        missing_area_ids.

        Args:
            metric: Selected metric
            key: Active demographic key
            areas: Full area set
            diagnostics: Optional shared collector for missing identities

        Returns:
            KPIResult with exact min/max and a rounded average

        Raises:
            EmptyInputError: if areas is empty
        """
        if not areas:
            raise EmptyInputError()

        log = diagnostics if diagnostics is not None else MissingDataLog()
        already_missing = len(log)
        pairs = self.repository.values_for(metric, key, areas, missing="zero", diagnostics=log)
        values = [value for _, value in pairs]

        return KPIResult(
            metric=metric,
            key=key,
            average=round_average(metric, float(np.mean(values))),
            min=min(values),
            max=max(values),
            area_count=len(values),
            missing_area_ids=list(dict.fromkeys(a for a, _ in log.entries[already_missing:])),
        )
