"""
Rank Builder - areas ordered by the active metric, highest first.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

from app.models.area import Area
from app.models.demographics import Metric
from app.services.key_resolver import DemographicKey
from app.services.metric_repository import MetricRepository, MissingDataLog


@dataclass
class RankedArea:
    area_id: str
    display_name: str
    value: Union[int, float]

    def to_dict(self) -> Dict[str, object]:
        return {"area_id": self.area_id, "display_name": self.display_name, "value": self.value}


def rank(
    metric: Metric,
    key: DemographicKey,
    areas: Sequence[Area],
    repository: MetricRepository,
    diagnostics: Optional[MissingDataLog] = None,
) -> List[RankedArea]:
    """
    Sort areas by value, descending.

    Areas without a vector at the key are left out rather than ranked as
    zero. Ties keep catalog order.
    """
    pairs = repository.values_for(metric, key, areas, missing="exclude", diagnostics=diagnostics)
    ranked = [RankedArea(area.id, area.display_name, value) for area, value in pairs]
    # list.sort is stable with reverse=True
    ranked.sort(key=lambda r: r.value, reverse=True)
    return ranked
