"""
Bracket Classifier - distribution of areas over a metric's bracket table.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

import numpy as np

from app.models.area import Area
from app.models.brackets import BracketTable
from app.models.demographics import Metric
from app.services.key_resolver import DemographicKey
from app.services.metric_repository import MetricRepository, MissingDataLog, MissingPolicy


@dataclass
class BracketCount:
    """Number of areas falling into one bracket."""
    label: str
    color: str
    count: int

    def to_dict(self) -> Dict[str, object]:
        return {"label": self.label, "color": self.color, "count": self.count}


def classify_index(value: Union[int, float], bracket_table: BracketTable) -> int:
    """Index of the bracket containing value; boundaries go to the upper bracket."""
    return bracket_table.index_of(value)


def count_brackets(values: Sequence[Union[int, float]], bracket_table: BracketTable) -> List[BracketCount]:
    """Count values per bracket, preserving table order."""
    indices = bracket_table.indices_of(values)
    counts = np.bincount(indices, minlength=len(bracket_table))
    return [
        BracketCount(label=bracket.label, color=bracket.color, count=int(counts[i]))
        for i, bracket in enumerate(bracket_table)
    ]


def classify(
    metric: Metric,
    key: DemographicKey,
    areas: Sequence[Area],
    bracket_table: BracketTable,
    repository: MetricRepository,
    diagnostics: Optional[MissingDataLog] = None,
    missing: MissingPolicy = "zero",
) -> List[BracketCount]:
    """
    Classify every area's value into the bracket table and count membership.

    Args:
        metric: Selected metric
        key: Active demographic key
        areas: Areas to classify
        bracket_table: Ordered brackets for the metric
        repository: Metric source
        diagnostics: Optional collector for missing identities
        missing: "zero" counts a missing area in the bracket containing 0,
            "exclude" leaves it out of every bracket

    Returns:
        One BracketCount per bracket, in ascending range order

    Raises:
        ValueError: if a value matches no bracket (malformed table)
    """
    pairs = repository.values_for(metric, key, areas, missing=missing, diagnostics=diagnostics)
    return count_brackets([value for _, value in pairs], bracket_table)
