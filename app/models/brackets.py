"""
Bracket tables shared by the classifier and the color mapper.
"""
import math
from dataclasses import dataclass
from typing import Dict, Iterator, List, Sequence, Union

import numpy as np

from app.models.demographics import Metric, ensure_exhaustive
from app.utils.constants import BRACKET_THRESHOLDS, CHOROPLETH_PALETTE

Number = Union[int, float]


@dataclass(frozen=True)
class Bracket:
    """Half-open value interval [lower_inclusive, upper_exclusive)."""
    label: str
    lower_inclusive: float
    upper_exclusive: float  # math.inf for the last bracket
    color: str

    def contains(self, value: Number) -> bool:
        return self.lower_inclusive <= value and (
            value < self.upper_exclusive or math.isinf(self.upper_exclusive)
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "label": self.label,
            "lower_inclusive": self.lower_inclusive,
            "upper_exclusive": None if math.isinf(self.upper_exclusive) else self.upper_exclusive,
            "color": self.color,
        }


class BracketTable:
    """
    Ordered, contiguous brackets covering [0, +inf).

    A malformed table raises ValueError on construction.
    """

    def __init__(self, brackets: Sequence[Bracket]):
        self.brackets = tuple(brackets)
        self._validate()
        self._lowers = np.array([b.lower_inclusive for b in self.brackets], dtype=float)

    def _validate(self):
        if not self.brackets:
            raise ValueError("Bracket table must contain at least one bracket")
        if self.brackets[0].lower_inclusive != 0:
            raise ValueError("First bracket must start at 0")
        if not math.isinf(self.brackets[-1].upper_exclusive):
            raise ValueError("Last bracket must be unbounded")
        for current, following in zip(self.brackets, self.brackets[1:]):
            if current.upper_exclusive != following.lower_inclusive:
                raise ValueError(
                    f"Brackets '{current.label}' and '{following.label}' are not contiguous"
                )
        for bracket in self.brackets:
            if not bracket.lower_inclusive < bracket.upper_exclusive:
                raise ValueError(f"Bracket '{bracket.label}' has an empty range")
            if not bracket.color:
                raise ValueError(f"Bracket '{bracket.label}' has no color")

    @classmethod
    def from_thresholds(cls, thresholds: Sequence[Number], colors: Sequence[str]) -> "BracketTable":
        """
        Build a table from the lower bounds of every bracket after the first.

        [30000, 50000] gives brackets <30000, 30000-50000 and >=50000.
        """
        if len(colors) != len(thresholds) + 1:
            raise ValueError(f"Need {len(thresholds) + 1} colors, got {len(colors)}")
        bounds = [0] + list(thresholds) + [math.inf]
        brackets = []
        for i, color in enumerate(colors):
            lower, upper = bounds[i], bounds[i + 1]
            if i == 0:
                label = f"<{_format_bound(upper)}"
            elif math.isinf(upper):
                label = f">={_format_bound(lower)}"
            else:
                label = f"{_format_bound(lower)}-{_format_bound(upper)}"
            brackets.append(Bracket(label, float(lower), float(upper), color))
        return cls(brackets)

    def index_of(self, value: Number) -> int:
        """
        Return the index of the unique bracket containing value.

        Boundary values belong to the upper bracket.
        """
        if not value >= 0:
            raise ValueError(f"Value {value} is outside the bracket table range [0, inf)")
        return int(np.searchsorted(self._lowers, value, side="right")) - 1

    def indices_of(self, values: Sequence[Number]) -> np.ndarray:
        """Vectorized index_of."""
        arr = np.asarray(values, dtype=float)
        if arr.size and not np.all(arr >= 0):
            raise ValueError("Bracket table cannot classify negative or NaN values")
        return np.searchsorted(self._lowers, arr, side="right") - 1

    def __getitem__(self, index: int) -> Bracket:
        return self.brackets[index]

    def __len__(self) -> int:
        return len(self.brackets)

    def __iter__(self) -> Iterator[Bracket]:
        return iter(self.brackets)

    def to_list(self) -> List[Dict[str, object]]:
        return [b.to_dict() for b in self.brackets]


def _format_bound(bound: Number) -> str:
    if float(bound).is_integer():
        return str(int(bound))
    return str(bound)


BRACKET_TABLES: Dict[Metric, BracketTable] = ensure_exhaustive({
    metric: BracketTable.from_thresholds(thresholds, CHOROPLETH_PALETTE)
    for metric, thresholds in BRACKET_THRESHOLDS.items()
}, Metric, "BRACKET_TABLES")
