"""
Metric Repository - per-area metric vectors addressed by demographic key.

The repository is populated once at startup, either from an external table
(JSON or CSV) or synthetically, and is read-only afterwards.
"""
import json
import logging
import zlib
from pathlib import Path
from typing import Dict, Iterable, List, Literal, Optional, Tuple, Union

import numpy as np
import pandas as pd

from app.exceptions import MetricNotFoundError, LoadFailureError
from app.models.area import Area, MetricVector
from app.models.demographics import Metric
from app.services.key_resolver import (
    DemographicKey,
    ALL_DIMENSIONS_KEY,
    all_keys,
    resolve_key,
)
from app.utils.constants import (
    SYNTHETIC_RANGES,
    GENDER_SHARES,
    AGE_BAND_SHARES,
    SOCIAL_CATEGORY_SHARES,
    ECONOMIC_CLASS_SHARES,
)

logger = logging.getLogger(__name__)

MissingPolicy = Literal["zero", "exclude"]
DIMENSION_COLUMNS = ["gender", "age_band", "social_category", "economic_class"]


class MissingDataLog:
    """
    Records the (area, key) pairs that had no metric vector during one
    derivation. Every record is also logged as a warning.
    """

    def __init__(self):
        self.entries: List[Tuple[str, Optional[DemographicKey]]] = []

    def record(self, error: MetricNotFoundError):
        self.entries.append((error.area_id, error.key))
        logger.warning(f"Missing metric vector: {error}")

    @property
    def area_ids(self) -> List[str]:
        """Distinct missing area ids in the order they were recorded."""
        return list(dict.fromkeys(area_id for area_id, _ in self.entries))

    def __len__(self) -> int:
        return len(self.entries)


class MetricRepository:
    """Mapping of area id -> demographic key -> MetricVector."""

    def __init__(self, table: Dict[str, Dict[DemographicKey, MetricVector]]):
        self._table = {area_id: dict(vectors) for area_id, vectors in table.items()}

    def get(self, area_id: str, key: DemographicKey) -> MetricVector:
        """
        Look up one metric vector by exact key.

        Raises:
            MetricNotFoundError: if the area or the key is absent
        """
        vectors = self._table.get(area_id)
        if vectors is None or key not in vectors:
            raise MetricNotFoundError(area_id, key)
        return vectors[key]

    def values_for(
        self,
        metric: Metric,
        key: DemographicKey,
        areas: Iterable[Area],
        missing: MissingPolicy = "zero",
        diagnostics: Optional[MissingDataLog] = None,
    ) -> List[Tuple[Area, Union[int, float]]]:
        """
        Gather one metric for every area at a key, in area order.

        Args:
            metric: Metric to read
            key: Active demographic key
            areas: Areas to read, in catalog order
            missing: "zero" substitutes 0 for a missing vector,
                "exclude" drops the area
            diagnostics: Collector for missing identities

        Returns:
            List of (area, value) pairs
        """
        log = diagnostics if diagnostics is not None else MissingDataLog()
        values = []
        for area in areas:
            try:
                value = self.get(area.id, key).value_of(metric)
            except MetricNotFoundError as e:
                log.record(e)
                if missing == "exclude":
                    continue
                value = 0.0 if metric is Metric.LITERACY else 0
            values.append((area, value))
        return values

    def coverage_gaps(
        self,
        areas: Iterable[Area],
        keys: Optional[List[DemographicKey]] = None,
    ) -> Dict[str, int]:
        """
        Count the producible keys each area is missing.

        Returns:
            area id -> number of missing keys, only for areas with gaps
        """
        keys = keys if keys is not None else all_keys()
        gaps = {}
        for area in areas:
            vectors = self._table.get(area.id, {})
            missing = sum(1 for k in keys if k not in vectors)
            if missing:
                gaps[area.id] = missing
        return gaps

    @property
    def area_ids(self) -> List[str]:
        return list(self._table.keys())

    def __contains__(self, area_id: str) -> bool:
        return area_id in self._table

    def __len__(self) -> int:
        return len(self._table)

    def to_dict(self) -> Dict[str, Dict[str, Dict[str, Union[int, float]]]]:
        """Serialize as area id -> key code -> vector fields."""
        return {
            area_id: {key.code: vector.to_dict() for key, vector in vectors.items()}
            for area_id, vectors in self._table.items()
        }

    def to_dataframe(self) -> pd.DataFrame:
        """Long format: one row per (area, key) with dimension and metric columns."""
        rows = []
        for area_id, vectors in self._table.items():
            for key, vector in vectors.items():
                rows.append({
                    "area_id": area_id,
                    "gender": key.gender.value,
                    "age_band": key.age_band.value,
                    "social_category": key.social_category.value,
                    "economic_class": key.economic_class.value,
                    **vector.to_dict(),
                })
        return pd.DataFrame(rows)

    @classmethod
    def from_dict(cls, data: Dict[str, Dict[str, Dict[str, Union[int, float]]]]) -> "MetricRepository":
        """Build from area id -> key code -> vector fields."""
        table = {}
        for area_id, vectors in data.items():
            table[str(area_id)] = {
                DemographicKey.parse(code): MetricVector.from_dict(fields)
                for code, fields in vectors.items()
            }
        return cls(table)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "MetricRepository":
        """
        Build from a long-format table.

        Rows address their key either through a `key` column holding the
        canonical code or through the four dimension columns.
        """
        use_code = "key" in df.columns
        required = ["area_id", "literacy", "income", "population"]
        required += ["key"] if use_code else DIMENSION_COLUMNS
        missing_cols = [c for c in required if c not in df.columns]
        if missing_cols:
            raise ValueError(f"Metric table is missing columns: {missing_cols}")

        table: Dict[str, Dict[DemographicKey, MetricVector]] = {}
        for row in df.to_dict("records"):
            if use_code:
                key = DemographicKey.parse(str(row["key"]))
            else:
                key = resolve_key(*(str(row[c]) for c in DIMENSION_COLUMNS))
            table.setdefault(str(row["area_id"]), {})[key] = MetricVector.from_dict(row)
        return cls(table)


def load_metric_table(path: Union[str, Path]) -> MetricRepository:
    """
    Load an externally materialized metric table from JSON or CSV.

    Raises:
        LoadFailureError: if the file cannot be read or parsed
    """
    path = Path(path)
    source = f"metric table {path}"
    try:
        if path.suffix.lower() == ".csv":
            repository = MetricRepository.from_dataframe(pd.read_csv(path, dtype={"area_id": str}))
        else:
            with open(path, "r", encoding="utf-8") as f:
                repository = MetricRepository.from_dict(json.load(f))
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
        raise LoadFailureError(source, str(e)) from e

    logger.info(f"Loaded metric table for {len(repository)} areas from {path}")
    return repository


def _rng_for_area(area_id: str, seed: Optional[int]) -> np.random.Generator:
    """Independent generator per area; seed=None is non-reproducible."""
    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng([seed, zlib.crc32(area_id.encode("utf-8"))])


def generate_synthetic_metrics(areas: Iterable[Area], seed: Optional[int] = 42) -> MetricRepository:
    """
    Populate a repository with synthetic vectors for every producible key.

    Each area draws from its own generator seeded by the base seed and a
    checksum of its id, so an area's vectors do not depend on catalog order.

    Args:
        areas: Areas to populate
        seed: Base seed; None draws fresh entropy on every call

    Returns:
        A fully covered MetricRepository
    """
    keys = all_keys()
    shares = np.array([
        GENDER_SHARES[k.gender]
        * AGE_BAND_SHARES[k.age_band]
        * SOCIAL_CATEGORY_SHARES[k.social_category]
        * ECONOMIC_CLASS_SHARES[k.economic_class]
        for k in keys
    ])

    table = {}
    for area in areas:
        rng = _rng_for_area(area.id, seed)
        base_literacy = int(rng.integers(*SYNTHETIC_RANGES[Metric.LITERACY]))
        base_income = int(rng.integers(*SYNTHETIC_RANGES[Metric.INCOME]))
        base_population = int(rng.integers(*SYNTHETIC_RANGES[Metric.POPULATION]))

        literacy = np.clip(np.round(base_literacy * rng.uniform(0.85, 1.15, len(keys)), 1), 0, 100)
        income = np.round(base_income * rng.uniform(0.6, 1.4, len(keys))).astype(int)
        population = np.floor(base_population * shares * rng.uniform(0.9, 1.1, len(keys))).astype(int)

        vectors = {
            key: MetricVector(float(literacy[i]), int(income[i]), int(population[i]))
            for i, key in enumerate(keys)
        }
        vectors[ALL_DIMENSIONS_KEY] = MetricVector(float(base_literacy), base_income, base_population)
        table[area.id] = vectors

    mode = f"seed={seed}" if seed is not None else "non-reproducible"
    logger.info(f"Generated synthetic metrics for {len(table)} areas x {len(keys)} keys ({mode})")
    return MetricRepository(table)
