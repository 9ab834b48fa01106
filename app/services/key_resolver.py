"""
Demographic key resolution.

A DemographicKey composes all four selectable dimensions. Its canonical text
form is <gender>_<age>_<social>_<economic>, e.g. all_all_all_all or
female_age19_35_sc_bpl, and is what external metric tables are keyed by.
"""
from dataclasses import dataclass
from itertools import product
from typing import List, NamedTuple, Union

from app.models.demographics import (
    Metric,
    Gender,
    AgeBand,
    SocialCategory,
    EconomicClass,
    ensure_exhaustive,
)

AGE_BAND_TOKENS = ensure_exhaustive({
    AgeBand.ALL: "all",
    AgeBand.AGE_0_18: "age0_18",
    AgeBand.AGE_19_35: "age19_35",
    AgeBand.AGE_36_50: "age36_50",
    AgeBand.AGE_51_PLUS: "age51_plus",
}, AgeBand, "AGE_BAND_TOKENS")

_AGE_BANDS_BY_TOKEN = {token: band for band, token in AGE_BAND_TOKENS.items()}


class DemographicKey(NamedTuple):
    """Composite key addressing one population segment."""
    gender: Gender
    age_band: AgeBand
    social_category: SocialCategory
    economic_class: EconomicClass

    @property
    def code(self) -> str:
        return "_".join([
            self.gender.value,
            AGE_BAND_TOKENS[self.age_band],
            self.social_category.value,
            self.economic_class.value,
        ])

    def __str__(self) -> str:
        return self.code

    @classmethod
    def parse(cls, code: str) -> "DemographicKey":
        """
        Parse a canonical key code back into a DemographicKey.

        Age tokens contain underscores themselves, so the code is split from
        both ends: gender first, social category and economic class last.
        """
        parts = code.strip().split("_")
        if len(parts) < 4:
            raise ValueError(f"Malformed demographic key: {code!r}")
        gender, social, economic = parts[0], parts[-2], parts[-1]
        age_token = "_".join(parts[1:-2])
        if age_token not in _AGE_BANDS_BY_TOKEN:
            raise ValueError(f"Unknown age band token {age_token!r} in key {code!r}")
        return resolve_key(gender, _AGE_BANDS_BY_TOKEN[age_token], social, economic)


def resolve_key(
    gender: Union[Gender, str],
    age_band: Union[AgeBand, str],
    social_category: Union[SocialCategory, str],
    economic_class: Union[EconomicClass, str],
) -> DemographicKey:
    """
    Compose the canonical key for a dimension selection.

    Raw strings are coerced through their enumeration; an unknown value
    raises ValueError.
    """
    return DemographicKey(
        Gender(gender),
        AgeBand(age_band),
        SocialCategory(social_category),
        EconomicClass(economic_class),
    )


def all_keys() -> List[DemographicKey]:
    """Every key the selection surface can produce, in enumeration order."""
    return [
        DemographicKey(*combo)
        for combo in product(Gender, AgeBand, SocialCategory, EconomicClass)
    ]


ALL_DIMENSIONS_KEY = resolve_key(Gender.ALL, AgeBand.ALL, SocialCategory.ALL, EconomicClass.ALL)


@dataclass(frozen=True)
class Selection:
    """The current metric and dimension choices, passed into every derivation."""
    metric: Metric = Metric.LITERACY
    gender: Gender = Gender.ALL
    age_band: AgeBand = AgeBand.ALL
    social_category: SocialCategory = SocialCategory.ALL
    economic_class: EconomicClass = EconomicClass.ALL

    @property
    def key(self) -> DemographicKey:
        return resolve_key(self.gender, self.age_band, self.social_category, self.economic_class)

    def to_dict(self) -> dict:
        return {
            "metric": self.metric.value,
            "gender": self.gender.value,
            "age_band": self.age_band.value,
            "social_category": self.social_category.value,
            "economic_class": self.economic_class.value,
            "key": self.key.code,
        }
