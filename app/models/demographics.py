"""
Closed enumerations for metrics and demographic dimensions.

Every lookup table indexed by one of these enums (bracket tables, formatters,
display names) is checked with ensure_exhaustive at import time so that an
unrecognized member can never fall through to a silent default.
"""
from enum import Enum
from typing import Dict, Type, TypeVar


class Metric(str, Enum):
    LITERACY = "literacy"
    INCOME = "income"
    POPULATION = "population"


class Gender(str, Enum):
    ALL = "all"
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class AgeBand(str, Enum):
    ALL = "all"
    AGE_0_18 = "0-18"
    AGE_19_35 = "19-35"
    AGE_36_50 = "36-50"
    AGE_51_PLUS = "51+"


class SocialCategory(str, Enum):
    ALL = "all"
    OBC = "obc"
    SC = "sc"
    ST = "st"
    OC = "oc"


class EconomicClass(str, Enum):
    ALL = "all"
    BPL = "bpl"
    LOW = "low"
    MIDDLE = "middle"
    HIGH = "high"
    AFFLUENT = "affluent"


E = TypeVar("E", bound=Enum)
V = TypeVar("V")


def ensure_exhaustive(mapping: Dict[E, V], enum_cls: Type[E], name: str) -> Dict[E, V]:
    """
    Check that a lookup table has exactly one entry per enum member.

    Args:
        mapping: Table keyed by enum members
        enum_cls: The enum the table must cover
        name: Table name used in the error message

    Returns:
        The mapping, unchanged
    """
    missing = [m.value for m in enum_cls if m not in mapping]
    extra = [k for k in mapping if not isinstance(k, enum_cls)]
    if missing or extra:
        raise ValueError(f"{name} is not exhaustive over {enum_cls.__name__}: missing={missing} extra={extra}")
    return mapping
