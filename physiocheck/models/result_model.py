from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict


class RiskLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @property
    def rank(self) -> int:
        return _RANK[self]

    @classmethod
    def parse(cls, value) -> "RiskLevel | None":
        """Case-insensitive lookup; None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


_RANK = {RiskLevel.LOW: 0, RiskLevel.MEDIUM: 1, RiskLevel.HIGH: 2}


class RiskAssessmentResult(BaseModel):
    """
    Outcome of one scoring call. Frozen once built.

    - level / score: classification and the raw weighted sum
    - factors: one line per triggered rule, in rule-table order
    - summary, recommendations, self_care_tips, medical_attention: advisory text
    - selected_body_areas / profile: kept for reporting and aggregation
    """

    model_config = ConfigDict(frozen=True)

    level: RiskLevel = RiskLevel.LOW
    score: int = 0
    factors: Tuple[str, ...] = ()

    summary: str = ""
    recommendations: Tuple[str, ...] = ()
    self_care_tips: Tuple[str, ...] = ()
    medical_attention: Tuple[str, ...] = ()

    selected_body_areas: Tuple[str, ...] = ()
    profile: str = "granular"
