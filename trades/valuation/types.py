from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from league.types import Direction


class DealVerdict(str, Enum):
    ACCEPT = "accept"
    REJECT = "reject"


@dataclass(frozen=True, slots=True)
class ValueAnalysis:
    receiving: float
    giving: float
    net: float
    # Largest deficit the team would still tolerate (positive number).
    threshold: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "receiving": self.receiving,
            "giving": self.giving,
            "net": self.net,
            "threshold": self.threshold,
        }


@dataclass(frozen=True, slots=True)
class TradeEvaluation:
    decision: DealVerdict
    reason: Optional[str]
    team_direction: Direction
    value_analysis: ValueAnalysis

    @property
    def accepted(self) -> bool:
        return self.decision is DealVerdict.ACCEPT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "decision": self.decision.value,
            "reason": self.reason,
            "team_direction": self.team_direction.value,
            "value_analysis": self.value_analysis.to_dict(),
        }
