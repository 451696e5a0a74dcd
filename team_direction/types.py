from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from league.types import Direction


@dataclass(frozen=True, slots=True)
class RosterMetrics:
    """Roster composition signals (rounded the way they are displayed)."""

    star_power: float
    core_alignment: float
    youth_score: float
    avg_overall: float
    avg_core_age: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "star_power": self.star_power,
            "core_alignment": self.core_alignment,
            "youth_score": self.youth_score,
            "avg_overall": self.avg_overall,
            "avg_core_age": self.avg_core_age,
        }


@dataclass(frozen=True, slots=True)
class DirectionAssessment:
    """Direction plus the evidence behind it (for API/debug views)."""

    direction: Direction
    metrics: RosterMetrics
    scores: Dict[Direction, float]
    win_pct: float
    record_weight: float
    override: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {
            "direction": self.direction.value,
            "metrics": self.metrics.to_dict(),
            "scores": {d.value: round(float(s), 4) for d, s in self.scores.items()},
            "win_pct": round(float(self.win_pct), 4),
            "record_weight": round(float(self.record_weight), 4),
            "override": self.override or None,
        }
