from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

# One slot per canonical position (PG, SG, SF, PF, C); None when unfilled.
Starters = Tuple[Optional[str], ...]


class SubstitutionStrategy(str, Enum):
    STAGGERED = "staggered"
    PLATOON = "platoon"
    TIGHT_ROTATION = "tight_rotation"
    DEEP_BENCH = "deep_bench"


@dataclass(frozen=True, slots=True)
class LineupPlan:
    starters: Starters
    strategy: SubstitutionStrategy = SubstitutionStrategy.STAGGERED

    def to_dict(self) -> Dict[str, Any]:
        return {"starters": list(self.starters), "sub_strategy": self.strategy.value}


@dataclass(frozen=True, slots=True)
class LineupChange:
    starters: Starters
    changed: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"starters": list(self.starters), "changed": self.changed}
