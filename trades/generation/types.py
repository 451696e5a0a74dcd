from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from league.normalize import asset_to_dict
from league.types import Asset, Direction

from ..valuation.types import TradeEvaluation


class NeedKind(str, Enum):
    POSITION = "position"
    STAR = "star"
    YOUNG = "young"


@dataclass(frozen=True, slots=True)
class TradeNeed:
    """What an AI team is shopping for this week."""

    kind: NeedKind
    position: Optional[str] = None
    min_rating: int = 70
    max_age: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind.value,
            "position": self.position,
            "min_rating": self.min_rating,
            "max_age": self.max_age,
        }


class TradePattern(str, Enum):
    SWAP = "swap"
    PLAYER_FOR_PICKS = "player_for_picks"
    PLAYER_PLUS_PICK_FOR_PLAYER = "player_plus_pick_for_player"


# Tried in this order; the first deal both sides accept wins.
PATTERN_ORDER: Tuple[TradePattern, ...] = (
    TradePattern.SWAP,
    TradePattern.PLAYER_FOR_PICKS,
    TradePattern.PLAYER_PLUS_PICK_FOR_PLAYER,
)


@dataclass(frozen=True, slots=True)
class AiTrade:
    """An agreed AI <-> AI deal. The caller applies roster/pick moves."""

    pattern: TradePattern
    team_a_id: str
    team_b_id: str
    team_a_gives: Tuple[Asset, ...]
    team_b_gives: Tuple[Asset, ...]
    team_a_payroll_after: float
    team_b_payroll_after: float
    evaluations: Tuple[TradeEvaluation, ...] = field(default=(), compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pattern": self.pattern.value,
            "team_a_id": self.team_a_id,
            "team_b_id": self.team_b_id,
            "team_a_gives": [asset_to_dict(a) for a in self.team_a_gives],
            "team_b_gives": [asset_to_dict(a) for a in self.team_b_gives],
            "team_a_payroll_after": self.team_a_payroll_after,
            "team_b_payroll_after": self.team_b_payroll_after,
            "evaluations": [e.to_dict() for e in self.evaluations],
        }


# Pitch text per direction; {name} is the target player's full name.
PROPOSAL_REASONS: Dict[Direction, str] = {
    Direction.TITLE_CONTENDER: "We believe {name} is the missing piece for a championship run.",
    Direction.WIN_NOW: "Adding {name} would give us the boost we need to compete this season.",
    Direction.ASCENDING: "{name} fits our timeline perfectly and would help accelerate our build.",
    Direction.REBUILDING: "We think {name} has the kind of upside we're looking for in our rebuild.",
}
