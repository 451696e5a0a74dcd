from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from league.types import Player, SeasonStats

from .config import MarketSize


@dataclass(frozen=True, slots=True)
class RetentionContext:
    """Everything satisfaction is computed from, for one player on one team.

    ``offer_salary`` (when set) replaces ``contract_salary`` in the money
    motivation, for "what if we paid them X" questions.
    """

    team_win_pct: float = 0.5
    made_playoffs: bool = False
    player_stats: Optional[SeasonStats] = None
    team_roster: Tuple[Player, ...] = ()
    team_market_size: MarketSize = MarketSize.MEDIUM
    years_with_team: int = 1
    coach_stability: bool = True
    has_championship: bool = False
    contract_salary: float = 0.0
    expected_salary: float = 0.0
    offer_salary: Optional[float] = None


@dataclass(frozen=True, slots=True)
class CareerEvents:
    """Season-end events that permanently shift motivation weights.

    ``age`` defaults to the player's own age when left unset.
    """

    age: Optional[int] = None
    was_traded: bool = False
    won_championship: bool = False
