"""Team direction classifier.

Public API:
- analyze_roster(roster) -> RosterMetrics
- analyze_team_direction(team, roster, context) -> Direction
- assess_team_direction(...) -> DirectionAssessment (direction + evidence)
- get_trade_interest(team, roster, context) -> "high" | "medium" | "low"
"""

from .analyzer import (
    analyze_roster,
    analyze_team_direction,
    assess_team_direction,
    core_players,
    get_trade_interest,
    is_eliminated,
    record_weight,
)
from .types import DirectionAssessment, RosterMetrics

__all__ = [
    "analyze_roster",
    "analyze_team_direction",
    "assess_team_direction",
    "core_players",
    "get_trade_interest",
    "is_eliminated",
    "record_weight",
    "DirectionAssessment",
    "RosterMetrics",
]
