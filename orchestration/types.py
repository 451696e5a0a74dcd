from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from contracts.types import RosterManagementResult
from league.types import Player, TradeProposal
from league.normalize import proposal_to_dict
from lineup.types import LineupChange
from trades.generation.types import AiTrade
from trades.maintenance import DeadlineFlags, NewsItem


@dataclass(slots=True)
class DailyReport:
    game_date: str
    lineups: Dict[str, LineupChange] = field(default_factory=dict)

    @property
    def changed_team_ids(self) -> List[str]:
        return [tid for tid, c in self.lineups.items() if c.changed]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game_date": self.game_date,
            "lineups": {tid: c.to_dict() for tid, c in self.lineups.items()},
        }


@dataclass(slots=True)
class WeeklyReport:
    game_date: str
    # Full proposal book after expiry, with this week's new pitches appended.
    proposals: Tuple[TradeProposal, ...] = ()
    expired: Tuple[TradeProposal, ...] = ()
    new_proposals: Tuple[TradeProposal, ...] = ()
    ai_trades: Tuple[AiTrade, ...] = ()
    news: Tuple[NewsItem, ...] = ()
    deadline_flags: DeadlineFlags = field(default_factory=DeadlineFlags)
    trade_window_open: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game_date": self.game_date,
            "trade_window_open": self.trade_window_open,
            "proposals": [proposal_to_dict(p) for p in self.proposals],
            "expired_ids": [p.id for p in self.expired],
            "new_proposal_ids": [p.id for p in self.new_proposals],
            "ai_trades": [t.to_dict() for t in self.ai_trades],
            "news": [n.to_dict() for n in self.news],
            "deadline_flags": {"warned": self.deadline_flags.warned, "passed": self.deadline_flags.passed},
        }


@dataclass(slots=True)
class OffseasonReport:
    season_year: int
    motivations_generated: int = 0
    motivations_shifted: int = 0
    roster: RosterManagementResult = field(default_factory=RosterManagementResult)

    @property
    def players(self) -> Tuple[Player, ...]:
        return self.roster.players

    def to_dict(self) -> Dict[str, Any]:
        return {
            "season_year": self.season_year,
            "motivations_generated": self.motivations_generated,
            "motivations_shifted": self.motivations_shifted,
            **self.roster.to_dict(),
        }
