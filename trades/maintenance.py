from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Dict, Iterable, List, Tuple

import game_time
from league.errors import PROPOSAL_INVALID_TRANSITION, EngineError
from league.types import ProposalStatus, TradeProposal

from . import config as cfg


def transition_proposal(proposal: TradeProposal, status: ProposalStatus, *, at: Any) -> TradeProposal:
    """
    Move a proposal out of ``pending``.

    Terminal states are final and nothing re-enters ``pending``; both raise
    EngineError(PROPOSAL_INVALID_TRANSITION). Returns a new proposal with
    ``resolved_at`` stamped.
    """
    target = ProposalStatus(status)
    if proposal.status.is_terminal or target is ProposalStatus.PENDING:
        raise EngineError(
            PROPOSAL_INVALID_TRANSITION,
            f"cannot move proposal from {proposal.status.value} to {target.value}",
            {"proposal_id": proposal.id, "from": proposal.status.value, "to": target.value},
        )
    return replace(proposal, status=target, resolved_at=game_time.parse_game_date(at, field="resolved_at"))


@dataclass(frozen=True, slots=True)
class ExpiryResult:
    # Every input proposal, in order, with expired ones replaced.
    proposals: Tuple[TradeProposal, ...]
    expired: Tuple[TradeProposal, ...]


def expire_stale_proposals(proposals: Iterable[TradeProposal], current_date: Any) -> ExpiryResult:
    """
    Tick-level proposal maintenance.

    Any ``pending`` proposal whose ``expires_at`` is strictly before
    ``current_date`` becomes ``expired``. Safe to call repeatedly: already
    expired proposals are not reported again.
    """
    today = game_time.parse_game_date(current_date, field="current_date")
    out: List[TradeProposal] = []
    expired: List[TradeProposal] = []
    for p in proposals:
        if p.status is ProposalStatus.PENDING and p.expires_at < today:
            p = transition_proposal(p, ProposalStatus.EXPIRED, at=today)
            expired.append(p)
        out.append(p)
    return ExpiryResult(proposals=tuple(out), expired=tuple(expired))


# -----------------------------------------------------------------------------
# Trade deadline news
# -----------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class DeadlineFlags:
    warned: bool = False
    passed: bool = False


@dataclass(frozen=True, slots=True)
class NewsItem:
    event_type: str
    headline: str
    body: str
    game_date: date

    def to_dict(self) -> Dict[str, str]:
        return {
            "event_type": self.event_type,
            "headline": self.headline,
            "body": self.body,
            "game_date": self.game_date.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class DeadlineEvents:
    news: Tuple[NewsItem, ...] = ()
    flags: DeadlineFlags = field(default_factory=DeadlineFlags)
    changed: bool = False


def process_trade_deadline_events(current_date: Any, season_year: int, flags: DeadlineFlags = DeadlineFlags()) -> DeadlineEvents:
    """Emit the 'deadline approaching' and 'deadline passed' items once each."""
    today = game_time.parse_game_date(current_date, field="current_date")
    deadline = game_time.get_trade_deadline(season_year).as_date()
    days_left = (deadline - today).days

    news: List[NewsItem] = []
    warned, passed = flags.warned, flags.passed

    if days_left <= cfg.DEADLINE_WARNING_DAYS and not warned:
        news.append(
            NewsItem(
                event_type="trade",
                headline="Trade deadline approaching",
                body=f"The January 6th trade deadline is {days_left} days away. Teams are expected to increase activity.",
                game_date=today,
            )
        )
        warned = True

    if today > deadline and not passed:
        news.append(
            NewsItem(
                event_type="trade",
                headline="Trade deadline has passed",
                body="The trade deadline has officially passed. No more trades can be made this season.",
                game_date=today,
            )
        )
        passed = True

    new_flags = DeadlineFlags(warned=warned, passed=passed)
    return DeadlineEvents(news=tuple(news), flags=new_flags, changed=new_flags != flags)
