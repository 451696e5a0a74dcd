"""Trade generation.

- proposals: weekly AI -> user pitches
- ai_market: weekly AI <-> AI matching
"""

from .ai_market import match_ai_trades, payroll_after
from .proposals import (
    build_ai_offer,
    fills_need,
    find_target_players,
    generate_proposal_reason,
    generate_weekly_proposals,
    identify_need,
    proposal_id,
    proposal_probability,
)
from .types import PATTERN_ORDER, AiTrade, NeedKind, TradeNeed, TradePattern

__all__ = [
    "match_ai_trades",
    "payroll_after",
    "build_ai_offer",
    "fills_need",
    "find_target_players",
    "generate_proposal_reason",
    "generate_weekly_proposals",
    "identify_need",
    "proposal_id",
    "proposal_probability",
    "PATTERN_ORDER",
    "AiTrade",
    "NeedKind",
    "TradeNeed",
    "TradePattern",
]
