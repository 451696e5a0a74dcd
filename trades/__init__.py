"""Trade engine.

Valuation and accept/reject live in ``trades.valuation``; weekly pitch and
AI <-> AI generation in ``trades.generation``; the availability gate, AI
trading blocks, cooldowns and proposal lifecycle at this level.
"""

from .availability import TradingBlockEntry, compute_ai_trading_block, is_player_available
from .config import (
    DIFFICULTY_CONFIGS,
    DIRECTION_MULTIPLIERS,
    AiMarketConfig,
    Difficulty,
    DifficultyConfig,
    DirectionMultipliers,
    get_difficulty_config,
    resolve_difficulty,
)
from .cooldown import CooldownIndex, build_cooldown_index
from .maintenance import (
    DeadlineEvents,
    DeadlineFlags,
    ExpiryResult,
    NewsItem,
    expire_stale_proposals,
    process_trade_deadline_events,
    transition_proposal,
)

__all__ = [
    "TradingBlockEntry",
    "compute_ai_trading_block",
    "is_player_available",
    "DIFFICULTY_CONFIGS",
    "DIRECTION_MULTIPLIERS",
    "AiMarketConfig",
    "Difficulty",
    "DifficultyConfig",
    "DirectionMultipliers",
    "get_difficulty_config",
    "resolve_difficulty",
    "CooldownIndex",
    "build_cooldown_index",
    "DeadlineEvents",
    "DeadlineFlags",
    "ExpiryResult",
    "NewsItem",
    "expire_stale_proposals",
    "process_trade_deadline_events",
    "transition_proposal",
]
