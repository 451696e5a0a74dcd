from __future__ import annotations

"""Trade engine tuning: difficulty presets, direction multipliers, cadence knobs.

Difficulty and direction tables are keyed by enums and are exhaustive; the
only silent fallback is an unknown difficulty *name* resolving to ``pro``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

from league.types import Direction


# ---------------------------------------------------------------------------
# Difficulty
# ---------------------------------------------------------------------------
class Difficulty(str, Enum):
    ROOKIE = "rookie"
    PRO = "pro"
    ALL_STAR = "all_star"
    HALL_OF_FAME = "hall_of_fame"


@dataclass(frozen=True, slots=True)
class DifficultyConfig:
    """How hard AI teams bargain.

    - threshold_pct * fairness_mult: tolerated value deficit as a share of what
      the AI gives up (floored at 1 point).
    - star_protection: extra multiplier on stars the AI would give away.
    - pick_sensitivity: multiplier on every draft pick's value.
    """

    threshold_pct: float
    fairness_mult: float
    star_protection: float
    pick_sensitivity: float


DIFFICULTY_CONFIGS: Dict[Difficulty, DifficultyConfig] = {
    Difficulty.ROOKIE: DifficultyConfig(threshold_pct=0.25, fairness_mult=1.6, star_protection=0.8, pick_sensitivity=0.85),
    Difficulty.PRO: DifficultyConfig(threshold_pct=0.15, fairness_mult=1.0, star_protection=1.0, pick_sensitivity=1.0),
    Difficulty.ALL_STAR: DifficultyConfig(threshold_pct=0.10, fairness_mult=0.7, star_protection=1.25, pick_sensitivity=1.15),
    Difficulty.HALL_OF_FAME: DifficultyConfig(threshold_pct=0.05, fairness_mult=0.45, star_protection=1.5, pick_sensitivity=1.30),
}


def resolve_difficulty(name: Union[str, Difficulty, None]) -> Difficulty:
    if isinstance(name, Difficulty):
        return name
    try:
        return Difficulty(str(name or "").strip().lower())
    except ValueError:
        return Difficulty.PRO


def get_difficulty_config(name: Union[str, Difficulty, None] = Difficulty.PRO) -> DifficultyConfig:
    return DIFFICULTY_CONFIGS[resolve_difficulty(name)]


# ---------------------------------------------------------------------------
# Direction multipliers
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class DirectionMultipliers:
    star_receive_premium: float
    star_give_protection: float
    young_receive_discount: float
    young_give_ease: float
    vet_receive_premium: float
    vet_give_ease: float
    pick_receive_discount: float
    pick_give_sensitivity: float


DIRECTION_MULTIPLIERS: Dict[Direction, DirectionMultipliers] = {
    Direction.TITLE_CONTENDER: DirectionMultipliers(1.25, 1.35, 0.95, 0.9, 1.1, 0.85, 0.65, 0.75),
    Direction.WIN_NOW: DirectionMultipliers(1.2, 1.25, 1.0, 0.95, 1.05, 0.9, 0.75, 0.85),
    Direction.ASCENDING: DirectionMultipliers(1.05, 1.1, 1.2, 1.15, 0.9, 0.85, 1.2, 1.3),
    Direction.REBUILDING: DirectionMultipliers(0.9, 0.85, 1.25, 1.2, 0.8, 0.75, 1.4, 1.5),
}

# ---------------------------------------------------------------------------
# Asset categories
# ---------------------------------------------------------------------------
STAR_RATING: int = 82
YOUNG_MAX_AGE: int = 24
VETERAN_MIN_AGE: int = 30

# Player field fallbacks inside trade logic.
DEFAULT_RATING: int = 75
DEFAULT_AGE: int = 25
DEFAULT_CONTRACT_YEARS: int = 1

POSITIONAL_NEED_MAX_COUNT: int = 1
POSITIONAL_NEED_BONUS: float = 1.15

# Expiring-contract bonus (rebuilding / ascending receivers only).
EXPIRING_BONUS_RATE: float = 0.05
EXPIRING_BONUS_CAP: float = 2.0

# ---------------------------------------------------------------------------
# Availability / trading block
# ---------------------------------------------------------------------------
PROTECTED_RATING: int = 82
LOW_MORALE: float = 50.0
LOW_RETENTION: int = 40

BLOCK_MAX_SIZE: int = 5
BLOCK_PROTECTED_TOP: int = 3
BLOCK_LIKELY_RESIGN_RATING: int = 78
BLOCK_LIKELY_RESIGN_RETENTION: int = 50
BLOCK_FLIGHT_RISK_RETENTION: int = 35
BLOCK_VETERAN_MIN_AGE: int = 30
BLOCK_VETERAN_MIN_YEARS: int = 2
BLOCK_OVERPAID_RATIO: float = 1.5
BLOCK_CORE_SIZE: int = 5

# ---------------------------------------------------------------------------
# Proposal generation (AI -> user)
# ---------------------------------------------------------------------------
PROPOSAL_BASE_PROBABILITY: float = 0.15
DEADLINE_WINDOW_DAYS: int = 30
DEADLINE_BUYER_BOOST: float = 3.0
DEADLINE_OTHER_BOOST: float = 2.0
PROPOSAL_EXPIRY_DAYS: int = 3

TEAM_COOLDOWN_DAYS: int = 30
PLAYER_COOLDOWN_DAYS: int = 30

MAX_TARGETS: int = 3
OFFER_PROTECTED_TOP: int = 3
OFFER_VALUE_MIN: float = 0.5
OFFER_VALUE_MAX: float = 1.5
OFFER_SWEETEN_BELOW: float = 0.8
REBUILD_OFFER_MIN_AGE: int = 28

STAR_NEED_RATING: int = 80
YOUNG_NEED_MIN_RATING: int = 70
POSITION_NEED_FALLBACK_RATING: int = 70
ASCENDING_NEED_FLOOR: int = 72

# Trade deadline news
DEADLINE_WARNING_DAYS: int = 16


# ---------------------------------------------------------------------------
# AI <-> AI market
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class AiMarketConfig:
    base_probability: float = 0.10
    deadline_buyer_boost: float = 2.5
    deadline_window_days: int = DEADLINE_WINDOW_DAYS
    min_roster: int = 8
    max_roster: int = 15
    max_deals: int = 3
    luxury_tax_line: Optional[float] = None  # None -> league.salary.LUXURY_TAX_LINE

    # swap: counterpart value within [swap_value_min, swap_value_max] of the target
    swap_value_min: float = 0.85
    swap_value_max: float = 1.15

    # player_for_picks: 2 picks for targets rated >= this, else 1
    two_pick_rating: int = 80

    # player_plus_pick_for_player: returned player valued within [0.4x, 0.85x]
    return_value_min: float = 0.4
    return_value_max: float = 0.85
    protected_top: int = 3


DEFAULT_AI_MARKET = AiMarketConfig()
