from __future__ import annotations

"""Motivation & retention tuning constants.

Weights are fixed per player at generation (archetype base +/- jitter) and
only drift on career events. Satisfaction values are recomputed from context
every time a retention score is requested.
"""

from enum import Enum
from typing import Dict, Mapping

from league.types import MotivationCategory


class MarketSize(str, Enum):
    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"


# ---------------------------------------------------------------------------
# Market tiers (unknown abbreviations are medium markets)
# ---------------------------------------------------------------------------

MARKET_SIZE_MAP: Mapping[str, MarketSize] = {
    **{abbr: MarketSize.LARGE for abbr in ("NYK", "NYM", "LAL", "LAC", "CHI", "HOU", "PHI", "DAL", "BOS", "GSW", "MIA", "BKN")},
    **{abbr: MarketSize.SMALL for abbr in ("MEM", "OKC", "NOP", "MIL", "SAC", "CHA", "IND", "UTA", "POR", "ORL", "SAS", "MIN", "CLE", "DET")},
    **{abbr: MarketSize.MEDIUM for abbr in ("ATL", "TOR", "DEN", "PHX", "WAS", "SEA")},
}

MARKET_SATISFACTION: Dict[MarketSize, float] = {
    MarketSize.LARGE: 0.8,
    MarketSize.MEDIUM: 0.5,
    MarketSize.SMALL: 0.3,
}

# ---------------------------------------------------------------------------
# Display labels
# ---------------------------------------------------------------------------

MOTIVATION_LABELS: Dict[MotivationCategory, str] = {
    MotivationCategory.MONEY: "Financial Security",
    MotivationCategory.WINNING: "Championship Contention",
    MotivationCategory.LOYALTY: "Team Loyalty",
    MotivationCategory.ROLE: "Playing Role",
    MotivationCategory.STAR_PAIRING: "Star Teammates",
    MotivationCategory.COACHING: "Coaching Stability",
    MotivationCategory.MARKET: "Market Size",
    MotivationCategory.LEGACY: "Legacy Building",
}

# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------

WEIGHT_MIN: float = 0.05
WEIGHT_MAX: float = 1.0
WEIGHT_JITTER: float = 0.15
INITIAL_SATISFACTION: float = 0.5

# Archetype draw boosts.
TRAIT_BOOST: int = 30
VETERAN_AGE: int = 32
VETERAN_RING_CHASER_BOOST: int = 20
STAR_RATING: int = 85
STAR_BOOST: int = 10

DEFAULT_AGE: int = 25
DEFAULT_RATING: int = 75

# ---------------------------------------------------------------------------
# Satisfaction / retention
# ---------------------------------------------------------------------------

# Incumbent bonus added to every retention score.
INCUMBENT_BONUS: float = 12.0
NEUTRAL_RETENTION: int = 50

# Minutes per game at which the role motivation is fully satisfied.
ROLE_FULL_MPG: float = 30.0
ROLE_FLOOR: float = 0.2
ROLE_DEFAULT_MPG: float = 15.0

STAR_TEAMMATE_RATING: int = 80

# Weight shifts on career events.
AGING_WINNING_SHIFT: float = 0.05
TRADED_LOYALTY_SHIFT: float = -0.15
CHAMPION_MONEY_SHIFT: float = 0.05
CHAMPION_WINNING_SHIFT: float = -0.03
