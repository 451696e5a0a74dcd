from __future__ import annotations

"""Contract engine tuning constants (offseason cadence)."""

# Keep in sync with league.normalize free-agent detection.
FREE_AGENT_TEAM_ID = "FA"

# ---------------------------------------------------------------------------
# Roster sizes
# ---------------------------------------------------------------------------

MIN_ROSTER: int = 10
ROSTER_TARGET: int = 12
MAX_NEW_SIGNINGS: int = 3

# Player field fallbacks inside contract logic.
DEFAULT_RATING: int = 70
DEFAULT_AGE: int = 25
DEFAULT_CONTRACT_YEARS: int = 0

# A contract with this many years (or fewer) left is up for renewal.
EXPIRING_YEARS: int = 1

# ---------------------------------------------------------------------------
# Re-signing
# ---------------------------------------------------------------------------

PERFORMING_RATING: int = 70
PERFORMING_MIN_GAMES: int = 5
PERFORMING_MIN_PPG: float = 5.0

OVERPAID_RATIO: float = 1.5
MISMATCH_KEEP_RATING: int = 78

# Tax teams let expensive role players walk.
TAX_ROLE_SALARY: float = 8_000_000.0
TAX_ROLE_RATING: int = 75

# Draft-rich rebuilders only keep young players or stars.
DRAFT_RICH_RESIGN: float = 0.6
DRAFT_RICH_MAX_AGE: int = 27
DRAFT_RICH_KEEP_RATING: int = 82

# ---------------------------------------------------------------------------
# Free agency
# ---------------------------------------------------------------------------

POSITION_NEED_BELOW: int = 2
POSITION_SATURATED: int = 3
DEFAULT_POSITION: str = "SF"
SHORT_HANDED_MIN_RATING: int = 60
TAX_TEAM_MIN_RATING: int = 70
BUYER_MIN_RATING: int = 72
BUYER_DEPTH_RATING: int = 70
DEFAULT_MIN_RATING: int = 65
REBUILD_UPSIDE_AGE: int = 24
REBUILD_UPSIDE_RATING: int = 62
REBUILD_MAX_AGE: int = 26
REBUILD_MIN_RATING: int = 68

# ---------------------------------------------------------------------------
# Offers
# ---------------------------------------------------------------------------

YOUTH_PREMIUM_AGE: int = 25
YOUTH_PREMIUM: float = 1.10
VETERAN_DISCOUNT_AGE: int = 32
VETERAN_DISCOUNT: float = 0.85

TAX_TEAM_OFFER: float = 0.80
OVER_CAP_OFFER: float = 0.90
CONTENDER_CAP_ROOM_OFFER: float = 1.10

MAX_CONTRACT_YEARS: int = 4

# ---------------------------------------------------------------------------
# Cuts
# ---------------------------------------------------------------------------

CUT_PROTECTED_TOP: int = 3
CUT_CORE_SIZE: int = 5
LOW_VALUE_SCORE: float = 35.0
LOW_VALUE_MIN_SALARY: float = 5_000_000.0
VETERAN_CUT_AGE: int = 31
VETERAN_CUT_MIN_SALARY: float = 10_000_000.0
TAX_RELIEF_SCORE: float = 45.0
CUT_MIN_YEARS: int = 2

DRAFT_RICH_CUTS: float = 0.5
MAX_CUTS_DRAFT_RICH_REBUILD: int = 3
MAX_CUTS_REBUILD_OR_TAX: int = 2
MAX_CUTS_DEFAULT: int = 1

# ---------------------------------------------------------------------------
# Backfill
# ---------------------------------------------------------------------------

BACKFILL_TARGET: int = ROSTER_TARGET
BACKFILL_MIN_RATING: int = 50
BACKFILL_SALARY: int = 2_000_000
BACKFILL_YEARS: int = 1
