from __future__ import annotations

"""Tuning constants for the direction classifier.

Direction is recomputed on every call from the current roster and standings.
Nothing here is cached; change a constant and the next call sees it.
"""

# Regular-season length used for record weighting and elimination math.
SEASON_GAMES: int = 54

# ---------------------------------------------------------------------------
# Roster metrics
# ---------------------------------------------------------------------------

CORE_SIZE: int = 5

# Star credits among the core: >= STAR_FULL -> 1.0, >= STAR_HALF -> 0.5.
# star_power = min(1, credits / STAR_CREDIT_NORM)
STAR_FULL_RATING: int = 85
STAR_HALF_RATING: int = 82
STAR_CREDIT_NORM: float = 2.0

# core_alignment = clamp01(1 - (age_range - ALIGN_FREE_RANGE) / ALIGN_SPAN)
ALIGN_FREE_RANGE: float = 3.0
ALIGN_SPAN: float = 7.0

# youth = clamp01((YOUTH_AGE_CEIL - avg_core_age) / YOUTH_AGE_SPAN)
YOUTH_AGE_CEIL: float = 32.0
YOUTH_AGE_SPAN: float = 10.0

# Empty-roster metrics.
EMPTY_AVG_RATING: float = 75.0
EMPTY_CORE_AGE: float = 27.0
NEUTRAL_SCORE: float = 0.5

# Missing player fields.
DEFAULT_RATING: int = 75
DEFAULT_AGE: int = 25

# ---------------------------------------------------------------------------
# Blending
# ---------------------------------------------------------------------------

# record_weight = min(RECORD_WEIGHT_MAX, games_played / SEASON_GAMES * RECORD_WEIGHT_SLOPE)
RECORD_WEIGHT_MAX: float = 0.7
RECORD_WEIGHT_SLOPE: float = 0.9

# ---------------------------------------------------------------------------
# Overrides
# ---------------------------------------------------------------------------

# Elimination is only considered once a team has played this many games.
ELIMINATION_MIN_GAMES: int = 20

# Title override: star_power >= X and win% >= Y after >= N league games.
TITLE_STAR_POWER: float = 0.8
TITLE_WIN_PCT: float = 0.65
TITLE_MIN_GAMES: int = 15
