from __future__ import annotations

"""Tuning parameters for AI lineup selection.

Fatigue here is the 0..100 between-game number carried on the player
snapshot. Ratings are penalized only above the caution line, and players at
the rest line are benched whenever a fresh alternative exists.
"""

# ---------------------------------------------------------------------------
# Fatigue
# ---------------------------------------------------------------------------

FATIGUE_REST_THRESHOLD: float = 70.0
FATIGUE_CAUTION_THRESHOLD: float = 50.0

# Rating points lost per fatigue point above the caution line.
FATIGUE_RATING_PENALTY: float = 0.5

# A rested starter is only swapped for someone at least this much fresher.
REFRESH_MIN_FATIGUE_GAP: float = 20.0

DEFAULT_RATING: int = 70

# ---------------------------------------------------------------------------
# Substitution strategy
# ---------------------------------------------------------------------------

DEEP_BENCH_RATING: int = 65
DEEP_BENCH_MIN_PLAYERS: int = 10

TIGHT_ROTATION_STAR_RATING: int = 85
TIGHT_ROTATION_BENCH_GAP: int = 15

PLATOON_PROBABILITY: float = 0.30
