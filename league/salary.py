"""Salary expectations and payroll math shared by valuation and contracts.

``expected_salary`` is the market rate the engine believes a player of a given
rating (and, once enough games are logged, a given production level) should
earn. Trade valuation compares actual salary against it to find bargains;
contracts uses it to veto overpaid re-signings and size offers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .types import Player, SeasonStats

SALARY_CAP: float = 136_000_000.0
LUXURY_TAX_LINE: float = 165_000_000.0

# (min_rating, expected_salary, expected_production)
# production = ppg + 0.5 * apg + 0.5 * rpg
SALARY_TIERS: Tuple[Tuple[int, float, float], ...] = (
    (90, 40_000_000.0, 35.0),
    (85, 30_000_000.0, 25.0),
    (80, 20_000_000.0, 18.0),
    (75, 10_000_000.0, 12.0),
    (70, 5_000_000.0, 8.0),
)
FLOOR_SALARY: float = 2_000_000.0
FLOOR_PRODUCTION: float = 8.0

PRODUCTION_MIN_GAMES: int = 5
PRODUCTION_RATIO_MIN: float = 0.8
PRODUCTION_RATIO_MAX: float = 1.2


def _tier(rating: float) -> Tuple[float, float]:
    for min_rating, salary, production in SALARY_TIERS:
        if rating >= min_rating:
            return salary, production
    return FLOOR_SALARY, FLOOR_PRODUCTION


def production_score(stats: Optional[SeasonStats]) -> Optional[float]:
    """Per-game production, or None until enough games are logged."""
    if stats is None or stats.games_played < PRODUCTION_MIN_GAMES:
        return None
    return stats.per_game(stats.points) + 0.5 * stats.per_game(stats.assists) + 0.5 * stats.per_game(stats.rebounds)


def expected_salary(rating: float, stats: Optional[SeasonStats] = None) -> float:
    base, expected_production = _tier(float(rating))
    production = production_score(stats)
    if production is None:
        return base
    ratio = production / max(1.0, expected_production)
    ratio = min(PRODUCTION_RATIO_MAX, max(PRODUCTION_RATIO_MIN, ratio))
    return base * ratio


def team_payroll(roster: Iterable[Player]) -> float:
    return float(sum(float(p.contract_salary or 0.0) for p in roster))


@dataclass(frozen=True, slots=True)
class CapSituation:
    payroll: float
    cap_space: float
    over_cap: bool
    over_tax: bool

    @property
    def tax_room(self) -> float:
        return LUXURY_TAX_LINE - self.payroll


def cap_situation(roster: Iterable[Player]) -> CapSituation:
    payroll = team_payroll(roster)
    return CapSituation(
        payroll=payroll,
        cap_space=max(0.0, SALARY_CAP - payroll),
        over_cap=payroll > SALARY_CAP,
        over_tax=payroll > LUXURY_TAX_LINE,
    )
