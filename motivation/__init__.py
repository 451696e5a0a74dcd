"""Player motivation & retention model.

Public API:
- generate_motivations(player, rng) -> motivations
- recalculate_satisfaction(player, context) -> motivations (pure)
- calculate_retention_score(player, context, salary_override) -> 0..100
- apply_weight_shifts(player, events) -> motivations (pure)
- retention_context_for_team(player, roster, league_context, ...) -> RetentionContext
"""

from .archetypes import ARCHETYPES, ArchetypeKey
from .config import MARKET_SIZE_MAP, MarketSize
from .logic import (
    apply_weight_shifts,
    archetype_label,
    archetype_pool,
    calculate_retention_score,
    generate_motivations,
    get_market_size,
    motivation_label,
    recalculate_satisfaction,
    retention_context_for_team,
    with_motivations,
)
from .types import CareerEvents, RetentionContext

__all__ = [
    "ARCHETYPES",
    "ArchetypeKey",
    "MARKET_SIZE_MAP",
    "MarketSize",
    "apply_weight_shifts",
    "archetype_label",
    "archetype_pool",
    "calculate_retention_score",
    "generate_motivations",
    "get_market_size",
    "motivation_label",
    "recalculate_satisfaction",
    "retention_context_for_team",
    "with_motivations",
    "CareerEvents",
    "RetentionContext",
]
