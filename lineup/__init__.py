"""AI lineup selection and fatigue management.

Public API
----------
- calculate_effective_rating / select_best_lineup / find_replacement
- handle_injured_starter / refresh_team_lineup
- select_substitution_strategy
- initialize_team_lineup / initialize_user_team_lineup
- initialize_all_team_lineups / refresh_all_team_lineups
"""

from .service import (
    calculate_effective_rating,
    find_replacement,
    handle_injured_starter,
    initialize_all_team_lineups,
    initialize_team_lineup,
    initialize_user_team_lineup,
    refresh_all_team_lineups,
    refresh_team_lineup,
    select_best_lineup,
    select_substitution_strategy,
    should_rest,
)
from .types import LineupChange, LineupPlan, Starters, SubstitutionStrategy

__all__ = [
    "LineupChange",
    "LineupPlan",
    "Starters",
    "SubstitutionStrategy",
    "calculate_effective_rating",
    "should_rest",
    "select_best_lineup",
    "find_replacement",
    "handle_injured_starter",
    "refresh_team_lineup",
    "select_substitution_strategy",
    "initialize_team_lineup",
    "initialize_user_team_lineup",
    "initialize_all_team_lineups",
    "refresh_all_team_lineups",
]
