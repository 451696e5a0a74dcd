"""contracts package public API.

Offseason roster decisions for AI teams: re-signing, free agency, contract
value cuts and minimum-roster backfill. Salary expectations live in
``league.salary`` and are re-exported here for convenience.
"""

from league.salary import expected_salary

from contracts.config import FREE_AGENT_TEAM_ID
from contracts.evaluation import (
    assess_draft_capital,
    calculate_contract_offer,
    evaluate_free_agent_signing,
    evaluate_player_contract,
    evaluate_resigning,
)
from contracts.offseason import (
    ensure_minimum_rosters,
    free_agent_pool,
    process_team_contracts,
    process_team_cuts,
    process_team_extensions,
    process_team_signings,
    run_ai_roster_management,
)
from contracts.types import (
    ContractEvaluation,
    ContractOffer,
    ContractSigning,
    CutDecision,
    DraftCapital,
    RosterManagementResult,
    TeamContractResult,
)

__all__ = [
    "FREE_AGENT_TEAM_ID",
    "expected_salary",
    "evaluate_resigning",
    "evaluate_free_agent_signing",
    "calculate_contract_offer",
    "evaluate_player_contract",
    "assess_draft_capital",
    "process_team_cuts",
    "process_team_extensions",
    "process_team_signings",
    "process_team_contracts",
    "ensure_minimum_rosters",
    "free_agent_pool",
    "run_ai_roster_management",
    "ContractOffer",
    "ContractEvaluation",
    "ContractSigning",
    "CutDecision",
    "DraftCapital",
    "TeamContractResult",
    "RosterManagementResult",
]
