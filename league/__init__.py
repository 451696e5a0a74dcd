"""League data model boundary.

Normalized immutable records, the standings context, salary math, injectable
randomness and the collaborator bundle every decision component reads
through.
"""

from .context import build_context
from .errors import BAD_PAYLOAD, MISSING_COLLABORATOR, PROPOSAL_INVALID_TRANSITION, EngineError
from .lookups import DEFAULT_PICK_VALUE, LeagueLookups
from .rng import RandomSource, ensure_rng, stable_seed
from .salary import LUXURY_TAX_LINE, SALARY_CAP, CapSituation, cap_situation, expected_salary, team_payroll
from .types import (
    POSITIONS,
    Asset,
    AssetKind,
    Direction,
    DraftPick,
    LeagueContext,
    Motivation,
    MotivationCategory,
    PickAsset,
    Player,
    PlayerAsset,
    ProposalStatus,
    SeasonStats,
    Team,
    TeamRecord,
    TradeProposal,
)

__all__ = [
    "build_context",
    "EngineError",
    "BAD_PAYLOAD",
    "MISSING_COLLABORATOR",
    "PROPOSAL_INVALID_TRANSITION",
    "DEFAULT_PICK_VALUE",
    "LeagueLookups",
    "RandomSource",
    "ensure_rng",
    "stable_seed",
    "SALARY_CAP",
    "LUXURY_TAX_LINE",
    "CapSituation",
    "cap_situation",
    "expected_salary",
    "team_payroll",
    "POSITIONS",
    "Asset",
    "AssetKind",
    "Direction",
    "DraftPick",
    "LeagueContext",
    "Motivation",
    "MotivationCategory",
    "PickAsset",
    "Player",
    "PlayerAsset",
    "ProposalStatus",
    "SeasonStats",
    "Team",
    "TeamRecord",
    "TradeProposal",
]
