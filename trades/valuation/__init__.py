"""Valuation subpackage.

Prices players and picks from one team's perspective and turns the net into
an accept/reject verdict.
"""

from .asset_value import (
    calculate_giving_value,
    calculate_receiving_value,
    contract_value_multiplier,
    expiring_contract_bonus,
    has_positional_need,
    player_trade_value,
    retention_risk_factor,
    timeline_fit,
    young_player_premium,
)
from .decision_policy import evaluate_trade, fairness_threshold, rejection_reason
from .types import DealVerdict, TradeEvaluation, ValueAnalysis

__all__ = [
    "calculate_giving_value",
    "calculate_receiving_value",
    "contract_value_multiplier",
    "expiring_contract_bonus",
    "has_positional_need",
    "player_trade_value",
    "retention_risk_factor",
    "timeline_fit",
    "young_player_premium",
    "evaluate_trade",
    "fairness_threshold",
    "rejection_reason",
    "DealVerdict",
    "TradeEvaluation",
    "ValueAnalysis",
]
