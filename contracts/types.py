from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from league.types import Player


@dataclass(frozen=True, slots=True)
class ContractOffer:
    years: int
    salary: int

    @property
    def total_value(self) -> int:
        return int(self.years) * int(self.salary)

    def to_dict(self) -> Dict[str, int]:
        return {"years": self.years, "salary": self.salary, "total_value": self.total_value}


@dataclass(frozen=True, slots=True)
class DraftCapital:
    total_picks: int = 0
    first_round_picks: int = 0
    draft_richness: float = 0.5


@dataclass(frozen=True, slots=True)
class ContractEvaluation:
    player_id: str
    value_score: float
    should_cut: bool = False
    cut_reason: Optional[str] = None


@dataclass(frozen=True, slots=True)
class CutDecision:
    team: str
    player_id: str
    player_name: str
    salary: float
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "team": self.team,
            "player_id": self.player_id,
            "player": self.player_name,
            "salary": self.salary,
            "reason": self.reason,
        }


@dataclass(frozen=True, slots=True)
class ContractSigning:
    """A re-signing (extension), free-agent signing, or backfill signing."""

    kind: str
    team: str
    team_id: str
    player_id: str
    player_name: str
    offer: ContractOffer

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "team": self.team,
            "team_id": self.team_id,
            "player_id": self.player_id,
            "player": self.player_name,
            **self.offer.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class TeamContractResult:
    extensions: Tuple[ContractSigning, ...] = ()
    signings: Tuple[ContractSigning, ...] = ()
    # Expiring players the team let walk.
    departing: Tuple[str, ...] = ()
    players: Tuple[Player, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "extensions": [e.to_dict() for e in self.extensions],
            "signings": [s.to_dict() for s in self.signings],
            "departing": list(self.departing),
        }


@dataclass(frozen=True, slots=True)
class RosterManagementResult:
    cuts: Tuple[CutDecision, ...] = ()
    extensions: Tuple[ContractSigning, ...] = ()
    signings: Tuple[ContractSigning, ...] = ()
    # Proposed league player snapshots after every decision above.
    players: Tuple[Player, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cuts": [c.to_dict() for c in self.cuts],
            "extensions": [e.to_dict() for e in self.extensions],
            "signings": [s.to_dict() for s in self.signings],
        }
