# league/types.py
"""Shared data model for the franchise decision engine.

Every record here is an immutable snapshot. Callers build them once at the
boundary (see league.normalize) and the decision components only ever read
them; proposed changes come back as new values.

Optional numeric fields are kept as ``None`` when the source snapshot did not
carry them. Each component resolves its own documented default (for example
lineups treat a missing rating as 70, trade valuation as 75).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple, Union


PlayerId = str
TeamId = str
PickId = str

POSITIONS: Tuple[str, ...] = ("PG", "SG", "SF", "PF", "C")


# -----------------------------------------------------------------------------
# Enumerations
# -----------------------------------------------------------------------------
class Direction(str, Enum):
    TITLE_CONTENDER = "title_contender"
    WIN_NOW = "win_now"
    ASCENDING = "ascending"
    REBUILDING = "rebuilding"

    @property
    def is_buyer(self) -> bool:
        return self in (Direction.TITLE_CONTENDER, Direction.WIN_NOW)


class MotivationCategory(str, Enum):
    MONEY = "money"
    WINNING = "winning"
    LOYALTY = "loyalty"
    ROLE = "role"
    STAR_PAIRING = "starPairing"
    COACHING = "coaching"
    MARKET = "market"
    LEGACY = "legacy"


class ProposalStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    EXPIRED = "expired"

    @property
    def is_terminal(self) -> bool:
        return self is not ProposalStatus.PENDING


class AssetKind(str, Enum):
    PLAYER = "player"
    PICK = "pick"


# -----------------------------------------------------------------------------
# Players
# -----------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class Motivation:
    """One motivation category for one player.

    ``weight`` is fixed at generation and only nudged by career events.
    ``satisfaction`` is recomputed from context whenever retention is scored.
    """

    weight: float
    satisfaction: float = 0.5


Motivations = Mapping[MotivationCategory, Motivation]


@dataclass(frozen=True, slots=True)
class SeasonStats:
    games_played: int = 0
    points: float = 0.0
    rebounds: float = 0.0
    assists: float = 0.0
    minutes: float = 0.0

    def per_game(self, total: float) -> float:
        if self.games_played <= 0:
            return 0.0
        return float(total) / float(self.games_played)


@dataclass(frozen=True, slots=True)
class Player:
    id: PlayerId
    first_name: str = ""
    last_name: str = ""
    team_abbreviation: Optional[str] = None
    position: Optional[str] = None
    secondary_position: Optional[str] = None
    age: Optional[int] = None
    overall_rating: Optional[int] = None
    trade_value: Optional[float] = None
    contract_salary: float = 0.0
    contract_years_remaining: Optional[int] = None
    fatigue: float = 0.0
    is_injured: bool = False
    morale: Optional[float] = None
    motivations: Dict[MotivationCategory, Motivation] = field(default_factory=dict)
    traits: Tuple[str, ...] = ()
    years_with_team: int = 1
    is_free_agent: bool = False
    is_draft_prospect: bool = False

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def plays(self, position: Optional[str]) -> bool:
        """True if ``position`` is this player's primary or secondary spot."""
        if not position:
            return False
        return self.position == position or self.secondary_position == position


# -----------------------------------------------------------------------------
# Teams / picks
# -----------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class DraftPick:
    id: PickId
    year: int = 0
    round: int = 1
    original_team_id: Optional[TeamId] = None
    current_owner_id: Optional[TeamId] = None


@dataclass(frozen=True, slots=True)
class Team:
    id: TeamId
    abbreviation: str
    city: str = ""
    name: str = ""
    conference: str = ""
    # Ordered; the first five entries are the canonical starters.
    roster_ids: Tuple[PlayerId, ...] = ()
    draft_picks: Tuple[DraftPick, ...] = ()
    # Explicit opt-in list of players the owner has flagged as available.
    trading_block: Tuple[PlayerId, ...] = ()

    @property
    def full_name(self) -> str:
        return f"{self.city} {self.name}".strip()


# -----------------------------------------------------------------------------
# League context
# -----------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class TeamRecord:
    wins: int = 0
    losses: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.losses

    @property
    def win_pct(self) -> float:
        return self.wins / self.games if self.games > 0 else 0.5


@dataclass(frozen=True, slots=True)
class LeagueContext:
    """Flattened standings snapshot shared by direction and trade logic."""

    standings: Mapping[str, TeamRecord] = field(default_factory=dict)
    games_played: int = 0
    season_phase: str = "preseason"

    def record_for(self, abbreviation: str) -> TeamRecord:
        return self.standings.get(abbreviation) or TeamRecord()


# -----------------------------------------------------------------------------
# Trade assets / proposals
# -----------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class PlayerAsset:
    player_id: PlayerId

    @property
    def kind(self) -> AssetKind:
        return AssetKind.PLAYER


@dataclass(frozen=True, slots=True)
class PickAsset:
    pick_id: PickId

    @property
    def kind(self) -> AssetKind:
        return AssetKind.PICK


Asset = Union[PlayerAsset, PickAsset]


@dataclass(frozen=True, slots=True)
class TradeProposal:
    """A trade offer seen from the proposing AI team's side."""

    id: str
    proposing_team_id: TeamId
    ai_gives: Tuple[Asset, ...]
    ai_receives: Tuple[Asset, ...]
    created_at: date
    expires_at: date
    status: ProposalStatus = ProposalStatus.PENDING
    reason: str = ""
    proposing_team_abbreviation: str = ""
    proposing_team_name: str = ""
    receiving_team_id: Optional[TeamId] = None
    target_player_id: Optional[PlayerId] = None
    resolved_at: Optional[date] = None
