# league/normalize.py
"""Boundary normalization: loosely-shaped snapshots -> league.types records.

League snapshots arrive from several producers (the save format, the HTTP
surface, CSV-built fixtures) and historically spell the same concept two ways
(``overallRating`` / ``overall_rating``). This module is the only place that
knows about both spellings. Everything downstream reads the normalized
dataclasses.

Missing optional values stay ``None``; malformed scalars degrade to defaults.
A payload that is not a mapping at all raises EngineError(BAD_PAYLOAD).
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import game_time

from .errors import BAD_PAYLOAD, EngineError
from .types import (
    Asset,
    DraftPick,
    Motivation,
    MotivationCategory,
    PickAsset,
    Player,
    PlayerAsset,
    ProposalStatus,
    SeasonStats,
    Team,
    TradeProposal,
)


# -----------------------------------------------------------------------------
# Small helpers
# -----------------------------------------------------------------------------
def _pick(raw: Mapping[str, Any], *keys: str) -> Any:
    for k in keys:
        if k in raw and raw[k] is not None:
            return raw[k]
    return None


def _safe_float(x: Any, default: float = 0.0) -> float:
    try:
        if x is None:
            return float(default)
        return float(x)
    except Exception:
        return float(default)


def _opt_float(x: Any) -> Optional[float]:
    if x is None:
        return None
    try:
        return float(x)
    except Exception:
        return None


def _opt_int(x: Any) -> Optional[int]:
    if x is None or isinstance(x, bool):
        return None
    try:
        return int(round(float(x)))
    except Exception:
        return None


def _flag(x: Any) -> bool:
    if isinstance(x, str):
        return x.strip().lower() in ("1", "true", "yes", "y")
    return bool(x)


def _require_mapping(raw: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(raw, Mapping):
        raise EngineError(BAD_PAYLOAD, f"{what} must be an object", {"raw": repr(raw)[:200]})
    return raw


def _opt_str(x: Any) -> Optional[str]:
    if x is None:
        return None
    s = str(x).strip()
    return s or None


# -----------------------------------------------------------------------------
# Players
# -----------------------------------------------------------------------------
def motivations_from_mapping(raw: Any) -> Dict[MotivationCategory, Motivation]:
    """Parse ``{category: {weight, satisfaction}}``; unknown categories are dropped."""
    if not isinstance(raw, Mapping):
        return {}
    out: Dict[MotivationCategory, Motivation] = {}
    for key, data in raw.items():
        try:
            cat = MotivationCategory(str(key))
        except ValueError:
            continue
        if isinstance(data, Motivation):
            out[cat] = data
            continue
        if not isinstance(data, Mapping):
            continue
        out[cat] = Motivation(
            weight=_safe_float(data.get("weight"), 0.5),
            satisfaction=_safe_float(data.get("satisfaction"), 0.5),
        )
    return out


def player_from_mapping(raw: Any) -> Player:
    r = _require_mapping(raw, "player")
    pid = _pick(r, "id", "playerId", "player_id")
    if pid is None:
        raise EngineError(BAD_PAYLOAD, "player.id is required", {"raw": dict(r)})

    traits_raw = _pick(r, "traits")
    if traits_raw is None:
        personality = _pick(r, "personality")
        if isinstance(personality, Mapping):
            traits_raw = personality.get("traits")
    traits: Tuple[str, ...] = tuple(str(t) for t in (traits_raw or ()) if t)

    free_agent_raw = _pick(r, "isFreeAgent", "is_free_agent")
    team_abbr = _opt_str(_pick(r, "teamAbbreviation", "team_abbreviation"))
    tenure = _opt_int(_pick(r, "yearsWithTeam", "years_with_team"))

    return Player(
        id=str(pid),
        first_name=str(_pick(r, "firstName", "first_name") or ""),
        last_name=str(_pick(r, "lastName", "last_name") or ""),
        team_abbreviation=team_abbr,
        position=_opt_str(_pick(r, "position")),
        secondary_position=_opt_str(_pick(r, "secondaryPosition", "secondary_position")),
        age=_opt_int(_pick(r, "age")),
        overall_rating=_opt_int(_pick(r, "overallRating", "overall_rating")),
        trade_value=_opt_float(_pick(r, "tradeValue", "tradeValueTotal", "trade_value")),
        contract_salary=_safe_float(_pick(r, "contractSalary", "contract_salary"), 0.0),
        contract_years_remaining=_opt_int(_pick(r, "contractYearsRemaining", "contract_years_remaining")),
        fatigue=_safe_float(_pick(r, "fatigue"), 0.0),
        is_injured=_flag(_pick(r, "isInjured", "is_injured")),
        morale=_opt_float(_pick(r, "morale")),
        motivations=motivations_from_mapping(_pick(r, "motivations")),
        traits=traits,
        years_with_team=tenure if tenure is not None else 1,
        is_free_agent=_flag(free_agent_raw) if free_agent_raw is not None else team_abbr in (None, "FA"),
        is_draft_prospect=_flag(_pick(r, "isDraftProspect", "is_draft_prospect")),
    )


def stats_from_mapping(raw: Any) -> Optional[SeasonStats]:
    if raw is None:
        return None
    if isinstance(raw, SeasonStats):
        return raw
    r = _require_mapping(raw, "stats")
    return SeasonStats(
        games_played=_opt_int(_pick(r, "gamesPlayed", "games_played")) or 0,
        points=_safe_float(_pick(r, "points"), 0.0),
        rebounds=_safe_float(_pick(r, "rebounds"), 0.0),
        assists=_safe_float(_pick(r, "assists"), 0.0),
        minutes=_safe_float(_pick(r, "minutes", "minutesPlayed", "minutes_played"), 0.0),
    )


# -----------------------------------------------------------------------------
# Teams / picks
# -----------------------------------------------------------------------------
def pick_from_mapping(raw: Any) -> DraftPick:
    r = _require_mapping(raw, "draft pick")
    pick_id = _pick(r, "id", "pickId", "pick_id")
    if pick_id is None:
        raise EngineError(BAD_PAYLOAD, "draft pick id is required", {"raw": dict(r)})
    return DraftPick(
        id=str(pick_id),
        year=_opt_int(_pick(r, "year")) or 0,
        round=_opt_int(_pick(r, "round")) or 1,
        original_team_id=_opt_str(_pick(r, "originalTeamId", "original_team_id")),
        current_owner_id=_opt_str(_pick(r, "currentOwnerId", "current_owner_id")),
    )


def _id_list(raw: Any) -> Tuple[str, ...]:
    out: List[str] = []
    for item in raw or ():
        if isinstance(item, Mapping):
            item = _pick(item, "id", "playerId", "player_id")
        if item is None:
            continue
        out.append(str(item))
    return tuple(out)


def team_from_mapping(raw: Any) -> Team:
    r = _require_mapping(raw, "team")
    abbr = _pick(r, "abbreviation", "teamAbbreviation", "team_abbreviation")
    tid = _pick(r, "id", "teamId", "team_id")
    if abbr is None and tid is None:
        raise EngineError(BAD_PAYLOAD, "team requires id or abbreviation", {"raw": dict(r)})
    picks = tuple(pick_from_mapping(p) for p in (_pick(r, "draftPicks", "draft_picks") or ()))
    return Team(
        id=str(tid if tid is not None else abbr),
        abbreviation=str(abbr if abbr is not None else tid),
        city=str(_pick(r, "city") or ""),
        name=str(_pick(r, "name") or ""),
        conference=str(_pick(r, "conference") or "").lower(),
        roster_ids=_id_list(_pick(r, "roster", "rosterIds", "roster_ids")),
        draft_picks=picks,
        trading_block=_id_list(_pick(r, "tradingBlock", "trading_block")),
    )


# -----------------------------------------------------------------------------
# Trade assets / proposals
# -----------------------------------------------------------------------------
def asset_from_mapping(raw: Any) -> Asset:
    if isinstance(raw, (PlayerAsset, PickAsset)):
        return raw
    r = _require_mapping(raw, "asset")
    kind = str(_pick(r, "type", "kind") or "").strip().lower()
    if kind == "player":
        pid = _pick(r, "playerId", "player_id", "id")
        if pid is not None:
            return PlayerAsset(player_id=str(pid))
    elif kind == "pick":
        pick_id = _pick(r, "pickId", "pick_id", "id")
        if pick_id is not None:
            return PickAsset(pick_id=str(pick_id))
    raise EngineError(BAD_PAYLOAD, "asset must be {type: player, playerId} or {type: pick, pickId}", {"raw": dict(r)})


def assets_from_list(raw: Optional[Iterable[Any]]) -> Tuple[Asset, ...]:
    return tuple(asset_from_mapping(a) for a in (raw or ()))


def asset_to_dict(asset: Asset) -> Dict[str, str]:
    if isinstance(asset, PlayerAsset):
        return {"type": "player", "playerId": asset.player_id}
    return {"type": "pick", "pickId": asset.pick_id}


def _date(raw: Any, *, field_name: str) -> date:
    try:
        return game_time.parse_game_date(raw, field=field_name)
    except ValueError as exc:
        raise EngineError(BAD_PAYLOAD, str(exc), {"field": field_name}) from exc


def proposal_from_mapping(raw: Any) -> TradeProposal:
    r = _require_mapping(raw, "proposal")
    body = r.get("proposal") if isinstance(r.get("proposal"), Mapping) else r
    status_raw = str(_pick(r, "status") or ProposalStatus.PENDING.value).lower()
    try:
        status = ProposalStatus(status_raw)
    except ValueError as exc:
        raise EngineError(BAD_PAYLOAD, f"unknown proposal status {status_raw!r}") from exc

    expires_at = _date(_pick(r, "expires_at", "expiresAt"), field_name="expires_at")
    created_raw = _pick(r, "created_at", "createdAt")
    resolved_raw = _pick(r, "resolved_at", "resolvedAt")
    return TradeProposal(
        id=str(_pick(r, "id") or ""),
        proposing_team_id=str(_pick(r, "proposing_team_id", "proposingTeamId") or ""),
        ai_gives=assets_from_list(_pick(body, "aiGives", "ai_gives")),
        ai_receives=assets_from_list(_pick(body, "aiReceives", "ai_receives")),
        created_at=_date(created_raw, field_name="created_at") if created_raw is not None else expires_at,
        expires_at=expires_at,
        status=status,
        reason=str(_pick(r, "reason") or ""),
        proposing_team_abbreviation=str(_pick(r, "proposing_team_abbreviation", "proposingTeamAbbreviation") or ""),
        proposing_team_name=str(_pick(r, "proposing_team_name", "proposingTeamName") or ""),
        receiving_team_id=_opt_str(_pick(r, "receiving_team_id", "receivingTeamId")),
        target_player_id=_opt_str(_pick(r, "target_player_id", "targetPlayerId")),
        resolved_at=_date(resolved_raw, field_name="resolved_at") if resolved_raw is not None else None,
    )


def proposal_to_dict(p: TradeProposal) -> Dict[str, Any]:
    return {
        "id": p.id,
        "proposing_team_id": p.proposing_team_id,
        "proposing_team_abbreviation": p.proposing_team_abbreviation,
        "proposing_team_name": p.proposing_team_name,
        "receiving_team_id": p.receiving_team_id,
        "status": p.status.value,
        "proposal": {
            "aiGives": [asset_to_dict(a) for a in p.ai_gives],
            "aiReceives": [asset_to_dict(a) for a in p.ai_receives],
        },
        "reason": p.reason,
        "created_at": p.created_at.isoformat(),
        "expires_at": p.expires_at.isoformat(),
        "resolved_at": p.resolved_at.isoformat() if p.resolved_at else None,
        "target_player_id": p.target_player_id,
    }
