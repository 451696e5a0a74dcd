from __future__ import annotations

from fastapi import APIRouter

from league import EngineError
from league.errors import BAD_PAYLOAD
from motivation import calculate_retention_score, retention_context_for_team
from team_direction import assess_team_direction, get_trade_interest
from app.schemas.common import DirectionRequest, RetentionRequest
from app.services.engine_facade import _engine_error_response, load_snapshot

router = APIRouter()


@router.post("/api/ai/direction")
async def api_ai_direction(req: DirectionRequest):
    try:
        snap = load_snapshot(req)
        teams = [snap.team(tid) for tid in req.team_ids] if req.team_ids else list(snap.teams)
        out = {}
        for team in teams:
            roster = snap.roster(team)
            assessment = assess_team_direction(team, roster, snap.context)
            out[team.id] = {
                "abbreviation": team.abbreviation,
                "trade_interest": get_trade_interest(team, roster, snap.context),
                **assessment.to_dict(),
            }
        return {"ok": True, "teams": out}
    except EngineError as exc:
        return _engine_error_response(exc)


@router.post("/api/ai/motivation/retention")
async def api_ai_retention(req: RetentionRequest):
    try:
        snap = load_snapshot(req)
        player = snap.lookups.player(req.player_id)
        if player is None:
            raise EngineError(BAD_PAYLOAD, f"unknown player {req.player_id!r}", {"player_id": req.player_id})
        team = snap.find_team(player.team_abbreviation)
        ctx = retention_context_for_team(
            player,
            snap.roster(team) if team is not None else [],
            snap.context,
            stats=snap.lookups.stats(player.id),
            made_playoffs=req.made_playoffs,
            coach_stability=req.coach_stability,
            has_championship=req.has_championship,
        )
        score = calculate_retention_score(player, ctx, salary_override=req.offer_salary)
        return {"ok": True, "player_id": player.id, "retention_score": score}
    except EngineError as exc:
        return _engine_error_response(exc)
