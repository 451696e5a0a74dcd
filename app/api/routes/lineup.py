from __future__ import annotations

from fastapi import APIRouter

from league import EngineError
from league.normalize import player_from_mapping
from lineup import handle_injured_starter, initialize_team_lineup, refresh_team_lineup
from app.schemas.lineup import LineupRefreshRequest, LineupSelectRequest
from app.services.engine_facade import _engine_error_response, request_rng

router = APIRouter()


@router.post("/api/ai/lineup/select")
async def api_ai_lineup_select(req: LineupSelectRequest):
    try:
        roster = [player_from_mapping(p) for p in req.roster]
        plan = initialize_team_lineup(roster, request_rng(req.seed))
        return {"ok": True, **plan.to_dict()}
    except EngineError as exc:
        return _engine_error_response(exc)


@router.post("/api/ai/lineup/refresh")
async def api_ai_lineup_refresh(req: LineupRefreshRequest):
    try:
        roster = [player_from_mapping(p) for p in req.roster]
        if req.injured_player_id:
            change = handle_injured_starter(req.current_starters, req.injured_player_id, roster)
        else:
            change = refresh_team_lineup(req.current_starters, roster, request_rng(req.seed))
        return {"ok": True, **change.to_dict()}
    except EngineError as exc:
        return _engine_error_response(exc)
