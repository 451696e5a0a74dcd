from __future__ import annotations

from fastapi import APIRouter

from contracts import run_ai_roster_management
from league import EngineError
from app.schemas.contracts import ContractsOffseasonRequest
from app.services.engine_facade import _engine_error_response, load_snapshot

router = APIRouter()


@router.post("/api/ai/contracts/offseason")
async def api_ai_contracts_offseason(req: ContractsOffseasonRequest):
    """Offseason roster management for AI teams.

    Returns the decisions plus the updated snapshot of every player whose
    team or contract changed.
    """
    try:
        snap = load_snapshot(req)
        if req.ai_team_ids is not None:
            ai_teams = [snap.team(tid) for tid in req.ai_team_ids]
        else:
            ai_teams = snap.teams_except([req.user_team_id])
        result = run_ai_roster_management(
            ai_teams=ai_teams,
            players=snap.players,
            context=snap.context,
            lookups=snap.lookups,
            season_year=req.season_year,
        )
        before = {p.id: p for p in snap.players}
        changed = [p for p in result.players if before.get(p.id) != p]
        return {
            "ok": True,
            **result.to_dict(),
            "updated_players": [
                {
                    "id": p.id,
                    "team_abbreviation": p.team_abbreviation,
                    "is_free_agent": p.is_free_agent,
                    "contract_salary": p.contract_salary,
                    "contract_years_remaining": p.contract_years_remaining,
                }
                for p in changed
            ],
        }
    except EngineError as exc:
        return _engine_error_response(exc)
