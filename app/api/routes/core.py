from __future__ import annotations

from fastapi import APIRouter

import game_time
from app.services.engine_facade import default_difficulty

router = APIRouter()


@router.get("/")
async def root():
    """Health check."""
    return {"ok": True, "service": "franchise-ai", "default_difficulty": default_difficulty().value}


@router.get("/api/ai/trade/deadline/{season_year}")
async def api_trade_deadline(season_year: int):
    return {"ok": True, "deadline": game_time.get_trade_deadline(season_year).to_dict()}
