from __future__ import annotations

from fastapi import APIRouter

from league import EngineError
from league.normalize import assets_from_list, proposal_from_mapping, proposal_to_dict
from team_direction import analyze_team_direction
from trades import compute_ai_trading_block, expire_stale_proposals
from trades.generation import generate_weekly_proposals, match_ai_trades
from trades.valuation import evaluate_trade
from app.schemas.common import LeagueSnapshotRequest
from app.schemas.trades import (
    AiMarketRequest,
    ExpireProposalsRequest,
    TradeEvaluateRequest,
    TradeProposalsRequest,
)
from app.services.engine_facade import _engine_error_response, load_snapshot, request_date, request_difficulty, request_rng

router = APIRouter()


@router.post("/api/ai/trade/evaluate")
async def api_ai_trade_evaluate(req: TradeEvaluateRequest):
    """Would the AI team accept this deal? (gives/receives are from its side)"""
    try:
        snap = load_snapshot(req)
        team = snap.team(req.team_id)
        evaluation = evaluate_trade(
            ai_gives=assets_from_list(req.ai_gives),
            ai_receives=assets_from_list(req.ai_receives),
            team=team,
            team_roster=snap.roster(team),
            context=snap.context,
            lookups=snap.lookups,
            difficulty=request_difficulty(req.difficulty),
        )
        return {"ok": True, "evaluation": evaluation.to_dict()}
    except EngineError as exc:
        return _engine_error_response(exc)


@router.post("/api/ai/trade/block/{team_id}")
async def api_ai_trade_block(team_id: str, req: LeagueSnapshotRequest):
    try:
        snap = load_snapshot(req)
        team = snap.team(team_id)
        roster = snap.roster(team)
        direction = analyze_team_direction(team, roster, snap.context)
        block = compute_ai_trading_block(team, roster, direction, snap.context, snap.lookups)
        return {"ok": True, "direction": direction.value, "trading_block": [e.to_dict() for e in block]}
    except EngineError as exc:
        return _engine_error_response(exc)


@router.post("/api/ai/trade/proposals")
async def api_ai_trade_proposals(req: TradeProposalsRequest):
    try:
        snap = load_snapshot(req)
        user_team = snap.team(req.user_team_id)
        proposals = generate_weekly_proposals(
            ai_teams=snap.teams_except([user_team.id]),
            user_team=user_team,
            context=snap.context,
            lookups=snap.lookups,
            current_date=request_date(req.current_date),
            season_year=req.season_year,
            difficulty=request_difficulty(req.difficulty),
            existing_proposals=[proposal_from_mapping(p) for p in req.existing_proposals],
            rng=request_rng(req.seed),
        )
        return {"ok": True, "proposals": [proposal_to_dict(p) for p in proposals]}
    except EngineError as exc:
        return _engine_error_response(exc)


@router.post("/api/ai/trade/ai-market")
async def api_ai_trade_market(req: AiMarketRequest):
    try:
        snap = load_snapshot(req)
        trades = match_ai_trades(
            teams=snap.teams_except([req.user_team_id]),
            context=snap.context,
            lookups=snap.lookups,
            current_date=request_date(req.current_date),
            season_year=req.season_year,
            difficulty=request_difficulty(req.difficulty),
            rng=request_rng(req.seed),
        )
        return {"ok": True, "trades": [t.to_dict() for t in trades]}
    except EngineError as exc:
        return _engine_error_response(exc)


@router.post("/api/ai/trade/expire")
async def api_ai_trade_expire(req: ExpireProposalsRequest):
    try:
        result = expire_stale_proposals([proposal_from_mapping(p) for p in req.proposals], request_date(req.current_date))
        return {
            "ok": True,
            "proposals": [proposal_to_dict(p) for p in result.proposals],
            "expired": [proposal_to_dict(p) for p in result.expired],
        }
    except EngineError as exc:
        return _engine_error_response(exc)
