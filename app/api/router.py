from fastapi import APIRouter

from app.api.routes import contracts, core, direction, lineup, trades

api_router = APIRouter()
api_router.include_router(core.router)
api_router.include_router(direction.router)
api_router.include_router(trades.router)
api_router.include_router(contracts.router)
api_router.include_router(lineup.router)
