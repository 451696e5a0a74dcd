from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from league import EngineError
from app.api.router import api_router
from app.services.engine_facade import _engine_error_response, default_difficulty

logger = logging.getLogger(__name__)

app = FastAPI(title="Franchise AI decision server")


@app.on_event("startup")
def _startup_log_config() -> None:
    # The server is stateless; the only process-level knobs are env vars.
    logger.info(
        "franchise-ai startup default_difficulty=%s admin_token=%s",
        default_difficulty().value,
        "set" if (os.environ.get("FRANCHISE_AI_ADMIN_TOKEN") or "").strip() else "unset",
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def _auth_guard_middleware(request: Request, call_next):
    """Optional auth guard.

    If FRANCHISE_AI_ADMIN_TOKEN is configured, require it on POST API calls.
    """
    required_token = (os.environ.get("FRANCHISE_AI_ADMIN_TOKEN") or "").strip()
    if not required_token:
        return await call_next(request)

    path = request.url.path or ""
    method = (request.method or "GET").upper()
    if method != "POST" or not path.startswith("/api/"):
        return await call_next(request)

    provided = (request.headers.get("X-Admin-Token") or "").strip()
    if provided != required_token:
        return JSONResponse(status_code=401, content={"detail": "Unauthorized: invalid X-Admin-Token"})

    return await call_next(request)


@app.exception_handler(EngineError)
async def _engine_error_handler(request: Request, exc: EngineError):
    return _engine_error_response(exc)


app.include_router(api_router)
