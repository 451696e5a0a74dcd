from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class EngineError(Exception):
    """Structured error for decision-engine contract violations.

    The engine defaults optional inputs instead of raising; this error is
    reserved for programming-contract violations (a required collaborator is
    missing, a proposal is pushed through an illegal status transition, a
    payload cannot be normalized at all). The server layer maps it to HTTP 400
    while keeping a stable machine-readable code.
    """

    code: str
    message: str
    details: Optional[Any] = None

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.code}: {self.message}"


# Error codes (stable API surface)
MISSING_COLLABORATOR = "MISSING_COLLABORATOR"
PROPOSAL_INVALID_TRANSITION = "PROPOSAL_INVALID_TRANSITION"
BAD_PAYLOAD = "BAD_PAYLOAD"
