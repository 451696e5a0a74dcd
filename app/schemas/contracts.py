from __future__ import annotations

from typing import List, Optional

from app.schemas.common import LeagueSnapshotRequest


class ContractsOffseasonRequest(LeagueSnapshotRequest):
    season_year: int
    # Defaults to every team in the snapshot except the user's.
    ai_team_ids: Optional[List[str]] = None
    user_team_id: Optional[str] = None
