"""League context builder.

Flattens per-conference standings into the abbreviation-keyed record map that
the direction classifier and trade logic read. It must be rebuilt whenever the
standings change; nothing here is cached.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from .types import LeagueContext, Team, TeamRecord

CONFERENCES = ("east", "west")


def _safe_int(x: Any, default: int = 0) -> int:
    try:
        if x is None:
            return int(default)
        return int(x)
    except Exception:
        return int(default)


def build_context(
    standings: Optional[Mapping[str, Iterable[Mapping[str, Any]]]] = None,
    teams: Iterable[Team] = (),
    season_phase: str = "preseason",
) -> LeagueContext:
    """Build a LeagueContext from ``{east: [...], west: [...]}`` standings rows.

    Rows carry ``teamId`` (or ``team_id``) plus wins/losses. A row may also carry
    an ``abbreviation`` directly, in which case no team lookup is needed. Rows
    whose team cannot be resolved still count toward ``games_played``.
    """
    by_id: Dict[str, Team] = {}
    for t in teams:
        by_id[str(t.id)] = t

    flat: Dict[str, TeamRecord] = {}
    games_played = 0
    for conf in CONFERENCES:
        for row in (standings or {}).get(conf) or ():
            wins = _safe_int(row.get("wins"))
            losses = _safe_int(row.get("losses"))
            games_played = max(games_played, wins + losses)

            abbr = row.get("abbreviation")
            if not abbr:
                team_id = row.get("teamId", row.get("team_id"))
                team = by_id.get(str(team_id)) if team_id is not None else None
                abbr = team.abbreviation if team is not None else None
            if abbr:
                flat[str(abbr)] = TeamRecord(wins=wins, losses=losses)

    return LeagueContext(standings=flat, games_played=games_played, season_phase=str(season_phase))
