from __future__ import annotations

import random
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

import pytest

from league import LeagueContext, LeagueLookups, Player, Team, TeamRecord

POSITION_CYCLE = ("PG", "SG", "SF", "PF", "C")


class FixedRandom:
    """RandomSource that always returns the same draw."""

    def __init__(self, value: float) -> None:
        self.value = float(value)

    def random(self) -> float:
        return self.value


def _player(pid: str, **kw) -> Player:
    fields = dict(
        first_name="Player",
        last_name=pid,
        team_abbreviation="AAA",
        position="SF",
        age=27,
        overall_rating=75,
        contract_salary=5_000_000.0,
        contract_years_remaining=2,
    )
    fields.update(kw)
    return Player(id=pid, **fields)


def _roster(abbr: str, ratings: Sequence[int], *, prefix: Optional[str] = None, **kw) -> List[Player]:
    """One player per rating, positions cycling PG..C, ids ``<prefix><index>``."""
    prefix = prefix if prefix is not None else abbr.lower()
    return [
        _player(f"{prefix}{i}", team_abbreviation=abbr, position=POSITION_CYCLE[i % 5], overall_rating=r, **kw)
        for i, r in enumerate(ratings)
    ]


def _team(abbr: str, players: Iterable[Player] = (), **kw) -> Team:
    return Team(id=kw.pop("id", abbr), abbreviation=abbr, roster_ids=tuple(p.id for p in players), **kw)


def _context(records: Optional[Mapping[str, Tuple[int, int]]] = None, games_played: Optional[int] = None) -> LeagueContext:
    standings = {abbr: TeamRecord(wins=w, losses=l) for abbr, (w, l) in (records or {}).items()}
    if games_played is None:
        games_played = max((r.games for r in standings.values()), default=0)
    return LeagueContext(standings=standings, games_played=games_played, season_phase="regular_season")


def _lookups(players: Iterable[Player], teams: Iterable[Team] = (), **kw) -> LeagueLookups:
    return LeagueLookups.from_snapshot(list(players), list(teams), **kw)


@pytest.fixture
def make_player():
    return _player


@pytest.fixture
def make_roster():
    return _roster


@pytest.fixture
def make_team():
    return _team


@pytest.fixture
def make_context():
    return _context


@pytest.fixture
def make_lookups():
    return _lookups


@pytest.fixture
def fixed_rng():
    return FixedRandom


@pytest.fixture
def rng():
    return random.Random(7)
