# motivation/archetypes.py
"""Motivation archetypes.

An archetype is a base weight per motivation category. Every generated player
draws one archetype, then jitters each weight so no two profiles are clones.
``balanced`` dominates the draw; traits, age and rating tilt it toward the
more opinionated archetypes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping

from league.types import MotivationCategory as C


class ArchetypeKey(str, Enum):
    FRANCHISE_CORNERSTONE = "franchise_cornerstone"
    RING_CHASER = "ring_chaser"
    MAX_CONTRACT_HUNTER = "max_contract_hunter"
    COMPETITOR = "competitor"
    BALANCED = "balanced"


@dataclass(frozen=True, slots=True)
class Archetype:
    key: ArchetypeKey
    label: str
    weights: Mapping[C, float]


def _w(money: float, winning: float, loyalty: float, role: float, star: float, coaching: float, market: float, legacy: float) -> Dict[C, float]:
    return {
        C.MONEY: money,
        C.WINNING: winning,
        C.LOYALTY: loyalty,
        C.ROLE: role,
        C.STAR_PAIRING: star,
        C.COACHING: coaching,
        C.MARKET: market,
        C.LEGACY: legacy,
    }


ARCHETYPES: Dict[ArchetypeKey, Archetype] = {
    ArchetypeKey.FRANCHISE_CORNERSTONE: Archetype(
        ArchetypeKey.FRANCHISE_CORNERSTONE, "Franchise Cornerstone", _w(0.5, 0.6, 0.9, 0.6, 0.3, 0.5, 0.4, 0.8)
    ),
    ArchetypeKey.RING_CHASER: Archetype(
        ArchetypeKey.RING_CHASER, "Ring Chaser", _w(0.4, 0.9, 0.2, 0.5, 0.8, 0.4, 0.3, 0.6)
    ),
    ArchetypeKey.MAX_CONTRACT_HUNTER: Archetype(
        ArchetypeKey.MAX_CONTRACT_HUNTER, "Max Contract Hunter", _w(0.95, 0.4, 0.2, 0.4, 0.2, 0.2, 0.5, 0.3)
    ),
    ArchetypeKey.COMPETITOR: Archetype(
        ArchetypeKey.COMPETITOR, "Competitor", _w(0.5, 0.8, 0.5, 0.8, 0.4, 0.5, 0.2, 0.6)
    ),
    ArchetypeKey.BALANCED: Archetype(
        ArchetypeKey.BALANCED, "Balanced", _w(0.6, 0.6, 0.5, 0.5, 0.4, 0.4, 0.3, 0.4)
    ),
}

# Base draw pool. Insertion order is the roll order.
BASE_POOL: Dict[ArchetypeKey, int] = {
    ArchetypeKey.BALANCED: 40,
    ArchetypeKey.FRANCHISE_CORNERSTONE: 10,
    ArchetypeKey.RING_CHASER: 10,
    ArchetypeKey.MAX_CONTRACT_HUNTER: 10,
    ArchetypeKey.COMPETITOR: 10,
}
