"""Injectable randomness.

Every stochastic decision in the engine (motivation archetype draws, proposal
probability gates, AI market shuffles, the platoon roll) goes through a
``RandomSource``. ``random.Random`` already satisfies the protocol, so tests
pass ``random.Random(seed)`` and production callers can derive a stable seed
per team/day with :func:`stable_seed`.
"""

from __future__ import annotations

import hashlib
import random
from typing import List, Mapping, Optional, Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")
K = TypeVar("K")


@runtime_checkable
class RandomSource(Protocol):
    def random(self) -> float:
        """Next float in [0, 1)."""
        ...


def ensure_rng(rng: Optional[RandomSource]) -> RandomSource:
    return rng if rng is not None else random.Random()


def stable_seed(*parts: object) -> int:
    """Deterministic seed from arbitrary parts (python hash() is salted per process)."""
    raw = "|".join(str(p) for p in parts)
    h = hashlib.sha256(raw.encode("utf-8")).digest()
    return int.from_bytes(h[:8], "big", signed=False)


def roll(rng: RandomSource, probability: float) -> bool:
    """True with the given probability."""
    return rng.random() < float(probability)


def shuffled(items: Sequence[T], rng: RandomSource) -> List[T]:
    """Fisher-Yates shuffle driven only by ``rng.random()``."""
    out: List[T] = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = int(rng.random() * (i + 1))
        out[i], out[j] = out[j], out[i]
    return out


def weighted_choice(weights: Mapping[K, float], rng: RandomSource, *, default: K) -> K:
    """Pick a key with probability proportional to its weight (insertion order)."""
    total = sum(max(0.0, float(w)) for w in weights.values())
    if total <= 0.0:
        return default
    remaining = rng.random() * total
    for key, w in weights.items():
        if float(w) <= 0.0:
            continue
        remaining -= float(w)
        if remaining <= 0.0:
            return key
    return default
