from __future__ import annotations

import random
from dataclasses import asdict, dataclass
from typing import Sequence

from ..analysis.types import ScoreResult


@dataclass(frozen=True)
class ChaosLevel:
    level: int
    title: str
    description: str
    emoji: str

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class Details:
    """Cosmetic percentages shown next to the real metrics."""

    creativity: int
    organization: int
    inspiration: int
    mystery: int

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


CHAOS_LEVELS: tuple[ChaosLevel, ...] = (
    ChaosLevel(1, "Zen State", "The desk is so pristine it borders on the void", "🧘‍♀️"),
    ChaosLevel(2, "Minimalist", "A refined workspace where simplicity stands out", "✨"),
    ChaosLevel(3, "Ordinary", "A perfectly typical desk. Peace itself", "😊"),
    ChaosLevel(4, "Creative Chaos", "Brimming with inspiration, like an artist's studio", "🎨"),
    ChaosLevel(
        5,
        "Researcher's Desk",
        "Traces of intellectual pursuit; a mess that radiates a passion for learning",
        "🔬",
    ),
    ChaosLevel(6, "Proof of Genius", "Einstein-grade clutter. Even a genius's desk is original", "🧠"),
    ChaosLevel(
        7,
        "Adventurer's Base",
        "Like an RPG item shop: nobody knows what will turn up next",
        "🗡️",
    ),
    ChaosLevel(
        8,
        "Archaeological Value",
        "Layers of civilisation stacked up into a site of historical significance",
        "🏺",
    ),
    ChaosLevel(
        9,
        "Interdimensional Portal",
        "Beyond the laws of physics, practically a gateway to another dimension",
        "🌀",
    ),
    ChaosLevel(10, "Cosmic Mystery", "Big Bang-grade chaos. A new universe may be born here", "🌌"),
)

COMMENTS: tuple[str, ...] = (
    "There is a story behind the way this desk is arranged",
    "A fine balance between creativity and practicality",
    "Great ideas are bound to come out of this desk",
    "The state of a desk reflects the richness of the mind",
    "A reminder that some things matter more than tidiness",
    "This desk overflows with its owner's personality",
    "An aesthetic that goes beyond mere function",
)

FALLBACK_DETAILS = Details(creativity=75, organization=40, inspiration=88, mystery=60)


def level_for(chaos_level: int) -> ChaosLevel:
    if not 1 <= chaos_level <= len(CHAOS_LEVELS):
        raise ValueError(f"Chaos level must be between 1 and {len(CHAOS_LEVELS)}: {chaos_level}")
    return CHAOS_LEVELS[chaos_level - 1]


def pick_comment(rng: random.Random, comments: Sequence[str] = COMMENTS) -> str:
    return comments[rng.randrange(len(comments))]


def random_level(rng: random.Random) -> ChaosLevel:
    return CHAOS_LEVELS[rng.randrange(len(CHAOS_LEVELS))]


def cosmetic_details(result: ScoreResult, rng: random.Random) -> Details:
    level = result.chaos_level
    metrics = result.metrics
    return Details(
        creativity=min(100, metrics.color_diversity + rng.randrange(20)),
        organization=max(10, 110 - level * 10 + rng.randrange(20)),
        inspiration=min(100, metrics.edge_complexity + rng.randrange(30) + 50),
        mystery=min(100, level * 8 + rng.randrange(30)),
    )


__all__ = [
    "CHAOS_LEVELS",
    "COMMENTS",
    "ChaosLevel",
    "Details",
    "FALLBACK_DETAILS",
    "cosmetic_details",
    "level_for",
    "pick_comment",
    "random_level",
]
