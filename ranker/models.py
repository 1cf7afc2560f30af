from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from functools import total_ordering
from typing import Dict, List, Optional, Tuple

from .cards import Card


class HandCategory(IntEnum):
    """Hand categories ordered from weakest to strongest; the value is the strength."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def slug(self) -> str:
        return self.name.lower()


_CATEGORY_LABELS = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.ROYAL_FLUSH: "Royal Flush",
}


@total_ordering
@dataclass(frozen=True)
class RankResult:
    category: HandCategory
    kicker_order: Tuple[int, ...]

    @property
    def strength(self) -> int:
        return int(self.category)

    @property
    def key(self) -> Tuple[int, Tuple[int, ...]]:
        return (self.strength, self.kicker_order)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RankResult):
            return NotImplemented
        return self.key < other.key


@dataclass(frozen=True)
class UnevaluableHand:
    """Stands in for a ranking when the caller supplied no cards at all."""

    reason: str = "No cards to evaluate"


UNEVALUABLE = UnevaluableHand()


@dataclass(frozen=True)
class BestHand:
    cards: Tuple[Card, ...]
    result: RankResult

    @property
    def labels(self) -> List[str]:
        return [card.label for card in self.cards]


@dataclass(frozen=True)
class PlayerHand:
    player_id: str
    hole_cards: Tuple[Card, ...]


@dataclass(frozen=True)
class RoundOutcome:
    per_player: Dict[str, BestHand]
    winners: Tuple[str, ...]

    @property
    def is_split(self) -> bool:
        return len(self.winners) > 1

    @property
    def winning_result(self) -> RankResult:
        return self.per_player[self.winners[0]].result


@dataclass
class SimulationConfig:
    trials: int = 50_000
    chunk_size: int = 10_000
    seed: Optional[int] = None


@dataclass
class SimulationReport:
    trials: int
    counts: Dict[HandCategory, int] = field(default_factory=dict)

    def probability(self, category: HandCategory) -> float:
        if self.trials <= 0:
            return 0.0
        return self.counts.get(category, 0) / self.trials * 100

    def rows(self) -> List[Tuple[HandCategory, int, float]]:
        return [
            (category, self.counts.get(category, 0), self.probability(category))
            for category in sorted(HandCategory, reverse=True)
        ]
