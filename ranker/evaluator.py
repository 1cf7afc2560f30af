from __future__ import annotations

import itertools
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

from .cards import SUITS, Card, CardLike, parse_hand
from .errors import InvalidHandSize
from .models import UNEVALUABLE, BestHand, HandCategory, RankResult, UnevaluableHand

HAND_SIZE = 5
POOL_SIZE = 7
WHEEL = (14, 5, 4, 3, 2)
WHEEL_ORDER = (5, 4, 3, 2, 1)


@dataclass(frozen=True)
class HandProfile:
    """Counts derived from five cards; every pattern test reads from here."""

    cards: Tuple[Card, ...]
    ranks: Tuple[int, ...]
    rank_counts: Dict[int, int]
    suit_counts: Dict[str, int]
    frequency: Tuple[Tuple[int, int], ...]

    @classmethod
    def from_cards(cls, cards: Sequence[Card]) -> "HandProfile":
        ranks = tuple(sorted((card.rank for card in cards), reverse=True))
        rank_counts = Counter(ranks)
        suit_counts = Counter(card.suit for card in cards)
        # Count first, rank second, both descending.
        frequency = tuple(sorted(rank_counts.items(), key=lambda item: (item[1], item[0]), reverse=True))
        return cls(
            cards=tuple(cards),
            ranks=ranks,
            rank_counts=dict(rank_counts),
            suit_counts=dict(suit_counts),
            frequency=frequency,
        )

    @property
    def counts(self) -> Tuple[int, ...]:
        return tuple(count for _, count in self.frequency)

    @property
    def is_flush(self) -> bool:
        return len(self.suit_counts) == 1

    @property
    def is_wheel(self) -> bool:
        return self.ranks == WHEEL

    @property
    def is_straight(self) -> bool:
        # A repeated rank breaks the step-of-one run, so 8-7-6-6-5 is not a straight.
        descending = all(high - low == 1 for high, low in zip(self.ranks, self.ranks[1:]))
        return descending or self.is_wheel


def classify(cards: Iterable[CardLike]) -> RankResult:
    """Rank exactly five cards. Higher results are better."""
    hand = coerce_cards(cards)
    if len(hand) != HAND_SIZE:
        raise InvalidHandSize(f"Expected {HAND_SIZE} cards, got {len(hand)}")

    profile = HandProfile.from_cards(hand)
    return RankResult(category=_categorize(profile), kicker_order=_kicker_order(profile))


def _categorize(profile: HandProfile) -> HandCategory:
    flush = profile.is_flush
    straight = profile.is_straight
    counts = profile.counts
    top = counts[0]
    second = counts[1] if len(counts) > 1 else 0

    if straight and flush and profile.ranks[0] == 14 and not profile.is_wheel:
        return HandCategory.ROYAL_FLUSH
    if straight and flush:
        return HandCategory.STRAIGHT_FLUSH
    if top == 4:
        return HandCategory.FOUR_OF_A_KIND
    if top == 3 and second == 2:
        return HandCategory.FULL_HOUSE
    if flush:
        return HandCategory.FLUSH
    if straight:
        return HandCategory.STRAIGHT
    if top == 3:
        return HandCategory.THREE_OF_A_KIND
    if top == 2 and second == 2:
        return HandCategory.TWO_PAIR
    if top == 2:
        return HandCategory.ONE_PAIR
    return HandCategory.HIGH_CARD


def _kicker_order(profile: HandProfile) -> Tuple[int, ...]:
    if profile.is_wheel:
        return WHEEL_ORDER
    return tuple(rank for rank, _ in profile.frequency)


def rank_hand(tokens: Union[str, Iterable[CardLike], None]) -> Union[RankResult, UnevaluableHand]:
    """Classify a hand, or return ``UNEVALUABLE`` when no cards were supplied."""
    if tokens is None:
        return UNEVALUABLE
    if isinstance(tokens, str):
        if not tokens.strip():
            return UNEVALUABLE
    else:
        tokens = list(tokens)
        if not tokens:
            return UNEVALUABLE
    return classify(parse_hand(tokens))


def compare_results(left: RankResult, right: RankResult) -> int:
    if left.key > right.key:
        return 1
    if left.key < right.key:
        return -1
    return 0


def best_of(cards: Iterable[CardLike]) -> BestHand:
    """Return the strongest five-card hand out of a seven-card pool."""
    pool = coerce_cards(cards)
    if len(pool) != POOL_SIZE:
        raise InvalidHandSize(f"Expected {POOL_SIZE} cards, got {len(pool)}")

    # Sorting the pool keeps every subset in one canonical order.
    ordered = sorted(pool, key=_card_sort_key)
    best: Optional[BestHand] = None
    for combo in itertools.combinations(ordered, HAND_SIZE):
        result = classify(combo)
        if best is None or result > best.result:
            best = BestHand(cards=combo, result=result)
    assert best is not None
    return best


def _card_sort_key(card: Card) -> Tuple[int, int]:
    return (-card.rank, SUITS.index(card.suit))


def coerce_cards(cards: Union[str, Iterable[CardLike]]) -> Tuple[Card, ...]:
    return tuple(parse_hand(cards))
