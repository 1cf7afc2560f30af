from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

from .errors import ParseError

RANKS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")
SUITS = "shdc"
RANK_VALUE = {token: value for value, token in enumerate(RANKS, start=2)}
VALUE_TOKEN = {value: token for token, value in RANK_VALUE.items()}


@dataclass(frozen=True)
class Card:
    rank: int
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in VALUE_TOKEN:
            raise ParseError(f"Invalid rank: {self.rank!r}")
        if self.suit not in SUITS:
            raise ParseError(f"Invalid suit: {self.suit!r}")

    @property
    def label(self) -> str:
        return f"{VALUE_TOKEN[self.rank]}{self.suit}"

    def __str__(self) -> str:
        return self.label


CardLike = Union[Card, str]


def parse_card(token: CardLike) -> Card:
    """Parse a token such as ``"As"`` or ``"10h"`` into a Card."""
    if isinstance(token, Card):
        return token
    if not isinstance(token, str):
        raise ParseError(f"Invalid card token: {token!r}")
    label = token.strip()
    if len(label) not in (2, 3):
        raise ParseError(f"Invalid card token: {token!r}")
    rank_token, suit = label[:-1], label[-1]
    if rank_token not in RANK_VALUE:
        raise ParseError(f"Invalid rank: {rank_token!r}")
    if suit not in SUITS:
        raise ParseError(f"Invalid suit: {suit!r}")
    return Card(RANK_VALUE[rank_token], suit)


def parse_hand(tokens: Union[str, Iterable[CardLike], None]) -> List[Card]:
    """Parse a whitespace separated hand string or a sequence of tokens.

    Empty input is an error here; callers that want a "no hand" state go
    through ``evaluator.rank_hand`` instead.
    """
    if tokens is None:
        raise ParseError("Empty hand")
    items = tokens.split() if isinstance(tokens, str) else list(tokens)
    if not items:
        raise ParseError("Empty hand")
    return [parse_card(item) for item in items]


def build_deck(seed: Optional[int] = None) -> List[Card]:
    rng = random.Random(seed)
    deck = [Card(rank, suit) for suit in SUITS for rank in VALUE_TOKEN]
    rng.shuffle(deck)
    return deck


def deal(deck: List[Card], count: int) -> List[Card]:
    if len(deck) < count:
        raise ValueError("Not enough cards left in deck")
    cards = deck[:count]
    del deck[:count]
    return cards


def cards_to_labels(cards: Sequence[Card]) -> List[str]:
    return [card.label for card in cards]
