from __future__ import annotations

from typing import List, Optional, Tuple

from ranker.cards import Card, build_deck, deal, parse_hand


def cards(text: str) -> List[Card]:
    """Shorthand: cards("Ah Kh Qh Jh 10h") -> [Card(14, "h"), ...]."""
    return parse_hand(text)


def deal_round(
    seed: int, players: int = 2
) -> Tuple[List[Card], List[Tuple[str, List[Card]]]]:
    """Deal hole cards for ``players`` seats plus a five-card board from a seeded deck."""
    deck = build_deck(seed)
    seats = [(f"Player{idx}", deal(deck, 2)) for idx in range(players)]
    community = deal(deck, 5)
    return community, seats


def seven_card_pool(seed: int, deck: Optional[List[Card]] = None) -> List[Card]:
    deck = deck if deck is not None else build_deck(seed)
    return deal(deck, 7)
