from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .cards import Card, CardLike
from .errors import DuplicateCard, InvalidHandSize
from .evaluator import best_of, coerce_cards, compare_results
from .models import BestHand, PlayerHand, RankResult, RoundOutcome

BOARD_SIZE = 5
HOLE_SIZE = 2

PlayersInput = Union[
    Mapping[str, Sequence[CardLike]],
    Iterable[Union[PlayerHand, Tuple[str, Sequence[CardLike]]]],
]


def resolve_round(community: Iterable[CardLike], players: PlayersInput) -> RoundOutcome:
    """Find every player's best hand and the winner(s) of the round.

    Players are compared on the full ranking (category, then kickers), so two
    different two-pair hands never split the pot. Players are visited in input
    order and ``winners`` keeps that order.
    """
    board = coerce_cards(community)
    if len(board) != BOARD_SIZE:
        raise InvalidHandSize(f"Expected {BOARD_SIZE} community cards, got {len(board)}")

    entries = _normalize_players(players)
    if not entries:
        raise ValueError("At least one player required")
    _check_distinct(board, entries)

    per_player: Dict[str, BestHand] = {}
    winners: List[str] = []
    best_result: Optional[RankResult] = None
    for entry in entries:
        best = best_of(entry.hole_cards + board)
        per_player[entry.player_id] = best
        if best_result is None:
            best_result = best.result
            winners = [entry.player_id]
            continue
        verdict = compare_results(best.result, best_result)
        if verdict > 0:
            best_result = best.result
            winners = [entry.player_id]
        elif verdict == 0:
            winners.append(entry.player_id)

    return RoundOutcome(per_player=per_player, winners=tuple(winners))


def _normalize_players(players: PlayersInput) -> List[PlayerHand]:
    items = players.items() if isinstance(players, Mapping) else players
    entries: List[PlayerHand] = []
    seen = set()
    for item in items:
        if isinstance(item, PlayerHand):
            player_id, hole = item.player_id, item.hole_cards
        else:
            player_id, hole = item
        hole_cards = coerce_cards(hole)
        if len(hole_cards) != HOLE_SIZE:
            raise InvalidHandSize(f"Player {player_id} needs {HOLE_SIZE} hole cards, got {len(hole_cards)}")
        if player_id in seen:
            raise ValueError(f"Duplicate player id: {player_id}")
        seen.add(player_id)
        entries.append(PlayerHand(player_id=player_id, hole_cards=hole_cards))
    return entries


def _check_distinct(board: Sequence[Card], entries: Sequence[PlayerHand]) -> None:
    seen = set(board)
    if len(seen) != len(board):
        raise DuplicateCard("Duplicate card on the board")
    for entry in entries:
        for card in entry.hole_cards:
            if card in seen:
                raise DuplicateCard(f"Duplicate card in deal: {card.label}")
            seen.add(card)


def describe_outcome(outcome: RoundOutcome) -> str:
    rank_name = outcome.winning_result.category.label
    if outcome.is_split:
        return f"Split Pot! {', '.join(outcome.winners)} share a {rank_name}"
    return f"Winner: {outcome.winners[0]} with a {rank_name}"
