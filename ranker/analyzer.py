from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from .cards import Card, CardLike, parse_hand
from .evaluator import classify
from .models import UNEVALUABLE, RankResult, UnevaluableHand

NO_HAND_ADVICE = "No cards detected to analyze."

_ADVICE_BY_STRENGTH = {
    9: "This is an unbeatable monster hand. Bet for maximum value!",
    8: "This is an unbeatable monster hand. Bet for maximum value!",
    7: "Extremely strong. You likely have the best hand.",
    6: "Extremely strong. You likely have the best hand.",
    5: "Strong hand, but be cautious if the board shows pairs or higher suit possibilities.",
    4: "Strong hand, but be cautious if the board shows pairs or higher suit possibilities.",
    3: "Solid hand. Three of a kind is often a winner.",
    2: "A moderate hand. Good for small pots, but be careful of heavy betting.",
    1: "A moderate hand. Good for small pots, but be careful of heavy betting.",
    0: "Very weak. You generally need a bluff or a fold here unless you have a strong 'draw'.",
}


@dataclass(frozen=True)
class HandAnalysis:
    result: Union[RankResult, UnevaluableHand]
    advice: str
    cards: Tuple[Card, ...] = ()

    @property
    def evaluable(self) -> bool:
        return isinstance(self.result, RankResult)

    @property
    def rank_name(self) -> str:
        if isinstance(self.result, RankResult):
            return self.result.category.label
        return "N/A"

    @property
    def strength(self) -> Optional[int]:
        if isinstance(self.result, RankResult):
            return self.result.strength
        return None


def advice_for(result: Union[RankResult, UnevaluableHand]) -> str:
    if isinstance(result, UnevaluableHand):
        return NO_HAND_ADVICE
    return _ADVICE_BY_STRENGTH[result.strength]


def analyze_hand(tokens: Union[str, Iterable[CardLike], None]) -> HandAnalysis:
    """Rank a five-card hand and attach beginner-level advice.

    Blank input gives an analysis with no rank at all rather than a High Card,
    so a UI can show "nothing to analyze" instead of "weakest hand".
    """
    if tokens is None or (isinstance(tokens, str) and not tokens.strip()):
        return HandAnalysis(result=UNEVALUABLE, advice=NO_HAND_ADVICE)
    items = tokens if isinstance(tokens, str) else list(tokens)
    if not items:
        return HandAnalysis(result=UNEVALUABLE, advice=NO_HAND_ADVICE)

    cards = tuple(parse_hand(items))
    result = classify(cards)
    return HandAnalysis(result=result, advice=advice_for(result), cards=cards)
