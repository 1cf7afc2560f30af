"""Poker hand ranking primitives shared by the console tool and the WebSocket host."""

from .analyzer import HandAnalysis, analyze_hand
from .cards import Card, RANKS, SUITS, build_deck, deal, parse_card, parse_hand
from .errors import DuplicateCard, InvalidHandSize, ParseError
from .evaluator import HandProfile, best_of, classify, compare_results, rank_hand
from .models import (
    UNEVALUABLE,
    BestHand,
    HandCategory,
    PlayerHand,
    RankResult,
    RoundOutcome,
    SimulationConfig,
    SimulationReport,
    UnevaluableHand,
)
from .showdown import describe_outcome, resolve_round
from .simulator import format_report, run_simulation

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "build_deck",
    "deal",
    "parse_card",
    "parse_hand",
    "DuplicateCard",
    "InvalidHandSize",
    "ParseError",
    "HandProfile",
    "best_of",
    "classify",
    "compare_results",
    "rank_hand",
    "UNEVALUABLE",
    "BestHand",
    "HandCategory",
    "PlayerHand",
    "RankResult",
    "RoundOutcome",
    "SimulationConfig",
    "SimulationReport",
    "UnevaluableHand",
    "HandAnalysis",
    "analyze_hand",
    "describe_outcome",
    "resolve_round",
    "format_report",
    "run_simulation",
]
