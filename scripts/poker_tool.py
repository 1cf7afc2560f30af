#!/usr/bin/env python3
"""Console front end for the hand ranker.

Examples:
    python scripts/poker_tool.py train "As Ks Qs Js 10s"
    python scripts/poker_tool.py simulate --trials 100000 --seed 7
    python scripts/poker_tool.py play --players 3
"""

from __future__ import annotations

import argparse
import logging
import sys

from ranker.analyzer import analyze_hand
from ranker.cards import build_deck, cards_to_labels, deal
from ranker.models import SimulationConfig
from ranker.showdown import describe_outcome, resolve_round
from ranker.simulator import format_report, run_simulation

LOGGER = logging.getLogger("poker_tool")


def cmd_train(args: argparse.Namespace) -> int:
    try:
        analysis = analyze_hand(args.hand)
    except ValueError as exc:
        LOGGER.error("Cannot analyze %r: %s", args.hand, exc)
        return 2

    print(f"Hand:     {args.hand or '(none)'}")
    print(f"Rank:     {analysis.rank_name}")
    print(f"Strength: {analysis.strength if analysis.strength is not None else '-'}")
    print(f"Advice:   {analysis.advice}")
    return 0


def cmd_simulate(args: argparse.Namespace) -> int:
    config = SimulationConfig(trials=args.trials, chunk_size=args.chunk_size, seed=args.seed)
    try:
        report = run_simulation(config)
    except ValueError as exc:
        LOGGER.error("Simulation rejected: %s", exc)
        return 2
    print(format_report(report))
    return 0


def cmd_play(args: argparse.Namespace) -> int:
    if not 2 <= args.players <= 10:
        LOGGER.error("Players must be between 2 and 10")
        return 2

    deck = build_deck(args.seed)
    players = [(f"Player{idx + 1}", deal(deck, 2)) for idx in range(args.players)]
    community = deal(deck, 5)
    outcome = resolve_round(community, players)

    print("Texas Hold'em Round Results:")
    print("-" * 28)
    print(f"Board:     {' '.join(cards_to_labels(community))}")
    for player_id, hole in players:
        best = outcome.per_player[player_id]
        print(
            f"{player_id + ':':<10} {' '.join(cards_to_labels(hole)):<8} "
            f"{best.result.category.label} ({' '.join(best.labels)})"
        )
    print("-" * 28)
    print(describe_outcome(outcome))
    return 0


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Poker hand ranking tool suite")
    parser.add_argument("--log-level", default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    train = sub.add_parser("train", help="Analyze a five-card hand")
    train.add_argument("hand", nargs="?", default="", help='Cards, e.g. "As Ks Qs Js 10s"')
    train.set_defaults(func=cmd_train)

    simulate = sub.add_parser("simulate", help="Estimate category frequencies")
    simulate.add_argument("--trials", type=int, default=50_000)
    simulate.add_argument("--chunk-size", type=int, default=10_000)
    simulate.add_argument("--seed", type=int, default=None)
    simulate.set_defaults(func=cmd_simulate)

    play = sub.add_parser("play", help="Deal and resolve one random round")
    play.add_argument("--players", type=int, default=2)
    play.add_argument("--seed", type=int, default=None)
    play.set_defaults(func=cmd_play)

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
