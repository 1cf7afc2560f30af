from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import websockets
from websockets.asyncio.server import ServerConnection

from ranker.analyzer import analyze_hand
from ranker.errors import DuplicateCard, InvalidHandSize, ParseError
from ranker.evaluator import best_of, classify
from ranker.models import RankResult, SimulationConfig
from ranker.showdown import describe_outcome, resolve_round
from ranker.simulator import run_simulation

LOGGER = logging.getLogger("hand_host")

# HandServer exposes the ranker to a browser UI over WebSocket.
# Every network concern lives here; the ranker stays pure.


@dataclass
class ServerConfig:
    max_trials: int = 200_000
    chunk_size: int = 10_000


class RequestError(Exception):
    def __init__(self, code: str, msg: str) -> None:
        super().__init__(msg)
        self.code = code
        self.msg = msg


class HandServer:
    def __init__(self, config: Optional[ServerConfig] = None) -> None:
        self.config = config or ServerConfig()
        self.handlers = {
            "classify": self._handle_classify,
            "best_of": self._handle_best_of,
            "resolve_round": self._handle_resolve_round,
            "analyze": self._handle_analyze,
            "simulate": self._handle_simulate,
        }

    async def start(self, host: str = "0.0.0.0", port: int = 8765) -> None:
        # websockets.serve keeps accepting clients until the process stops.
        async with websockets.serve(self._handle_connection, host, port):
            LOGGER.info("Hand host listening on %s:%s", host, port)
            await asyncio.Future()

    async def _handle_connection(self, websocket: ServerConnection) -> None:
        LOGGER.info("Client connected")
        try:
            async for raw in websocket:
                await self._handle_message(websocket, raw)
        except websockets.ConnectionClosed:
            pass
        LOGGER.info("Client disconnected")

    async def _handle_message(self, websocket: ServerConnection, raw: str) -> None:
        message = self._decode(raw)
        if message is None:
            await self._send_error(websocket, code="BAD_JSON", msg="Message is not a JSON object")
            return
        msg_type = message.get("type")
        handler = self.handlers.get(msg_type) if isinstance(msg_type, str) else None
        if handler is None:
            await self._send_error(websocket, code="UNKNOWN_TYPE", msg="Unsupported message type")
            return

        try:
            reply_type, payload = await handler(message)
        except RequestError as exc:
            await self._send_error(websocket, code=exc.code, msg=exc.msg)
            return
        except ParseError as exc:
            await self._send_error(websocket, code="PARSE_ERROR", msg=str(exc))
            return
        except InvalidHandSize as exc:
            await self._send_error(websocket, code="INVALID_HAND_SIZE", msg=str(exc))
            return
        except DuplicateCard as exc:
            await self._send_error(websocket, code="DUPLICATE_CARD", msg=str(exc))
            return
        except ValueError as exc:
            await self._send_error(websocket, code="BAD_REQUEST", msg=str(exc))
            return
        await self._send_json(websocket, reply_type, payload)

    # Request handlers -------------------------------------------------

    async def _handle_classify(self, message: Dict[str, Any]) -> tuple[str, Dict[str, object]]:
        result = classify(self._card_list(message, "cards"))
        return "classified", self._result_payload(result)

    async def _handle_best_of(self, message: Dict[str, Any]) -> tuple[str, Dict[str, object]]:
        best = best_of(self._card_list(message, "cards"))
        return "best_hand", {"cards": best.labels, **self._result_payload(best.result)}

    async def _handle_resolve_round(self, message: Dict[str, Any]) -> tuple[str, Dict[str, object]]:
        community = self._card_list(message, "community")
        players_raw = message.get("players")
        if not isinstance(players_raw, list):
            raise RequestError("BAD_SCHEMA", "players must be a list")
        players = []
        for entry in players_raw:
            if not isinstance(entry, dict) or not isinstance(entry.get("id"), str):
                raise RequestError("BAD_SCHEMA", "each player needs an id")
            players.append((entry["id"], self._card_list(entry, "hole")))

        outcome = resolve_round(community, players)
        return "round_result", {
            "winners": list(outcome.winners),
            "split": outcome.is_split,
            "summary": describe_outcome(outcome),
            "players": [
                {"id": player_id, "best": best.labels, **self._result_payload(best.result)}
                for player_id, best in outcome.per_player.items()
            ],
        }

    async def _handle_analyze(self, message: Dict[str, Any]) -> tuple[str, Dict[str, object]]:
        cards = message.get("cards")
        if cards is not None and not isinstance(cards, (str, list)):
            raise RequestError("BAD_SCHEMA", "cards must be a string or a list")
        analysis = analyze_hand(cards)
        return "analysis", {
            "rank": analysis.rank_name,
            "strength": analysis.strength,
            "advice": analysis.advice,
            "cards": [card.label for card in analysis.cards],
        }

    async def _handle_simulate(self, message: Dict[str, Any]) -> tuple[str, Dict[str, object]]:
        trials = message.get("trials", 10_000)
        seed = message.get("seed")
        if not isinstance(trials, int) or isinstance(trials, bool) or trials <= 0:
            raise RequestError("BAD_SCHEMA", "trials must be a positive integer")
        if seed is not None and not isinstance(seed, int):
            raise RequestError("BAD_SCHEMA", "seed must be an integer")
        if trials > self.config.max_trials:
            LOGGER.info("Capping simulation at %s trials (asked for %s)", self.config.max_trials, trials)
            trials = self.config.max_trials

        config = SimulationConfig(trials=trials, chunk_size=self.config.chunk_size, seed=seed)
        # Simulation is CPU bound; keep the event loop free for other clients.
        report = await asyncio.to_thread(run_simulation, config)
        return "simulation", {
            "trials": report.trials,
            "rows": [
                {"rank": category.label, "count": count, "probability": round(probability, 4)}
                for category, count, probability in report.rows()
            ],
        }

    # Helpers ---------------------------------------------------------

    def _card_list(self, message: Dict[str, Any], key: str) -> List[str]:
        value = message.get(key)
        if isinstance(value, str):
            value = value.split()
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise RequestError("BAD_SCHEMA", f"{key} must be a list of card tokens")
        return value

    def _result_payload(self, result: RankResult) -> Dict[str, object]:
        return {
            "rank": result.category.label,
            "slug": result.category.slug,
            "strength": result.strength,
            "kickers": list(result.kicker_order),
        }

    async def _send_json(self, websocket: ServerConnection, msg_type: str, payload: Dict[str, object]) -> None:
        try:
            await websocket.send(self._envelope(msg_type, payload))
        except websockets.ConnectionClosed:
            pass

    async def _send_error(self, websocket: ServerConnection, code: str, msg: str) -> None:
        LOGGER.debug("Rejecting request: %s %s", code, msg)
        await self._send_json(websocket, "error", {"code": code, "msg": msg})

    def _envelope(self, msg_type: str, payload: Dict[str, object]) -> str:
        body = {"type": msg_type, "v": 1, "ts": datetime.now(timezone.utc).isoformat()}
        body.update(payload)
        return json.dumps(body)

    def _decode(self, raw: str) -> Optional[Dict[str, Any]]:
        try:
            message = json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            return None
        return message if isinstance(message, dict) else None
