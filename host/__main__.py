import argparse
import asyncio
import logging

from .server import HandServer, ServerConfig


def main() -> None:
    parser = argparse.ArgumentParser(description="Poker hand ranker WebSocket host")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument(
        "--max-trials",
        type=int,
        default=200_000,
        help="Upper bound on trials for a single simulate request",
    )
    parser.add_argument("--chunk-size", type=int, default=10_000)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    config = ServerConfig(max_trials=args.max_trials, chunk_size=args.chunk_size)
    server = HandServer(config)
    asyncio.run(server.start(host=args.host, port=args.port))


if __name__ == "__main__":
    main()
