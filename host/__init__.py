"""WebSocket host: serves the hand ranker to browser clients."""

from .server import HandServer, ServerConfig

__all__ = ["HandServer", "ServerConfig"]
