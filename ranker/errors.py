from __future__ import annotations


class ParseError(ValueError):
    """Raised for a malformed card token or an empty hand."""


class InvalidHandSize(ValueError):
    """Raised when a hand or card pool has the wrong number of cards."""


class DuplicateCard(ValueError):
    """Raised when the same card shows up twice in one deal."""
