from __future__ import annotations


class InvalidBits(ValueError):
    """Bit count that is not a non-negative integer."""


class UnknownBackend(ValueError):
    """No backend registered under the requested name."""
