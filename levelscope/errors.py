"""Exceptions raised by the analysis engine."""


class InvalidConfiguration(ValueError):
    """Raised when analysis options cannot produce a meaningful result."""
