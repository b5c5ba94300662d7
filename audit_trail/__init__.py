"""Mini audit trail: word-level version history for a text document."""

__version__ = "1.0.0"
