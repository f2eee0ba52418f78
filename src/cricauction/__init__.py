"""Bid evaluation and display helpers for a live cricket player auction."""

__version__ = "0.1.0"
