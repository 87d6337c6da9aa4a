"""Transcript policy resolution and model catalog aggregation."""

__version__ = "0.1.0"
