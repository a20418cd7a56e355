"""Lease renewal policy engine."""

__version__ = "1.0.0"
