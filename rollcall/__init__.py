"""Rollcall - college attendance administration with idle session protection."""

__version__ = "0.1.0"
