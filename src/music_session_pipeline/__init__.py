"""Validated command pipeline for per-guild voice playback queues."""

__version__ = "1.0.0"
