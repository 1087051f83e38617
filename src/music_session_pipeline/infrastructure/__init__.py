"""
Infrastructure Layer

Adapters for Discord and in-memory session storage.
"""
