"""
Resources module.

Exports:
- OpponentDatabase: Loader for per-difficulty opponent tables
- OpponentProfile: One validated opponent entry
- OpponentNotFoundError: Raised for a difficulty with no entry
"""

from duel.resources.database import (
    OpponentDatabase,
    OpponentProfile,
    OpponentNotFoundError,
    DEFAULT_DATA_PATH,
)

__all__ = [
    "OpponentDatabase",
    "OpponentProfile",
    "OpponentNotFoundError",
    "DEFAULT_DATA_PATH",
]
