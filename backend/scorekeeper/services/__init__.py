"""Game services (pure helpers, no I/O)."""

from .validation import ValidationError, validate_pins, clean_player_names
from .games import (
    create_game,
    find_game,
    find_player,
    is_game_finished,
    record_roll,
)

__all__ = [
    "ValidationError",
    "validate_pins",
    "clean_player_names",
    "create_game",
    "find_game",
    "find_player",
    "is_game_finished",
    "record_roll",
]
