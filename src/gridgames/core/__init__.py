"""
Core module - fundamental types and the error taxonomy.

This module provides the building blocks used throughout the engine.
"""

from gridgames.core.types import Location, Player, InputMode, BACK, EXIT
from gridgames.core.errors import (
    GridGameError,
    InvalidDimension,
    InputError,
    OutOfBounds,
    ParseError,
    InvalidPieceSelection,
    InvalidDestination,
    ExitRequested,
    GameOverError,
)

__all__ = [
    # Types
    "Location",
    "Player",
    "InputMode",
    # Constants
    "BACK",
    "EXIT",
    # Errors
    "GridGameError",
    "InvalidDimension",
    "InputError",
    "OutOfBounds",
    "ParseError",
    "InvalidPieceSelection",
    "InvalidDestination",
    "ExitRequested",
    "GameOverError",
]
