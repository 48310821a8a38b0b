"""
Error taxonomy for the game engine.

InputError and its subclasses are recoverable: the session turns them into
re-prompt messages and never lets them escape a turn. Everything else is
either fatal (bad construction) or a deliberate termination.
"""


class GridGameError(Exception):
    """Base class for all engine errors."""


class InvalidDimension(GridGameError, ValueError):
    """Grid constructed with a non-positive number of rows or columns."""


class InputError(GridGameError):
    """Recoverable error caused by player input."""


class OutOfBounds(InputError, IndexError):
    """Location outside the grid extents."""


class ParseError(InputError, ValueError):
    """Location text is malformed."""


class InvalidPieceSelection(InputError):
    """Selected cell is empty or belongs to the other player."""


class InvalidDestination(InputError):
    """Destination breaks the movement rules of the selected piece."""


class ExitRequested(GridGameError):
    """The player asked to leave the game."""


class GameOverError(GridGameError, RuntimeError):
    """A move was submitted after the session ended."""
