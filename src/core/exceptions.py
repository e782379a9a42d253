"""
Custom exceptions.

Everything derives from GameError, so callers higher up can catch a single type.
"""


class GameError(Exception):
    """Base class for all errors raised by this application."""


# --- ILLEGAL INTERACTIONS ---
# NOTE: these never leave the interaction handlers in src/clickchess/game.py. They are logged and recovered from there.
class IllegalInteractionError(GameError):
    """The user clicked something that cannot be acted upon."""


class IllegalSelectionError(IllegalInteractionError):
    """Selected an empty square or a piece of the side that is not to move."""


class NoSelectionError(IllegalInteractionError):
    """Attempted a move without selecting a piece first."""


class IllegalMoveError(IllegalInteractionError):
    """The selected piece is not allowed to move to the requested square."""


# --- INPUT ERRORS ---
class InvalidPositionError(GameError):
    """A board placement string that cannot be parsed."""


class InvalidRequestError(GameError):
    """Request data that failed validation at the boundary."""


# --- SESSION STORE ---
class RepositoryError(GameError):
    """Could not find (or store) the requested game."""
