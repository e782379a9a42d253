"""
The game state is the entrypoint into the domain layer for the service layer.
It holds everything that changes during a session: the board, whose turn it is, and which piece is selected.

Every interaction takes a state and hands back a new one. The state that was passed in is left untouched.

Illegal interactions (selecting a square you can't select, moving without a selection, an illegal move)
are never fatal: they get logged, the selection gets cleared, and play continues.
"""

import logging
from copy import deepcopy
from dataclasses import dataclass, replace
from typing import Optional, Self

from src.clickchess.board import Board
from src.clickchess.destinations import destinations_for_selection
from src.clickchess.pieces import Piece
from src.clickchess.rules import is_legal_move
from src.clickchess.square import Square
from src.core.exceptions import (
    IllegalInteractionError,
    IllegalMoveError,
    IllegalSelectionError,
    InvalidPositionError,
    NoSelectionError,
)
from src.core.models import GameModel
from src.core.shared_types import Side, opponent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    """The piece the side to move has picked up, and where it stands"""

    piece: Piece
    square: Square


@dataclass
class GameState:
    board: Board
    active_side: Side
    selection: Optional[Selection] = None

    @classmethod
    def new_game(cls, starting_position: Optional[str] = None) -> Self:
        """Fresh board (or the given placement), First to move, nothing selected."""
        board = (
            Board.from_fen(starting_position)
            if starting_position
            else Board.starting_position()
        )
        return cls(board=board, active_side=Side.FIRST)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a GameState from the information the Service layer actually has"""
        if model.active_side not in [side.value for side in Side]:
            raise InvalidPositionError(
                f"Invalid side: {model.active_side!r}. \nPick one from {','.join(side.value for side in Side)}"
            )

        board = Board.from_fen(model.position)
        active_side = Side(model.active_side)
        selection = None
        if model.selection is not None:
            square = Square(*model.selection)
            piece = board.piece(square)
            # a stored selection that no longer points at a piece of the side to move is simply dropped
            if piece is not None and piece.side == active_side:
                selection = Selection(piece, square)

        return cls(board, active_side, selection)

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            position=self.board.to_fen(),
            active_side=self.active_side.value,
            selection=(
                (self.selection.square.row, self.selection.square.col)
                if self.selection
                else None
            ),
        )

    @property
    def legal_destinations(self) -> set[Square]:
        """Recomputed on every access"""
        return destinations_for_selection(self.board, self.selection)

    def copy(self) -> Self:
        return deepcopy(self)


# --- INTERACTIONS ---
def select_piece(state: GameState, row: int, col: int) -> GameState:
    """
    The side to move picks up one of its pieces.
    ---

    Selecting an empty square or an opponent's piece changes nothing.
    """
    square = Square(row, col)
    try:
        piece = _selectable_piece(state, square)
    except IllegalSelectionError as exc:
        logger.info("%s", exc)
        return state.copy()

    return replace(state.copy(), selection=Selection(piece, square))


def attempt_move(state: GameState, row: int, col: int) -> GameState:
    """
    Try to move the selected piece to the given square
    -----

    1. No selection? Nothing to move.
    2. Ask the rules for a verdict.
    3. Legal: clear the origin, put the piece on the target (overwriting whatever stood there), pass the turn.

    In every case the selection is cleared afterwards.
    """
    new_state = state.copy()
    target = Square(row, col)
    try:
        selection = _current_selection(new_state)
        piece = selection.piece
        logger.info("Trying to move piece %s from %s to %s", piece, selection.square, target)
        _assert_legal_move(new_state.board, piece, selection.square, target)
    except IllegalInteractionError as exc:
        logger.info("%s", exc)
        new_state.selection = None
        return new_state

    logger.info("Move is valid.")
    captured = new_state.board.move_piece(selection.square, target)
    if captured is not None:
        logger.info("Captured %s at %s", captured, target)

    new_state.selection = None
    new_state.active_side = opponent(new_state.active_side)
    return new_state


def click(state: GameState, row: int, col: int) -> GameState:
    """
    For a presentation layer that only knows which cell got clicked.
    ---

    * a piece of the side to move: (re)select it
    * anything else: treat it as a move attempt. This includes squares holding an opponent's piece,
      otherwise a capture could never be clicked.

    Without a selection, a click on an empty square or an opponent's piece is a no-op.
    """
    piece = state.board.piece(Square(row, col))
    if piece is not None and piece.side == state.active_side:
        return select_piece(state, row, col)

    if state.selection is None:
        logger.info("No piece selected.")
        return state.copy()
    return attempt_move(state, row, col)


# -- PRIVATE HELPERS ---
def _selectable_piece(state: GameState, square: Square) -> Piece:
    piece = state.board.piece(square)
    if piece is None:
        raise IllegalSelectionError(f"Nothing to select at {square}.")
    if piece.side != state.active_side:
        raise IllegalSelectionError(
            f"Cannot select {piece} at {square}: it is {state.active_side}'s turn."
        )
    return piece


def _current_selection(state: GameState) -> Selection:
    """Re-read the selected square on the live board, never trust the piece cached in the selection."""
    if state.selection is None:
        raise NoSelectionError("No piece selected.")

    square = state.selection.square
    piece = state.board.piece(square)
    if piece is None or piece.side != state.active_side:
        raise NoSelectionError(f"No piece of {state.active_side} selected at {square}.")
    return Selection(piece, square)


def _assert_legal_move(
    board: Board, piece: Piece, from_square: Square, to_square: Square
) -> None:
    if not is_legal_move(board, piece, from_square, to_square):
        raise IllegalMoveError("Invalid move.")
