"""Which squares to highlight for the selected piece"""

from typing import TYPE_CHECKING, Optional

from src.clickchess.board import Board
from src.clickchess.pieces import Piece
from src.clickchess.rules import is_legal_move
from src.clickchess.square import Square, all_squares

if TYPE_CHECKING:
    from src.clickchess.game import Selection


def legal_destinations(board: Board, piece: Piece, origin: Square) -> set[Square]:
    """Ask the rules about every square on the board. Recomputed from scratch each call, nothing is cached."""
    return {
        square for square in all_squares() if is_legal_move(board, piece, origin, square)
    }


def destinations_for_selection(
    board: Board, selection: Optional["Selection"]
) -> set[Square]:
    """
    Highlight set for the current selection (empty if nothing is selected).

    The piece is read from the live board at the selected square, rather than trusting the copy kept in the selection.
    """
    if selection is None:
        return set()

    piece = board.piece(selection.square)
    if piece is None:
        return set()
    return legal_destinations(board, piece, selection.square)
