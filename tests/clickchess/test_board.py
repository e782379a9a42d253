"""Unit tests for /src/clickchess/board.py"""

from typing import Callable

import pytest

from src.clickchess.board import EMPTY_POSITION, STARTING_POSITION, Board
from src.clickchess.pieces import Piece
from src.clickchess.square import Square
from src.core.exceptions import InvalidPositionError
from src.core.shared_types import PieceKind, Side

BACK_RANK: list[PieceKind] = [
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
]


# -- CREATION LOGIC ---
def test_creating_board_in_starting_position() -> None:
    """Second's army on rows 0-1, First's army on rows 6-7, mirrored"""
    board = Board.starting_position()

    for col, kind in enumerate(BACK_RANK):
        assert board.piece(Square(0, col)) == Piece(Side.SECOND, kind)
        assert board.piece(Square(1, col)) == Piece(Side.SECOND, PieceKind.PAWN)
        assert board.piece(Square(6, col)) == Piece(Side.FIRST, PieceKind.PAWN)
        assert board.piece(Square(7, col)) == Piece(Side.FIRST, kind)

    # rows 2 through 5 all empty
    for row in range(2, 6):
        for col in range(8):
            assert board.is_empty(Square(row, col))


def test_empty_board() -> None:
    board = Board.empty()
    assert board.occupied_squares() == []
    assert board.to_fen() == EMPTY_POSITION


def test_creating_board_after_double_push() -> None:
    """First pushed the pawn on column 4 by two squares"""
    board = Board.from_fen("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR")
    assert board.piece(Square(4, 4)) == Piece(Side.FIRST, PieceKind.PAWN)
    assert board.is_empty(Square(6, 4))
    assert len(board.occupied_squares()) == 32


@pytest.mark.parametrize(
    "fen",
    [
        STARTING_POSITION,
        EMPTY_POSITION,
        "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR",
        "r6k/8/8/3Q4/8/8/8/K6R",
    ],
)
def test_fen_round_trip(fen: str) -> None:
    assert Board.from_fen(fen).to_fen() == fen


@pytest.mark.parametrize(
    "fen",
    [
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP",  # only 7 rows
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR/8",  # 9 rows
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBN",  # last row too short
        "rnbqkbnrr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR",  # first row too long
        "rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR",  # digit overshoots the row
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNX",  # unknown piece letter
    ],
)
def test_invalid_fen(fen: str) -> None:
    with pytest.raises(InvalidPositionError):
        Board.from_fen(fen)


def test_codes_for_presentation() -> None:
    """Each cell is either an asset code or None"""
    codes = Board.starting_position().to_codes()
    assert codes[0] == ["bR", "bN", "bB", "bQ", "bK", "bB", "bN", "bR"]
    assert codes[1] == ["bP"] * 8
    assert codes[3] == [None] * 8
    assert codes[6] == ["wP"] * 8
    assert codes[7] == ["wR", "wN", "wB", "wQ", "wK", "wB", "wN", "wR"]


# -- MUTATION LOGIC ---
def test_place_and_remove_piece() -> None:
    board = Board.empty()
    square = Square(3, 3)
    queen = Piece(Side.FIRST, PieceKind.QUEEN)

    board.place_piece(queen, square)
    assert board.piece(square) == queen
    assert board.occupied_squares() == [square]

    board.remove_piece(square)
    assert board.is_empty(square)


def test_move_piece_to_empty_square() -> None:
    board = Board.starting_position()
    captured = board.move_piece(Square(6, 4), Square(4, 4))
    assert captured is None
    assert board.is_empty(Square(6, 4))
    assert board.piece(Square(4, 4)) == Piece(Side.FIRST, PieceKind.PAWN)


def test_move_piece_captures(
    board_with_pieces: Callable[[dict[tuple[int, int], str]], Board],
) -> None:
    """The occupant of the target square is overwritten, and handed back"""
    board = board_with_pieces({(4, 4): "wR", (4, 7): "bN"})
    captured = board.move_piece(Square(4, 4), Square(4, 7))
    assert captured == Piece(Side.SECOND, PieceKind.KNIGHT)
    assert board.piece(Square(4, 7)) == Piece(Side.FIRST, PieceKind.ROOK)
    assert board.is_empty(Square(4, 4))
    assert len(board.occupied_squares()) == 1


def test_copy_is_independent() -> None:
    board = Board.starting_position()
    copied = board.copy()
    copied.move_piece(Square(6, 0), Square(5, 0))
    assert board.to_fen() == STARTING_POSITION
    assert copied.to_fen() != STARTING_POSITION
