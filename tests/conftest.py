"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.clickchess.board import Board
from src.clickchess.game import GameState
from src.clickchess.pieces import Piece
from src.clickchess.square import Square
from src.core.shared_types import Side
from src.services.game_service import GameService
from src.store.memory_repository import InMemoryGameRepository

PiecePlacement = dict[tuple[int, int], str]


@pytest.fixture
def board_with_pieces() -> Callable[[PiecePlacement], Board]:
    """Call the inner function with {(row, col): asset code} to get an otherwise empty board"""

    def _create_board(placement: PiecePlacement) -> Board:
        board = Board.empty()
        for (row, col), code in placement.items():
            board.place_piece(Piece.from_code(code), Square(row, col))
        return board

    return _create_board


@pytest.fixture
def state_with_pieces(
    board_with_pieces: Callable[[PiecePlacement], Board],
) -> Callable[..., GameState]:
    """Same as board_with_pieces, wrapped in a game state with the given side to move"""

    def _create_state(
        placement: PiecePlacement, active_side: Side = Side.FIRST
    ) -> GameState:
        return GameState(board_with_pieces(placement), active_side)

    return _create_state


@pytest.fixture
def new_game() -> GameState:
    return GameState.new_game()


@pytest.fixture
def repository() -> InMemoryGameRepository:
    """Fresh, empty session store per test"""
    return InMemoryGameRepository()


@pytest.fixture
def service(repository: InMemoryGameRepository) -> GameService:
    return GameService(repository)
