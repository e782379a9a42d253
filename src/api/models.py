"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.clickchess.board import Board
from src.clickchess.square import BOARD_DIMENSIONS
from src.core.exceptions import InvalidPositionError, InvalidRequestError
from src.core.shared_types import Side

PieceCode = str


# --- SHARED PIECES ---
class SquareModel(BaseModel):
    row: int
    col: int


class CoordinatesRequest(BaseModel):
    """Any request pointing at a cell of the board"""

    game_id: UUID
    row: int
    col: int

    @field_validator("row")
    @classmethod
    def validate_row(cls, value: int) -> int:
        if not 0 <= value < BOARD_DIMENSIONS[0]:
            raise InvalidRequestError(
                f"Row {value} is off the board (0-{BOARD_DIMENSIONS[0] - 1})."
            )
        return value

    @field_validator("col")
    @classmethod
    def validate_col(cls, value: int) -> int:
        if not 0 <= value < BOARD_DIMENSIONS[1]:
            raise InvalidRequestError(
                f"Column {value} is off the board (0-{BOARD_DIMENSIONS[1] - 1})."
            )
        return value


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    starting_position: Optional[str] = None

    @field_validator("starting_position")
    @classmethod
    def validate_starting_position(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        try:
            Board.from_fen(value.strip())
        except InvalidPositionError as exc:
            raise InvalidRequestError(f"Invalid starting position: {exc}") from exc
        return value.strip()


class GetGameRequest(BaseModel):
    game_id: UUID


class SelectPieceRequest(CoordinatesRequest):
    pass


class MoveRequest(CoordinatesRequest):
    pass


class ClickRequest(CoordinatesRequest):
    pass


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    """Everything the presentation layer needs to redraw the board from scratch"""

    game_id: UUID
    board: list[list[Optional[PieceCode]]]
    active_side: Side
    selection: Optional[SquareModel]
    legal_destinations: list[SquareModel]
