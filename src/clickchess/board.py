"""The Game board: the single source of truth for where the pieces are"""

from copy import deepcopy
from dataclasses import dataclass
from typing import Optional, Self

from src.clickchess.pieces import LETTER_TO_KIND, Piece
from src.clickchess.square import BOARD_DIMENSIONS, Square, all_squares
from src.core.exceptions import InvalidPositionError

# Second's army on top (row 0), First's army at the bottom (row 7)
STARTING_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_POSITION = "/".join(["8"] * BOARD_DIMENSIONS[0])

Grid = list[list[Optional[Piece]]]


@dataclass
class Board:
    grid: Grid

    @classmethod
    def empty(cls) -> Self:
        num_rows, num_cols = BOARD_DIMENSIONS
        return cls([[None] * num_cols for _ in range(num_rows)])

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_POSITION)

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the placement part of a FEN string.

        ex. the starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * the first chunk is row 0: Second's back rank (lower case letters), read from column 0 to column 7
        * row 1 is filled with Second's pawns
        * rows 2 through 5 have 8 consecutive empty squares
        * row 6 holds First's pawns (capital letters)
        * row 7 holds First's back rank
        """
        num_rows, num_cols = BOARD_DIMENSIONS
        fen_by_rows = fen_str.split("/")
        if len(fen_by_rows) != num_rows:
            raise InvalidPositionError(
                f"Expected {num_rows} rows separated by '/', got {len(fen_by_rows)}: {fen_str!r}"
            )

        board = cls.empty()
        for row, fen_one_row in enumerate(fen_by_rows):
            col = 0
            for character in fen_one_row:
                if character.isdigit():
                    # A number denotes the amount of empty squares after each other
                    col += int(character)
                    continue

                if character.upper() not in LETTER_TO_KIND:
                    raise InvalidPositionError(
                        f"Invalid character {character!r} in row {row}: {fen_str!r}"
                    )
                if col >= num_cols:
                    raise InvalidPositionError(
                        f"Row {row} describes more than {num_cols} squares: {fen_one_row!r}"
                    )
                board.grid[row][col] = Piece.from_fen(character)
                col += 1

            if col != num_cols:
                raise InvalidPositionError(
                    f"Row {row} does not describe exactly {num_cols} squares: {fen_one_row!r}"
                )
        return board

    def to_fen(self) -> str:
        """Rows are separated by slashes in FEN string."""
        return "/".join(self._row_to_fen(row) for row in self.grid)

    def _row_to_fen(self, row: list[Optional[Piece]]) -> str:
        fen_characters: list[str] = []
        empty_count = 0
        for piece in row:
            if piece is None:
                empty_count += 1
                continue

            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece.to_fen())

        # if the entire row is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def to_codes(self) -> list[list[Optional[str]]]:
        """What the presentation layer draws: the asset code per cell, or None for an empty cell"""
        return [
            [piece.to_code() if piece else None for piece in row] for row in self.grid
        ]

    def copy(self) -> Self:
        return deepcopy(self)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.grid[square.row][square.col]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is None

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.grid[square.row][square.col] = piece

    def remove_piece(self, square: Square) -> None:
        self.grid[square.row][square.col] = None

    def occupied_squares(self) -> list[Square]:
        return [square for square in all_squares() if not self.is_empty(square)]

    def move_piece(self, from_square: Square, to_square: Square) -> Optional[Piece]:
        """Update the position on the board. Whatever stood on the target square gets overwritten (captured) and returned."""
        piece_that_moved = self.piece(from_square)
        captured = self.piece(to_square)
        self.remove_piece(from_square)
        self.grid[to_square.row][to_square.col] = piece_that_moved
        return captured
