"""Defines the pieces: a side paired with a kind"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidPositionError
from src.core.shared_types import PieceKind, Side

# Single letter per kind. Used in both FEN characters and asset codes.
KIND_TO_LETTER: dict[PieceKind, str] = {
    PieceKind.ROOK: "R",
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
    PieceKind.PAWN: "P",
}

LETTER_TO_KIND: dict[str, PieceKind] = {
    value: key for key, value in KIND_TO_LETTER.items()
}

# Asset codes keep the old white/black prefixes, since that's what the image files are called.
SIDE_TO_PREFIX: dict[Side, str] = {Side.FIRST: "w", Side.SECOND: "b"}
PREFIX_TO_SIDE: dict[str, Side] = {value: key for key, value in SIDE_TO_PREFIX.items()}


@dataclass(frozen=True)
class Piece:
    side: Side
    kind: PieceKind

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # upper case: First's pieces, lower case: Second's pieces
        kind = LETTER_TO_KIND.get(character.upper())
        if kind is None:
            raise InvalidPositionError(f"Not a piece character: {character!r}")
        side = Side.FIRST if character.isupper() else Side.SECOND
        return cls(side, kind)

    def to_fen(self) -> str:
        letter = KIND_TO_LETTER[self.kind]
        return letter if self.side == Side.FIRST else letter.lower()

    @classmethod
    def from_code(cls, code: str) -> Self:
        """Asset code, ex. 'wP' for First's pawn or 'bK' for Second's king"""
        if len(code) != 2 or code[0] not in PREFIX_TO_SIDE or code[1] not in LETTER_TO_KIND:
            raise InvalidPositionError(f"Not a piece code: {code!r}")
        return cls(PREFIX_TO_SIDE[code[0]], LETTER_TO_KIND[code[1]])

    def to_code(self) -> str:
        return f"{SIDE_TO_PREFIX[self.side]}{KIND_TO_LETTER[self.kind]}"

    def __str__(self) -> str:
        return self.to_code()
