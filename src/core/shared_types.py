"""
Type definitions used across layers
"""

from enum import StrEnum


class Side(StrEnum):
    """The two armies. First moves up the board (towards row 0), Second moves down."""

    FIRST = "first"
    SECOND = "second"


class PieceKind(StrEnum):
    ROOK = "rook"
    KNIGHT = "knight"
    BISHOP = "bishop"
    QUEEN = "queen"
    KING = "king"
    PAWN = "pawn"


def opponent(side: Side) -> Side:
    return Side.SECOND if side == Side.FIRST else Side.FIRST
