"""
Movement rules: decides if a piece may move from one square to another.

Key idea: Use strategy pattern to define the legal move shape for each piece kind.

There is no notion of check here. Kings can be taken like any other piece,
and a move leaving your own king under attack is still allowed.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from src.clickchess.pieces import Piece
from src.clickchess.square import Square
from src.core.shared_types import PieceKind, Side


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def is_empty(self, square: Square) -> bool: ...


Vector = tuple[int, int]

# First moves up the board (towards row 0), Second moves down.
PAWN_DIRECTION: dict[Side, int] = {Side.FIRST: -1, Side.SECOND: 1}
PAWN_HOME_ROW: dict[Side, int] = {Side.FIRST: 6, Side.SECOND: 1}


@dataclass(frozen=True)
class MoveContext:
    """The facts every rule needs, computed once per call"""

    piece: Piece
    from_square: Square
    to_square: Square
    row_diff: int
    col_diff: int
    is_capturing: bool
    is_empty: bool

    @property
    def target_available(self) -> bool:
        """A side can never move onto a square it occupies itself."""
        return self.is_capturing or self.is_empty


def build_context(
    board: Board, piece: Piece, from_square: Square, to_square: Square
) -> MoveContext:
    target_occupant = board.piece(to_square)
    return MoveContext(
        piece=piece,
        from_square=from_square,
        to_square=to_square,
        row_diff=abs(to_square.row - from_square.row),
        col_diff=abs(to_square.col - from_square.col),
        is_capturing=target_occupant is not None and target_occupant.side != piece.side,
        is_empty=target_occupant is None,
    )


# --- PATH OBSTRUCTION ---
def step_direction(from_square: Square, to_square: Square) -> Vector:
    """Unit step (sign of the row delta, sign of the col delta)"""

    def _sign(value: int) -> int:
        return (value > 0) - (value < 0)

    return (
        _sign(to_square.row - from_square.row),
        _sign(to_square.col - from_square.col),
    )


def is_path_blocked(board: Board, from_square: Square, to_square: Square) -> bool:
    """
    Walk from the starting square towards the target, one unit step at a time.
    ---

    Both endpoints are excluded: only the squares strictly in between can block.

    NOTE: The two squares must share a row, a column, or a diagonal. Otherwise the walk never lands on the target.
    """
    d_row, d_col = step_direction(from_square, to_square)
    square = from_square.offset(d_row, d_col)
    while square != to_square:
        if not board.is_empty(square):
            return True
        square = square.offset(d_row, d_col)
    return False


# --- SHAPES ---
def is_straight(ctx: MoveContext) -> bool:
    return ctx.row_diff == 0 or ctx.col_diff == 0


def is_diagonal(ctx: MoveContext) -> bool:
    return ctx.row_diff == ctx.col_diff


# --- MOVEMENT RULES ---
def rook_rule(board: Board, ctx: MoveContext) -> bool:
    """Rooks move either horizontally or vertically"""
    return (
        is_straight(ctx)
        and not is_path_blocked(board, ctx.from_square, ctx.to_square)
        and ctx.target_available
    )


def bishop_rule(board: Board, ctx: MoveContext) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return (
        is_diagonal(ctx)
        and not is_path_blocked(board, ctx.from_square, ctx.to_square)
        and ctx.target_available
    )


def queen_rule(board: Board, ctx: MoveContext) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return (
        (is_straight(ctx) or is_diagonal(ctx))
        and not is_path_blocked(board, ctx.from_square, ctx.to_square)
        and ctx.target_available
    )


def knight_rule(board: Board, ctx: MoveContext) -> bool:
    """Knights jump, so nothing in between matters"""
    return (ctx.row_diff, ctx.col_diff) in [(2, 1), (1, 2)] and ctx.target_available


def king_rule(board: Board, ctx: MoveContext) -> bool:
    """
    The king can move by a single square at the time.

    NOTE: The zero move is not excluded explicitly. It's never legal anyway, since the king occupies its own target square.
    """
    return ctx.row_diff <= 1 and ctx.col_diff <= 1 and ctx.target_available


def pawn_rule(board: Board, ctx: MoveContext) -> bool:
    """
    A pawn:
    - moves by a single square forward onto an empty square.
    - can move by two from its home row, if both squares are empty.
    - takes diagonally

    NOTE: The diagonal take does not check the direction, so a pawn may take one row backwards too.
    Kept as is on purpose: this is how the variant was always played.
    """
    side = ctx.piece.side
    direction = PAWN_DIRECTION[side]
    from_square, to_square = ctx.from_square, ctx.to_square

    if to_square.col == from_square.col:
        # single push
        if to_square.row == from_square.row + direction and ctx.is_empty:
            return True

        # double push from the home row
        if (
            from_square.row == PAWN_HOME_ROW[side]
            and to_square.row == from_square.row + 2 * direction
            and board.is_empty(from_square.offset(direction, 0))
            and ctx.is_empty
        ):
            return True

    return ctx.row_diff == 1 and ctx.col_diff == 1 and ctx.is_capturing


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MoveRuleFn = Callable[[Board, MoveContext], bool]
MOVEMENT_RULES: dict[PieceKind, MoveRuleFn] = {
    PieceKind.ROOK: rook_rule,
    PieceKind.KNIGHT: knight_rule,
    PieceKind.BISHOP: bishop_rule,
    PieceKind.QUEEN: queen_rule,
    PieceKind.KING: king_rule,
    PieceKind.PAWN: pawn_rule,
}


def is_legal_move(
    board: Board, piece: Piece, from_square: Square, to_square: Square
) -> bool:
    """
    The verdict for a single attempted move. Never changes the board.

    The caller guarantees both squares lie on the board.
    """
    ctx = build_context(board, piece, from_square, to_square)
    movement_rule = MOVEMENT_RULES[piece.kind]
    return movement_rule(board, ctx)
