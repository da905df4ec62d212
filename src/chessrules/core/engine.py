"""Move engine — commits a chosen (source, destination) pair.

The engine never mutates its inputs: ``commit`` works on copies and returns
the updated board and state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeAlias, Union

from chessrules.core.board import Board
from chessrules.core.enums import PROMOTION_TYPES, Color, MoveFlag, PieceType
from chessrules.core.errors import IllegalDestinationError
from chessrules.core.move_generator import legal_destinations
from chessrules.core.piece import Piece
from chessrules.core.state import CASTLING_CORNERS, GameState
from chessrules.core.types import (
    Square,
    col_of,
    is_valid_square,
    make_square,
    row_of,
    square_name,
)

_LOGGER = logging.getLogger(__name__)

PromotionChoice: TypeAlias = Union[PieceType, str, None]
PromotionProvider: TypeAlias = Callable[[Color, Square], object]

_PROMOTION_NAMES: dict[str, PieceType] = {
    "q": PieceType.QUEEN,
    "queen": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "rook": PieceType.ROOK,
    "n": PieceType.KNIGHT,
    "knight": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "bishop": PieceType.BISHOP,
}


def resolve_promotion(
    choice: PromotionChoice | PromotionProvider,
    color: Color,
    square: Square,
    default: PieceType = PieceType.QUEEN,
) -> PieceType:
    """Turn a promotion answer into one of the four promotion piece types.

    *choice* may be a provider callable; it is asked ``(color, square)`` and
    its answer is resolved the same way.  Anything unrecognised yields
    *default*.
    """
    if default not in PROMOTION_TYPES:
        raise ValueError(f"Invalid default promotion piece: {default!r}")

    if callable(choice):
        choice = choice(color, square)

    if isinstance(choice, PieceType):
        if choice in PROMOTION_TYPES:
            return choice
    elif isinstance(choice, str):
        piece_type = _PROMOTION_NAMES.get(choice.strip().lower())
        if piece_type is not None:
            return piece_type
    elif choice is None:
        _LOGGER.debug(
            "No promotion choice on %s, using %s", square_name(square), default.name
        )
        return default

    _LOGGER.warning(
        "Unrecognised promotion choice %r on %s, promoting to %s",
        choice,
        square_name(square),
        default.name,
    )
    return default


def classify_move(
    board: Board, state: GameState, from_sq: Square, to_sq: Square
) -> MoveFlag:
    """Special-move classification of a generated move."""
    piece = board[from_sq]
    if piece is None:
        return MoveFlag.NORMAL

    if piece.piece_type == PieceType.PAWN:
        if row_of(to_sq) == piece.color.promotion_row:
            return MoveFlag.PROMOTION
        if to_sq == state.en_passant_target and col_of(to_sq) != col_of(from_sq):
            return MoveFlag.EN_PASSANT
        if abs(row_of(to_sq) - row_of(from_sq)) == 2:
            return MoveFlag.DOUBLE_PAWN
    elif piece.piece_type == PieceType.KING and abs(to_sq - from_sq) == 2:
        if to_sq > from_sq:
            return MoveFlag.CASTLE_KINGSIDE
        return MoveFlag.CASTLE_QUEENSIDE
    return MoveFlag.NORMAL


def en_passant_victim(from_sq: Square, to_sq: Square) -> Square:
    """Square of the pawn taken en passant: mover's row, destination's column."""
    return make_square(row_of(from_sq), col_of(to_sq))


def captured_piece(
    board: Board, state: GameState, from_sq: Square, to_sq: Square
) -> Piece | None:
    """The piece a generated move would remove from the board, if any."""
    if classify_move(board, state, from_sq, to_sq) == MoveFlag.EN_PASSANT:
        return board[en_passant_victim(from_sq, to_sq)]
    return board[to_sq]


def commit(
    board: Board,
    state: GameState,
    from_sq: Square,
    to_sq: Square,
    promotion: PromotionChoice | PromotionProvider = None,
    *,
    default_promotion: PieceType = PieceType.QUEEN,
) -> tuple[Board, GameState]:
    """Apply the move *from_sq* → *to_sq* and return the new board and state.

    Raises:
        InvalidSourceError: *from_sq* is empty or not the mover's piece.
        IllegalDestinationError: *to_sq* is not a generated destination.
    """
    if to_sq not in legal_destinations(board, state, from_sq):
        target = square_name(to_sq) if is_valid_square(to_sq) else str(to_sq)
        raise IllegalDestinationError(f"{square_name(from_sq)} cannot move to {target}")

    flag = classify_move(board, state, from_sq, to_sq)
    board = board.copy()
    state = state.copy()
    piece = board[from_sq]
    assert piece is not None
    color = piece.color

    # En passant: the captured pawn is not on the destination square
    if flag == MoveFlag.EN_PASSANT:
        board[en_passant_victim(from_sq, to_sq)] = None

    state.en_passant_target = None
    if flag == MoveFlag.DOUBLE_PAWN:
        state.en_passant_target = (from_sq + to_sq) // 2

    # Hop the rook over the king
    if flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE):
        kingside = flag == MoveFlag.CASTLE_KINGSIDE
        rook_from = CASTLING_CORNERS[(color, kingside)]
        rook_to = to_sq - 1 if kingside else to_sq + 1
        board.move_piece(rook_from, rook_to)
        state.rook_moved[rook_from] = True

    # Normal capture, then relocation
    if board[to_sq] is not None:
        board[to_sq] = None
    board.move_piece(from_sq, to_sq)

    if piece.piece_type == PieceType.KING:
        state.king_moved = state.king_moved | {color}
    elif piece.piece_type == PieceType.ROOK and from_sq in state.rook_moved:
        state.rook_moved[from_sq] = True

    if flag == MoveFlag.PROMOTION:
        chosen = resolve_promotion(promotion, color, to_sq, default_promotion)
        board[to_sq] = piece.promoted(chosen)

    state.turn = color.opposite
    _LOGGER.debug(
        "Committed %s%s (%s), %s to move",
        square_name(from_sq),
        square_name(to_sq),
        flag.name,
        state.turn,
    )
    return board, state
