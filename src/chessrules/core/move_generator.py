"""Destination generation for a single selected piece.

Moves are pseudo-legal: nothing here checks whether the mover's own king
ends up attacked, and castling ignores attacked squares.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import InvalidSourceError
from chessrules.core.piece import Piece
from chessrules.core.state import CASTLING_CORNERS, GameState
from chessrules.core.types import (
    BOARD_WIDTH,
    Square,
    col_of,
    is_valid_square,
    make_square,
    on_board,
    row_of,
    square_name,
)

# (Δrow, Δcol)
KNIGHT_DELTAS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_DELTAS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

# Index steps for ray casting.
ROOK_STEPS: tuple[int, ...] = (-1, 1, -BOARD_WIDTH, BOARD_WIDTH)
BISHOP_STEPS: tuple[int, ...] = (
    -BOARD_WIDTH - 1,
    -BOARD_WIDTH + 1,
    BOARD_WIDTH - 1,
    BOARD_WIDTH + 1,
)
QUEEN_STEPS: tuple[int, ...] = ROOK_STEPS + BISHOP_STEPS

_SLIDING_STEPS: dict[PieceType, tuple[int, ...]] = {
    PieceType.ROOK: ROOK_STEPS,
    PieceType.BISHOP: BISHOP_STEPS,
    PieceType.QUEEN: QUEEN_STEPS,
}

# kingside flag, columns that must be empty, king destination column
_CASTLE_PATHS: tuple[tuple[bool, tuple[int, ...], int], ...] = (
    (True, (5, 6), 6),
    (False, (1, 2, 3), 2),
)
KING_START_COL = 4


def _build_targets(
    deltas: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        row, col = row_of(sq), col_of(sq)
        targets.append(
            tuple(
                make_square(row + dr, col + dc)
                for dr, dc in deltas
                if on_board(row + dr, col + dc)
            )
        )
    return tuple(targets)


_KNIGHT_TARGETS = _build_targets(KNIGHT_DELTAS)
_KING_TARGETS = _build_targets(KING_DELTAS)


def _steps_off_board(prev: Square, nxt: Square) -> bool:
    """True when stepping from *prev* to *nxt* leaves the board or wraps a file edge."""
    if not is_valid_square(nxt):
        return True
    return (
        abs(row_of(nxt) - row_of(prev)) > 1
        or abs(col_of(nxt) - col_of(prev)) > 1
    )


class MoveGenerator:
    """Computes destination squares on a read-only board/state snapshot."""

    __slots__ = ("_board", "_state")

    def __init__(self, board: Board, state: GameState) -> None:
        self._board = board
        self._state = state

    # -- Public API ---------------------------------------------------------

    def destinations(self, sq: Square) -> set[Square]:
        """Squares the piece on *sq* may move to.

        Raises:
            InvalidSourceError: *sq* is empty or holds a piece of the side
                not to move.
        """
        piece = self._source_piece(sq)
        moves: set[Square] = set()
        ptype = piece.piece_type

        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_knight(sq, piece.color, moves)
        elif ptype == PieceType.KING:
            self._gen_king(sq, piece.color, moves)
        else:
            self._gen_sliding(sq, piece.color, _SLIDING_STEPS[ptype], moves)
        return moves

    def all_destinations(self) -> dict[Square, set[Square]]:
        """Destinations for every piece of the side to move, keyed by square."""
        return {
            sq: self.destinations(sq)
            for sq in self._board.all_pieces(self._state.turn)
        }

    # -- Piece-specific generators (private) -------------------------------

    def _source_piece(self, sq: Square) -> Piece:
        if not is_valid_square(sq):
            raise InvalidSourceError(f"Square index out of range: {sq}")
        piece = self._board[sq]
        if piece is None:
            raise InvalidSourceError(f"No piece on {square_name(sq)}")
        if piece.color != self._state.turn:
            raise InvalidSourceError(
                f"Piece on {square_name(sq)} is {piece.color}, "
                f"but it is {self._state.turn} to move"
            )
        return piece

    def _gen_pawn(self, sq: Square, color: Color, moves: set[Square]) -> None:
        board = self._board
        row, col = row_of(sq), col_of(sq)
        ahead = row + color.forward
        if not 0 <= ahead < BOARD_WIDTH:
            return

        one_step = make_square(ahead, col)
        if board.is_empty(one_step):
            moves.add(one_step)
            if row == color.pawn_row:
                two_step = make_square(ahead + color.forward, col)
                if board.is_empty(two_step):
                    moves.add(two_step)

        ep = self._state.en_passant_target
        for dc in (-1, 1):
            if not 0 <= col + dc < BOARD_WIDTH:
                continue
            cap_sq = make_square(ahead, col + dc)
            if board.is_enemy(cap_sq, color):
                moves.add(cap_sq)
            elif cap_sq == ep and board.is_empty(cap_sq):
                moves.add(cap_sq)

    def _gen_knight(self, sq: Square, color: Color, moves: set[Square]) -> None:
        board = self._board
        for to_sq in _KNIGHT_TARGETS[sq]:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.add(to_sq)

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        steps: tuple[int, ...],
        moves: set[Square],
    ) -> None:
        board = self._board
        for step in steps:
            prev = sq
            while True:
                to_sq = prev + step
                if _steps_off_board(prev, to_sq):
                    break
                target = board[to_sq]
                if target is None:
                    moves.add(to_sq)
                    prev = to_sq
                    continue
                if target.color != color:
                    moves.add(to_sq)
                break

    def _gen_king(self, sq: Square, color: Color, moves: set[Square]) -> None:
        board = self._board
        for to_sq in _KING_TARGETS[sq]:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.add(to_sq)

        self._gen_castling(sq, color, moves)

    def _gen_castling(self, king_sq: Square, color: Color, moves: set[Square]) -> None:
        """Also requires the king on e1/e8 and the colour's rook still on its corner."""
        board = self._board
        state = self._state
        row = color.home_row
        if state.has_king_moved(color) or king_sq != make_square(row, KING_START_COL):
            return

        rook = Piece(color, PieceType.ROOK)
        for kingside, between, king_to_col in _CASTLE_PATHS:
            if not state.can_castle(color, kingside):
                continue
            if board[CASTLING_CORNERS[(color, kingside)]] != rook:
                continue
            if all(board.is_empty(make_square(row, c)) for c in between):
                moves.add(make_square(row, king_to_col))


def legal_destinations(board: Board, state: GameState, from_sq: Square) -> set[Square]:
    """Squares the piece on *from_sq* may move to (not filtered for self-check)."""
    return MoveGenerator(board, state).destinations(from_sq)
