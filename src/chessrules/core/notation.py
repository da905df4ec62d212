"""FEN parsing and serialization for (Board, GameState) pairs.

The castling field maps onto the corner-rook flags of :class:`GameState`:
a missing ``K`` marks White's h-file rook as moved, and so on.  A side with
neither letter keeps its king unmoved; losing both rooks' rights already
rules out castling for it.  Clock fields are accepted but not tracked.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.piece import Piece
from chessrules.core.state import CASTLING_CORNERS, GameState
from chessrules.core.types import Square, make_square, parse_square, row_of, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# FEN castling letter -> (color, kingside)
_CASTLING_LETTERS: dict[str, tuple[Color, bool]] = {
    "K": (Color.WHITE, True),
    "Q": (Color.WHITE, False),
    "k": (Color.BLACK, True),
    "q": (Color.BLACK, False),
}


def _parse_placement(placement: str, fen: str) -> Board:
    rows = placement.split("/")
    if len(rows) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[make_square(row, col)] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    return board


def position_from_fen(fen: str) -> tuple[Board, GameState]:
    """Parse a FEN string into a board and game state."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]
    board = _parse_placement(placement, fen)

    if side_part == "w":
        turn = Color.WHITE
    elif side_part == "b":
        turn = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    allowed: set[str] = set()
    if castling_part != "-":
        for ch in castling_part:
            if ch not in _CASTLING_LETTERS or ch in allowed:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            allowed.add(ch)
    state = GameState(turn=turn)
    for letter, key in _CASTLING_LETTERS.items():
        state.rook_moved[CASTLING_CORNERS[key]] = letter not in allowed

    if ep_part != "-":
        ep: Square = parse_square(ep_part)
        # Skipped square sits on row 5 after a White push, row 2 after a Black one
        expected_row = 2 if turn == Color.WHITE else 5
        if row_of(ep) != expected_row:
            raise ValueError(f"Invalid FEN en-passant square: {ep_part!r}")
        state.en_passant_target = ep

    for clock in parts[4:]:
        if not clock.isdigit():
            raise ValueError(f"Invalid FEN clock field: {clock!r}")

    return board, state


def position_to_fen(board: Board, state: GameState) -> str:
    """Serialise a board and game state to FEN."""
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            piece = board[make_square(row, col)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    side_str = "w" if state.turn == Color.WHITE else "b"

    castling_str = "".join(
        letter
        for letter, (color, kingside) in _CASTLING_LETTERS.items()
        if state.can_castle(color, kingside)
    )
    if not castling_str:
        castling_str = "-"

    ep = state.en_passant_target
    ep_str = square_name(ep) if ep is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} 0 1"
