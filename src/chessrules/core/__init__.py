"""Core rules layer — pure chess logic with zero external dependencies.

Quick start::

    from chessrules.core import GameState, commit, initial_board, legal_destinations

    board, state = initial_board(), GameState.initial()
    print(sorted(legal_destinations(board, state, 52)))  # [36, 44]
    board, state = commit(board, state, 52, 36)
"""

from chessrules.core.board import Board, initial_board
from chessrules.core.engine import (
    PromotionChoice,
    PromotionProvider,
    captured_piece,
    classify_move,
    commit,
    resolve_promotion,
)
from chessrules.core.enums import PROMOTION_TYPES, Color, MoveFlag, PieceType
from chessrules.core.errors import (
    IllegalDestinationError,
    InvalidSourceError,
    RulesError,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator, legal_destinations
from chessrules.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.piece import Piece
from chessrules.core.state import GameState, current_turn
from chessrules.core.types import (
    Square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "MoveFlag",
    "PieceType",
    "PROMOTION_TYPES",
    # Types / helpers
    "Square",
    "col_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "GameState",
    "Move",
    "MoveGenerator",
    "Piece",
    # Operations
    "captured_piece",
    "classify_move",
    "commit",
    "current_turn",
    "initial_board",
    "legal_destinations",
    "resolve_promotion",
    "PromotionChoice",
    "PromotionProvider",
    # Errors
    "IllegalDestinationError",
    "InvalidSourceError",
    "RulesError",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
