"""chessrules — move generation and move commit for standard chess pieces."""

from chessrules.core import (
    Board,
    Color,
    GameState,
    IllegalDestinationError,
    InvalidSourceError,
    PieceType,
    commit,
    current_turn,
    initial_board,
    legal_destinations,
)

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Color",
    "GameState",
    "IllegalDestinationError",
    "InvalidSourceError",
    "PieceType",
    "commit",
    "current_turn",
    "initial_board",
    "legal_destinations",
]
