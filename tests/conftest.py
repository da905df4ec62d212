"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.state import GameState
from chessrules.core.types import Square

PlaceFn = Callable[..., tuple[Board, GameState]]


@pytest.fixture
def place() -> PlaceFn:
    """Build a sparse position: ``place({sq: "P", ...}, turn=Color.BLACK)``.

    Pieces use FEN letters.  Castling flags start as "never moved", so
    tests that need a rook or king to count as moved say so explicitly.
    """

    def _place(
        pieces: dict[Square, str],
        turn: Color = Color.WHITE,
        en_passant: Square | None = None,
    ) -> tuple[Board, GameState]:
        board = Board()
        for sq, char in pieces.items():
            board[sq] = Piece.from_char(char)
        return board, GameState(turn=turn, en_passant_target=en_passant)

    return _place


@pytest.fixture
def white_pawn() -> Piece:
    return Piece(Color.WHITE, PieceType.PAWN)


@pytest.fixture
def black_pawn() -> Piece:
    return Piece(Color.BLACK, PieceType.PAWN)
