"""Tests for FEN parsing/serialisation and the Move value object."""

import pytest

from chessrules.core.board import Board
from chessrules.core.engine import commit
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.piece import Piece
from chessrules.core.state import GameState
from chessrules.core.types import A1, A8, E2, E4, E7, E8, H1, H8, parse_square


class TestFenParse:
    def test_starting_position(self) -> None:
        board, state = position_from_fen(STARTING_FEN)
        assert board == Board.initial()
        assert state == GameState.initial()

    def test_side_to_move(self) -> None:
        _, state = position_from_fen(
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        assert state.turn == Color.BLACK
        assert state.en_passant_target == parse_square("e3")

    def test_castling_letters_map_to_rook_flags(self) -> None:
        _, state = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 1")
        assert state.rook_moved == {A8: False, H8: True, A1: True, H1: False}
        assert state.king_moved == frozenset()

    def test_no_castling(self) -> None:
        _, state = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert all(state.rook_moved.values())

    def test_clock_fields_optional(self) -> None:
        board, _ = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - -")
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8 w - - 0 1",
            "9/8/8/8/8/8/8/8 w - - 0 1",
            "ppppppppp/8/8/8/8/8/8/8 w - - 0 1",
            "7/8/8/8/8/8/8/8 w - - 0 1",
            "8/8/8/8/8/8/8/8 x - - 0 1",
            "8/8/8/8/8/8/8/8 w KK - 0 1",
            "8/8/8/8/8/8/8/8 w X - 0 1",
            "8/8/8/8/8/8/8/8 w - e4 0 1",
            "8/8/8/8/8/8/8/8 w - e3 0 1",
            "8/8/8/8/8/8/8/8 w - - -1 1",
            "8/8/8/8/8/8/8/x7 w - - 0 1",
        ],
    )
    def test_invalid(self, fen: str) -> None:
        with pytest.raises(ValueError):
            position_from_fen(fen)


class TestFenWrite:
    def test_round_trip_start(self) -> None:
        board, state = position_from_fen(STARTING_FEN)
        assert position_to_fen(board, state) == STARTING_FEN

    def test_after_double_push(self) -> None:
        board, state = commit(Board.initial(), GameState.initial(), E2, E4)
        assert position_to_fen(board, state) == (
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )

    def test_king_move_drops_both_letters(self) -> None:
        board, state = position_from_fen("r3k2r/8/8/8/8/8/8/R3K2R b KQkq - 0 1")
        board, state = commit(board, state, E8, E7)
        assert position_to_fen(board, state).split()[2] == "KQ"

    def test_all_rights_gone(self) -> None:
        board, state = position_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert position_to_fen(board, state).split()[2] == "-"


class TestMove:
    def test_str(self) -> None:
        assert str(Move(E2, E4)) == "e2e4"
        assert Move(parse_square("a7"), A8, PieceType.KNIGHT).uci == "a7a8n"

    def test_from_uci(self) -> None:
        assert Move.from_uci("e2e4") == Move(52, 36)
        assert Move.from_uci("h2h1Q") == Move(55, 63, PieceType.QUEEN)

    @pytest.mark.parametrize("text", ["e2", "e2e4qq", "e2e9", "a7a8k"])
    def test_from_uci_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            Move.from_uci(text)
