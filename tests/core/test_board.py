"""Tests for Board, Piece and square helpers."""

import pytest

from chessrules.core.board import Board, initial_board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E2, E4,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)


class TestSquareHelpers:
    def test_corners(self) -> None:
        assert (A8, H8, A1, H1) == (0, 7, 56, 63)

    def test_row_and_col(self) -> None:
        assert row_of(E2) == 6
        assert col_of(E2) == 4
        assert make_square(4, 4) == E4 == 36

    def test_square_name_round_trip_examples(self) -> None:
        assert square_name(0) == "a8"
        assert square_name(63) == "h1"
        assert square_name(52) == "e2"
        assert parse_square("e4") == 36
        assert parse_square("e3") == 44

    @pytest.mark.parametrize("bad", ["", "e", "i1", "a9", "a0", "e22"])
    def test_parse_square_rejects(self, bad: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(bad)


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_str_is_fen_char(self) -> None:
        assert str(Piece(Color.BLACK, PieceType.KING)) == "k"

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    @pytest.mark.parametrize("char", "PNBRQKpnbrqk")
    def test_char_round_trip(self, char: str) -> None:
        assert str(Piece.from_char(char)) == char

    def test_promoted_keeps_color(self) -> None:
        pawn = Piece(Color.BLACK, PieceType.PAWN)
        assert pawn.promoted(PieceType.KNIGHT) == Piece(Color.BLACK, PieceType.KNIGHT)
        assert pawn.piece_type == PieceType.PAWN


class TestBoardInitial:
    def test_kings(self) -> None:
        board = initial_board()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawn_rows(self) -> None:
        board = Board.initial()
        assert board.pieces(Color.BLACK, PieceType.PAWN) == list(range(8, 16))
        assert board.pieces(Color.WHITE, PieceType.PAWN) == list(range(48, 56))

    def test_empty_middle(self) -> None:
        board = Board.initial()
        assert all(board[sq] is None for sq in range(16, 48))


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_is_enemy(self) -> None:
        board = Board.initial()
        assert board.is_enemy(E8, Color.WHITE)
        assert not board.is_enemy(E1, Color.WHITE)
        assert not board.is_enemy(E4, Color.WHITE)

    def test_move_piece(self) -> None:
        board = Board.initial()
        board.move_piece(E2, E4)
        assert board[E2] is None
        assert board[E4] == Piece(Color.WHITE, PieceType.PAWN)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_all_pieces_count(self) -> None:
        board = Board.initial()
        assert len(board.all_pieces(Color.WHITE)) == 16
        assert len(board.all_pieces(Color.BLACK)) == 16

    def test_repr_shows_black_on_top(self) -> None:
        lines = repr(Board.initial()).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"
