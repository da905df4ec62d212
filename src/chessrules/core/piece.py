"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType

# FEN letter per type; uppercase for White
_TYPE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

_LETTER_TYPES: dict[str, PieceType] = {v: k for k, v in _TYPE_LETTERS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """A coloured piece; replaced rather than changed when a pawn promotes."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        letter = _TYPE_LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Piece for a FEN placement letter, e.g. ``'N'`` is a white knight."""
        piece_type = _LETTER_TYPES.get(char.lower()) if len(char) == 1 else None
        if piece_type is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, piece_type)

    def promoted(self, piece_type: PieceType) -> Piece:
        return Piece(self.color, piece_type)
