"""GameState — whose turn it is, castling bookkeeping and the en passant target."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.core.enums import Color
from chessrules.core.types import A1, A8, H1, H8, Square

ROOK_CORNERS: tuple[Square, ...] = (A8, H8, A1, H1)

# (color, kingside) -> corner the castling rook starts from
CASTLING_CORNERS: dict[tuple[Color, bool], Square] = {
    (Color.WHITE, True): H1,
    (Color.WHITE, False): A1,
    (Color.BLACK, True): H8,
    (Color.BLACK, False): A8,
}


def _fresh_rook_flags() -> dict[Square, bool]:
    return {sq: False for sq in ROOK_CORNERS}


@dataclass(slots=True)
class GameState:
    """Cross-move state threaded through generation and commit.

    ``king_moved`` and ``rook_moved`` only ever grow during a game.
    ``en_passant_target`` is valid for exactly one reply.
    """

    turn: Color = Color.WHITE
    king_moved: frozenset[Color] = frozenset()
    rook_moved: dict[Square, bool] = field(default_factory=_fresh_rook_flags)
    en_passant_target: Square | None = None

    @classmethod
    def initial(cls) -> GameState:
        """State at the start of a standard game."""
        return cls()

    def copy(self) -> GameState:
        return GameState(
            turn=self.turn,
            king_moved=self.king_moved,
            rook_moved=self.rook_moved.copy(),
            en_passant_target=self.en_passant_target,
        )

    def has_king_moved(self, color: Color) -> bool:
        return color in self.king_moved

    def has_rook_moved(self, corner: Square) -> bool:
        return self.rook_moved.get(corner, True)

    def can_castle(self, color: Color, kingside: bool) -> bool:
        """Whether neither the king nor the rook for this side has moved yet."""
        if self.has_king_moved(color):
            return False
        return not self.has_rook_moved(CASTLING_CORNERS[(color, kingside)])


def current_turn(state: GameState) -> Color:
    """Side whose move is next."""
    return state.turn
