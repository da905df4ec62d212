"""Move history records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.enums import MoveFlag

if TYPE_CHECKING:
    from chessrules.core.move import Move
    from chessrules.core.piece import Piece


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    flag: MoveFlag
    captured: Piece | None
    fen_after: str

    @property
    def was_capture(self) -> bool:
        return self.captured is not None

    @property
    def was_castle(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)
