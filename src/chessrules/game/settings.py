"""Game setup options."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PROMOTION_TYPES, PieceType
from chessrules.core.notation import STARTING_FEN


@dataclass
class GameSettings:
    """All caller-configurable options for a game session."""

    # Starting position
    start_fen: str = STARTING_FEN

    # Piece used when the promotion chooser gives no usable answer
    default_promotion: PieceType = PieceType.QUEEN

    def __post_init__(self) -> None:
        if self.default_promotion not in PROMOTION_TYPES:
            raise ValueError(
                f"default_promotion must be one of "
                f"{[pt.name for pt in PROMOTION_TYPES]}, got {self.default_promotion!r}"
            )
