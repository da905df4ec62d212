"""Abstract interfaces for the game layer.

The controller depends on these ABCs, not on concrete promotion providers
or on any particular input mechanism.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.engine import PromotionChoice
    from chessrules.core.enums import Color
    from chessrules.core.types import Square
    from chessrules.game.settings import GameSettings


class IPromotionChooser(ABC):
    """Answers which piece a pawn reaching the far rank becomes."""

    @abstractmethod
    def choose(self, color: Color, square: Square) -> PromotionChoice:
        """Return a piece type, a letter such as ``"q"``, or ``None``.

        Called synchronously in the middle of a commit; anything not
        recognised as Queen, Rook, Knight or Bishop means the default piece.
        """

    def __call__(self, color: Color, square: Square) -> PromotionChoice:
        return self.choose(color, square)


class IGameController(ABC):
    """Interface for the game session object."""

    @abstractmethod
    def new_game(
        self,
        settings: GameSettings | None = None,
        chooser: IPromotionChooser | None = None,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def select(self, square: Square) -> set[Square]:
        """Destinations reachable from *square* for the side to move."""

    @abstractmethod
    def submit_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PromotionChoice = None,
    ) -> bool:
        """Submit a move. Returns True if legal and applied."""
