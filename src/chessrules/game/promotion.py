"""Concrete promotion choice providers."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from chessrules.core.enums import PieceType
from chessrules.game.interfaces import IPromotionChooser

if TYPE_CHECKING:
    from chessrules.core.engine import PromotionChoice
    from chessrules.core.enums import Color
    from chessrules.core.types import Square


class FixedPromotion(IPromotionChooser):
    """Always answers with the same piece (Queen unless told otherwise)."""

    __slots__ = ("_choice",)

    def __init__(self, choice: PromotionChoice = PieceType.QUEEN) -> None:
        self._choice = choice

    def choose(self, color: Color, square: Square) -> PromotionChoice:
        return self._choice


class ScriptedPromotion(IPromotionChooser):
    """Replays a fixed sequence of answers, one per promotion.

    Once the script runs out every further promotion gets ``None``,
    which the engine resolves to the default piece.
    """

    __slots__ = ("_answers", "asked")

    def __init__(self, answers: Iterable[PromotionChoice]) -> None:
        self._answers: deque[PromotionChoice] = deque(answers)
        self.asked: list[tuple[Color, Square]] = []

    def choose(self, color: Color, square: Square) -> PromotionChoice:
        self.asked.append((color, square))
        if not self._answers:
            return None
        return self._answers.popleft()

    @property
    def remaining(self) -> int:
        return len(self._answers)


class CallbackPromotion(IPromotionChooser):
    """Delegates the decision to a callable, e.g. a UI prompt.

    Args:
        on_choose: ``(Color, Square) -> choice`` — invoked synchronously
            when a pawn reaches the far rank.
    """

    __slots__ = ("_on_choose",)

    def __init__(self, on_choose: Callable[[Color, Square], PromotionChoice]) -> None:
        self._on_choose = on_choose

    def choose(self, color: Color, square: Square) -> PromotionChoice:
        return self._on_choose(color, square)
