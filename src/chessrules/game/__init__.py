"""Game session layer — controller, promotion choosers, history, settings.

Quick start::

    from chessrules.game import GameController, ScriptedPromotion

    ctrl = GameController(chooser=ScriptedPromotion(["n"]))
    ctrl.select(52)      # {36, 44}
    ctrl.play("e2e4")
"""

from chessrules.game.controller import GameController, GameEvents
from chessrules.game.history import MoveRecord
from chessrules.game.interfaces import IGameController, IPromotionChooser
from chessrules.game.promotion import (
    CallbackPromotion,
    FixedPromotion,
    ScriptedPromotion,
)
from chessrules.game.settings import GameSettings

__all__ = [
    # Interfaces
    "IGameController",
    "IPromotionChooser",
    # Concrete
    "CallbackPromotion",
    "FixedPromotion",
    "GameController",
    "GameEvents",
    "GameSettings",
    "MoveRecord",
    "ScriptedPromotion",
]
