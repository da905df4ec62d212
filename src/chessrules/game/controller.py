"""GameController — owns the board and game state for one game.

Coordinates: MoveGenerator, commit, promotion chooser, move history.
Emits events via simple callbacks so a UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.engine import (
    PromotionChoice,
    captured_piece,
    classify_move,
    commit,
)
from chessrules.core.enums import Color, MoveFlag
from chessrules.core.errors import RulesError
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import position_from_fen, position_to_fen
from chessrules.core.state import GameState
from chessrules.core.types import Square
from chessrules.game.history import MoveRecord
from chessrules.game.interfaces import IGameController, IPromotionChooser
from chessrules.game.promotion import FixedPromotion
from chessrules.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
TurnCallback = Callable[[Color], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Runs a game: hands out destinations, commits moves, records history.

    Board and state are replaced wholesale on every committed move, so
    values previously returned by :attr:`board` / :attr:`state` stay valid
    snapshots.  Single-threaded by contract.
    """

    __slots__ = (
        "_board",
        "_state",
        "_settings",
        "_chooser",
        "_history",
        "events",
    )

    def __init__(
        self,
        settings: GameSettings | None = None,
        chooser: IPromotionChooser | None = None,
    ) -> None:
        self.events = GameEvents()
        self._history: list[MoveRecord] = []
        self._setup(settings, chooser)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def current_turn(self) -> Color:
        return self._state.turn

    @property
    def history(self) -> list[MoveRecord]:
        return list(self._history)

    @property
    def fen(self) -> str:
        return position_to_fen(self._board, self._state)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        settings: GameSettings | None = None,
        chooser: IPromotionChooser | None = None,
    ) -> None:
        self._setup(settings, chooser)
        _LOGGER.info("New game from %s", self._settings.start_fen)
        self._emit_turn_changed()

    def select(self, square: Square) -> set[Square]:
        try:
            return MoveGenerator(self._board, self._state).destinations(square)
        except RulesError as exc:
            _LOGGER.debug("Selection rejected: %s", exc)
            return set()

    def submit_move(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PromotionChoice = None,
    ) -> bool:
        board, state = self._board, self._state
        choice = promotion if promotion is not None else self._chooser

        try:
            new_board, new_state = commit(
                board,
                state,
                from_sq,
                to_sq,
                choice,
                default_promotion=self._settings.default_promotion,
            )
        except RulesError as exc:
            _LOGGER.debug("Move rejected: %s", exc)
            return False

        # commit() worked on copies, so the old snapshot still describes the move
        flag = classify_move(board, state, from_sq, to_sq)
        captured = captured_piece(board, state, from_sq, to_sq)
        piece = board[from_sq]
        assert piece is not None
        promoted = new_board[to_sq] if flag == MoveFlag.PROMOTION else None
        move = Move(from_sq, to_sq, promoted.piece_type if promoted else None)

        self._board, self._state = new_board, new_state
        record = MoveRecord(
            move=move,
            piece=piece,
            flag=flag,
            captured=captured,
            fen_after=self.fen,
        )
        self._history.append(record)

        self._emit_move(record)
        self._emit_turn_changed()
        return True

    # ── Convenience ──────────────────────────────────────────────────────

    def play(self, text: str) -> bool:
        """Submit a move written as ``e2e4`` / ``e7e8q``."""
        move = Move.from_uci(text)
        return self.submit_move(move.from_sq, move.to_sq, move.promotion)

    def all_destinations(self) -> dict[Square, set[Square]]:
        """Destinations of every piece of the side to move."""
        return MoveGenerator(self._board, self._state).all_destinations()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _setup(
        self,
        settings: GameSettings | None,
        chooser: IPromotionChooser | None,
    ) -> None:
        self._settings = settings if settings is not None else GameSettings()
        self._chooser = (
            chooser
            if chooser is not None
            else FixedPromotion(self._settings.default_promotion)
        )
        self._board, self._state = position_from_fen(self._settings.start_fen)
        self._history = []

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_turn_changed(self) -> None:
        for cb in self.events.on_turn_changed:
            cb(self._state.turn)
