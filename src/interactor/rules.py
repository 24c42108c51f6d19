"""Move legality for the white pieces.

Kings block the queen like any other piece would: a queen move along the
line towards either king must stop short of it.
"""

from __future__ import annotations

import logging

from interactor.position import (
    Piece,
    Square,
    UnreachableSquareError,
    queen_distance,
)
from interactor.state import GameState

logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Raised when a proposed white move breaks a rule of the puzzle."""


def _blocks_path(
    origin: Square,
    blocker: Square,
    distance: int,
    direction: tuple[int, int],
) -> bool:
    """True when blocker sits on the origin's line in direction, within distance."""
    try:
        blocker_distance, blocker_direction = queen_distance(origin, blocker)
    except UnreachableSquareError:
        return False
    return blocker_direction == direction and distance >= blocker_distance


def _apply_queen_move(state: GameState, target: Square) -> None:
    logger.debug("Trying to move white queen from %s to %s", state.white_queen, target)
    try:
        distance, direction = queen_distance(state.white_queen, target)
    except UnreachableSquareError:
        raise IllegalMoveError("queen tried to do impossible move") from None
    if distance == 0:
        raise IllegalMoveError("queen has not been moved")
    if _blocks_path(state.white_queen, state.white_king, distance, direction):
        raise IllegalMoveError("queen tried to jump over white king")
    if _blocks_path(state.white_queen, state.black_king, distance, direction):
        raise IllegalMoveError("queen tried to jump over black king")
    state.white_queen = target


def _apply_king_move(state: GameState, target: Square) -> None:
    logger.debug("Trying to move white king from %s to %s", state.white_king, target)
    if target == state.white_queen:
        raise IllegalMoveError("king tried to move over the queen")
    try:
        distance, _ = queen_distance(state.white_king, target)
    except UnreachableSquareError:
        raise IllegalMoveError("king tried to do impossible move") from None
    if distance == 0:
        raise IllegalMoveError("king was not moved")
    if distance > 1:
        raise IllegalMoveError("king tried to move too far")
    try:
        black_king_distance, _ = queen_distance(state.black_king, target)
    except UnreachableSquareError:
        black_king_distance = None
    # Distance 0 (landing on the black king) is rejected too.
    if black_king_distance is not None and black_king_distance <= 1:
        raise IllegalMoveError("white king tried to move next to the black king")
    state.white_king = target


def apply_move(
    state: GameState,
    piece: Piece,
    target: Square,
    king_moves_enabled: bool = False,
) -> None:
    """Validate and apply one white move, mutating state on success.

    Raises IllegalMoveError with a rule-specific reason otherwise; state is
    left untouched in that case.
    """
    if piece is Piece.QUEEN:
        _apply_queen_move(state, target)
    elif king_moves_enabled:
        _apply_king_move(state, target)
    else:
        raise IllegalMoveError("king moves are not allowed")
