"""The black king's forced reply.

Deliberately greedy: black takes the first safe neighbouring square in
row-major order rather than searching for the most stubborn defence. Judge
runs depend on this exact order.
"""

from __future__ import annotations

from interactor.attack_map import Cell, cell_at, neighbors
from interactor.game_over import Verdict
from interactor.position import Square


def select_black_response(board: list[list[Cell]], black_king: Square) -> Square | Verdict:
    """Return the black king's new square, or STALEMATE / CHECKMATE."""
    for square in neighbors(black_king):
        if cell_at(board, square) is Cell.AVAILABLE:
            return square

    if cell_at(board, black_king) is Cell.AVAILABLE:
        return Verdict.STALEMATE
    return Verdict.CHECKMATE
