"""Game loop: one solver line in, one verdict-or-reply out.

``Interactor.play_line`` is the whole per-turn state machine and touches no
I/O; ``Interactor.play`` wraps it with the line protocol on a pair of text
streams.
"""

from __future__ import annotations

import logging
from typing import TextIO

from interactor.attack_map import build_attack_map, render_attack_map
from interactor.game_over import GameOver, Verdict
from interactor.position import (
    NotationError,
    Square,
    parse_piece,
    parse_square,
    queen_distance_or_zero,
)
from interactor.response import select_black_response
from interactor.rules import IllegalMoveError, apply_move
from interactor.state import GameState

logger = logging.getLogger(__name__)
game_log = logging.getLogger("interactor.game_log")

CHECKMATE_CLAIM = "#"


def parse_initial_position(text: str) -> tuple[Square, Square, Square]:
    """Parse ``wk wq bk`` square tokens separated by whitespace."""
    tokens = text.split()
    squares = []
    for name, index in (("white king", 0), ("white queen", 1), ("black king", 2)):
        if index >= len(tokens):
            raise ValueError(f"unable to find the initial {name} position")
        squares.append(parse_square(tokens[index]))
    return squares[0], squares[1], squares[2]


class Interactor:
    """Referee for a single KQK game."""

    def __init__(self, state: GameState, king_moves_enabled: bool = False):
        self.state = state
        self.king_moves_enabled = king_moves_enabled

    @property
    def moves(self) -> int:
        return self.state.moves

    def check_moves_limit(self) -> GameOver | None:
        if self.state.moves >= self.state.moves_limit:
            return GameOver(Verdict.TOO_MANY_MOVES)
        return None

    def _is_unprotected_queen_check(self) -> bool:
        state = self.state
        return (queen_distance_or_zero(state.black_king, state.white_queen) == 1
                and queen_distance_or_zero(state.white_king, state.white_queen) != 1)

    def play_line(self, line: str) -> GameOver | Square:
        """Play one white move given as a stripped input line.

        Returns the black king's new square when the game continues.
        """
        if len(line) == 4 and line.endswith(CHECKMATE_CLAIM):
            checkmate_claimed = True
        elif len(line) == 3:
            checkmate_claimed = False
        else:
            return GameOver.wrong_input(
                "line is neither of length 3 nor length 4 with '#' at the end", line,
            )

        try:
            piece = parse_piece(line[:1])
            target = parse_square(line[1:3])
        except NotationError as e:
            return GameOver.wrong_input(str(e), line)

        try:
            apply_move(self.state, piece, target, king_moves_enabled=self.king_moves_enabled)
        except IllegalMoveError as e:
            return GameOver.wrong_input(str(e), line)
        self.state.moves += 1
        logger.debug("Position after move %d: %s", self.state.moves, self.state.fen())

        if self._is_unprotected_queen_check():
            logger.debug(
                "White queen moved too close to the black king without white king protection"
            )
            return GameOver(Verdict.DRAW)

        board = build_attack_map(self.state.white_king, self.state.white_queen)
        logger.debug("Attack map:\n%s", render_attack_map(board))
        response = select_black_response(board, self.state.black_king)
        if isinstance(response, Verdict):
            if response is Verdict.CHECKMATE and not checkmate_claimed:
                return GameOver.wrong_input("no checkmate when expected", line)
            return GameOver(response)

        self.state.black_king = response
        return response

    def play(self, reader: TextIO, writer: TextIO) -> GameOver:
        """Run the game over a line protocol until a verdict is reached."""
        initial = self.state.squares_line()
        print(initial, file=writer, flush=True)
        game_log.info("%s", initial)

        while True:
            game_over = self.check_moves_limit()
            if game_over is not None:
                return game_over

            try:
                raw = reader.readline()
            except (OSError, UnicodeDecodeError) as e:
                return GameOver.wrong_input(f"Reading a new line from a solution failed: {e!r}")
            if not raw:
                return GameOver.wrong_input(
                    "Reading a new line from a solution failed: end of input"
                )
            line = raw.strip()
            game_log.info("%s", line)

            result = self.play_line(line)
            if isinstance(result, GameOver):
                return result

            reply = f"K{result}"
            print(reply, file=writer, flush=True)
            game_log.info("%s", reply)
