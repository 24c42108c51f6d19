"""Judge entry point for the KQK interactor.

Usage:
    python -m interactor.cli [--answer FILE] [--moves-limit N]
        [--enable-king-moves] [--log-level LEVEL]

Reads the initial position from the answer file, prints it to the solver on
stdout, then referees the solver's moves from stdin. The verdict becomes the
process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from interactor.config import LOG_LEVELS, Settings
from interactor.config_flags import is_king_moves_enabled
from interactor.game import Interactor, parse_initial_position
from interactor.game_over import Verdict
from interactor.state import GameState

logger = logging.getLogger(__name__)

EXIT_CODE_OK = 0
EXIT_CODE_WA = 1
EXIT_CODE_PE = 2
EXIT_CODE_FAIL = 3

EXIT_CODES: dict[Verdict, int] = {
    Verdict.CHECKMATE: EXIT_CODE_OK,
    Verdict.WRONG_INPUT: EXIT_CODE_PE,
    Verdict.TOO_MANY_MOVES: EXIT_CODE_WA,
    Verdict.DRAW: EXIT_CODE_WA,
    Verdict.STALEMATE: EXIT_CODE_WA,
}


def _load_state(answer_path: str, moves_limit: int) -> GameState:
    with open(answer_path) as f:
        white_king, white_queen, black_king = parse_initial_position(f.read())
    return GameState(white_king, white_queen, black_king, moves_limit=moves_limit)


def main(argv: list[str] | None = None) -> None:
    try:
        settings = Settings()
    except ValidationError as e:
        print(f"error: invalid interactor settings: {e}", file=sys.stderr)
        sys.exit(EXIT_CODE_FAIL)

    parser = argparse.ArgumentParser(description="King+Queen vs King puzzle interactor")
    parser.add_argument(
        "--answer", default=settings.answer_path, metavar="FILE",
        help=f"Initial position file (default: {settings.answer_path})",
    )
    parser.add_argument(
        "--moves-limit", type=int, default=settings.moves_limit,
        help=f"White moves allowed before the game is lost (default: {settings.moves_limit})",
    )
    parser.add_argument(
        "--enable-king-moves", action="store_true", default=is_king_moves_enabled(),
        help="Allow the solver to move the white king",
    )
    parser.add_argument(
        "--log-level", default=settings.log_level,
        help=f"Logging level for stderr (default: {settings.log_level})",
    )
    args = parser.parse_args(argv)

    # argparse's own usage errors exit 2, which is the wrong-input code
    log_level = args.log_level.upper()
    if log_level not in LOG_LEVELS:
        parser.exit(EXIT_CODE_FAIL, f"error: unknown log level {args.log_level!r}\n")

    logging.basicConfig(
        stream=sys.stderr,
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Initializing Chess interactor")

    try:
        state = _load_state(args.answer, args.moves_limit)
    except (OSError, ValueError) as e:
        logger.error("Unable to load the initial position from %s: %s", args.answer, e)
        sys.exit(EXIT_CODE_FAIL)

    interactor = Interactor(state, king_moves_enabled=args.enable_king_moves)
    game_over = interactor.play(sys.stdin, sys.stdout)
    logger.info("%s. Moves: %d", game_over, interactor.moves)
    sys.exit(EXIT_CODES[game_over.verdict])


if __name__ == "__main__":
    main()
