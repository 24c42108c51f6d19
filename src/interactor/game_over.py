"""Terminal outcomes of a game."""

import enum
from dataclasses import dataclass


class Verdict(enum.Enum):
    WRONG_INPUT = "wrong_input"
    TOO_MANY_MOVES = "too_many_moves"
    DRAW = "draw"
    STALEMATE = "stalemate"
    CHECKMATE = "checkmate"


@dataclass(frozen=True)
class GameOver:
    verdict: Verdict
    error_message: str = ""  # WRONG_INPUT only
    input: str = ""          # offending raw line, WRONG_INPUT only

    @classmethod
    def wrong_input(cls, error_message: str, input: str = "") -> "GameOver":
        return cls(Verdict.WRONG_INPUT, error_message=error_message, input=input)

    def __str__(self) -> str:
        if self.verdict is Verdict.WRONG_INPUT:
            return f"{self.verdict.value}: {self.error_message} (input: {self.input!r})"
        return self.verdict.value
