"""Board squares, piece identities, and the queen-distance primitive.

Every legality rule in the interactor is phrased in terms of
``queen_distance``: two squares either share a rank, file, or diagonal
(and then have a distance plus a unit direction), or they do not.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

import chess


class NotationError(ValueError):
    """Raised when a piece letter or square token cannot be parsed."""


class UnreachableSquareError(ValueError):
    """Raised when two squares share no rank, file, or diagonal."""


@dataclass(frozen=True)
class Square:
    row: int     # 0-7, rank 1-8
    column: int  # 0-7, file a-h

    def __post_init__(self) -> None:
        if not (0 <= self.row <= 7 and 0 <= self.column <= 7):
            raise ValueError(f"square off the board: row={self.row} column={self.column}")

    def __str__(self) -> str:
        return chess.FILE_NAMES[self.column] + chess.RANK_NAMES[self.row]

    def to_chess(self) -> chess.Square:
        return chess.square(self.column, self.row)

    @classmethod
    def from_chess(cls, square: chess.Square) -> Square:
        return cls(row=chess.square_rank(square), column=chess.square_file(square))


class Piece(enum.Enum):
    KING = "K"
    QUEEN = "Q"


def parse_square(text: str) -> Square:
    """Parse a two-character token like ``e4``.

    Raises NotationError with "invalid length", "invalid column" or
    "invalid row", checked in that order.
    """
    if len(text) != 2:
        raise NotationError("invalid length")
    file_char, rank_char = text
    if file_char not in chess.FILE_NAMES:
        raise NotationError("invalid column")
    if rank_char not in chess.RANK_NAMES:
        raise NotationError("invalid row")
    return Square(
        row=chess.RANK_NAMES.index(rank_char),
        column=chess.FILE_NAMES.index(file_char),
    )


def parse_piece(text: str) -> Piece:
    try:
        return Piece(text)
    except ValueError:
        raise NotationError("invalid chess piece") from None


def queen_distance(a: Square, b: Square) -> tuple[int, tuple[int, int]]:
    """Return (distance, (drow, dcol)) from a to b along a queen line.

    The direction is a unit step, (0, 0) when a == b.
    """
    row_diff = b.row - a.row
    column_diff = b.column - a.column
    if row_diff == 0 and column_diff == 0:
        return 0, (0, 0)
    if row_diff == 0 or column_diff == 0:
        distance = abs(row_diff) + abs(column_diff)
    elif abs(row_diff) == abs(column_diff):
        distance = abs(row_diff)
    else:
        raise UnreachableSquareError("the position is not reachable by queen move")
    return distance, (row_diff // distance, column_diff // distance)


def queen_distance_or_zero(a: Square, b: Square) -> int:
    """Queen distance, with unreachable pairs counted as 0."""
    try:
        distance, _ = queen_distance(a, b)
    except UnreachableSquareError:
        return 0
    return distance
