"""Per-turn classification of all 64 squares from white's point of view."""

import enum

from interactor.position import Square

BOARD_SIZE = 8

# (drow, dcol): right, left, up, down, then the four diagonals
_QUEEN_RAYS = [
    (0, 1), (0, -1), (1, 0), (-1, 0),
    (1, 1), (-1, -1), (-1, 1), (1, -1),
]


class Cell(enum.Enum):
    AVAILABLE = "."
    KING = "K"
    ATTACKABLE = "x"


def neighbors(square: Square) -> list[Square]:
    """Squares at Chebyshev distance 1, clipped at the edges, row-major order."""
    result = []
    for row in range(max(square.row - 1, 0), min(square.row + 1, BOARD_SIZE - 1) + 1):
        for column in range(max(square.column - 1, 0), min(square.column + 1, BOARD_SIZE - 1) + 1):
            if row == square.row and column == square.column:
                continue
            result.append(Square(row, column))
    return result


def _sweep_ray(board: list[list[Cell]], origin: Square, direction: tuple[int, int]) -> None:
    dr, dc = direction
    row = origin.row + dr
    column = origin.column + dc
    while 0 <= row < BOARD_SIZE and 0 <= column < BOARD_SIZE:
        if board[row][column] is Cell.KING:
            break
        board[row][column] = Cell.ATTACKABLE
        row += dr
        column += dc


def build_attack_map(white_king: Square, white_queen: Square) -> list[list[Cell]]:
    """Build a fresh board[row][column] grid of cells.

    The white king's neighbours are attackable. The queen's rays stop at the
    white king but run through the black king, whose square plays no part here.
    """
    board = [[Cell.AVAILABLE] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    for square in neighbors(white_king):
        board[square.row][square.column] = Cell.ATTACKABLE
    board[white_king.row][white_king.column] = Cell.KING

    for direction in _QUEEN_RAYS:
        _sweep_ray(board, white_queen, direction)

    return board


def cell_at(board: list[list[Cell]], square: Square) -> Cell:
    return board[square.row][square.column]


def render_attack_map(board: list[list[Cell]]) -> str:
    """Eight lines, rank 8 first, for debug logs."""
    return "\n".join(
        "".join(cell.value for cell in board[row])
        for row in reversed(range(BOARD_SIZE))
    )
