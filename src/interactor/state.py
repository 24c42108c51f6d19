"""The single in-memory game position."""

from __future__ import annotations

from dataclasses import dataclass

import chess

from interactor.position import Square


@dataclass
class GameState:
    white_king: Square
    white_queen: Square
    black_king: Square
    moves_limit: int = 50
    moves: int = 0

    def __post_init__(self) -> None:
        squares = {self.white_king, self.white_queen, self.black_king}
        if len(squares) != 3:
            raise ValueError(
                f"pieces must stand on distinct squares: "
                f"{self.white_king} {self.white_queen} {self.black_king}"
            )

    def squares_line(self) -> str:
        """The three squares as the solver sees them: ``wk wq bk``."""
        return f"{self.white_king} {self.white_queen} {self.black_king}"

    def to_board(self) -> chess.Board:
        """Mirror the position onto a python-chess board, white to move."""
        board = chess.Board.empty()
        board.set_piece_at(self.white_king.to_chess(), chess.Piece(chess.KING, chess.WHITE))
        board.set_piece_at(self.white_queen.to_chess(), chess.Piece(chess.QUEEN, chess.WHITE))
        board.set_piece_at(self.black_king.to_chess(), chess.Piece(chess.KING, chess.BLACK))
        board.turn = chess.WHITE
        return board

    def fen(self) -> str:
        return self.to_board().fen()
