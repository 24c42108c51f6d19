"""Tests for white move legality."""

import pytest

from interactor.position import Piece, parse_square
from interactor.rules import IllegalMoveError, apply_move
from interactor.state import GameState


def make_state(wk: str, wq: str, bk: str) -> GameState:
    return GameState(parse_square(wk), parse_square(wq), parse_square(bk))


def rejection(state: GameState, piece: Piece, target: str, king_moves_enabled: bool = False) -> str:
    with pytest.raises(IllegalMoveError) as exc:
        apply_move(state, piece, parse_square(target), king_moves_enabled=king_moves_enabled)
    return str(exc.value)


class TestQueenMoves:
    def test_accepted_move_updates_queen(self):
        state = make_state("a1", "e1", "e8")
        apply_move(state, Piece.QUEEN, parse_square("e6"))
        assert state.white_queen == parse_square("e6")
        assert state.white_king == parse_square("a1")
        assert state.black_king == parse_square("e8")

    def test_impossible_move(self):
        state = make_state("a1", "e1", "e8")
        assert rejection(state, Piece.QUEEN, "f3") == "queen tried to do impossible move"

    @pytest.mark.parametrize("wk, wq, bk", [
        ("a1", "e1", "e8"),
        ("h8", "a1", "c7"),
        ("d4", "d5", "g1"),
        ("b2", "h7", "a8"),
    ])
    def test_not_moved(self, wk, wq, bk):
        state = make_state(wk, wq, bk)
        assert rejection(state, Piece.QUEEN, wq) == "queen has not been moved"

    @pytest.mark.parametrize("target", ["e4", "e6", "e8"])
    def test_cannot_pass_white_king_on_file(self, target):
        state = make_state("e4", "e1", "h8")
        assert rejection(state, Piece.QUEEN, target) == "queen tried to jump over white king"

    def test_stops_short_of_white_king(self):
        state = make_state("e4", "e1", "h8")
        apply_move(state, Piece.QUEEN, parse_square("e3"))
        assert state.white_queen == parse_square("e3")

    @pytest.mark.parametrize("target", ["c3", "d4", "g7"])
    def test_cannot_pass_white_king_on_diagonal(self, target):
        state = make_state("c3", "a1", "h1")
        assert rejection(state, Piece.QUEEN, target) == "queen tried to jump over white king"

    @pytest.mark.parametrize("target", ["e5", "e7"])
    def test_cannot_pass_black_king(self, target):
        state = make_state("a1", "e1", "e5")
        assert rejection(state, Piece.QUEEN, target) == "queen tried to jump over black king"

    def test_black_king_off_the_line_does_not_block(self):
        state = make_state("a1", "e1", "f5")
        apply_move(state, Piece.QUEEN, parse_square("e7"))
        assert state.white_queen == parse_square("e7")

    def test_white_king_checked_before_black_king(self):
        state = make_state("e3", "e1", "e6")
        assert rejection(state, Piece.QUEEN, "e7") == "queen tried to jump over white king"

    def test_rejection_leaves_state_untouched(self):
        state = make_state("e4", "e1", "h8")
        rejection(state, Piece.QUEEN, "e5")
        assert state.white_queen == parse_square("e1")


class TestKingMoves:
    def test_disabled_by_default(self):
        state = make_state("a1", "e1", "e8")
        assert rejection(state, Piece.KING, "b2") == "king moves are not allowed"

    def test_accepted_move_updates_king(self):
        state = make_state("a1", "e1", "e8")
        apply_move(state, Piece.KING, parse_square("b2"), king_moves_enabled=True)
        assert state.white_king == parse_square("b2")

    def test_onto_queen(self):
        state = make_state("d4", "d5", "h8")
        assert rejection(state, Piece.KING, "d5", True) == "king tried to move over the queen"

    def test_impossible(self):
        state = make_state("d4", "a1", "h8")
        assert rejection(state, Piece.KING, "f5", True) == "king tried to do impossible move"

    def test_not_moved(self):
        state = make_state("d4", "a1", "h8")
        assert rejection(state, Piece.KING, "d4", True) == "king was not moved"

    @pytest.mark.parametrize("target", ["d6", "f6", "b4", "d1"])
    def test_too_far(self, target):
        state = make_state("d4", "a1", "h8")
        assert rejection(state, Piece.KING, target, True) == "king tried to move too far"

    def test_next_to_black_king(self):
        state = make_state("d4", "a1", "f6")
        assert rejection(state, Piece.KING, "e5", True) == (
            "white king tried to move next to the black king"
        )

    def test_onto_black_king(self):
        state = make_state("d4", "a1", "e5")
        assert rejection(state, Piece.KING, "e5", True) == (
            "white king tried to move next to the black king"
        )
        assert state.white_king == parse_square("d4")

    def test_two_squares_from_black_king_is_fine(self):
        state = make_state("e4", "a1", "e7")
        apply_move(state, Piece.KING, parse_square("e5"), king_moves_enabled=True)
        assert state.white_king == parse_square("e5")

    def test_knight_distance_from_black_king_is_fine(self):
        state = make_state("d4", "a1", "f7")
        apply_move(state, Piece.KING, parse_square("e5"), king_moves_enabled=True)
        assert state.white_king == parse_square("e5")
