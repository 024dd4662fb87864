"""Tests for pseudo-legal move generation."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.placement import board_from_placement
from chessrules.core.ruleset import RuleSet
from chessrules.core.types import (
    A1, A2, A3, A4, A5, A8, B1, B2, B3, C1, C2, C3, C8, D1, D2, D3, D4, D5, D8,
    E1, E2, E3, E4, E5, E6, E7, E8, F3, F5, G1, G2, G6, H1, H3, H4,
    F8,
)


def _targets(placement: str, sq: int, rules: RuleSet | None = None) -> list[int] | None:
    return MoveGenerator(board_from_placement(placement), rules).pseudo_legal_targets(sq)


# ── Starting position ────────────────────────────────────────────────────────


class TestInitialPosition:
    def test_empty_square_returns_none(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.pseudo_legal_targets(E4) is None

    def test_white_pawn_single_and_double_step(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.pseudo_legal_targets(E2) == [E3, E4]

    def test_black_pawn_moves_down_the_board(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.pseudo_legal_targets(E7) == [E6, E5]

    def test_knight_two_jumps(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert sorted(gen.pseudo_legal_targets(B1) or []) == sorted([A3, C3])
        assert sorted(gen.pseudo_legal_targets(G1) or []) == sorted([F3, H3])

    @pytest.mark.parametrize("sq", [A1, C1, D1, E1, H1, A8, C8, D8, E8, F8])
    def test_blocked_pieces_have_no_moves(self, sq: int) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.pseudo_legal_targets(sq) == []

    def test_twenty_moves_for_each_side(self) -> None:
        board = Board.initial()
        gen = MoveGenerator(board)
        for color in (Color.WHITE, Color.BLACK):
            total = sum(len(gen.pseudo_legal_targets(sq) or []) for sq in board.pieces_of(color))
            assert total == 20


# ── Leapers ──────────────────────────────────────────────────────────────────


class TestLeapers:
    def test_knight_in_corner(self) -> None:
        assert sorted(_targets("8/8/8/8/8/8/8/N7", A1) or []) == sorted([B3, C2])

    def test_knight_does_not_wrap_around_edge(self) -> None:
        targets = _targets("8/8/8/8/7N/8/8/8", H4) or []
        assert sorted(targets) == sorted([G6, F5, F3, G2])

    def test_king_in_open_board(self) -> None:
        assert len(_targets("8/8/8/8/3K4/8/8/8", D4) or []) == 8

    def test_king_in_corner(self) -> None:
        assert sorted(_targets("8/8/8/8/8/8/8/K7", A1) or []) == sorted([A2, B1, B2])

    def test_leap_rejects_own_piece_but_allows_enemy(self) -> None:
        board = board_from_placement("8/8/8/8/8/8/Pp6/K7")
        gen = MoveGenerator(board)
        assert gen.leap(A1, 0, -1, Color.WHITE) is None  # own pawn on a2
        assert gen.leap(A1, 1, -1, Color.WHITE) == B2  # enemy pawn
        assert gen.leap(A1, -1, 0, Color.WHITE) is None  # off the board


# ── Sliders ──────────────────────────────────────────────────────────────────


class TestSliders:
    def test_rook_reaches_full_length_of_board(self) -> None:
        targets = _targets("8/8/8/8/8/8/8/R7", A1) or []
        assert len(targets) == 14
        assert A8 in targets and H1 in targets

    def test_rook_stops_at_capture_and_before_own_piece(self) -> None:
        targets = _targets("8/8/8/3p4/8/8/3R1P2/8", D2) or []
        assert sorted(targets) == sorted([D3, D4, D5, D1, C2, B2, A2, E2])

    def test_queen_on_open_board(self) -> None:
        assert len(_targets("8/8/8/8/3Q4/8/8/8", D4) or []) == 27

    def test_bishop_on_open_board(self) -> None:
        assert len(_targets("8/8/8/8/3B4/8/8/8", D4) or []) == 13


# ── Pawns ────────────────────────────────────────────────────────────────────


class TestPawns:
    def test_diagonal_captures(self) -> None:
        assert _targets("8/8/8/3p1p2/4P3/8/8/8", E4) == [E5, D5, F5]

    def test_black_pawn_captures(self) -> None:
        assert _targets("8/8/8/8/8/8/3p4/2Q1R3", D2) == [D1, C1, E1]

    def test_no_capture_wraps_around_edge(self) -> None:
        assert _targets("8/8/7p/8/P7/8/8/8", A4) == [A5]

    def test_blocked_push_standard(self) -> None:
        assert _targets("8/8/8/8/4p3/4P3/8/8", E3) == []

    def test_blocked_push_legacy_captures_ahead(self) -> None:
        assert _targets("8/8/8/8/4p3/4P3/8/8", E3, RuleSet.legacy()) == [E4]

    def test_double_step_blocked_standard(self) -> None:
        assert _targets("8/8/8/8/8/4n3/4P3/8", E2) == []

    def test_double_step_blocked_legacy(self) -> None:
        assert _targets("8/8/8/8/8/4n3/4P3/8", E2, RuleSet.legacy()) == [E3, E4]

    def test_no_double_step_off_start_rank(self) -> None:
        assert _targets("8/8/8/8/8/4P3/8/8", E3) == [E4]


# ── Attack detection ─────────────────────────────────────────────────────────


class TestAttacks:
    def test_king_not_attacked_at_start(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert not gen.is_king_attacked(Color.WHITE)
        assert not gen.is_king_attacked(Color.BLACK)

    def test_rook_attacks_king_on_file(self) -> None:
        gen = MoveGenerator(board_from_placement("4r3/8/8/8/8/8/8/4K3"))
        assert gen.is_king_attacked(Color.WHITE)
        assert gen.checks_from(E8)

    def test_blocked_rook_does_not_attack(self) -> None:
        gen = MoveGenerator(board_from_placement("4r3/8/8/8/8/8/4B3/4K3"))
        assert not gen.is_king_attacked(Color.WHITE)
        assert not gen.checks_from(E8)

    def test_checks_from_empty_square(self) -> None:
        gen = MoveGenerator(Board())
        assert not gen.checks_from(E4)
