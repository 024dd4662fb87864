"""Square type alias and coordinate helpers.

Board layout (row-major from the black side):
    a8=0, b8=1, ..., h8=7
    a7=8, b7=9, ..., h7=15
    ...
    a1=56, b1=57, ..., h1=63
"""

from __future__ import annotations

from typing import TypeAlias

from chessrules.core.errors import InvalidNotation

Square: TypeAlias = int  # 0–63

_FILES = "abcdefgh"
_RANKS = "12345678"


def row_of(sq: Square) -> int:
    """Row index 0–7, row 0 being rank 8."""
    return sq // 8


def col_of(sq: Square) -> int:
    """Column index 0–7 (a–h)."""
    return sq % 8


def make_square(col: int, row: int) -> Square:
    """Create square from column (0–7) and row (0–7)."""
    return row * 8 + col


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'A8', 63 → 'H1'."""
    return _FILES[col_of(sq)].upper() + str(8 - row_of(sq))


def parse_square(name: str) -> Square:
    """Parse square name case-insensitively, e.g. 'e2' or 'E2' → 52."""
    if not isinstance(name, str) or len(name) != 2:
        raise InvalidNotation(name)
    file_ch = name[0].lower()
    rank_ch = name[1]
    if file_ch not in _FILES or rank_ch not in _RANKS:
        raise InvalidNotation(name)
    return make_square(_FILES.index(file_ch), 8 - int(rank_ch))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = range(0, 8)
A7, B7, C7, D7, E7, F7, G7, H7 = range(8, 16)
A6, B6, C6, D6, E6, F6, G6, H6 = range(16, 24)
A5, B5, C5, D5, E5, F5, G5, H5 = range(24, 32)
A4, B4, C4, D4, E4, F4, G4, H4 = range(32, 40)
A3, B3, C3, D3, E3, F3, G3, H3 = range(40, 48)
A2, B2, C2, D2, E2, F2, G2, H2 = range(48, 56)
A1, B1, C1, D1, E1, F1, G1, H1 = range(56, 64)
