"""Static attacker/defender model built from FEN piece placement.

The grid is indexed ``[file][rank]`` with rank 0 being the top row in FEN
order (rank 8). Coordinates are converted back to algebraic names only at
the edges via ``coordinate`` / ``parse_coordinate``.
"""

from dataclasses import dataclass

import chess

__all__ = [
    "AttackMap",
    "PieceGrid",
    "StaticBoardModel",
    "build_attack_map",
    "coordinate",
    "parse_coordinate",
    "parse_placement",
]

PieceGrid = tuple[tuple[chess.Piece | None, ...], ...]
AttackMap = tuple[tuple[int, ...], ...]

_PIECE_LETTERS = frozenset("pnbrqk")

_KNIGHT_JUMPS = [(-2, -1), (-2, 1), (-1, -2), (1, -2), (2, -1), (2, 1), (-1, 2), (1, 2)]
_KING_STEPS = [(df, dr) for df in (-1, 0, 1) for dr in (-1, 0, 1) if df or dr]
_DIAGONALS = [(-1, -1), (1, -1), (1, 1), (-1, 1)]
_LINES = [(-1, 0), (1, 0), (0, 1), (0, -1)]

# Same-colored pieces a ray keeps going through.
_XRAY_TYPES = {
    True: (chess.BISHOP, chess.QUEEN),   # diagonal
    False: (chess.ROOK, chess.QUEEN),    # rank/file
}


def _on_board(file: int, rank: int) -> bool:
    return 0 <= file <= 7 and 0 <= rank <= 7


def coordinate(file: int, rank: int) -> str:
    """(0, 7) -> "a1", (4, 3) -> "e5"."""
    return f"{chr(ord('a') + file)}{chr(ord('1') + 7 - rank)}"


def parse_coordinate(name: str) -> tuple[int, int]:
    """Inverse of ``coordinate``: "e5" -> (4, 3)."""
    sq = chess.parse_square(name)
    return chess.square_file(sq), 7 - chess.square_rank(sq)


def parse_placement(fen: str) -> PieceGrid:
    """Build the piece grid from a FEN placement field (or a full FEN).

    Parsing stops at the first space. Nothing is validated: unknown
    characters leave their square empty, and placements past the board edge
    are dropped.
    """
    cells: list[list[chess.Piece | None]] = [[None] * 8 for _ in range(8)]
    file = 0
    rank = 0
    for ch in fen:
        if ch == " ":
            break
        if "1" <= ch <= "8":
            file += int(ch)
        elif ch == "/":
            rank += 1
            file = 0
        else:
            if ch.lower() in _PIECE_LETTERS and _on_board(file, rank):
                cells[file][rank] = chess.Piece.from_symbol(ch)
            file += 1
    return tuple(tuple(col) for col in cells)


def _cast_ray(
    grid: PieceGrid,
    counts: list[list[int]],
    color: chess.Color,
    file: int,
    rank: int,
    direction: tuple[int, int],
) -> None:
    df, dr = direction
    xray = _XRAY_TYPES[df != 0 and dr != 0]
    f, r = file + df, rank + dr
    while _on_board(f, r):
        counts[f][r] += 1
        piece = grid[f][r]
        if piece is not None and not (piece.color == color and piece.piece_type in xray):
            break
        f += df
        r += dr


def _add_steps(counts: list[list[int]], file: int, rank: int, steps) -> None:
    for df, dr in steps:
        if _on_board(file + df, rank + dr):
            counts[file + df][rank + dr] += 1


def build_attack_map(grid: PieceGrid, color: chess.Color) -> AttackMap:
    """Count, for every square, how many pieces of ``color`` attack it."""
    counts = [[0] * 8 for _ in range(8)]
    for rank in range(8):
        for file in range(8):
            piece = grid[file][rank]
            if piece is None or piece.color != color:
                continue
            pt = piece.piece_type
            if pt == chess.PAWN:
                forward = -1 if color == chess.WHITE else 1
                _add_steps(counts, file, rank, [(-1, forward), (1, forward)])
            elif pt == chess.KNIGHT:
                _add_steps(counts, file, rank, _KNIGHT_JUMPS)
            elif pt == chess.KING:
                _add_steps(counts, file, rank, _KING_STEPS)
            else:
                rays = []
                if pt in (chess.BISHOP, chess.QUEEN):
                    rays += _DIAGONALS
                if pt in (chess.ROOK, chess.QUEEN):
                    rays += _LINES
                for direction in rays:
                    _cast_ray(grid, counts, color, file, rank, direction)
    return tuple(tuple(col) for col in counts)


@dataclass(frozen=True)
class StaticBoardModel:
    grid: PieceGrid
    white_attacks: AttackMap
    black_attacks: AttackMap

    @classmethod
    def from_fen(cls, fen: str) -> "StaticBoardModel":
        grid = parse_placement(fen)
        return cls(
            grid=grid,
            white_attacks=build_attack_map(grid, chess.WHITE),
            black_attacks=build_attack_map(grid, chess.BLACK),
        )

    def piece_at(self, file: int, rank: int) -> chess.Piece | None:
        return self.grid[file][rank]

    def attack_map(self, color: chess.Color) -> AttackMap:
        return self.white_attacks if color == chess.WHITE else self.black_attacks

    def attack_count(self, color: chess.Color, file: int, rank: int) -> int:
        return self.attack_map(color)[file][rank]
