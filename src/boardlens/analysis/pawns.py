"""Pawn structure weaknesses: doubled, isolated, backward, passed."""

import math
from dataclasses import dataclass

import chess

__all__ = [
    "PawnWeakness",
    "analyze_pawn_weakness",
]


@dataclass
class PawnWeakness:
    pawns: int = 0
    doubled: int = 0
    isolated: int = 0
    backward: int = 0
    passed: int = 0
    weakness_score: int = 0  # percent of pawns with a structural weakness


def _ranks_by_file(board: chess.Board, color: chess.Color) -> list[list[int]]:
    """Pass 1: 1-based ranks of ``color``'s pawns, grouped by file."""
    files: list[list[int]] = [[] for _ in range(8)]
    for sq in board.pieces(chess.PAWN, color):
        files[chess.square_file(sq)].append(chess.square_rank(sq) + 1)
    return files


def _count_doubled(files: list[list[int]]) -> int:
    # Every pawn beyond the first on a file
    return sum(len(ranks) - 1 for ranks in files if len(ranks) > 1)


def _count_isolated(files: list[list[int]]) -> int:
    isolated = 0
    for f, ranks in enumerate(files):
        if not ranks:
            continue
        left = f > 0 and files[f - 1]
        right = f < 7 and files[f + 1]
        if not left and not right:
            isolated += len(ranks)
    return isolated


def _count_backward(files: list[list[int]]) -> int:
    """Pawns trailing the most advanced pawn on both neighbouring files.

    Rank numbers are compared as-is (white's point of view) and a missing
    neighbour file counts as rank 0.
    """
    backward = 0
    for f, ranks in enumerate(files):
        highest_left = max(files[f - 1], default=0) if f > 0 else 0
        highest_right = max(files[f + 1], default=0) if f < 7 else 0
        backward += sum(1 for r in ranks if r < highest_left and r < highest_right)
    return backward


def _count_passed(board: chess.Board, color: chess.Color) -> int:
    enemy_pawns = board.pieces(chess.PAWN, not color)
    passed = 0
    for sq in board.pieces(chess.PAWN, color):
        f = chess.square_file(sq)
        r = chess.square_rank(sq)
        blocked = any(
            abs(chess.square_file(esq) - f) <= 1
            and (chess.square_rank(esq) > r if color == chess.WHITE else chess.square_rank(esq) < r)
            for esq in enemy_pawns
        )
        if not blocked:
            passed += 1
    return passed


def analyze_pawn_weakness(board: chess.Board, color: chess.Color) -> PawnWeakness:
    files = _ranks_by_file(board, color)
    total = sum(len(ranks) for ranks in files)
    doubled = _count_doubled(files)
    isolated = _count_isolated(files)
    backward = _count_backward(files)
    score = 0
    if total:
        # Round half up
        score = math.floor((doubled + isolated + backward) / total * 100 + 0.5)
    return PawnWeakness(
        pawns=total,
        doubled=doubled,
        isolated=isolated,
        backward=backward,
        passed=_count_passed(board, color),
        weakness_score=score,
    )
