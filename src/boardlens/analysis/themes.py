"""Five-axis theme scoring of a position for one side.

Axes and units:
  material    centipawns
  mobility    legal moves of queens, rooks, bishops, knights
  space       attacks on centre and flank squares
  positional  pawn weakness percentage
  king_safety danger score, lower is safer

The axes are on different scales; callers comparing them compare raw values.
"""

from dataclasses import dataclass

import chess

from boardlens.analysis.activity import MobilityInfo, analyze_mobility
from boardlens.analysis.constants import THEMES, parse_side
from boardlens.analysis.king_safety import KingSafety, analyze_king_safety
from boardlens.analysis.material import MaterialInfo, analyze_material
from boardlens.analysis.pawns import PawnWeakness, analyze_pawn_weakness
from boardlens.analysis.positional import SpaceControl, analyze_space

__all__ = [
    "ThemeScore",
    "ThemeBreakdown",
    "analyze_themes",
    "score_board",
    "score_position",
]


@dataclass(frozen=True)
class ThemeScore:
    material: float = 0
    mobility: float = 0
    space: float = 0
    positional: float = 0
    king_safety: float = 0

    def get(self, theme: str) -> float:
        if theme not in THEMES:
            raise KeyError(theme)
        return getattr(self, theme)


@dataclass
class ThemeBreakdown:
    """Per-axis detail behind a ThemeScore."""
    material: MaterialInfo
    mobility: MobilityInfo
    space: SpaceControl
    pawns: PawnWeakness
    king_safety: KingSafety

    def score(self) -> ThemeScore:
        return ThemeScore(
            material=self.material.value,
            mobility=self.mobility.total,
            space=self.space.total,
            positional=self.pawns.weakness_score,
            king_safety=self.king_safety.score,
        )


def analyze_themes(board: chess.Board, color: chess.Color) -> ThemeBreakdown:
    return ThemeBreakdown(
        material=analyze_material(board, color),
        mobility=analyze_mobility(board, color),
        space=analyze_space(board, color),
        pawns=analyze_pawn_weakness(board, color),
        king_safety=analyze_king_safety(board, color),
    )


def score_board(board: chess.Board, side: str | chess.Color) -> ThemeScore:
    return analyze_themes(board, parse_side(side)).score()


def score_position(fen: str, side: str | chess.Color) -> ThemeScore:
    """Score a full FEN for ``side`` ("w" or "b").

    Raises ValueError for an unparsable FEN or an unknown side.
    """
    return score_board(chess.Board(fen), side)
