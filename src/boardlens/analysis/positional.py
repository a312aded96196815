"""Space control: attacks on the central band and the flanks."""

from dataclasses import dataclass

import chess

from boardlens.analysis.constants import CENTER_SQUARES, FLANK_SQUARES

__all__ = [
    "SpaceControl",
    "analyze_space",
]


@dataclass
class SpaceControl:
    center: int  # attacks on c4-f4 / c5-f5
    flank: int   # attacks on a/b/g/h files, ranks 4-5

    @property
    def total(self) -> int:
        return self.center + self.flank


def _count_attacks(board: chess.Board, color: chess.Color, squares: list[chess.Square]) -> int:
    return sum(len(board.attackers(color, sq)) for sq in squares)


def analyze_space(board: chess.Board, color: chess.Color) -> SpaceControl:
    return SpaceControl(
        center=_count_attacks(board, color, CENTER_SQUARES),
        flank=_count_attacks(board, color, FLANK_SQUARES),
    )
