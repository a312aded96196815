"""Material counting in centipawns."""

from dataclasses import dataclass

import chess

from boardlens.analysis.constants import get_piece_value

__all__ = [
    "MaterialCount",
    "MaterialInfo",
    "analyze_material",
]


@dataclass
class MaterialCount:
    pawns: int = 0
    knights: int = 0
    bishops: int = 0
    rooks: int = 0
    queens: int = 0


@dataclass
class MaterialInfo:
    counts: MaterialCount
    value: int  # centipawns
    bishop_pair: bool


_PIECE_FIELDS: list[tuple[str, chess.PieceType]] = [
    ("pawns", chess.PAWN),
    ("knights", chess.KNIGHT),
    ("bishops", chess.BISHOP),
    ("rooks", chess.ROOK),
    ("queens", chess.QUEEN),
]


def _count_material(board: chess.Board, color: chess.Color) -> MaterialCount:
    return MaterialCount(**{
        fname: len(board.pieces(pt, color)) for fname, pt in _PIECE_FIELDS
    })


def analyze_material(board: chess.Board, color: chess.Color) -> MaterialInfo:
    counts = _count_material(board, color)
    return MaterialInfo(
        counts=counts,
        value=sum(getattr(counts, fname) * get_piece_value(pt) for fname, pt in _PIECE_FIELDS),
        bishop_pair=counts.bishops >= 2,
    )
