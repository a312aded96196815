"""King safety: attackers and defenders of the king square, pawn shield."""

from dataclasses import dataclass

import chess

__all__ = [
    "KingSafety",
    "analyze_king_safety",
]


@dataclass
class KingSafety:
    king_square: str | None
    attackers: int = 0
    defenders: int = 0
    pawn_shield: int = 0
    can_castle: bool = False
    has_castled: bool = False
    score: int = 0  # lower is safer


def _pawn_shield(board: chess.Board, king_sq: chess.Square, color: chess.Color) -> int:
    """Own pawns on the king file and its neighbours: 2 one rank ahead, 1 two ranks ahead."""
    king_file = chess.square_file(king_sq)
    king_rank = chess.square_rank(king_sq)
    direction = 1 if color == chess.WHITE else -1
    shield = 0
    for sf in (king_file - 1, king_file, king_file + 1):
        if not 0 <= sf <= 7:
            continue
        for rank_offset in (1, 2):
            sr = king_rank + direction * rank_offset
            if not 0 <= sr <= 7:
                continue
            piece = board.piece_at(chess.square(sf, sr))
            if piece and piece.piece_type == chess.PAWN and piece.color == color:
                shield += 2 if rank_offset == 1 else 1
    return shield


def analyze_king_safety(board: chess.Board, color: chess.Color) -> KingSafety:
    king_sq = board.king(color)
    if king_sq is None:
        return KingSafety(king_square=None)

    attackers = len(board.attackers(not color, king_sq))
    defenders = len(board.attackers(color, king_sq))
    shield = _pawn_shield(board, king_sq, color)
    home = chess.E1 if color == chess.WHITE else chess.E8

    return KingSafety(
        king_square=chess.square_name(king_sq),
        attackers=attackers,
        defenders=defenders,
        pawn_shield=shield,
        can_castle=bool(board.has_castling_rights(color)),
        has_castled=king_sq != home,
        score=max(0, attackers * 10 - defenders * 5 - shield * 2),
    )
