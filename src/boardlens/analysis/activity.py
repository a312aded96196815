"""Piece mobility: legal moves available to each piece type."""

from dataclasses import dataclass

import chess

__all__ = [
    "MobilityInfo",
    "analyze_mobility",
]


@dataclass
class MobilityInfo:
    queen: int = 0
    rook: int = 0
    bishop: int = 0
    knight: int = 0

    @property
    def total(self) -> int:
        return self.queen + self.rook + self.bishop + self.knight


_FIELD_BY_TYPE = {
    chess.QUEEN: "queen",
    chess.ROOK: "rook",
    chess.BISHOP: "bishop",
    chess.KNIGHT: "knight",
}


def analyze_mobility(board: chess.Board, color: chess.Color) -> MobilityInfo:
    """Count legal moves of queens, rooks, bishops and knights for ``color``.

    The position is looked at with ``color`` to move, whoever actually has
    the move. Pawn and king moves are not counted.
    """
    probe = board.copy(stack=False)
    if probe.turn != color:
        probe.turn = color
        probe.ep_square = None

    info = MobilityInfo()
    for move in probe.legal_moves:
        pt = probe.piece_type_at(move.from_square)
        fname = _FIELD_BY_TYPE.get(pt)
        if fname is not None:
            setattr(info, fname, getattr(info, fname) + 1)
    return info
