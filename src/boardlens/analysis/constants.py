"""Constants and small utility functions shared across analysis submodules."""

import chess

__all__ = [
    "CENTER_SQUARES",
    "FLANK_SQUARES",
    "PIECE_VALUES",
    "THEMES",
    "get_piece_value",
    "parse_side",
    "_color_name",
]

# Space is measured on the c-f band of ranks 4-5 and on the a/b/g/h flanks.
CENTER_SQUARES = [chess.C4, chess.C5, chess.D4, chess.D5, chess.E4, chess.E5, chess.F4, chess.F5]
FLANK_SQUARES = [chess.A4, chess.A5, chess.B4, chess.B5, chess.H4, chess.H5, chess.G4, chess.G5]

# Centipawns
PIECE_VALUES: dict[chess.PieceType, int] = {
    chess.PAWN: 100,
    chess.KNIGHT: 300,
    chess.BISHOP: 300,
    chess.ROOK: 500,
    chess.QUEEN: 900,
    chess.KING: 0,
}

# Fixed theme order; tie-breaks in variation analysis follow it.
THEMES = ("material", "mobility", "space", "positional", "king_safety")


def get_piece_value(piece_type: chess.PieceType) -> int:
    """Centipawn value of a piece type. Kings are worth nothing as material."""
    return PIECE_VALUES[piece_type]


def parse_side(side: str | chess.Color) -> chess.Color:
    """Accept "w"/"b" (or "white"/"black") as well as chess.WHITE/chess.BLACK."""
    if isinstance(side, bool):
        return side
    key = str(side).strip().lower()
    if key in ("w", "white"):
        return chess.WHITE
    if key in ("b", "black"):
        return chess.BLACK
    raise ValueError(f"Invalid side: {side!r} (expected 'w' or 'b')")


def _color_name(color: chess.Color) -> str:
    """Convert chess.Color bool to lowercase string."""
    return "white" if color == chess.WHITE else "black"
