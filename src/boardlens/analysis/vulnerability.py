"""Hanging and semi-protected piece detection over the static board model."""

from dataclasses import dataclass

import chess

from boardlens.analysis.board_model import StaticBoardModel, coordinate
from boardlens.analysis.constants import _color_name

__all__ = [
    "VulnerabilityRecord",
    "ThreatBoard",
    "classify_vulnerabilities",
    "format_vulnerability_report",
]


@dataclass(frozen=True)
class VulnerabilityRecord:
    description: str  # e.g. "black knight"
    coordinate: str   # e.g. "e5"


def _describe(piece: chess.Piece) -> str:
    return f"{_color_name(piece.color)} {chess.piece_name(piece.piece_type)}"


def classify_vulnerabilities(
    model: StaticBoardModel,
) -> tuple[tuple[VulnerabilityRecord, ...], tuple[VulnerabilityRecord, ...]]:
    """Return (hanging, semi_protected) records in board order (a8 .. h1).

    Hanging: attacked with no defenders. Semi-protected: attackers equal
    defenders. A piece attacked more often than it is defended, but defended
    at least once, lands in neither list.
    """
    hanging = []
    semi_protected = []
    for rank in range(8):
        for file in range(8):
            piece = model.piece_at(file, rank)
            if piece is None or piece.piece_type == chess.KING:
                continue
            defenders = model.attack_count(piece.color, file, rank)
            attackers = model.attack_count(not piece.color, file, rank)
            record = VulnerabilityRecord(_describe(piece), coordinate(file, rank))
            if attackers > defenders and defenders == 0:
                hanging.append(record)
            elif attackers == defenders and attackers > 0:
                semi_protected.append(record)
    return tuple(hanging), tuple(semi_protected)


def format_vulnerability_report(
    hanging: tuple[VulnerabilityRecord, ...],
    semi_protected: tuple[VulnerabilityRecord, ...],
) -> str:
    lines = [
        "PIECE VULNERABILITY ANALYSIS:",
        "",
        "PIECE VULNERABILITY CATEGORIES:",
        "",
        "1. HANGING PIECES (Critical Threats):",
        "   Definition: Pieces that are attacked by the opponent but have NO defenders.",
        "   These pieces can be captured for free without any compensation.",
        "   Priority: IMMEDIATE attention required - these pieces should be moved or defended.",
    ]
    if hanging:
        lines.append("   Current hanging pieces:")
        lines.extend(f"   - {r.description} (coordinate: {r.coordinate})" for r in hanging)
    else:
        lines.append("   No hanging pieces found.")
    lines += [
        "",
        "2. SEMI-PROTECTED PIECES (Contested):",
        "   Definition: Pieces where the number of attackers EQUALS the number of defenders.",
        "   These pieces are in a tactical balance - capturing them leads to equal exchanges.",
        "   Priority: MEDIUM - monitor for tactical opportunities or threats.",
    ]
    if semi_protected:
        lines.append("   Current semi-protected pieces:")
        lines.extend(f"   - {r.description} (coordinate: {r.coordinate})" for r in semi_protected)
    else:
        lines.append("   No semi-protected pieces found.")
    lines += [
        "",
        "TACTICAL RECOMMENDATIONS:",
        "- Address hanging pieces immediately (move or defend)",
        "- Look for tactical opportunities involving semi-protected pieces",
        "- Check if any opponent pieces fall into these categories for potential attacks",
    ]
    return "\n".join(lines)


class ThreatBoard:
    """Attack maps plus vulnerability lists for one position.

    Everything is computed in the constructor; the instance is read-only
    afterwards and safe to share.
    """

    __slots__ = ("_model", "_hanging", "_semi_protected")

    def __init__(self, fen: str):
        self._model = StaticBoardModel.from_fen(fen)
        self._hanging, self._semi_protected = classify_vulnerabilities(self._model)

    @property
    def model(self) -> StaticBoardModel:
        return self._model

    @property
    def hanging(self) -> tuple[VulnerabilityRecord, ...]:
        return self._hanging

    @property
    def semi_protected(self) -> tuple[VulnerabilityRecord, ...]:
        return self._semi_protected

    @property
    def hanging_piece_descriptions(self) -> tuple[str, ...]:
        return tuple(r.description for r in self._hanging)

    @property
    def hanging_piece_coordinates(self) -> tuple[str, ...]:
        return tuple(r.coordinate for r in self._hanging)

    @property
    def semi_protected_piece_descriptions(self) -> tuple[str, ...]:
        return tuple(r.description for r in self._semi_protected)

    @property
    def semi_protected_piece_coordinates(self) -> tuple[str, ...]:
        return tuple(r.coordinate for r in self._semi_protected)

    def report(self) -> str:
        return format_vulnerability_report(self._hanging, self._semi_protected)

    def __str__(self) -> str:
        return self.report()
