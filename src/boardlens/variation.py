"""Theme deltas along a move sequence.

Replays SAN moves from a starting FEN, scores every position for one side,
and reports how each theme moved between the first and last position
(``analyze_variation_themes``) or on individual moves
(``find_critical_moments``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import chess

from boardlens.analysis import THEMES, ThemeScore, parse_side, score_board
from boardlens.analysis.constants import _color_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThemeChange:
    theme: str
    initial_score: float
    final_score: float
    change: float
    percent_change: float


@dataclass(frozen=True)
class VariationAnalysis:
    theme_changes: list[ThemeChange]
    overall_change: float
    strongest_improvement: ThemeChange | None
    biggest_decline: ThemeChange | None
    move_by_move_scores: list[ThemeScore] = field(default_factory=list)


@dataclass(frozen=True)
class CriticalMoment:
    move_index: int  # 0-based ply
    move: str        # SAN
    theme_changes: list[ThemeChange]

    @property
    def max_abs_change(self) -> float:
        return max((abs(tc.change) for tc in self.theme_changes), default=0.0)


@dataclass(frozen=True)
class VariationComparison:
    name: str
    analysis: VariationAnalysis


def _replay(starting_fen: str, san_moves: list[str], color: chess.Color) -> list[ThemeScore]:
    """Score the starting position and the position after every move.

    Illegal, invalid or ambiguous SAN raises (a ValueError subclass from
    python-chess); no partial result is returned.
    """
    board = chess.Board(starting_fen)
    logger.debug("Replaying %d moves for %s from %s", len(san_moves), _color_name(color), starting_fen)
    scores = [score_board(board, color)]
    for san in san_moves:
        board.push_san(san)
        scores.append(score_board(board, color))
    return scores


def _percent_change(initial: float, change: float) -> float:
    # No baseline to compare against
    if initial == 0:
        return 0.0
    return change / initial


def theme_changes(initial: ThemeScore, final: ThemeScore) -> list[ThemeChange]:
    """One ThemeChange per theme, in THEMES order."""
    changes = []
    for theme in THEMES:
        start = initial.get(theme)
        end = final.get(theme)
        delta = end - start
        changes.append(ThemeChange(
            theme=theme,
            initial_score=start,
            final_score=end,
            change=delta,
            percent_change=_percent_change(start, delta),
        ))
    return changes


def overall_change(changes: list[ThemeChange]) -> float:
    """Raw sum of theme changes.

    The themes use different units (centipawns, move counts, percentages);
    this does not normalize them.
    """
    return sum(tc.change for tc in changes)


def _strongest_improvement(changes: list[ThemeChange]) -> ThemeChange | None:
    best = None
    for tc in changes:
        if tc.change > 0 and (best is None or tc.change > best.change):
            best = tc
    return best


def _biggest_decline(changes: list[ThemeChange]) -> ThemeChange | None:
    worst = None
    for tc in changes:
        if tc.change < 0 and (worst is None or tc.change < worst.change):
            worst = tc
    return worst


def analyze_variation_themes(
    starting_fen: str,
    san_moves: list[str],
    side: str | chess.Color,
) -> VariationAnalysis:
    scores = _replay(starting_fen, san_moves, parse_side(side))
    changes = theme_changes(scores[0], scores[-1])
    return VariationAnalysis(
        theme_changes=changes,
        overall_change=overall_change(changes),
        strongest_improvement=_strongest_improvement(changes),
        biggest_decline=_biggest_decline(changes),
        move_by_move_scores=scores,
    )


def find_critical_moments(
    starting_fen: str,
    san_moves: list[str],
    side: str | chess.Color,
    threshold: float,
) -> list[CriticalMoment]:
    """Moves where any single theme moved by more than ``threshold``.

    Each moment carries all five per-move deltas. Results are in move order.
    """
    scores = _replay(starting_fen, san_moves, parse_side(side))
    moments = []
    for i, san in enumerate(san_moves):
        changes = theme_changes(scores[i], scores[i + 1])
        if any(abs(tc.change) > threshold for tc in changes):
            moments.append(CriticalMoment(move_index=i, move=san, theme_changes=changes))
    return moments


def get_theme_progression(
    starting_fen: str,
    san_moves: list[str],
    side: str | chess.Color,
    theme: str,
) -> list[float]:
    """One theme's score before the first move and after every move."""
    if theme not in THEMES:
        raise ValueError(f"Unknown theme: {theme!r}")
    return [s.get(theme) for s in _replay(starting_fen, san_moves, parse_side(side))]


def compare_variations(
    starting_fen: str,
    variations: list[tuple[str, list[str]]],
    side: str | chess.Color,
) -> list[VariationComparison]:
    """Analyze several named lines from the same position, in input order."""
    return [
        VariationComparison(name=name, analysis=analyze_variation_themes(starting_fen, moves, side))
        for name, moves in variations
    ]
