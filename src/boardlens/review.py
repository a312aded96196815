"""Whole-game theme review.

Parses a PGN, runs the variation analysis and critical-moment search for
both colors over the same move list, and ranks the biggest per-move swings
as turning points.
"""

from __future__ import annotations

import io
import logging
from dataclasses import asdict, dataclass, field

import chess
import chess.pgn

from boardlens.analysis import THEMES, ThemeScore
from boardlens.config import Settings
from boardlens.variation import (
    CriticalMoment,
    VariationAnalysis,
    analyze_variation_themes,
    find_critical_moments,
)

logger = logging.getLogger(__name__)


@dataclass
class GameInfo:
    white: str
    black: str
    result: str
    event: str | None = None
    date: str | None = None


@dataclass
class SideAnalysis:
    overall_themes: VariationAnalysis
    critical_moments: list[CriticalMoment]
    average_theme_scores: ThemeScore


@dataclass
class TurningPoint:
    move_number: int
    player: str   # "White" or "Black"
    move: str     # SAN
    impact: str   # e.g. "material: -100.00"


@dataclass
class Insights:
    white_best_theme: str
    white_worst_theme: str
    black_best_theme: str
    black_worst_theme: str
    turning_points: list[TurningPoint] = field(default_factory=list)


@dataclass
class GameReview:
    game_info: GameInfo
    white_analysis: SideAnalysis
    black_analysis: SideAnalysis
    insights: Insights

    def to_dict(self) -> dict:
        return asdict(self)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

# python-chess fills missing Seven Tag Roster entries with these
_PLACEHOLDERS = {"", "?", "????.??.??"}


def _header(headers: chess.pgn.Headers, name: str, default: str | None) -> str | None:
    value = headers.get(name)
    if value is None or value.strip() in _PLACEHOLDERS:
        return default
    return value


def _read_game(pgn: str) -> chess.pgn.Game:
    game = chess.pgn.read_game(io.StringIO(pgn))
    if game is None:
        raise ValueError("No game found in PGN")
    if game.errors:
        raise ValueError(f"Invalid PGN: {game.errors[0]}")
    return game


def _mainline_san(game: chess.pgn.Game) -> list[str]:
    board = game.board()
    san_moves = []
    for move in game.mainline_moves():
        san_moves.append(board.san(move))
        board.push(move)
    return san_moves


def average_scores(scores: list[ThemeScore]) -> ThemeScore:
    """Per-theme arithmetic mean. An empty list averages to all zeros."""
    if not scores:
        return ThemeScore()
    count = len(scores)
    return ThemeScore(**{
        theme: sum(s.get(theme) for s in scores) / count for theme in THEMES
    })


def _theme_label(analysis: VariationAnalysis, best: bool) -> str:
    tc = analysis.strongest_improvement if best else analysis.biggest_decline
    return tc.theme if tc is not None else "none"


def _format_impact(moment: CriticalMoment) -> str:
    # First theme wins ties
    biggest = moment.theme_changes[0]
    for tc in moment.theme_changes[1:]:
        if abs(tc.change) > abs(biggest.change):
            biggest = tc
    sign = "+" if biggest.change > 0 else ""
    return f"{biggest.theme}: {sign}{biggest.change:.2f}"


def rank_turning_points(
    white_moments: list[CriticalMoment],
    black_moments: list[CriticalMoment],
    limit: int = 10,
) -> list[TurningPoint]:
    """Merge both sides' critical moments, biggest single-theme swing first."""
    tagged = [(m, "White") for m in white_moments] + [(m, "Black") for m in black_moments]
    tagged.sort(key=lambda pair: pair[0].max_abs_change, reverse=True)
    return [
        TurningPoint(
            move_number=moment.move_index // 2 + 1,
            player=player,
            move=moment.move,
            impact=_format_impact(moment),
        )
        for moment, player in tagged[:limit]
        if moment.theme_changes
    ]


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def generate_game_review(
    pgn: str,
    critical_moment_threshold: float | None = None,
    settings: Settings | None = None,
) -> GameReview:
    """Build a GameReview from PGN text.

    Raises ValueError for unreadable PGN or a move that cannot be replayed.
    """
    settings = settings or Settings()
    threshold = (
        settings.critical_threshold if critical_moment_threshold is None
        else critical_moment_threshold
    )

    game = _read_game(pgn)
    headers = game.headers
    game_info = GameInfo(
        white=_header(headers, "White", "Unknown"),
        black=_header(headers, "Black", "Unknown"),
        result=_header(headers, "Result", "*"),
        event=_header(headers, "Event", None),
        date=_header(headers, "Date", None),
    )
    history = _mainline_san(game)
    starting_fen = game.board().fen()
    logger.info(
        "Reviewing %s vs %s: %d plies, threshold %s",
        game_info.white, game_info.black, len(history), threshold,
    )

    sides = {}
    for side in ("w", "b"):
        analysis = analyze_variation_themes(starting_fen, history, side)
        sides[side] = SideAnalysis(
            overall_themes=analysis,
            critical_moments=find_critical_moments(starting_fen, history, side, threshold),
            average_theme_scores=average_scores(analysis.move_by_move_scores),
        )

    white, black = sides["w"], sides["b"]
    insights = Insights(
        white_best_theme=_theme_label(white.overall_themes, best=True),
        white_worst_theme=_theme_label(white.overall_themes, best=False),
        black_best_theme=_theme_label(black.overall_themes, best=True),
        black_worst_theme=_theme_label(black.overall_themes, best=False),
        turning_points=rank_turning_points(
            white.critical_moments, black.critical_moments, settings.turning_point_limit,
        ),
    )
    return GameReview(
        game_info=game_info,
        white_analysis=white,
        black_analysis=black,
        insights=insights,
    )
