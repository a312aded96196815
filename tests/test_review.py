"""Tests for whole-game review assembly."""

import json

import pytest

from boardlens.analysis import THEMES, ThemeScore
from boardlens.config import Settings
from boardlens.review import average_scores, generate_game_review, rank_turning_points
from boardlens.variation import CriticalMoment, theme_changes


SCHOLARS_MATE = """[Event "Casual Game"]
[Site "?"]
[Date "2024.01.15"]
[Round "?"]
[White "Alice"]
[Black "Bob"]
[Result "1-0"]

1. e4 e5 2. Bc4 Nc6 3. Qh5 Nf6 4. Qxf7# 1-0
"""

NO_HEADERS = "1. e4 e5 2. Nf3 *\n"

NO_MOVES = """[White "Alice"]
[Black "Bob"]

*
"""

ILLEGAL_MOVE = """[White "Alice"]
[Black "Bob"]

1. e4 e4 *
"""


@pytest.fixture()
def settings(monkeypatch):
    for var in ("CRITICAL_THRESHOLD", "TURNING_POINT_LIMIT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return Settings(_env_file=None)


def _magnitude(impact: str) -> float:
    return abs(float(impact.split(": ")[1]))


class TestGameInfo:
    def test_headers(self, settings):
        review = generate_game_review(SCHOLARS_MATE, settings=settings)
        info = review.game_info
        assert info.white == "Alice"
        assert info.black == "Bob"
        assert info.result == "1-0"
        assert info.event == "Casual Game"
        assert info.date == "2024.01.15"

    def test_missing_headers_fall_back(self, settings):
        info = generate_game_review(NO_HEADERS, settings=settings).game_info
        assert info.white == "Unknown"
        assert info.black == "Unknown"
        assert info.result == "*"
        assert info.event is None
        assert info.date is None


class TestSideAnalyses:
    def test_both_sides_replay_every_move(self, settings):
        review = generate_game_review(SCHOLARS_MATE, settings=settings)
        assert len(review.white_analysis.overall_themes.move_by_move_scores) == 8
        assert len(review.black_analysis.overall_themes.move_by_move_scores) == 8

    def test_material(self, settings):
        review = generate_game_review(SCHOLARS_MATE, settings=settings)
        white = {tc.theme: tc for tc in review.white_analysis.overall_themes.theme_changes}
        black = {tc.theme: tc for tc in review.black_analysis.overall_themes.theme_changes}
        assert white["material"].change == 0
        assert black["material"].final_score == 3800

    def test_average_scores(self, settings):
        review = generate_game_review(SCHOLARS_MATE, settings=settings)
        assert review.white_analysis.average_theme_scores.material == 3900
        # Seven snapshots at 3900, the final one at 3800
        assert review.black_analysis.average_theme_scores.material == pytest.approx(3887.5)

    def test_empty_game(self, settings):
        review = generate_game_review(NO_MOVES, settings=settings)
        assert review.white_analysis.critical_moments == []
        assert review.insights.white_best_theme == "none"
        assert review.insights.black_worst_theme == "none"
        assert review.insights.turning_points == []


class TestInsights:
    def test_best_and_worst_are_theme_names(self, settings):
        insights = generate_game_review(SCHOLARS_MATE, settings=settings).insights
        for label in (
            insights.white_best_theme,
            insights.white_worst_theme,
            insights.black_best_theme,
            insights.black_worst_theme,
        ):
            assert label in THEMES or label == "none"

    def test_biggest_turning_point_is_the_mate(self, settings):
        insights = generate_game_review(SCHOLARS_MATE, settings=settings).insights
        top = insights.turning_points[0]
        assert top.move_number == 4
        assert top.player == "Black"
        assert top.move == "Qxf7#"
        assert top.impact == "material: -100.00"

    def test_turning_points_ranked_and_capped(self, settings):
        insights = generate_game_review(SCHOLARS_MATE, settings=settings).insights
        points = insights.turning_points
        assert 0 < len(points) <= 10
        magnitudes = [_magnitude(p.impact) for p in points]
        assert magnitudes == sorted(magnitudes, reverse=True)
        assert all(p.player in ("White", "Black") for p in points)

    def test_rank_turning_points_formatting_and_ties(self):
        gain = theme_changes(ThemeScore(), ThemeScore(mobility=3))
        loss = theme_changes(ThemeScore(), ThemeScore(space=-3))
        points = rank_turning_points(
            [CriticalMoment(move_index=0, move="e4", theme_changes=gain)],
            [CriticalMoment(move_index=3, move="Nf6", theme_changes=loss)],
        )
        # Equal swings keep White before Black
        assert [(p.move_number, p.player, p.move) for p in points] == [
            (1, "White", "e4"),
            (2, "Black", "Nf6"),
        ]
        assert points[0].impact == "mobility: +3.00"
        assert points[1].impact == "space: -3.00"

    def test_rank_turning_points_limit(self):
        changes = theme_changes(ThemeScore(), ThemeScore(material=1))
        moments = [CriticalMoment(move_index=i, move="x", theme_changes=changes) for i in range(8)]
        assert len(rank_turning_points(moments, moments, limit=10)) == 10


class TestThreshold:
    def test_threshold_from_settings(self, settings, monkeypatch):
        monkeypatch.setenv("CRITICAL_THRESHOLD", "1000")
        review = generate_game_review(SCHOLARS_MATE, settings=Settings(_env_file=None))
        assert review.white_analysis.critical_moments == []
        assert review.black_analysis.critical_moments == []

    def test_explicit_threshold_wins(self, settings, monkeypatch):
        monkeypatch.setenv("CRITICAL_THRESHOLD", "1000")
        review = generate_game_review(SCHOLARS_MATE, 50, settings=Settings(_env_file=None))
        assert [m.move for m in review.black_analysis.critical_moments] == ["Qxf7#"]

    def test_turning_point_limit_from_settings(self, monkeypatch):
        monkeypatch.delenv("CRITICAL_THRESHOLD", raising=False)
        monkeypatch.setenv("TURNING_POINT_LIMIT", "3")
        review = generate_game_review(SCHOLARS_MATE, settings=Settings(_env_file=None))
        assert len(review.insights.turning_points) == 3


class TestErrors:
    def test_empty_pgn(self, settings):
        with pytest.raises(ValueError):
            generate_game_review("", settings=settings)

    def test_illegal_move(self, settings):
        with pytest.raises(ValueError):
            generate_game_review(ILLEGAL_MOVE, settings=settings)


class TestSerialization:
    def test_to_dict_is_json_serializable(self, settings):
        data = generate_game_review(SCHOLARS_MATE, settings=settings).to_dict()
        text = json.dumps(data)
        assert '"white_best_theme"' in text
        assert data["game_info"]["white"] == "Alice"
        assert set(data["white_analysis"]["average_theme_scores"]) == set(THEMES)


class TestAverageScores:
    def test_empty_list_is_all_zero(self):
        assert average_scores([]) == ThemeScore()

    def test_mean(self):
        avg = average_scores([ThemeScore(material=100, space=2), ThemeScore(material=300)])
        assert avg.material == 200
        assert avg.space == 1
