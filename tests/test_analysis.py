"""
Tests de la mise en forme des predictions
"""
import pytest

from gamepulse.contracts.output_models import PredictionResult
from gamepulse.presentation.analysis import (
    build_analysis,
    format_record,
    format_streak,
    render_text,
)
from tests.factories import create_mock_profile


def _result(score_a, score_b, prob_a=55.0):
    return PredictionResult(
        score_a=score_a,
        score_b=score_b,
        win_probability_a=prob_a,
        win_probability_b=round(100 - prob_a, 1),
        rating_a=80.0,
        rating_b=70.0
    )


class TestFormatting:
    """Tests des libelles"""

    @pytest.mark.parametrize("streak,expected", [
        (3, "3 game win streak 🔥"),
        (1, "1 game win streak 🔥"),
        (-2, "2 game losing streak 📉"),
        (0, "No active streak"),
    ])
    def test_format_streak(self, streak, expected):
        assert format_streak(streak) == expected

    def test_format_record(self):
        profile = create_mock_profile(wins=10, losses=2, ppg=35.2, papg=18.5)
        assert format_record(profile) == "10-2 (35.2 PPG, 18.5 PAPG)"

    def test_format_record_one_decimal(self):
        profile = create_mock_profile(wins=7, losses=5, ppg=30.0, papg=21.0)
        assert format_record(profile) == "7-5 (30.0 PPG, 21.0 PAPG)"


class TestBuildAnalysis:
    """Tests de build_analysis"""

    def test_team_a_wins(self):
        profile = create_mock_profile()
        analysis = build_analysis("Alabama", "Auburn", profile, profile, _result(31, 17, 60.2))

        assert analysis.predicted_winner == "Alabama"
        assert analysis.winner_probability == "60.2"
        assert analysis.margin == 14

    def test_team_b_wins(self):
        profile = create_mock_profile()
        analysis = build_analysis("Alabama", "Auburn", profile, profile, _result(17, 24, 60.0))

        assert analysis.predicted_winner == "Auburn"
        assert analysis.winner_probability == "40.0"

    def test_tie(self):
        """Test: Scores egaux -> 'Neither (Tie)' a 50.0"""
        profile = create_mock_profile()
        analysis = build_analysis("Alabama", "Auburn", profile, profile, _result(24, 24, 57.3))

        assert analysis.predicted_winner == "Neither (Tie)"
        assert analysis.winner_probability == "50.0"
        assert analysis.margin == 0

    def test_streak_labels(self):
        hot = create_mock_profile(streak=4)
        cold = create_mock_profile(streak=-1)
        analysis = build_analysis("Alabama", "Auburn", hot, cold, _result(28, 21))

        assert analysis.team_a_streak == "4 game win streak 🔥"
        assert analysis.team_b_streak == "1 game losing streak 📉"


class TestRenderText:
    def test_render_text(self):
        profile = create_mock_profile(wins=10, losses=2, ppg=35.2, papg=18.5, streak=3)
        result = _result(45, 20, 56.9)
        analysis = build_analysis("Alabama", "Mississippi State", profile, profile, result)

        text = render_text("Alabama", "Mississippi State", result, analysis)

        lines = text.splitlines()
        assert lines[0] == "Alabama 45 - 20 Mississippi State"
        assert "Predicted Winner: Alabama (56.9% win probability)" in lines
        assert "Margin of Victory: 25 points" in lines
        assert "Alabama Current Streak: 3 game win streak 🔥" in lines
