"""
Tests du pipeline de prediction
"""
import pytest

from gamepulse.contracts.output_models import DataSource
from gamepulse.errors import InvalidMatchupError, InvalidProfileError, MissingProfileError
from gamepulse.pipelines.prediction_pipeline import PredictionPipeline
from gamepulse.store.profile_store import ProfileStore
from tests.factories import create_mock_profile, create_profile_map


@pytest.fixture
def pipeline(static_store):
    return PredictionPipeline(static_store)


class TestPredictionPipeline:
    """Tests de predict_matchup"""

    def test_reference_matchup(self, pipeline):
        """Test: Alabama vs Mississippi State sur la table statique"""
        response = pipeline.predict_matchup("Alabama", "Mississippi State", trace_id="trace-pred-001")

        assert response.trace_id == "trace-pred-001"
        assert response.data_source == DataSource.STATIC
        assert (response.result.score_a, response.result.score_b) == (45, 20)
        assert response.result.win_probability_a == pytest.approx(56.9)
        assert response.analysis.predicted_winner == "Alabama"
        assert response.analysis.winner_probability == "56.9"
        assert response.analysis.margin == 25
        assert response.analysis.team_a_record == "10-2 (35.2 PPG, 18.5 PAPG)"
        assert response.analysis.team_b_streak == "3 game losing streak 📉"
        assert response.profile_a.strength == 92

    def test_generates_trace_id(self, pipeline):
        response = pipeline.predict_matchup("Georgia", "Texas")
        assert response.trace_id

    def test_same_team_rejected(self, pipeline):
        with pytest.raises(InvalidMatchupError, match="two different teams"):
            pipeline.predict_matchup("Alabama", "Alabama")

    @pytest.mark.parametrize("team_a,team_b", [("", "Alabama"), ("Alabama", "")])
    def test_missing_selection(self, pipeline, team_a, team_b):
        with pytest.raises(InvalidMatchupError, match="select both teams"):
            pipeline.predict_matchup(team_a, team_b)

    def test_unknown_team(self, pipeline):
        with pytest.raises(MissingProfileError) as exc_info:
            pipeline.predict_matchup("Alabama", "Hogwarts")
        assert str(exc_info.value) == "No profile found for team: Hogwarts"

    def test_invalid_profile_propagates(self):
        store = ProfileStore(create_profile_map(
            Alabama=create_mock_profile(),
            New_Team=create_mock_profile(wins=0, losses=0)
        ))
        with pytest.raises(InvalidProfileError):
            PredictionPipeline(store).predict_matchup("Alabama", "New Team")

    def test_reads_refreshed_profiles(self, static_store, pipeline):
        """Test: Une prediction lit les profils courants du store"""
        before = pipeline.predict_matchup("Alabama", "Georgia")

        static_store.refresh(
            create_profile_map(
                Alabama=create_mock_profile(wins=1, losses=11, ppg=12.0, papg=38.0, strength=70),
                Georgia=create_mock_profile(wins=12, losses=0, ppg=40.0, papg=12.0, strength=100)
            ),
            DataSource.API
        )
        after = pipeline.predict_matchup("Alabama", "Georgia")

        assert after.data_source == DataSource.API
        assert after.result.score_a < before.result.score_a
        assert after.analysis.predicted_winner == "Georgia"
