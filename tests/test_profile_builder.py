"""
Tests de la construction des profils depuis les donnees API
"""
import pytest

from gamepulse.config.settings import SETTINGS
from gamepulse.pipelines.profile_builder import (
    assemble_profiles,
    build_profiles,
    derive_strength,
    parse_games,
)
from tests.factories import create_raw_game

DEFAULTS = SETTINGS.profile_defaults


def _stats(team, ppg, papg):
    return [
        {"team": team, "statName": "pointsPerGame", "statValue": ppg},
        {"team": team, "statName": "pointsAllowedPerGame", "statValue": papg},
    ]


class TestDeriveStrength:
    """Tests de derive_strength"""

    def test_reference_value(self):
        """Test: 10-2, 35.2 ppg, 18.5 papg"""
        # 33.33 + 26.4 + 14.14 = 73.88
        assert derive_strength(10, 2, 35.2, 18.5) == 74

    def test_clamped_to_minimum(self):
        assert derive_strength(0, 12, 10.0, 40.0) == 70

    def test_clamped_to_maximum(self):
        assert derive_strength(12, 0, 60.0, 0.0) == 100

    def test_custom_bounds(self):
        assert derive_strength(0, 12, 10.0, 40.0, minimum=0, maximum=100) == 3


class TestParseGames:
    """Tests de parse_games"""

    def test_camel_and_snake_case(self):
        games = parse_games([
            create_raw_game(camel_case=True),
            create_raw_game(home_team="Georgia", away_team="Florida", camel_case=False),
        ])
        assert [g.home_team for g in games] == ["Alabama", "Georgia"]

    def test_invalid_entries_skipped(self):
        games = parse_games([
            create_raw_game(),
            {"homeTeam": "Alabama"},
        ])
        assert len(games) == 1

    def test_none(self):
        assert parse_games(None) == []

    def test_incomplete_game_kept(self):
        games = parse_games([create_raw_game(home_points=None, away_points=None)])
        assert len(games) == 1
        assert games[0].is_complete is False


class TestAssembleProfiles:
    """Tests de assemble_profiles"""

    def test_full_data(self):
        teams = [{"school": "Alabama"}, {"school": "Auburn"}]
        stats = _stats("Alabama", "35.2", "18.5")
        records = [{"team": "Alabama", "total": {"wins": 10, "losses": 2}}]
        games = [
            create_raw_game("Alabama", "Auburn", 28, 21, "2025-11-29T19:30:00.000Z"),
            create_raw_game("Alabama", "Georgia", 31, 24, "2025-11-22T19:30:00.000Z"),
            create_raw_game("LSU", "Alabama", 20, 17, "2025-11-15T19:30:00.000Z"),
        ]

        profiles = assemble_profiles(teams, stats, records, games, DEFAULTS)

        alabama = profiles["Alabama"]
        assert (alabama.wins, alabama.losses) == (10, 2)
        assert alabama.ppg == 35.2
        assert alabama.papg == 18.5
        assert alabama.streak == 2
        assert alabama.strength == 74

        auburn = profiles["Auburn"]
        assert auburn.streak == -1

    def test_defaults_for_missing_data(self):
        profiles = assemble_profiles([{"school": "Boise State"}], None, None, None, DEFAULTS)

        boise = profiles["Boise State"]
        assert (boise.wins, boise.losses) == (DEFAULTS.wins, DEFAULTS.losses)
        assert boise.ppg == DEFAULTS.ppg
        assert boise.papg == DEFAULTS.papg
        assert boise.streak == 0
        assert DEFAULTS.strength_min <= boise.strength <= DEFAULTS.strength_max

    def test_invalid_stat_values_use_defaults(self):
        stats = _stats("Alabama", "n/a", None)
        profiles = assemble_profiles([{"school": "Alabama"}], stats, None, None, DEFAULTS)

        assert profiles["Alabama"].ppg == DEFAULTS.ppg
        assert profiles["Alabama"].papg == DEFAULTS.papg

    @pytest.mark.parametrize("value", ["-3", "inf", "nan", -12.5])
    def test_negative_or_non_finite_stat_uses_default(self, value):
        """Test: Une stat aberrante n'invalide pas le chargement"""
        teams = [{"school": "Navy"}, {"school": "Army"}]
        stats = [{"team": "Army", "statName": "pointsPerGame", "statValue": value}]

        profiles = assemble_profiles(teams, stats, [], [], DEFAULTS)

        assert set(profiles) == {"Navy", "Army"}
        assert profiles["Army"].ppg == DEFAULTS.ppg

    def test_invalid_record_skips_only_that_team(self):
        """Test: Un bilan invalide n'ecarte que l'equipe concernee"""
        teams = [{"school": "Navy"}, {"school": "Army"}, {"school": "Air Force"}]
        records = [
            {"team": "Army", "total": {"wins": -2, "losses": 1}},
            {"team": "Air Force", "total": {"wins": "n/a", "losses": 4}},
        ]

        profiles = assemble_profiles(teams, None, records, None, DEFAULTS)

        assert list(profiles) == ["Navy"]

    def test_zero_game_record_uses_defaults(self):
        """Test: Un bilan 0-0 ne produit jamais un profil sans match"""
        records = [{"team": "Alabama", "total": {"wins": 0, "losses": 0}}]
        profiles = assemble_profiles([{"school": "Alabama"}], None, records, None, DEFAULTS)

        alabama = profiles["Alabama"]
        assert alabama.wins + alabama.losses > 0

    def test_winless_record_is_kept(self):
        records = [{"team": "Alabama", "total": {"wins": 0, "losses": 12}}]
        profiles = assemble_profiles([{"school": "Alabama"}], None, records, None, DEFAULTS)

        assert (profiles["Alabama"].wins, profiles["Alabama"].losses) == (0, 12)

    def test_sportsdb_team_names(self):
        profiles = assemble_profiles([{"strTeam": "Navy"}, {"idTeam": "1"}], None, None, None, DEFAULTS)
        assert list(profiles) == ["Navy"]

    def test_rounding_to_one_decimal(self):
        stats = _stats("Alabama", "35.2667", "18.4444")
        profiles = assemble_profiles([{"school": "Alabama"}], stats, None, None, DEFAULTS)

        assert profiles["Alabama"].ppg == 35.3
        assert profiles["Alabama"].papg == 18.4

    @pytest.mark.parametrize("teams", [None, []])
    def test_no_teams(self, teams):
        assert assemble_profiles(teams, [], [], [], DEFAULTS) is None


class TestBuildProfiles:
    """Tests de build_profiles avec client simule"""

    def test_fetches_all_datasets(self, mock_client):
        mock_client.get_teams.return_value = [{"school": "Alabama"}]
        mock_client.get_team_stats.return_value = _stats("Alabama", 35.2, 18.5)
        mock_client.get_team_records.return_value = [{"team": "Alabama", "total": {"wins": 10, "losses": 2}}]
        mock_client.get_games.return_value = [create_raw_game()]

        profiles = build_profiles(mock_client)

        assert profiles["Alabama"].streak == 1
        mock_client.get_teams.assert_called_once()
        mock_client.get_team_stats.assert_called_once()
        mock_client.get_team_records.assert_called_once()
        mock_client.get_games.assert_called_once()

    def test_bad_row_does_not_discard_remote_load(self, mock_client):
        mock_client.get_teams.return_value = [{"school": "Navy"}, {"school": "Army"}]
        mock_client.get_team_stats.return_value = [
            {"team": "Army", "statName": "pointsPerGame", "statValue": "-3"}
        ]
        mock_client.get_team_records.return_value = [
            {"team": "Navy", "total": {"wins": -1, "losses": 5}}
        ]
        mock_client.get_games.return_value = []

        profiles = build_profiles(mock_client)

        assert list(profiles) == ["Army"]

    def test_no_team_list(self, mock_client):
        mock_client.get_teams.return_value = None
        mock_client.get_team_stats.return_value = None
        mock_client.get_team_records.return_value = None
        mock_client.get_games.return_value = None

        assert build_profiles(mock_client) is None
