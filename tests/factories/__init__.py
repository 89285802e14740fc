"""
Test Data Factories

This module provides factory functions for creating test data.
All test data should be created through these factories to ensure consistency.

Usage:
    from tests.factories import create_mock_profile, create_results_sequence

    profile = create_mock_profile(wins=10, losses=2, streak=3)
    games = create_results_sequence("Alabama", "WWLW")
"""

from .games import create_mock_game, create_raw_game, create_results_sequence
from .profiles import create_mock_load_report, create_mock_profile, create_profile_map

__all__ = [
    'create_mock_profile',
    'create_profile_map',
    'create_mock_load_report',
    'create_mock_game',
    'create_raw_game',
    'create_results_sequence',
]
