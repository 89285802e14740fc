"""
Calcul de la serie en cours (streak) a partir des resultats de matchs
"""
from typing import Iterable

from gamepulse.contracts.input_models import GameResult


def compute_streak(team: str, games: Iterable[GameResult]) -> int:
    """
    Calcule la serie en cours d'une equipe

    Les matchs sont parcourus du plus recent au plus ancien. Les matchs
    sans score final sont ignores. Un score egal compte comme une defaite.

    Args:
        team: Nom de l'equipe
        games: Matchs (non tries, toutes equipes confondues)

    Returns:
        Serie signee: +n victoires consecutives, -n defaites, 0 si aucun match score
    """
    team_games = sorted(
        (g for g in games if g.involves(team)),
        key=lambda g: g.start_date,
        reverse=True
    )

    streak = 0
    last_won = None

    for game in team_games:
        if not game.is_complete:
            continue

        is_home = game.home_team == team
        team_points = game.home_points if is_home else game.away_points
        opponent_points = game.away_points if is_home else game.home_points
        won = team_points > opponent_points

        if last_won is None:
            last_won = won
            streak = 1 if won else -1
        elif won == last_won:
            streak += 1 if won else -1
        else:
            break

    return streak
