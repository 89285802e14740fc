"""
Rating scalaire d'une equipe
Combinaison ponderee offense / defense / bilan / force
"""
from gamepulse.contracts.input_models import TeamProfile
from gamepulse.errors import InvalidProfileError

# Echelles de reference
HIGH_PPG = 35.0
PAPG_CEILING = 45.0

# Poids fixes
OFFENSE_WEIGHT = 0.25
DEFENSE_WEIGHT = 0.25
RECORD_WEIGHT = 0.20
STRENGTH_WEIGHT = 0.30


def win_percentage(profile: TeamProfile) -> float:
    """
    Pourcentage de victoires

    Raises:
        InvalidProfileError: si l'equipe n'a joue aucun match
    """
    games = profile.wins + profile.losses
    if games == 0:
        raise InvalidProfileError("Team profile has no games played (wins + losses == 0)")
    return profile.wins / games


def compute_rating(profile: TeamProfile) -> float:
    """
    Calcule le rating d'une equipe

    Echelle lineaire non bornee: une defense au-dela de 45 points encaisses
    donne un rating defensif negatif.

    Args:
        profile: Profil de l'equipe

    Returns:
        Rating (environ 0-100 pour des profils realistes)
    """
    offensive_rating = profile.ppg / HIGH_PPG * 100
    defensive_rating = (PAPG_CEILING - profile.papg) / PAPG_CEILING * 100
    record_rating = win_percentage(profile) * 100

    return (
        offensive_rating * OFFENSE_WEIGHT +
        defensive_rating * DEFENSE_WEIGHT +
        record_rating * RECORD_WEIGHT +
        profile.strength * STRENGTH_WEIGHT
    )
