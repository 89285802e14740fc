"""
Table statique de profils (fallback quand les API sont indisponibles)
"""
from typing import Dict

from gamepulse.contracts.input_models import TeamProfile

# name: (wins, losses, ppg, papg, streak, strength)
_STATIC_ROWS = {
    "Alabama": (10, 2, 35.2, 18.5, 3, 92),
    "Georgia": (11, 1, 38.5, 15.2, 5, 95),
    "Ohio State": (10, 2, 36.8, 19.3, 4, 91),
    "Michigan": (11, 1, 34.7, 17.8, 6, 93),
    "Texas": (9, 3, 33.4, 21.2, 2, 88),
    "Oklahoma": (8, 4, 31.5, 23.7, -1, 85),
    "USC": (9, 3, 35.9, 22.4, 3, 87),
    "Clemson": (8, 4, 30.2, 20.5, -2, 84),
    "Florida State": (10, 2, 32.8, 19.7, 4, 89),
    "Penn State": (9, 3, 33.1, 20.9, 2, 86),
    "Oregon": (10, 2, 37.3, 18.9, 5, 90),
    "LSU": (8, 4, 32.4, 22.8, 1, 85),
    "Notre Dame": (9, 3, 31.7, 21.5, 3, 87),
    "Washington": (10, 2, 34.5, 20.2, 4, 88),
    "Florida": (7, 5, 28.9, 24.3, -1, 82),
    "Tennessee": (8, 4, 33.6, 23.1, 2, 84),
    "Auburn": (7, 5, 29.4, 25.7, -2, 81),
    "Wisconsin": (8, 4, 30.8, 22.4, 1, 83),
    "Iowa": (8, 4, 26.5, 19.8, 2, 82),
    "Ole Miss": (8, 4, 34.2, 24.9, 3, 85),
    "Texas A&M": (7, 5, 30.1, 25.3, -1, 81),
    "Utah": (9, 3, 32.7, 21.8, 3, 86),
    "North Carolina": (8, 4, 35.4, 26.2, 2, 84),
    "Miami": (7, 5, 31.8, 26.5, -2, 80),
    "Kansas State": (8, 4, 29.7, 22.9, 1, 83),
    "Kentucky": (7, 5, 27.3, 23.6, -1, 80),
    "Mississippi State": (6, 6, 28.6, 27.4, -3, 78),
    "UCLA": (8, 4, 33.9, 24.1, 2, 84),
    "Oklahoma State": (7, 5, 30.5, 25.8, 1, 81),
    "Baylor": (6, 6, 29.2, 26.9, -2, 79),
}


def load_static_profiles() -> Dict[str, TeamProfile]:
    """Retourne une copie neuve de la table statique"""
    return {
        name: TeamProfile(wins=w, losses=l, ppg=ppg, papg=papg, streak=streak, strength=strength)
        for name, (w, l, ppg, papg, streak, strength) in _STATIC_ROWS.items()
    }
