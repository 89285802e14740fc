"""
Module de scoring predictif pour affiches de football universitaire
Serie en cours, rating d'equipe, score projete et probabilite de victoire
"""
from .prediction_engine import PredictionEngine, predict
from .rating import compute_rating, win_percentage
from .streak import compute_streak

__all__ = [
    'PredictionEngine',
    'predict',
    'compute_rating',
    'win_percentage',
    'compute_streak',
]
