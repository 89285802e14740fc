# Contracts module
from .input_models import GameResult, PredictionRequest, TeamProfile
from .output_models import (
    DataSource,
    DataSourceInfo,
    LoadReport,
    MatchupAnalysis,
    PredictionResponse,
    PredictionResult,
)

__all__ = [
    'TeamProfile',
    'GameResult',
    'PredictionRequest',
    'DataSource',
    'DataSourceInfo',
    'LoadReport',
    'MatchupAnalysis',
    'PredictionResponse',
    'PredictionResult'
]
