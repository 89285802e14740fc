"""
Pipelines: chargement des profils (API + fallback) et prediction
"""
from .cfbd_client import CollegeFootballDataClient, ResponseCache
from .fallback_pipeline import LoadStatus, ProfileLoadPipeline
from .prediction_pipeline import PredictionPipeline
from .profile_builder import assemble_profiles, build_profiles, derive_strength

__all__ = [
    'CollegeFootballDataClient',
    'ResponseCache',
    'LoadStatus',
    'ProfileLoadPipeline',
    'PredictionPipeline',
    'assemble_profiles',
    'build_profiles',
    'derive_strength',
]
