"""
Store des profils d'equipe et table statique de fallback
"""
from .profile_store import ProfileStore, StoredProfile, merge
from .static_profiles import load_static_profiles

__all__ = ["ProfileStore", "StoredProfile", "merge", "load_static_profiles"]
