"""
Store des profils d'equipe
Lecture concurrente, remplacement atomique au refresh
"""
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from gamepulse.contracts.input_models import TeamProfile
from gamepulse.contracts.output_models import DataSource
from gamepulse.errors import MissingProfileError

logger = logging.getLogger(__name__)

ProfileMap = Mapping[str, TeamProfile]


def merge(base: ProfileMap, overrides: ProfileMap) -> Dict[str, TeamProfile]:
    """
    Fusionne deux tables de profils

    Args:
        base: Table de base (ex: table statique)
        overrides: Table prioritaire (ex: donnees API)

    Returns:
        Nouvelle table; la valeur de overrides gagne pour chaque cle commune
    """
    merged = dict(base)
    merged.update(overrides)
    return merged


@dataclass(frozen=True)
class StoredProfile:
    """Profil avec sa date de fraicheur et son origine"""
    profile: TeamProfile
    fetched_at: datetime
    source: DataSource


class ProfileStore:
    """
    Store injectable des profils d'equipe
    Le moteur ne lit jamais ce store directement: il recoit des profils
    """

    def __init__(self, profiles: Optional[ProfileMap] = None, source: DataSource = DataSource.STATIC):
        self._lock = threading.Lock()
        self._entries: Mapping[str, StoredProfile] = MappingProxyType({})
        self._source = source
        self.load_error: Optional[str] = None
        self.last_refreshed_at: Optional[datetime] = None

        if profiles:
            self.refresh(profiles, source)

    def refresh(
        self,
        profiles: ProfileMap,
        source: DataSource,
        remote_names: Optional[List[str]] = None,
        load_error: Optional[str] = None
    ) -> None:
        """
        Remplace le contenu du store de maniere atomique

        Args:
            profiles: Nouvelle table complete
            source: Origine globale des donnees
            remote_names: Equipes issues de la source distante (sinon toutes selon source)
            load_error: Cause du fallback le cas echeant
        """
        now = datetime.now(timezone.utc)
        remote = set(remote_names) if remote_names is not None else None

        entries = {}
        for name, profile in profiles.items():
            if remote is None:
                entry_source = source
            else:
                entry_source = DataSource.API if name in remote else DataSource.STATIC
            entries[name] = StoredProfile(profile=profile, fetched_at=now, source=entry_source)

        with self._lock:
            self._entries = MappingProxyType(entries)
            self._source = source
            self.load_error = load_error
            self.last_refreshed_at = now

        logger.info(f"Profile store refreshed: {len(entries)} teams (source: {source.value})")

    def snapshot(self) -> Mapping[str, TeamProfile]:
        """Vue immutable des profils au moment de l'appel"""
        return self.snapshot_with_source()[0]

    def snapshot_with_source(self) -> Tuple[Mapping[str, TeamProfile], DataSource]:
        """Vue immutable des profils et leur origine, lues ensemble"""
        with self._lock:
            entries = self._entries
            source = self._source
        return MappingProxyType({name: e.profile for name, e in entries.items()}), source

    def get_profile(self, team_name: str) -> TeamProfile:
        """
        Recupere le profil d'une equipe

        Raises:
            MissingProfileError: si l'equipe est inconnue
        """
        entry = self._entries.get(team_name)
        if entry is None:
            raise MissingProfileError(team_name)
        return entry.profile

    def freshness(self, team_name: str) -> datetime:
        entry = self._entries.get(team_name)
        if entry is None:
            raise MissingProfileError(team_name)
        return entry.fetched_at

    def entry(self, team_name: str) -> StoredProfile:
        entry = self._entries.get(team_name)
        if entry is None:
            raise MissingProfileError(team_name)
        return entry

    def team_names(self) -> List[str]:
        return sorted(self._entries)

    @property
    def data_source(self) -> DataSource:
        return self._source

    def __contains__(self, team_name: object) -> bool:
        return team_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
