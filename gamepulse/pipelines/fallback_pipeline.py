"""
Pipeline de chargement des profils avec fallback statique
Basculement automatique sur la table statique si les API echouent
"""
import logging
import threading
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from gamepulse.contracts.input_models import TeamProfile
from gamepulse.contracts.output_models import DataSource, LoadReport
from gamepulse.store.profile_store import ProfileMap, ProfileStore, merge
from gamepulse.store.static_profiles import load_static_profiles

from .cfbd_client import CollegeFootballDataClient
from .profile_builder import build_profiles

logger = logging.getLogger(__name__)


class LoadStatus(Enum):
    """Statuts du pipeline de chargement"""
    PENDING = "pending"
    LOADING = "loading"
    SUCCESS = "success"
    FALLBACK = "fallback"


class ProfileLoadPipeline:
    """
    Charge les profils depuis les API et alimente le store
    Se replie sur la table statique si la source distante echoue
    """

    def __init__(
        self,
        store: ProfileStore,
        client: Optional[CollegeFootballDataClient] = None,
        static_profiles: Optional[ProfileMap] = None,
        trace_id: Optional[str] = None
    ):
        """
        Initialise le pipeline

        Args:
            store: Store a alimenter
            client: Client API (cree par defaut)
            static_profiles: Table de fallback (table embarquee par defaut)
            trace_id: ID de tracabilite
        """
        self.trace_id = trace_id or str(uuid.uuid4())
        self.store = store
        self.client = client or CollegeFootballDataClient(trace_id=self.trace_id)
        self.static_profiles = dict(static_profiles) if static_profiles is not None else load_static_profiles()
        self.status = LoadStatus.PENDING
        self.error_cause: Optional[str] = None
        self.error_details: Optional[str] = None
        self.was_triggered: bool = False
        self.events: List[Dict[str, Any]] = []
        self.last_report: Optional[LoadReport] = None
        self._run_lock = threading.Lock()

        logger.info(f"[{self.trace_id}] ProfileLoadPipeline initialise - {len(self.static_profiles)} profils statiques")

    def _event(self, event_type: str, **details: Any) -> None:
        event = {
            "type": event_type,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "trace_id": self.trace_id
        }
        event.update(details)
        self.events.append(event)

    def _fetch_remote(self) -> Optional[Dict[str, TeamProfile]]:
        """Profils distants, ou None avec cause renseignee"""
        try:
            remote = build_profiles(self.client)
        except Exception as e:
            self.error_cause = "REMOTE_LOAD_ERROR"
            self.error_details = str(e)
            logger.error(f"[{self.trace_id}] Erreur chargement API: {e}")
            return None

        if remote is None:
            self.error_cause = "REMOTE_NO_DATA"
            self.error_details = "No team list available from any remote source"
            return None

        if not remote:
            self.error_cause = "REMOTE_EMPTY_RESPONSE"
            self.error_details = "Remote sources returned no usable team"
            return None

        return remote

    def run(self) -> LoadReport:
        """
        Execute le chargement complet

        Returns:
            LoadReport avec source retenue et evenements
        """
        with self._run_lock:
            logger.info(f"[{self.trace_id}] === Demarrage chargement profils ===")
            self.status = LoadStatus.LOADING
            self.error_cause = None
            self.error_details = None
            self.was_triggered = False
            self.events = []
            self.client.clear_errors()

            remote = self._fetch_remote()

            if remote is not None:
                profiles = merge(self.static_profiles, remote)
                self.store.refresh(profiles, DataSource.API, remote_names=list(remote))
                self.status = LoadStatus.SUCCESS
                self._event("REMOTE_LOAD_SUCCESS", teams_loaded=len(remote))
                logger.info(f"[{self.trace_id}] Chargement API reussi: {len(remote)} equipes")

                report = LoadReport(
                    status="success",
                    source=DataSource.API,
                    trace_id=self.trace_id,
                    teams_count=len(profiles),
                    remote_teams_count=len(remote),
                    error_summary=self.client.get_error_summary(),
                    events=list(self.events)
                )
            else:
                report = self._fallback()

            self.last_report = report
            return report

    def _fallback(self) -> LoadReport:
        """Bascule sur la table statique"""
        self.was_triggered = True
        self.status = LoadStatus.FALLBACK
        error_summary = self.client.get_error_summary()

        logger.warning(f"[{self.trace_id}] Fallback statique declenche: {self.error_cause}")
        self._event(
            "FALLBACK_TRIGGERED",
            reason=self.error_cause,
            details=self.error_details,
            total_errors=error_summary["total_errors"] if error_summary else 0
        )

        self.store.refresh(self.static_profiles, DataSource.STATIC, load_error=self.error_details)

        return LoadReport(
            status="fallback",
            source=DataSource.STATIC,
            trace_id=self.trace_id,
            teams_count=len(self.static_profiles),
            remote_teams_count=0,
            error_cause=self.error_cause,
            error_summary=error_summary,
            events=list(self.events)
        )

    def refresh(self) -> LoadReport:
        """Vide le cache API puis recharge"""
        self.client.clear_cache()
        return self.run()

    def get_load_report(self) -> Dict[str, Any]:
        """
        Genere un rapport du dernier chargement

        Returns:
            Dictionnaire avec details du chargement
        """
        return {
            "was_triggered": self.was_triggered,
            "status": self.status.value,
            "error_cause": self.error_cause,
            "error_details": self.error_details,
            "events": self.events,
            "trace_id": self.trace_id
        }
