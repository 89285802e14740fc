"""
Client des API de donnees football universitaire
CollegeFootballData (source primaire) et TheSportsDB (secours liste equipes)
"""
import logging
import threading
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

import requests
from requests.exceptions import HTTPError, RequestException, Timeout

from gamepulse.config import settings as config
from gamepulse.config.settings import Settings
from gamepulse.errors import ErrorKind, SourceError, summarize_errors

logger = logging.getLogger(__name__)


class ResponseCache:
    """
    Cache memoire des reponses brutes avec expiration (TTL)
    """

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._clock() - entry["timestamp"] >= self.ttl_seconds:
                del self._entries[key]
                return None
            return entry["data"]

    def set(self, key: str, data: Any) -> None:
        with self._lock:
            self._entries[key] = {"data": data, "timestamp": self._clock()}

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class CollegeFootballDataClient:
    """
    Client HTTP des sources de donnees
    Responsabilites:
    - Appels API avec timeout et retry sur erreurs transitoires
    - Cache des reponses brutes
    - Journalisation structuree des echecs (ErrorKind)
    """

    CFBD = "cfbd"
    SPORTSDB = "sportsdb"

    def __init__(
        self,
        trace_id: Optional[str] = None,
        settings: Optional[Settings] = None,
        year: Optional[int] = None,
        cache: Optional[ResponseCache] = None
    ):
        self.trace_id = trace_id or str(uuid.uuid4())
        self.settings = settings or config.SETTINGS
        self.year = year or datetime.now(timezone.utc).year
        self.cache = cache if cache is not None else ResponseCache(self.settings.cache.ttl_seconds)
        self.errors: List[SourceError] = []
        self._errors_lock = threading.Lock()

        logger.info(f"[{self.trace_id}] Client initialise - saison {self.year}")

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _record_error(self, error: SourceError) -> None:
        with self._errors_lock:
            self.errors.append(error)

    def _headers(self, api_key: Optional[str] = None) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "X-Trace-Id": self.trace_id
        }
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        return headers

    def _get_json(
        self,
        source: str,
        url: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        api_key: Optional[str] = None
    ) -> Optional[Any]:
        """
        GET JSON avec retry

        Args:
            source: Nom de la source (cfbd, sportsdb)
            url: URL complete
            endpoint: Endpoint logique (pour les erreurs)
            params: Parametres de requete
            api_key: Token bearer optionnel

        Returns:
            JSON decode ou None si echec
        """
        http = self.settings.http

        for attempt in range(1, http.max_retries + 1):
            status_code = None
            try:
                response = requests.get(
                    url,
                    params=params,
                    timeout=http.timeout_seconds,
                    headers=self._headers(api_key)
                )
                response.raise_for_status()
                return response.json()

            except Timeout as e:
                kind = ErrorKind.TIMEOUT
                message = f"{source} API timeout after {http.timeout_seconds}s: {e}"

            except HTTPError as e:
                status_code = getattr(e.response, 'status_code', None)
                kind = ErrorKind.from_status_code(status_code)
                message = f"{source} API error: HTTP {status_code if status_code is not None else 'unknown'}"

            except ValueError as e:
                # Corps non JSON (requests JSONDecodeError herite de ValueError)
                kind = ErrorKind.PARSE_ERROR
                message = f"{source} API returned invalid JSON: {e}"

            except RequestException as e:
                kind = ErrorKind.NETWORK
                message = f"{source} API unavailable: {e}"

            self._record_error(SourceError(
                kind=kind,
                source=source,
                endpoint=endpoint,
                message=message,
                status_code=status_code
            ))

            retryable = kind.transient or (status_code is not None and status_code >= 500)
            if not retryable or attempt == http.max_retries:
                logger.error(f"[{self.trace_id}] {message} ({endpoint}, tentative {attempt})")
                return None

            logger.warning(f"[{self.trace_id}] {message} - retry {attempt}/{http.max_retries}")
            time.sleep(http.retry_backoff_seconds * attempt)

        return None

    def fetch_from_cfbd(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Optional[Any]:
        source = self.settings.sources.cfbd
        return self._get_json(
            self.CFBD,
            f"{source.base_url}{endpoint}",
            endpoint,
            params=params,
            api_key=source.resolve_api_key()
        )

    def fetch_from_sportsdb(self, endpoint: str) -> Optional[Any]:
        source = self.settings.sources.sportsdb
        key = source.resolve_api_key() or "3"
        return self._get_json(self.SPORTSDB, f"{source.base_url}/{key}{endpoint}", endpoint)

    def _cached(self, cache_key: str, loader: Callable[[], Optional[Any]]) -> Optional[Any]:
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug(f"[{self.trace_id}] Cache hit: {cache_key}")
            return cached

        data = loader()
        if data is not None:
            self.cache.set(cache_key, data)
        return data

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    def get_teams(self) -> Optional[List[Dict[str, Any]]]:
        """
        Liste des equipes FBS

        Returns:
            Equipes CFBD, sinon equipes TheSportsDB filtrees, sinon None
        """
        return self._cached("teams_list", self._load_teams)

    def _load_teams(self) -> Optional[List[Dict[str, Any]]]:
        if self.settings.sources.cfbd.enabled:
            teams = self.fetch_from_cfbd("/teams/fbs", {"year": self.year})
            if teams:
                return teams
            if teams is not None:
                self._record_error(SourceError(
                    kind=ErrorKind.EMPTY_RESPONSE,
                    source=self.CFBD,
                    endpoint="/teams/fbs",
                    message="CFBD returned no teams"
                ))

        if self.settings.sources.sportsdb.enabled:
            logger.info(f"[{self.trace_id}] Liste equipes via TheSportsDB")
            result = self.fetch_from_sportsdb("/search_all_teams.php?l=NCAA")
            if result and result.get("teams"):
                return [t for t in result["teams"] if t.get("strSport") == "American Football"]

        return None

    def get_team_stats(self, year: Optional[int] = None) -> Optional[List[Dict[str, Any]]]:
        """Statistiques de saison reguliere par equipe"""
        year = year or self.year
        if not self.settings.sources.cfbd.enabled:
            return None
        return self._cached(
            f"team_stats_{year}",
            lambda: self.fetch_from_cfbd("/stats/season", {"year": year, "seasonType": "regular"})
        )

    def get_team_records(self, year: Optional[int] = None) -> Optional[List[Dict[str, Any]]]:
        """Bilans victoires/defaites"""
        year = year or self.year
        if not self.settings.sources.cfbd.enabled:
            return None
        return self._cached(
            f"team_records_{year}",
            lambda: self.fetch_from_cfbd("/records", {"year": year})
        )

    def get_games(self, year: Optional[int] = None, season_type: str = "regular") -> Optional[List[Dict[str, Any]]]:
        """Matchs de la saison (pour le calcul des series)"""
        year = year or self.year
        if not self.settings.sources.cfbd.enabled:
            return None
        return self._cached(
            f"games_{year}_{season_type}",
            lambda: self.fetch_from_cfbd(
                "/games", {"year": year, "seasonType": season_type, "division": "fbs"}
            )
        )

    # ------------------------------------------------------------------
    # Diagnostic
    # ------------------------------------------------------------------

    def get_error_summary(self) -> Optional[Dict[str, Any]]:
        with self._errors_lock:
            errors = list(self.errors)
        return summarize_errors(errors)

    def clear_errors(self) -> None:
        with self._errors_lock:
            self.errors.clear()

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info(f"[{self.trace_id}] Cache vide")
