"""
Erreurs du service de prediction
Categorisation structuree des echecs (source de donnees et moteur)
"""
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorKind(str, Enum):
    """Categories d'erreur produites au point d'echec"""
    TIMEOUT = "timeout"
    HTTP_ERROR = "http_error"
    RATE_LIMITED = "rate_limited"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    NETWORK = "network"
    PARSE_ERROR = "parse_error"
    EMPTY_RESPONSE = "empty_response"

    @classmethod
    def from_status_code(cls, status_code: Optional[int]) -> "ErrorKind":
        """Classe une erreur HTTP selon son code de statut"""
        if status_code == 429:
            return cls.RATE_LIMITED
        if status_code == 404:
            return cls.NOT_FOUND
        if status_code in (401, 403):
            return cls.UNAUTHORIZED
        return cls.HTTP_ERROR

    @property
    def transient(self) -> bool:
        """True si un nouvel essai a une chance de reussir"""
        return self in (ErrorKind.TIMEOUT, ErrorKind.NETWORK, ErrorKind.RATE_LIMITED)


@dataclass
class SourceError:
    """Echec d'un appel vers une source de donnees externe"""
    kind: ErrorKind
    source: str
    endpoint: str
    message: str
    status_code: Optional[int] = None
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Convertit en dictionnaire"""
        return {
            "kind": self.kind.value,
            "source": self.source,
            "endpoint": self.endpoint,
            "message": self.message,
            "status_code": self.status_code,
            "occurred_at": self.occurred_at.isoformat()
        }


def summarize_errors(errors: List[SourceError], recent: int = 5) -> Optional[Dict[str, Any]]:
    """
    Resume une liste d'erreurs source

    Args:
        errors: Erreurs enregistrees
        recent: Nombre d'erreurs recentes a inclure

    Returns:
        Dict avec total, categorie la plus frequente et erreurs recentes,
        ou None si aucune erreur
    """
    if not errors:
        return None

    counts = Counter(e.kind for e in errors)
    most_common, _ = counts.most_common(1)[0]

    return {
        "total_errors": len(errors),
        "most_common_error": most_common.value,
        "counts": {kind.value: count for kind, count in counts.items()},
        "recent_errors": [e.to_dict() for e in errors[-recent:]]
    }


class PredictionError(Exception):
    """Erreur de base du domaine prediction"""


class MissingProfileError(PredictionError):
    """Equipe absente du store de profils"""

    def __init__(self, team_name: str):
        self.team_name = team_name
        super().__init__(f"No profile found for team: {team_name}")


class InvalidProfileError(PredictionError):
    """Profil inutilisable (aucun match joue)"""

    def __init__(self, message: str, team_name: Optional[str] = None):
        self.team_name = team_name
        super().__init__(message)


class DegenerateRatingsError(PredictionError):
    """Somme des ratings nulle, probabilite indefinie"""


class InvalidMatchupError(PredictionError):
    """Selection d'equipes invalide (manquante ou identique)"""
